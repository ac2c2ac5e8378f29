"""
Exceptions raised by the Hex Mines engine.
"""


class OutOfBoundsError(IndexError):
    """Raised when a board operation gets coordinates outside the grid."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"Cell ({row}, {col}) is outside a {rows}x{cols} board"
        )
        self.row = row
        self.col = col
