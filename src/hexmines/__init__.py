"""
Hex Mines game module.

Provides core game logic for Minesweeper on a hexagonal grid: board
management, cell state and a gymnasium environment.
"""
from .cell import Cell, CellState
from .errors import OutOfBoundsError
from .board import (
    Board,
    BoardConfig,
    GameState,
    EASY,
    HARD,
    DIFFICULTIES,
)
from .environment import HexMinesEnv, make_vec_env

__all__ = [
    "Cell",
    "CellState",
    "OutOfBoundsError",
    "Board",
    "BoardConfig",
    "GameState",
    "EASY",
    "HARD",
    "DIFFICULTIES",
    "HexMinesEnv",
    "make_vec_env",
]
