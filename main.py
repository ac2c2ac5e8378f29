#!/usr/bin/env python3
"""
Hex Mines - Main entry point.

Usage:
    python main.py play [--difficulty {easy,hard}] [--seed N]
"""
import argparse
import logging
import time
from typing import Optional, Tuple

from hexmines import (
    DIFFICULTIES, Board, BoardConfig, CellState, OutOfBoundsError,
)

HELP_TEXT = "Commands: u ROW COL (uncover), f ROW COL (flag), q (quit)"


def parse_command(line: str) -> Optional[Tuple[str, int, int]]:
    """
    Parse one line of player input.

    Returns:
        (action, row, col) for "u"/"f" commands, ("q", -1, -1) to quit,
        or None if the line is not a valid command.
    """
    parts = line.split()
    if not parts:
        return None
    action = parts[0].lower()
    if action == "q" and len(parts) == 1:
        return "q", -1, -1
    if action not in ("u", "f") or len(parts) != 3:
        return None
    try:
        return action, int(parts[1]), int(parts[2])
    except ValueError:
        return None


def new_board(config: BoardConfig, seed: Optional[int]) -> Board:
    """Build the board for one game."""
    return Board(config, seed=seed)


def play_game(board: Board) -> bool:
    """
    Run one game until it is won, lost or abandoned.

    The clock starts on the first uncover and stops when the game ends.

    Returns:
        True if the game reached a win or a loss, False if the player quit.
    """
    started: Optional[float] = None

    while True:
        print()
        print(board)
        print(f"{board.flags_remaining} Flags")

        try:
            line = input("> ")
        except EOFError:
            print()
            return False

        command = parse_command(line)
        if command is None:
            print(HELP_TEXT)
            continue

        action, row, col = command
        if action == "q":
            return False

        try:
            if action == "f":
                board.toggle_flag(row, col)
                continue
            if started is None:
                started = time.monotonic()
            state = board.uncover(row, col)
        except OutOfBoundsError as exc:
            print(exc)
            continue

        if state == CellState.MINE:
            elapsed = time.monotonic() - started
            print()
            print(board)
            print(
                f"Boom! Mine at ({row}, {col}). "
                f"You lose after {elapsed:.0f} seconds."
            )
            return True
        if board.check_for_win():
            elapsed = time.monotonic() - started
            print()
            print(board)
            print(f"You win! Cleared the board in {elapsed:.0f} seconds.")
            return True


def ask_play_again() -> bool:
    try:
        answer = input("Play again? [y/n] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def play(args: argparse.Namespace) -> None:
    """Play interactive games in the terminal, a fresh board each time."""
    config = DIFFICULTIES[args.difficulty]
    games = 0

    while True:
        seed = None if args.seed is None else args.seed + games
        board = new_board(config, seed)
        games += 1

        print(
            f"Hex Mines ({args.difficulty}): {config.rows}x{config.cols}, "
            f"{config.num_mines} mines"
        )
        print(HELP_TEXT)

        if not play_game(board) or not ask_play_again():
            return


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Hex Mines - Minesweeper on a hexagonal grid"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show engine debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--difficulty", choices=sorted(DIFFICULTIES), default="easy",
        help="Board size and mine count",
    )
    play_parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for the first mine layout (later games use seed + n)",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    if args.command == "play":
        play(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
