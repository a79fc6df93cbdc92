"""
Game model: the tic-tac-toe state machine and its interface.
Teaching notes:
- The board is a 3x3 list of rows; a cell is None or a Player. X always starts.
- The game is over once a line of three exists or all 9 cells are filled.
- The turn is not switched by the move that ends the game; get_turn() raises
  from then on, so the frozen value is never observable.
- Failing calls leave the model untouched.

Example:
    game = TicTacToeModel()
    game.move(0, 0)  # X takes the top-left corner
    game.move(1, 1)  # O takes the center
"""
from __future__ import annotations

import logging
import numbers
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from .errors import GameOverError, InvalidMoveError, OutOfBoundsError
from .player import Player

SIZE = 3
CELLS = SIZE * SIZE

Board = List[List[Optional[Player]]]

# Scan order: row 0, col 0, row 1, col 1, row 2, col 2, main diagonal, anti-diagonal.
WIN_LINES: List[Tuple[Tuple[int, int], ...]] = [
    ((0, 0), (0, 1), (0, 2)), ((0, 0), (1, 0), (2, 0)),
    ((1, 0), (1, 1), (1, 2)), ((0, 1), (1, 1), (2, 1)),
    ((2, 0), (2, 1), (2, 2)), ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)), ((0, 2), (1, 1), (2, 0)),
]


def _in_range(v: object) -> bool:
    return isinstance(v, numbers.Integral) and not isinstance(v, bool) and 0 <= v < SIZE


def render_board(board: Board) -> str:
    """Render a board snapshot as text, one row per line with separators."""
    rows = [" " + " | ".join(" " if p is None else str(p) for p in row) for row in board]
    return "\n-----------\n".join(rows)


class TicTacToe(ABC):
    """Contract for a two-player game of tic-tac-toe on a 3x3 grid."""

    @abstractmethod
    def move(self, row: int, col: int) -> None:
        """Place the current player's mark at (row, col).

        Raises GameOverError if the game is over, InvalidMoveError if the
        cell is off the board or already taken.
        """

    @abstractmethod
    def get_turn(self) -> Player:
        """Whose turn it is. Raises GameOverError once the game is over."""

    @abstractmethod
    def is_game_over(self) -> bool:
        """True if someone has won or the board is full."""

    @abstractmethod
    def get_winner(self) -> Optional[Player]:
        """The winner, or None if there is none (yet, or ever: a tie)."""

    @abstractmethod
    def get_board(self) -> Board:
        """A copy of the board; changes to it do not affect the game."""

    @abstractmethod
    def get_mark_at(self, row: int, col: int) -> Optional[Player]:
        """The mark at (row, col), or None. Raises OutOfBoundsError off the board."""


class TicTacToeModel(TicTacToe):
    def __init__(self) -> None:
        self._board: Board = [[None] * SIZE for _ in range(SIZE)]
        self._turn = Player.X
        self._move_count = 0

    @property
    def move_count(self) -> int:
        return self._move_count

    def move(self, row: int, col: int) -> None:
        if self.is_game_over():
            raise GameOverError("Game is over.")
        if not (_in_range(row) and _in_range(col)) or self._board[row][col] is not None:
            raise InvalidMoveError(f"Invalid move: ({row}, {col}).")

        self._board[row][col] = self._turn
        self._move_count += 1
        logging.debug("move=%d player=%s cell=(%d,%d)", self._move_count, self._turn, row, col)

        if self.is_game_over():
            logging.debug("game_over winner=%s moves=%d", self.get_winner(), self._move_count)
        else:
            self._turn = self._turn.opponent()

    def get_turn(self) -> Player:
        if self.is_game_over():
            raise GameOverError("Game is over.")
        return self._turn

    def is_game_over(self) -> bool:
        return self.get_winner() is not None or self._move_count == CELLS

    def get_winner(self) -> Optional[Player]:
        b = self._board
        for (r0, c0), (r1, c1), (r2, c2) in WIN_LINES:
            v = b[r0][c0]
            if v is not None and v == b[r1][c1] and v == b[r2][c2]:
                return v
        return None

    def get_board(self) -> Board:
        return [row[:] for row in self._board]

    def get_mark_at(self, row: int, col: int) -> Optional[Player]:
        if not (_in_range(row) and _in_range(col)):
            raise OutOfBoundsError(f"Cell ({row}, {col}) is out of bounds.")
        return self._board[row][col]

    def __str__(self) -> str:
        return render_board(self._board)
