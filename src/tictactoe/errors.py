"""Errors raised by the game model.

Each one also subclasses the closest builtin, so ``except ValueError`` and
friends keep working for callers that don't import this module.
"""


class TicTacToeError(Exception):
    pass


class InvalidMoveError(TicTacToeError, ValueError):
    """Move coordinates out of range, or the target cell is occupied."""


class GameOverError(TicTacToeError, RuntimeError):
    """The operation needs a game that is still in progress."""


class OutOfBoundsError(TicTacToeError, IndexError):
    """A cell query outside the 3x3 grid."""
