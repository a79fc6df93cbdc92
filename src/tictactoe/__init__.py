"""tictactoe package.

The game model (a 3x3 tic-tac-toe state machine), board encodings,
random playouts, and a small CLI.

Convenience imports are exposed for common workflows.
"""

from .errors import GameOverError, InvalidMoveError, OutOfBoundsError, TicTacToeError
from .model import TicTacToe, TicTacToeModel, render_board
from .player import Player

__all__ = [
    "Player",
    "TicTacToe",
    "TicTacToeModel",
    "render_board",
    "TicTacToeError",
    "InvalidMoveError",
    "GameOverError",
    "OutOfBoundsError",
]
