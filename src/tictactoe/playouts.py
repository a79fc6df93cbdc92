"""
Replays and random playouts driven through the public model interface.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .model import SIZE, Board, TicTacToeModel
from .player import Player

Move = Tuple[int, int]


@dataclass
class GameRecord:
    moves: List[Move]
    board: Board
    winner: Optional[Player]
    move_count: int
    over: bool


def replay(moves: Iterable[Move], model: Optional[TicTacToeModel] = None) -> TicTacToeModel:
    """Apply moves in order. Errors from the model propagate as-is."""
    game = model if model is not None else TicTacToeModel()
    for r, c in moves:
        game.move(r, c)
    return game


def record_game(moves: Iterable[Move]) -> GameRecord:
    mv = list(moves)
    game = replay(mv)
    return GameRecord(
        moves=mv,
        board=game.get_board(),
        winner=game.get_winner(),
        move_count=game.move_count,
        over=game.is_game_over(),
    )


def random_game(seed: Optional[int] = None) -> List[Move]:
    """Play uniformly random legal moves until the game ends."""
    rng = np.random.default_rng(seed)
    game = TicTacToeModel()
    moves: List[Move] = []
    while not game.is_game_over():
        empty = [(r, c) for r in range(SIZE) for c in range(SIZE) if game.get_mark_at(r, c) is None]
        r, c = empty[int(rng.integers(len(empty)))]
        game.move(r, c)
        moves.append((r, c))
    return moves
