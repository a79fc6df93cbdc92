"""
Board encodings for inspection and downstream tooling.
Teaching notes:
- Boards serialize row-major to 9 digits: 0=empty, 1=X, 2=O.
- board_to_array gives the same codes as a 3x3 int8 numpy array.
"""
from __future__ import annotations

import re
from typing import List, Tuple

import numpy as np

from .model import CELLS, SIZE, Board
from .player import Player

_MOVE_SEP = re.compile(r"[\s;]+")


def serialize_board(board: Board) -> str:
    return ''.join('0' if p is None else str(p.code) for row in board for p in row)


def deserialize_board(board_str: str) -> Board:
    raw = board_str.strip()
    if len(raw) != CELLS or any(c not in "012" for c in raw):
        raise ValueError(f"Invalid board string {board_str!r}. Must be 9 chars of 0/1/2.")
    cells = [None if c == '0' else Player.from_code(int(c)) for c in raw]
    return [cells[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]


def board_to_array(board: Board) -> np.ndarray:
    arr = np.zeros((SIZE, SIZE), dtype=np.int8)
    for r, row in enumerate(board):
        for c, p in enumerate(row):
            if p is not None:
                arr[r, c] = p.code
    return arr


def parse_moves(text: str) -> List[Tuple[int, int]]:
    """Parse moves written as "r,c" pairs, e.g. "0,0 1,1;2,2".

    Only the syntax is checked here; whether a move is legal is up to the model.
    """
    moves: List[Tuple[int, int]] = []
    for tok in _MOVE_SEP.split(text.strip()):
        if not tok:
            continue
        parts = tok.split(',')
        if len(parts) != 2:
            raise ValueError(f"Malformed move {tok!r}; expected row,col")
        try:
            moves.append((int(parts[0]), int(parts[1])))
        except ValueError:
            raise ValueError(f"Malformed move {tok!r}; expected row,col") from None
    return moves


def format_moves(moves: List[Tuple[int, int]]) -> str:
    return ' '.join(f"{r},{c}" for r, c in moves)
