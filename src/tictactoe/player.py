"""
Player marks.
Teaching notes:
- X always starts. The enum value doubles as the display label.
- Integer codes match the 9-digit board strings: 0=empty, 1=X, 2=O.
"""
from __future__ import annotations

from enum import Enum


class Player(Enum):
    X = "X"
    O = "O"

    def __str__(self) -> str:
        return self.value

    @property
    def code(self) -> int:
        return 1 if self is Player.X else 2

    def opponent(self) -> "Player":
        """Return the other mark."""
        return Player.O if self is Player.X else Player.X

    @classmethod
    def from_code(cls, code: int) -> "Player":
        if code == 1:
            return cls.X
        if code == 2:
            return cls.O
        raise ValueError(f"Unknown player code: {code}")
