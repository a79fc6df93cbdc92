import pytest

from tictactoe.player import Player


def test_display_labels():
    assert str(Player.X) == "X"
    assert str(Player.O) == "O"


def test_opponent():
    assert Player.X.opponent() is Player.O
    assert Player.O.opponent() is Player.X


def test_codes_round_trip():
    for p in Player:
        assert Player.from_code(p.code) is p
    with pytest.raises(ValueError):
        Player.from_code(0)
