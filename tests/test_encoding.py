import numpy as np
import pytest

from tictactoe.encoding import (
    board_to_array,
    deserialize_board,
    format_moves,
    parse_moves,
    serialize_board,
)
from tictactoe.model import TicTacToeModel
from tictactoe.player import Player


def test_serialize_uses_player_codes():
    game = TicTacToeModel()
    game.move(0, 0)
    game.move(1, 1)
    assert serialize_board(game.get_board()) == "100020000"


def test_deserialize_layout():
    board = deserialize_board("120000002")
    assert board[0] == [Player.X, Player.O, None]
    assert board[1] == [None, None, None]
    assert board[2][2] is Player.O
    assert serialize_board(board) == "120000002"


@pytest.mark.parametrize("bad", ["", "abc", "12000000", "0123456789", "12000000x", "300000000"])
def test_deserialize_rejects_bad_strings(bad):
    with pytest.raises(ValueError):
        deserialize_board(bad)


def test_board_to_array():
    arr = board_to_array(deserialize_board("102020001"))
    assert arr.shape == (3, 3)
    assert arr.dtype == np.int8
    assert arr.tolist() == [[1, 0, 2], [0, 2, 0], [0, 0, 1]]


def test_board_to_array_is_detached_from_model():
    game = TicTacToeModel()
    game.move(2, 2)
    arr = board_to_array(game.get_board())
    arr[2, 2] = 2
    assert game.get_mark_at(2, 2) is Player.X


def test_parse_moves_separators():
    assert parse_moves("0,0 1,1;2,2\n0,2") == [(0, 0), (1, 1), (2, 2), (0, 2)]
    assert parse_moves("  ") == []


def test_parse_moves_keeps_out_of_range_values():
    # range checks belong to the model
    assert parse_moves("-1,0 3,3") == [(-1, 0), (3, 3)]


@pytest.mark.parametrize("bad", ["0", "0,0,0", "a,b", "1,"])
def test_parse_moves_rejects_malformed(bad):
    with pytest.raises(ValueError):
        parse_moves(bad)


def test_format_moves():
    assert format_moves([(0, 0), (2, 1)]) == "0,0 2,1"
