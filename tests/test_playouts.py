import pytest

from tictactoe.errors import GameOverError, InvalidMoveError
from tictactoe.model import TicTacToeModel
from tictactoe.player import Player
from tictactoe.playouts import random_game, record_game, replay


def test_replay_applies_moves_in_order():
    game = replay([(0, 0), (1, 0), (0, 1)])
    assert game.get_mark_at(0, 0) is Player.X
    assert game.get_mark_at(1, 0) is Player.O
    assert game.get_turn() is Player.O


def test_replay_continues_given_model():
    game = TicTacToeModel()
    game.move(1, 1)
    out = replay([(0, 0)], model=game)
    assert out is game
    assert game.move_count == 2


def test_replay_propagates_model_errors():
    with pytest.raises(InvalidMoveError):
        replay([(0, 0), (0, 0)])
    with pytest.raises(GameOverError):
        replay([(0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (2, 2)])


def test_record_game():
    rec = record_game([(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    assert rec.over is True
    assert rec.winner is Player.X
    assert rec.move_count == 5
    assert rec.board[0] == [Player.X, Player.X, Player.X]


@pytest.mark.parametrize("seed", range(25))
def test_random_game_is_complete_and_legal(seed):
    moves = random_game(seed=seed)
    assert 5 <= len(moves) <= 9
    assert len(set(moves)) == len(moves)
    game = replay(moves)
    assert game.is_game_over()
    # the game must not have ended before the last move
    assert not replay(moves[:-1]).is_game_over()


def test_random_game_is_deterministic_per_seed():
    assert random_game(seed=7) == random_game(seed=7)
    assert all(isinstance(v, int) for mv in random_game(seed=3) for v in mv)
