import pytest

from tictacplay.game import Game, Player


@pytest.fixture
def game():
    return Game()


def play(game, *moves):
    for row, col in moves:
        game.make_move(row, col)


def test_initialization(game):
    assert game.current_player is Player.X
    assert game.winner() is Player.NONE
    assert not game.is_draw()
    assert all(game.at(r, c) is Player.NONE for r in range(3) for c in range(3))
    assert len(game.available_moves()) == 9


def test_basic_moves(game):
    assert game.make_move(0, 0)
    assert game.at(0, 0) is Player.X
    assert game.current_player is Player.O

    assert game.make_move(1, 1)
    assert game.at(1, 1) is Player.O
    assert game.current_player is Player.X

    assert not game.make_move(0, 0)
    assert game.current_player is Player.X

    assert len(game.available_moves()) == 7


def test_horizontal_win(game):
    play(game, (0, 0), (1, 0), (0, 1), (1, 1), (0, 2))
    assert game.is_win(Player.X)
    assert game.winner() is Player.X
    assert not game.is_draw()


def test_vertical_win(game):
    play(game, (1, 1), (0, 0), (1, 2), (1, 0), (2, 2), (2, 0))
    assert game.is_win(Player.O)
    assert game.winner() is Player.O
    assert not game.is_draw()


def test_diagonal_win_main(game):
    play(game, (0, 0), (0, 1), (1, 1), (0, 2), (2, 2))
    assert game.is_win(Player.X)
    assert game.winner() is Player.X


def test_diagonal_win_anti(game):
    play(game, (0, 0), (0, 2), (0, 1), (1, 1), (1, 0), (2, 0))
    assert game.is_win(Player.O)
    assert game.winner() is Player.O


def test_draw(game):
    play(
        game,
        (0, 0), (0, 1), (0, 2), (1, 0), (1, 2),
        (2, 0), (2, 1), (2, 2), (1, 1),
    )
    assert game.is_draw()
    assert game.winner() is Player.NONE
    assert not game.is_win(Player.X)
    assert not game.is_win(Player.O)


def test_available_moves(game):
    assert len(game.available_moves()) == 9
    game.make_move(1, 1)
    moves = game.available_moves()
    assert len(moves) == 8
    assert (1, 1) not in moves
    game.make_move(0, 0)
    game.make_move(2, 2)
    assert len(game.available_moves()) == 6


def test_available_moves_row_major_order(game):
    game.make_move(0, 1)
    assert game.available_moves() == [
        (0, 0), (0, 2), (1, 0), (1, 1), (1, 2), (2, 0), (2, 1), (2, 2)
    ]


def test_player_alternation(game):
    assert game.current_player is Player.X
    game.make_move(0, 0)
    assert game.current_player is Player.O
    game.make_move(0, 1)
    assert game.current_player is Player.X
    game.make_move(0, 2)
    assert game.current_player is Player.O
    assert not game.make_move(0, 0)
    assert game.current_player is Player.O


def test_reset_clears_board(game):
    play(game, (0, 0), (1, 1))
    game.reset()
    assert game.available_moves() == [(r, c) for r in range(3) for c in range(3)]
    assert game.current_player is Player.X
    assert game.move_count == 0


def test_copy_is_independent(game):
    game.make_move(0, 0)
    clone = game.copy()
    clone.make_move(1, 1)
    assert game.at(1, 1) is Player.NONE
    assert clone.at(1, 1) is Player.O
    assert clone.at(0, 0) is Player.X
    assert game.current_player is Player.O
    assert clone.current_player is Player.X


def test_render(game):
    play(game, (0, 0), (1, 1))
    assert game.render() == "X . . \n. O . \n. . . \n"


@pytest.mark.parametrize("row,col", [(-1, 0), (0, 3), (3, 3)])
def test_out_of_range_cell_raises(game, row, col):
    with pytest.raises(IndexError):
        game.make_move(row, col)
    with pytest.raises(IndexError):
        game.at(row, col)


def test_player_opponent_matches_turn_order(game):
    first = game.current_player
    assert game.make_move(0, 0)
    assert game.current_player is first.opponent
    assert game.at(0, 0).opponent is Player.O
    assert game.make_move(1, 1)
    assert game.at(1, 1).opponent is Player.X
    assert game.at(2, 2).opponent is Player.NONE