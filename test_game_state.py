"""
Tests for game state, move application and move validation.
"""

import dataclasses

import pytest

from logic.game import reset, apply_move
from logic.game_state import GameSession, GameMode, GameStatus, Player, EMPTY
from logic.move_validator import InvalidMove, MoveValidator


# X0, O1, X2, O4, X3, O5, X7, O6, X8 fills the board without a line
DRAW_SEQUENCE = [0, 1, 2, 4, 3, 5, 7, 6, 8]


def play(session, indices):
    for index in indices:
        session = apply_move(session, index, session.current_player)
    return session


def test_reset_gives_fresh_session():
    session = reset()
    assert session.board == [EMPTY] * 9
    assert session.current_player == Player.X
    assert session.status == GameStatus.IN_PROGRESS
    assert session.winner is None
    assert session.winning_lines == []
    assert session.moves == []
    assert session.mode == GameMode.AI


def test_reset_keeps_requested_mode():
    assert reset(GameMode.PVP).mode == GameMode.PVP


def test_apply_move_places_mark_and_flips_player():
    session = apply_move(reset(), 4, Player.X)
    assert session.board[4] == Player.X
    assert session.current_player == Player.O
    assert session.status == GameStatus.IN_PROGRESS
    assert session.moves[0].index == 4
    assert session.moves[0].player == Player.X
    assert session.moves[0].move_number == 0


def test_apply_move_returns_new_session():
    original = reset()
    updated = apply_move(original, 0, Player.X)
    assert updated is not original
    assert original.board == [EMPTY] * 9
    assert original.current_player == Player.X
    assert original.moves == []


def test_apply_move_accepts_plain_strings():
    session = apply_move(reset(), 0, "X")
    assert session.board[0] == "X"
    assert session.board[0] is Player.X


def test_row_win_reports_winner_and_line():
    session = GameSession(
        board=["X", "X", "", "", "O", "O", "", "", ""],
        current_player=Player.X,
    )
    session = apply_move(session, 2, Player.X)
    assert session.status == GameStatus.WON
    assert session.winner == Player.X
    assert session.winning_lines == [(0, 1, 2)]
    # Winner keeps the turn marker; no flip on a finished game
    assert session.current_player == Player.X


def test_win_reports_every_completed_line():
    session = GameSession(
        board=["", "X", "X", "X", "O", "O", "X", "O", "O"],
        current_player=Player.X,
    )
    session = apply_move(session, 0, Player.X)
    assert session.winning_lines == [(0, 1, 2), (0, 3, 6)]


def test_nine_moves_without_a_line_is_a_draw():
    session = play(reset(), DRAW_SEQUENCE)
    assert session.status == GameStatus.DRAW
    assert session.is_draw
    assert session.winner is None
    assert session.board == ["X", "O", "X", "X", "O", "O", "O", "X", "X"]
    assert len(session.moves) == 9


def test_winning_last_move_on_full_board_is_a_win():
    # X completes the diagonal with the ninth mark
    session = play(reset(), [0, 1, 2, 5, 3, 6, 4, 7, 8])
    assert session.status == GameStatus.WON
    assert session.winner == Player.X
    assert (0, 4, 8) in session.winning_lines


@pytest.mark.parametrize("index", [-1, 9, 100])
def test_out_of_range_index_is_rejected(index):
    session = reset()
    with pytest.raises(InvalidMove):
        apply_move(session, index, Player.X)
    assert session.board == [EMPTY] * 9


@pytest.mark.parametrize("index", ["4", 4.0, None, True])
def test_non_integer_index_is_rejected(index):
    with pytest.raises(InvalidMove):
        apply_move(reset(), index, Player.X)


def test_occupied_cell_is_rejected():
    session = apply_move(reset(), 4, Player.X)
    with pytest.raises(InvalidMove) as excinfo:
        apply_move(session, 4, Player.O)
    assert excinfo.value.index == 4
    assert session.board[4] == Player.X
    assert session.current_player == Player.O


def test_wrong_player_is_rejected():
    session = reset()
    with pytest.raises(InvalidMove) as excinfo:
        apply_move(session, 0, Player.O)
    assert excinfo.value.player == Player.O
    assert session.board[0] == EMPTY


def test_moves_after_game_over_are_rejected():
    won = play(reset(), [0, 3, 1, 4, 2])
    assert won.status == GameStatus.WON
    before = won.copy()

    with pytest.raises(InvalidMove):
        apply_move(won, 8, won.current_player)
    with pytest.raises(InvalidMove):
        apply_move(won, 8, won.current_player.opposite())
    assert won == before

    drawn = play(reset(), DRAW_SEQUENCE)
    with pytest.raises(InvalidMove):
        apply_move(drawn, 0, Player.X)


def test_invalid_move_is_a_value_error():
    with pytest.raises(ValueError):
        apply_move(reset(), 9, Player.X)


def test_validator_reports_reason():
    validator = MoveValidator()
    session = apply_move(reset(), 4, Player.X)

    result = validator.validate_move(session, 4, Player.O)
    assert not result.is_valid
    assert "occupied" in result.error_message

    result = validator.validate_move(session, 0, Player.O)
    assert result.is_valid
    assert result.error_message is None


def test_valid_moves_are_empty_cells_until_game_over():
    validator = MoveValidator()
    session = apply_move(reset(), 4, Player.X)
    assert validator.get_valid_moves(session) == [0, 1, 2, 3, 5, 6, 7, 8]

    won = play(reset(), [0, 3, 1, 4, 2])
    assert validator.get_valid_moves(won) == []


def test_player_opposite():
    assert Player.X.opposite() == Player.O
    assert Player.O.opposite() == Player.X


def test_format_board_shows_marks_and_free_indices():
    session = apply_move(reset(), 0, Player.X)
    text = session.format_board()
    assert "│ X │ 1 │ 2 │" in text
    assert "│ 6 │ 7 │ 8 │" in text


def test_copy_has_its_own_lists_and_shares_frozen_moves():
    session = apply_move(reset(), 4, Player.X)
    duplicate = session.copy()
    duplicate.board[0] = Player.O
    duplicate.moves.append(duplicate.moves[0])

    assert session.board[0] == EMPTY
    assert len(session.moves) == 1
    with pytest.raises(dataclasses.FrozenInstanceError):
        session.moves[0].index = 0


def test_is_draw_only_after_a_drawn_game():
    assert not reset().is_draw
    assert not play(reset(), [0, 3, 1, 4, 2]).is_draw
    assert play(reset(), DRAW_SEQUENCE).is_draw
