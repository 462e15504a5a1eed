"""
Tests for the console front end.
"""

from main import TicTacToeConsole, main
from logic.game_state import GameMode, GameStatus, Player


def scripted(lines):
    """An input() stand-in that replays lines, then hits end of input."""
    lines = list(lines)

    def fake_input(prompt):
        if not lines:
            raise EOFError
        return lines.pop(0)

    return fake_input


def test_pvp_game_to_a_win(capsys):
    game = TicTacToeConsole(GameMode.PVP, input_func=scripted(["0", "3", "1", "4", "2", "n"]))
    game.start()

    session = game.controller.session
    assert session.status == GameStatus.WON
    assert session.winner == Player.X
    out = capsys.readouterr().out
    assert "X wins! Congratulations!" in out
    assert "(0, 1, 2)" in out
    assert not game.is_running


def test_bad_input_is_reported_and_ignored(capsys):
    game = TicTacToeConsole(GameMode.PVP, input_func=scripted(["abc", "0", "0", "9", "q"]))
    game.start()

    out = capsys.readouterr().out
    assert "'abc' is not a cell" in out
    assert out.count("Invalid move") == 2
    assert game.controller.session.board.count(Player.X) == 1
    assert game.controller.session.board.count(Player.O) == 0
    assert "Game quit by user." in out


def test_ai_replies_after_thinking_delay():
    delays = []
    game = TicTacToeConsole(
        GameMode.AI,
        input_func=scripted(["4", "q"]),
        sleep_func=delays.append,
    )
    game.start()

    assert delays == [0.6]
    board = game.controller.session.board
    assert board[4] == Player.X
    assert board.count(Player.O) == 1


def test_reset_command_clears_board():
    game = TicTacToeConsole(GameMode.PVP, input_func=scripted(["0", "r"]))
    game.start()
    assert game.controller.session.moves == []


def test_play_again_after_draw():
    moves = ["0", "1", "2", "4", "3", "5", "7", "6", "8"]
    game = TicTacToeConsole(GameMode.PVP, input_func=scripted(moves + ["y", "4", "q"]))
    game.start()

    session = game.controller.session
    assert session.status == GameStatus.IN_PROGRESS
    assert session.board[4] == Player.X


def test_main_console_mode(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", scripted(["q"]))
    main(["--no-ui", "--mode", "pvp"])
    out = capsys.readouterr().out
    assert "Player vs Player" in out
    assert "Goodbye!" in out
