"""
Game operations for TicTacToe.

Sessions are passed in and returned; nothing here keeps state between calls.
"""

from .game_state import GameSession, GameMode, Move, Player
from .move_validator import MoveValidator
from .win_checker import WinChecker


_validator = MoveValidator()
_win_checker = WinChecker()


def reset(mode: GameMode = GameMode.AI) -> GameSession:
    """Start a fresh game: empty board, X to move."""
    return GameSession(mode=mode)


def apply_move(session: GameSession, index: int, player: Player) -> GameSession:
    """
    Place player's mark on a cell.

    Args:
        session: Current game session. Not modified.
        index: Cell index (0-8).
        player: Who is moving. Must be session.current_player.

    Returns:
        A new session with the mark placed and the status updated
        (WON, DRAW, or IN_PROGRESS with the other player to move).

    Raises:
        InvalidMove: the game is over, the index is off the board,
            the cell is taken, or it is not player's turn.
    """
    _validator.ensure_valid(session, index, player)

    player = Player(player)
    new_session = session.copy()
    new_session.board[index] = player
    new_session.moves.append(Move(
        player=player,
        index=index,
        move_number=len(session.moves),
    ))

    return _win_checker.update_session(new_session, player)
