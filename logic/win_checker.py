"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, List, Sequence, Tuple
from .game_state import GameSession, GameStatus, Player, EMPTY


# All possible winning lines (as cell index triples)
WINNING_LINES: List[Tuple[int, int, int]] = [
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
]


def check_win(board: Sequence[str], player: Player) -> bool:
    """True if any winning line is held entirely by player."""
    return any(
        all(board[i] == player for i in line)
        for line in WINNING_LINES
    )


def is_draw(board: Sequence[str]) -> bool:
    """
    True if no cell is empty.

    Check for a win first: a full board with a winning line is a win.
    """
    return all(cell != EMPTY for cell in board)


def get_winning_lines(board: Sequence[str], player: Player) -> List[Tuple[int, int, int]]:
    """Every winning line held by player, in WINNING_LINES order."""
    return [
        line for line in WINNING_LINES
        if all(board[i] == player for i in line)
    ]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    def check_winner(self, board: Sequence[str]) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The 9-cell board.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for player in (Player.X, Player.O):
            if check_win(board, player):
                return player
        return None

    def update_session(self, session: GameSession, player: Player) -> GameSession:
        """
        Update the session after player has just moved.

        Sets WON (with every winning line) or DRAW, otherwise hands the
        turn to the other player.

        Args:
            session: The session to update, modified in place.
            player: The player who made the last move.

        Returns:
            The same session, for chaining.
        """
        lines = get_winning_lines(session.board, player)

        if lines:
            session.status = GameStatus.WON
            session.winner = player
            session.winning_lines = lines
        elif is_draw(session.board):
            session.status = GameStatus.DRAW
        else:
            session.current_player = player.opposite()

        return session
