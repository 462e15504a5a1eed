"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import GameSession, Player, EMPTY, NUM_CELLS


class InvalidMove(ValueError):
    """A move was rejected. The session it was aimed at is unchanged."""

    def __init__(self, message: str, index=None, player: Optional[Player] = None):
        super().__init__(message)
        self.message = message
        self.index = index
        self.player = player


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Index must be a cell on the board (0-8)
    3. Can only place on empty cells
    4. Only the player whose turn it is may move
    """

    def validate_move(
        self,
        session: GameSession,
        index: int,
        player: Player
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            session: Current game session.
            index: Cell to place the mark on (0-8).
            player: Who is moving.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if session.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # bool is an int subclass; True must not mean cell 1
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < NUM_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index!r}. Must be 0-{NUM_CELLS - 1}."
            )

        if session.board[index] != EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {session.board[index]}"
            )

        if player != session.current_player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's {session.current_player}'s turn, not {player}'s!"
            )

        return ValidationResult(is_valid=True)

    def ensure_valid(self, session: GameSession, index: int, player: Player):
        """Raise InvalidMove if the move fails validation."""
        result = self.validate_move(session, index, player)
        if not result.is_valid:
            raise InvalidMove(result.error_message, index=index, player=player)

    def get_valid_moves(self, session: GameSession) -> List[int]:
        """
        Get all valid moves for the current player.

        Args:
            session: Current game session.

        Returns:
            List of empty cell indices, or [] once the game is over.
        """
        if session.is_game_over:
            return []

        return [i for i, cell in enumerate(session.board) if cell == EMPTY]
