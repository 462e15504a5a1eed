"""
Game controller for TicTacToe.

Owns the current session on behalf of a presentation layer (Tkinter UI or
console) and turns "a cell was clicked" into core calls. The AI thinking
delay and input locking stay with the presentation layer.
"""

from typing import Optional
from .game_state import GameSession, GameMode, GameStatus, Player
from .game import reset, apply_move
from .move_validator import InvalidMove
from .ai_player import AIPlayer


class GameController:
    """
    Holds one game session and its mode.

    In AI mode the human plays X and the AI plays O.
    In PvP mode both marks come from clicks.
    """

    def __init__(self, mode: GameMode = GameMode.AI, ai: Optional[AIPlayer] = None):
        self.mode = mode
        self.ai = ai or AIPlayer(Player.O)
        self.session: GameSession = reset(mode)

    @property
    def ai_player(self) -> Player:
        return self.ai.player

    def reset(self, mode: Optional[GameMode] = None) -> GameSession:
        """Start a new game, optionally switching mode."""
        if mode is not None:
            self.mode = mode
        self.session = reset(self.mode)
        return self.session

    def set_mode(self, mode: GameMode) -> GameSession:
        """Switch between AI and PvP. Always starts a new game."""
        return self.reset(mode)

    @property
    def ai_pending(self) -> bool:
        """True when the AI should move next."""
        return (
            self.mode == GameMode.AI
            and not self.session.is_game_over
            and self.session.current_player == self.ai_player
        )

    def human_move(self, index: int) -> GameSession:
        """
        Apply a clicked cell for the human whose turn it is.

        Raises:
            InvalidMove: the move is illegal, or the AI is to move.
        """
        if self.ai_pending:
            raise InvalidMove("Wait for the AI to move!", index=index, player=self.ai_player)

        self.session = apply_move(self.session, index, self.session.current_player)
        return self.session

    def ai_move(self) -> GameSession:
        """
        Let the AI play its move.

        Raises:
            InvalidMove: it is not the AI's turn.
        """
        if not self.ai_pending:
            raise InvalidMove("No AI move is pending.", player=self.ai_player)

        index = self.ai.get_best_move(self.session)
        self.session = apply_move(self.session, index, self.ai_player)
        return self.session

    def status_text(self) -> str:
        """The status line shown above the board."""
        session = self.session

        if session.status == GameStatus.WON:
            return f"{session.winner} Wins the Match!"
        if session.status == GameStatus.DRAW:
            return "Game Draw!"

        if self.mode == GameMode.AI:
            if session.current_player == self.ai_player:
                return "AI Turn..."
            if not session.moves:
                return f"Your turn ({session.current_player})"
        return f"Player {session.current_player}'s Turn"
