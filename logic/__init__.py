"""
Logic module for TicTacToe.
Handles game state, rules, and the minimax AI opponent.
"""

from .game_state import GameSession, GameMode, GameStatus, Move, Player, EMPTY
from .move_validator import InvalidMove, MoveValidator
from .win_checker import WinChecker, WINNING_LINES, check_win, is_draw
from .game import reset, apply_move
from .ai_player import AIPlayer, SolverResult, solve
from .controller import GameController
