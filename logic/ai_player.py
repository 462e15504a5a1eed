"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from functools import lru_cache
from typing import Optional, Sequence, Tuple
from dataclasses import dataclass
from .game_state import GameSession, Player, EMPTY
from .win_checker import check_win, is_draw


# Scores are fixed relative to O: O maximizes, X minimizes.
# No depth discount, so a win in 1 scores the same as a win in 5.
O_WIN_SCORE = 10
X_WIN_SCORE = -10
DRAW_SCORE = 0


@dataclass(frozen=True)
class SolverResult:
    """Best move for the player to move, and the game value under perfect play."""
    index: Optional[int]    # None on a terminal board
    score: int


def solve(board: Sequence[str], player_to_move: Player) -> SolverResult:
    """
    Find the optimal move by exhaustive minimax search.

    Ties are broken by lowest cell index. The board is not modified.

    Args:
        board: The 9-cell board.
        player_to_move: Whose move it is.

    Returns:
        SolverResult with the chosen cell and its score. On a board that is
        already won or full there is nothing to choose and index is None.
    """
    cells = tuple(getattr(cell, "value", cell) for cell in board)
    index, score = _minimax(cells, Player(player_to_move).value)
    return SolverResult(index=index, score=score)


@lru_cache(maxsize=None)
def _minimax(cells: Tuple[str, ...], player: str) -> Tuple[Optional[int], int]:
    """
    Minimax over a board tuple. Memoised, so the full tree from the empty
    board is only walked once per process.

    Returns:
        (index, score) for the player to move.
    """
    if check_win(cells, Player.X):
        return None, X_WIN_SCORE
    if check_win(cells, Player.O):
        return None, O_WIN_SCORE
    if is_draw(cells):
        return None, DRAW_SCORE

    maximizing = player == Player.O.value
    opponent = Player(player).opposite().value

    board = list(cells)
    best_index = None
    best_score = None

    for index, cell in enumerate(cells):
        if cell != EMPTY:
            continue

        # Try this move, score it, then put the cell back
        board[index] = player
        _, score = _minimax(tuple(board), opponent)
        board[index] = EMPTY

        # Strict comparison keeps the first (lowest index) of equal scores
        if (
            best_score is None
            or (maximizing and score > best_score)
            or (not maximizing and score < best_score)
        ):
            best_index = index
            best_score = score

    return best_index, best_score


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(self, player: Player = Player.O, verbose: bool = True):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
            verbose: Print each chosen move to the console
        """
        self.player = player
        self.verbose = verbose

        # Result of the last search (for debugging)
        self.last_result: Optional[SolverResult] = None

    def get_best_move(self, session: GameSession) -> Optional[int]:
        """
        Get the best move for the current position.

        Args:
            session: Current game session.

        Returns:
            Cell index of the best move, or None if there is nothing to play.
        """
        if session.is_game_over:
            return None

        if session.current_player != self.player:
            if self.verbose:
                print(f"Warning: It's not {self.player}'s turn!")
            return None

        if not session.get_empty_cells():
            return None

        result = solve(session.board, self.player)
        self.last_result = result

        if self.verbose:
            print(f"AI ({self.player}) chose cell {result.index} (score: {result.score})")

        return result.index

    def get_move_suggestion(self, session: GameSession) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            session: Current game session.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(session)

        if move is None:
            return "No moves available!"

        row, col = divmod(move, 3)
        return f"Place {self.player} at cell {move} (row {row}, col {col})"
