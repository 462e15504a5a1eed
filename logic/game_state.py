"""
Game state management for TicTacToe.
Tracks the board, current player, game mode and move history.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


class Player(str, Enum):
    """The two players in the game. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    def __str__(self) -> str:
        return self.value


class GameMode(Enum):
    """Who plays O: the minimax AI or a second human."""
    AI = "ai"
    PVP = "pvp"


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


# An empty cell
EMPTY = ""

# Board is 3x3, stored row-major as 9 cells:
#   0 1 2
#   3 4 5
#   6 7 8
BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE


def new_board() -> List[str]:
    """Create an empty board."""
    return [EMPTY] * NUM_CELLS


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Which move this is (0-8)


@dataclass
class GameSession:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 9-cell board (EMPTY, "X" or "O" per cell)
    - Current player
    - Game status (in progress, won, draw) and the winner
    - Every winning line found on the final move
    - The mode (vs AI or vs another player)
    - Move history

    Sessions are values: operations in logic.game return a new session
    and leave the one they were given untouched.
    """

    board: List[str] = field(default_factory=new_board)

    current_player: Player = Player.X

    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Player] = None
    winning_lines: List[Tuple[int, int, int]] = field(default_factory=list)

    mode: GameMode = GameMode.AI

    moves: List[Move] = field(default_factory=list)

    @property
    def is_game_over(self) -> bool:
        """True once the game is won or drawn."""
        return self.status != GameStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        """True once the game has ended in a draw."""
        return self.status == GameStatus.DRAW

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of cell indices, lowest first.
        """
        return [i for i, cell in enumerate(self.board) if cell == EMPTY]

    def copy(self) -> "GameSession":
        """Copy the session with fresh board and history lists. Moves are frozen."""
        return GameSession(
            board=list(self.board),
            current_player=self.current_player,
            status=self.status,
            winner=self.winner,
            winning_lines=list(self.winning_lines),
            mode=self.mode,
            moves=list(self.moves),
        )

    def format_board(self) -> str:
        """
        Get a text representation of the board.

        Empty cells show their index so a console player knows what to type.
        """
        lines = ["┌───┬───┬───┐"]

        for row in range(BOARD_SIZE):
            row_str = "│"
            for col in range(BOARD_SIZE):
                index = row * BOARD_SIZE + col
                cell = self.board[index]
                row_str += f" {cell if cell != EMPTY else index} │"
            lines.append(row_str)

            if row < BOARD_SIZE - 1:
                lines.append("├───┼───┼───┤")

        lines.append("└───┴───┴───┘")
        return "\n".join(lines)

    def print_board(self):
        """Print the board and game info to console."""
        print()
        print(self.format_board())

        if self.status == GameStatus.WON:
            print(f"\n{self.winner} WINS!")
        elif self.status == GameStatus.DRAW:
            print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player}")
