"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.

Run this script to play TicTacToe against the unbeatable AI,
or against a friend with --mode pvp!
"""

import time
from typing import Callable, Optional

# Display imports
from display.config import DisplayConfig

# Logic imports
from logic.game_state import GameMode, GameStatus
from logic.move_validator import InvalidMove
from logic.controller import GameController


class TicTacToeConsole:
    """
    Console front end for TicTacToe.

    Game flow:
    1. Human types a cell index (0-8)
    2. Move is validated and applied
    3. In AI mode, the AI "thinks" for a moment, then replies as O
    4. Repeat until someone wins or it's a draw

    'r' resets the game, 'q' quits.
    """

    def __init__(
        self,
        mode: GameMode = GameMode.AI,
        config: Optional[DisplayConfig] = None,
        input_func: Optional[Callable[[str], str]] = None,
        sleep_func: Optional[Callable[[float], None]] = None
    ):
        """
        Initialize the console game.

        Args:
            mode: Play vs the AI or vs another player.
            config: Display configuration (for the AI delay).
            input_func: Where moves are read from (default: input).
            sleep_func: How the AI thinking delay is waited out (default: time.sleep).
        """
        self.config = config or DisplayConfig()
        self.controller = GameController(mode)
        self.input_func = input_func or input
        self.sleep_func = sleep_func or time.sleep
        self.is_running = False

    def start(self):
        """Start the game."""
        print("\n" + "="*60)
        print(f"   TicTacToe - {'vs AI' if self.controller.mode == GameMode.AI else 'Player vs Player'}")
        print("="*60)
        print("Type a cell (0-8) to move, 'r' to reset, 'q' to quit\n")

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            session = self.controller.session
            session.print_board()

            if session.is_game_over:
                self._show_game_result()
                answer = self._read("Play again? (y/n): ")
                if answer is None or answer.lower() != "y":
                    self.is_running = False
                else:
                    self._reset_game()
                continue

            print(self.controller.status_text())
            command = self._read(f"{session.current_player} > ")

            if command is None or command.lower() == "q":
                print("\nGame quit by user.")
                self.is_running = False
            elif command.lower() == "r":
                self._reset_game()
            else:
                self._process_human_move(command)

    def _read(self, prompt: str) -> Optional[str]:
        """Read a line, or None at end of input."""
        try:
            return self.input_func(prompt).strip()
        except EOFError:
            return None

    def _process_human_move(self, command: str):
        """
        Process a typed move.

        Args:
            command: What the player typed.
        """
        try:
            index = int(command)
        except ValueError:
            print(f"'{command}' is not a cell. Type 0-8.")
            return

        try:
            self.controller.human_move(index)
        except InvalidMove as e:
            print(f"Invalid move: {e}")
            return

        if self.controller.ai_pending:
            self._ai_move()

    def _ai_move(self):
        """Execute the AI's move."""
        print("\n>>> AI is thinking...")
        self.sleep_func(self.config.AI_THINK_DELAY_MS / 1000)
        self.controller.ai_move()

    def _show_game_result(self):
        """Show the final game result."""
        session = self.controller.session

        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        if session.status == GameStatus.WON:
            if self.controller.mode == GameMode.AI and session.winner == self.controller.ai_player:
                print("\nAI wins! Better luck next time!")
            else:
                print(f"\n{session.winner} wins! Congratulations!")
            print(f"Winning line: {', '.join(str(line) for line in session.winning_lines)}")
        else:
            print("\nIt's a draw! Good game!")

        print("\n" + "="*60)

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.controller.reset()


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe with an unbeatable AI")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GameMode],
        default=GameMode.AI.value,
        help="Play against the AI (default) or another player"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args(argv)
    mode = GameMode(args.mode)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(mode=mode)
        ui.run()
        return

    game = TicTacToeConsole(mode=mode)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
