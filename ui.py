"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The board, rendered with OpenCV (winning line highlighted)
- Game status and whose turn it is
- Mode selection (vs AI / vs Player)
"""

import cv2
import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional

# Display imports
from display.config import DisplayConfig
from display.board_renderer import BoardRenderer

# Logic imports
from logic.game_state import GameMode
from logic.move_validator import InvalidMove
from logic.controller import GameController


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, mode: GameMode = GameMode.AI, config: Optional[DisplayConfig] = None):
        """Initialize the UI."""
        self.config = config or DisplayConfig()
        self.renderer = BoardRenderer(self.config)
        self.controller = GameController(mode)

        # Board clicks are ignored while the AI is "thinking"
        self.input_locked = False
        # Handle of the scheduled AI move, so reset can cancel it
        self._ai_job: Optional[str] = None

        # Create UI
        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(self.config.WINDOW_TITLE)
        self.root.configure(bg=self.config.WINDOW_BG)
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=self.config.WINDOW_BG)
        style.configure('TLabel', background=self.config.WINDOW_BG, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        ttk.Label(main_frame, text="Tic-Tac-Toe", style='Title.TLabel').pack(pady=(0, 5))

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Board canvas
        size = self.config.BOARD_OUTPUT_SIZE
        self.board_canvas = tk.Canvas(
            main_frame,
            width=size,
            height=size,
            bg='#0f0f1a',
            highlightthickness=0
        )
        self.board_canvas.pack(pady=10)
        self.board_canvas.bind("<Button-1>", self._on_board_click)

        # Mode buttons
        mode_frame = ttk.Frame(main_frame)
        mode_frame.pack(pady=10)

        self.mode_buttons = {}
        for text, mode in (("vs AI", GameMode.AI), ("vs Player", GameMode.PVP)):
            btn = tk.Button(
                mode_frame,
                text=text,
                font=('Segoe UI', 10, 'bold'),
                width=10,
                command=lambda m=mode: self._set_mode(m)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.mode_buttons[mode] = btn

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=5)

        tk.Button(
            control_frame,
            text="Reset",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=10,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Quit",
            font=('Segoe UI', 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=10,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _set_mode(self, mode: GameMode):
        """Switch mode. Starts a new game."""
        self._cancel_ai_move()
        self.controller.set_mode(mode)
        print(f"Mode set to: {mode.name}")
        self._refresh()

    def _on_board_click(self, event):
        """Handle a click on the board canvas."""
        if self.input_locked:
            return

        index = self.renderer.point_to_index(event.x, event.y)
        if index is None:
            return

        try:
            self.controller.human_move(index)
        except InvalidMove as e:
            # Occupied cell or finished game: leave the board as it is
            if self.config.DEBUG_MODE:
                print(f"Ignored move: {e}")
            return

        self._refresh()

        if self.controller.ai_pending:
            self.input_locked = True
            self.status_label.configure(text="AI is thinking...")
            self._ai_job = self.root.after(self.config.AI_THINK_DELAY_MS, self._ai_move)

    def _ai_move(self):
        """Play the AI's reply (runs on UI thread after the delay)."""
        self._ai_job = None
        try:
            self.controller.ai_move()
        finally:
            self.input_locked = False
        self._refresh()

    def _cancel_ai_move(self):
        if self._ai_job is not None:
            self.root.after_cancel(self._ai_job)
            self._ai_job = None
        self.input_locked = False

    def _refresh(self):
        """Redraw board, status and mode buttons."""
        image = self.renderer.render(self.controller.session)
        self._update_board_canvas(image)
        self.status_label.configure(text=self.controller.status_text())

        for mode, btn in self.mode_buttons.items():
            if mode == self.controller.mode:
                btn.configure(bg='#00d4ff', fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

    def _update_board_canvas(self, image):
        """Show a rendered BGR board image on the canvas."""
        image_rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)

        photo = ImageTk.PhotoImage(Image.fromarray(image_rgb))

        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self._cancel_ai_move()
        self.controller.reset()
        self._refresh()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_ai_move()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GameMode],
        default=GameMode.AI.value,
        help="Play against the AI or another player"
    )

    args = parser.parse_args()

    ui = TicTacToeUI(mode=GameMode(args.mode))
    ui.run()


if __name__ == "__main__":
    main()
