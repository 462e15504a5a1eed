"""
Board renderer for TicTacToe.
Draws a game session as an image and maps clicks back to cells.
"""

import cv2
import numpy as np
from typing import Optional, Tuple
from .config import DisplayConfig

from logic.game_state import GameSession, Player, EMPTY


class BoardRenderer:
    """
    Renders the 3x3 board with OpenCV.

    The image is BGR, BOARD_OUTPUT_SIZE pixels square.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration.
        """
        self.config = config or DisplayConfig()

    def render(self, session: GameSession) -> np.ndarray:
        """
        Draw the board for a session.

        Args:
            session: The session to draw.

        Returns:
            BGR image with grid, marks and any winning lines.
        """
        size = self.config.BOARD_OUTPUT_SIZE
        image = np.zeros((size, size, 3), dtype=np.uint8)
        image[:] = self.config.BACKGROUND_COLOR

        winning_cells = {i for line in session.winning_lines for i in line}

        # Highlight winning cells under everything else
        for index in winning_cells:
            x1, y1, x2, y2 = self.cell_bounds(index)
            cv2.rectangle(image, (x1, y1), (x2, y2), self.config.HIGHLIGHT_COLOR, -1)

        self._draw_grid(image)

        for index, cell in enumerate(session.board):
            if cell == Player.X:
                self._draw_x(image, index)
            elif cell == Player.O:
                self._draw_o(image, index)
            elif self.config.SHOW_CELL_INDICES and cell == EMPTY:
                self._draw_index(image, index)

        for line in session.winning_lines:
            start = self.cell_center(line[0])
            end = self.cell_center(line[-1])
            cv2.line(image, start, end, self.config.HIGHLIGHT_COLOR, self.config.MARK_THICKNESS // 2)

        return image

    def _draw_grid(self, image: np.ndarray):
        cell_size = self.config.CELL_OUTPUT_SIZE
        size = self.config.BOARD_OUTPUT_SIZE

        for i in range(1, self.config.BOARD_SIZE):
            # Vertical lines
            cv2.line(
                image,
                (i * cell_size, 0),
                (i * cell_size, size),
                self.config.GRID_COLOR,
                self.config.GRID_THICKNESS
            )
            # Horizontal lines
            cv2.line(
                image,
                (0, i * cell_size),
                (size, i * cell_size),
                self.config.GRID_COLOR,
                self.config.GRID_THICKNESS
            )

    def _draw_x(self, image: np.ndarray, index: int):
        x1, y1, x2, y2 = self.cell_bounds(index)
        pad = self.config.MARK_PADDING
        color = self.config.X_COLOR
        thickness = self.config.MARK_THICKNESS

        cv2.line(image, (x1 + pad, y1 + pad), (x2 - pad, y2 - pad), color, thickness)
        cv2.line(image, (x2 - pad, y1 + pad), (x1 + pad, y2 - pad), color, thickness)

    def _draw_o(self, image: np.ndarray, index: int):
        radius = self.config.CELL_OUTPUT_SIZE // 2 - self.config.MARK_PADDING
        cv2.circle(
            image,
            self.cell_center(index),
            radius,
            self.config.O_COLOR,
            self.config.MARK_THICKNESS
        )

    def _draw_index(self, image: np.ndarray, index: int):
        x1, y1, _, _ = self.cell_bounds(index)
        cv2.putText(
            image,
            str(index),
            (x1 + 10, y1 + 25),
            self.config.FONT,
            self.config.INDEX_FONT_SCALE,
            self.config.INDEX_COLOR,
            1
        )

    def cell_bounds(self, index: int) -> Tuple[int, int, int, int]:
        """
        Pixel bounds of a cell.

        Returns:
            (x1, y1, x2, y2), inclusive of the top-left corner.
        """
        cell_size = self.config.CELL_OUTPUT_SIZE
        row, col = divmod(index, self.config.BOARD_SIZE)
        return (
            col * cell_size,
            row * cell_size,
            (col + 1) * cell_size,
            (row + 1) * cell_size,
        )

    def cell_center(self, index: int) -> Tuple[int, int]:
        x1, y1, x2, y2 = self.cell_bounds(index)
        return (x1 + x2) // 2, (y1 + y2) // 2

    def point_to_index(self, x: int, y: int) -> Optional[int]:
        """
        Convert a point on the rendered board to a cell index.

        Args:
            x: X coordinate in board pixels.
            y: Y coordinate in board pixels.

        Returns:
            Cell index (0-8), or None if the point is off the board.
        """
        size = self.config.BOARD_OUTPUT_SIZE
        if not (0 <= x < size and 0 <= y < size):
            return None

        cell_size = self.config.CELL_OUTPUT_SIZE

        # Clamp for the few pixels left over when size isn't a multiple of 3
        col = min(self.config.BOARD_SIZE - 1, int(x) // cell_size)
        row = min(self.config.BOARD_SIZE - 1, int(y) // cell_size)

        return row * self.config.BOARD_SIZE + col
