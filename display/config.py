"""
Display configuration for TicTacToe.
All the settings for drawing the board and pacing the AI.
"""

import cv2


class DisplayConfig:
    """
    Configuration class for display settings.
    Change these values to restyle the board!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Output size for the rendered board image (pixels)
    BOARD_OUTPUT_SIZE = 450
    CELL_OUTPUT_SIZE = BOARD_OUTPUT_SIZE // BOARD_SIZE  # 150 pixels per cell

    # Gap between a mark and its cell border
    MARK_PADDING = 35

    GRID_THICKNESS = 4
    MARK_THICKNESS = 10

    # ==================== COLORS (BGR) ====================
    BACKGROUND_COLOR = (46, 26, 26)
    GRID_COLOR = (128, 128, 128)
    X_COLOR = (113, 113, 248)       # red
    O_COLOR = (129, 185, 16)        # green
    HIGHLIGHT_COLOR = (0, 215, 255)  # gold, winning cells
    INDEX_COLOR = (90, 90, 90)

    FONT = cv2.FONT_HERSHEY_SIMPLEX
    INDEX_FONT_SCALE = 0.6

    # ==================== AI SETTINGS ====================
    # Pause before the AI moves so it looks like it's thinking.
    # Board input stays locked for this long.
    AI_THINK_DELAY_MS = 600

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    WINDOW_BG = '#1a1a2e'

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = True
    SHOW_CELL_INDICES = True
