"""
Frame rendering for board snapshots.

Draws one padded quad per grid cell with Pillow: the background cell color,
the snake color for occupied cells, and an apple quad on top of the apple
cell. The same layout is used by the pygame window, so exported videos look
like the live game.
"""

from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from domain.board import Board
from domain.rules import is_game_over

CELL_SIZE = 40  # Size of each grid cell in pixels
CELL_PADDING = 1
FOOTER_HEIGHT = 24


class ColorScheme:
    """Colors shared by the window shell and the frame renderer"""

    BACKGROUND = "#FFFFFF"
    CELL = "#C8D2F0"
    SNAKE = "#6EF064"
    APPLE = "#F0646E"

    # Footer
    FOOTER_BG = "#1A1F2E"
    FOOTER_TEXT = "#FFFFFF"
    GAME_OVER_TEXT = "#F0646E"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def cell_rect(x: int, y: int, cell_size: int, padding: int = CELL_PADDING) -> Tuple[int, int, int, int]:
    """
    Pixel rectangle (left, top, width, height) of the quad for cell (x, y).

    Shared by every renderer so the window and the video agree on layout.
    """
    if cell_size <= 2 * padding:
        raise ValueError(f"cell_size must be larger than {2 * padding}, got {cell_size}")
    return (
        x * cell_size + padding,
        y * cell_size + padding,
        cell_size - 2 * padding,
        cell_size - 2 * padding,
    )


def cell_color(board: Board, cell: Tuple[int, int]) -> str:
    """Occupancy color of a cell (the apple is drawn as a separate quad)."""
    return ColorScheme.SNAKE if cell in board.snake else ColorScheme.CELL


class FrameRenderer:
    """Render Board snapshots to Pillow images"""

    def __init__(self, cell_size: int = CELL_SIZE, show_footer: bool = True):
        if cell_size <= 2 * CELL_PADDING:
            raise ValueError(f"cell_size must be larger than {2 * CELL_PADDING}, got {cell_size}")
        self.cell_size = cell_size
        self.show_footer = show_footer
        self.font = ImageFont.load_default()

    def image_size(self, board: Board) -> Tuple[int, int]:
        footer = FOOTER_HEIGHT if self.show_footer else 0
        return (board.width * self.cell_size, board.height * self.cell_size + footer)

    def render_frame(
        self,
        board: Board,
        round_number: int = 0,
        total_rounds: Optional[int] = None
    ) -> Image.Image:
        """Render a single video frame: the grid plus an optional footer line"""
        img = Image.new('RGB', self.image_size(board), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)
        self._draw_cells(draw, board)

        if self.show_footer:
            self._draw_footer(draw, board, round_number, total_rounds)

        return img

    def _draw_cells(self, draw: ImageDraw.ImageDraw, board: Board):
        for x, y in board.cells():
            self._draw_quad(draw, x, y, cell_color(board, (x, y)))
            if board.apple == (x, y):
                self._draw_quad(draw, x, y, ColorScheme.APPLE)

    def _draw_quad(self, draw: ImageDraw.ImageDraw, x: int, y: int, color: str):
        left, top, w, h = cell_rect(x, y, self.cell_size)
        # Pillow rectangles include the end coordinate
        draw.rectangle([left, top, left + w - 1, top + h - 1], fill=hex_to_rgb(color))

    def _draw_footer(
        self,
        draw: ImageDraw.ImageDraw,
        board: Board,
        round_number: int,
        total_rounds: Optional[int]
    ):
        top = board.height * self.cell_size
        width = board.width * self.cell_size
        draw.rectangle([0, top, width, top + FOOTER_HEIGHT], fill=hex_to_rgb(ColorScheme.FOOTER_BG))

        if total_rounds:
            text = f"Round {round_number + 1} / {total_rounds} | Length {len(board.snake)}"
        else:
            text = f"Round {round_number + 1} | Length {len(board.snake)}"
        color = ColorScheme.FOOTER_TEXT
        if is_game_over(board):
            text += " | GAME OVER"
            color = ColorScheme.GAME_OVER_TEXT

        draw.text((6, top + 6), text, fill=hex_to_rgb(color), font=self.font)
