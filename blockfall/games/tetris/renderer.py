"""
Tetris Game Renderer - Pygame-based visualization implementing RendererInterface.
"""

import pygame
from typing import Dict, Any, Tuple, List

from ...core.renderer_interface import RendererInterface


# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
DARK_GRAY = (30, 30, 40)
GRID_COLOR = (50, 50, 60)
TEXT_COLOR = (220, 220, 220)
BORDER_COLOR = (80, 80, 100)
OVERLAY_COLOR = (10, 10, 20, 180)
GAME_OVER_COLOR = (255, 100, 100)

# Standard Tetris piece colors, keyed by piece tag
PIECE_COLORS: Dict[str, Tuple[int, int, int]] = {
    "I": (0, 240, 240),    # Cyan
    "J": (0, 0, 240),      # Blue
    "L": (240, 160, 0),    # Orange
    "O": (240, 240, 0),    # Yellow
    "S": (0, 240, 0),      # Green
    "T": (160, 0, 240),    # Purple
    "Z": (240, 0, 0),      # Red
}


class TetrisRenderer(RendererInterface):
    """
    Renders Tetris game using Pygame, implementing RendererInterface.

    Layout:
    [Main Board] [Next Piece]
    [Score/Level/Lines]
    """

    def __init__(
        self,
        cell_size: int = 25,
        board_width: int = 10,
        board_height: int = 20
    ):
        """
        Initialize the renderer.

        Args:
            cell_size: Size of each grid cell in pixels
            board_width: Board width in cells
            board_height: Board height in cells
        """
        self._cell_size = cell_size
        self._board_width = board_width
        self._board_height = board_height
        self._offset_x = 0
        self._offset_y = 0

        # Layout dimensions
        self._preview_width = 6 * cell_size  # Next piece box width
        self._info_height = 80  # Score/level/lines area

        self._calculate_dimensions()

    def _calculate_dimensions(self) -> None:
        """Calculate total render dimensions."""
        board_w = self._board_width * self._cell_size
        board_h = self._board_height * self._cell_size

        self._render_width = board_w + self._preview_width + 10
        self._render_height = board_h + self._info_height

    def get_preferred_size(self) -> Tuple[int, int]:
        """Get the preferred render size."""
        return (self._render_width, self._render_height)

    def get_cell_size(self) -> int:
        """Get current cell size."""
        return self._cell_size

    def set_cell_size(self, cell_size: int) -> None:
        """Set cell size."""
        self._cell_size = cell_size
        self._preview_width = 6 * cell_size
        self._calculate_dimensions()

    def set_render_area(self, x: int, y: int, width: int, height: int) -> None:
        """Set the render area, shrinking cells to fit."""
        self._offset_x = x
        self._offset_y = y

        # Preview box is 6 cells wide, so the board shares the width with it
        available_height = height - self._info_height
        available_width = width - 10

        cell_w = available_width // (self._board_width + 6)
        cell_h = available_height // self._board_height
        self.set_cell_size(max(10, min(cell_w, cell_h)))

    def render(self, game_state: Dict[str, Any], surface: pygame.Surface) -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Dictionary containing game state
            surface: Pygame surface to draw on
        """
        width = game_state.get("width", self._board_width)
        height = game_state.get("height", self._board_height)

        board_x = self._offset_x
        preview_x = board_x + width * self._cell_size + 10
        info_y = self._offset_y + height * self._cell_size + 5

        self._draw_board(surface, board_x, self._offset_y, game_state)

        if game_state.get("current_piece"):
            self._draw_piece(surface, board_x, self._offset_y, game_state["current_piece"])

        self._draw_preview(surface, preview_x, self._offset_y, game_state)
        self._draw_info(surface, board_x, info_y, game_state)

        if game_state.get("game_over"):
            self._draw_banner(surface, board_x, self._offset_y, width, height,
                              ["GAME OVER", f"Final Score: {game_state.get('score', 0)}"],
                              GAME_OVER_COLOR)
        elif game_state.get("paused"):
            self._draw_banner(surface, board_x, self._offset_y, width, height,
                              ["PAUSED"], TEXT_COLOR)

    def _draw_board(self, surface: pygame.Surface, x: int, y: int, game_state: Dict[str, Any]) -> None:
        """Draw the main game board."""
        width = game_state.get("width", self._board_width)
        height = game_state.get("height", self._board_height)
        board = game_state.get("board", [])

        board_w = width * self._cell_size
        board_h = height * self._cell_size

        # Background
        pygame.draw.rect(surface, DARK_GRAY, (x, y, board_w, board_h))

        # Grid lines
        for gx in range(width + 1):
            pygame.draw.line(surface, GRID_COLOR,
                             (x + gx * self._cell_size, y),
                             (x + gx * self._cell_size, y + board_h))
        for gy in range(height + 1):
            pygame.draw.line(surface, GRID_COLOR,
                             (x, y + gy * self._cell_size),
                             (x + board_w, y + gy * self._cell_size))

        # Settled blocks
        for row_idx, row in enumerate(board):
            for col_idx, tag in enumerate(row):
                if tag is not None:
                    self._draw_cell(surface,
                                    x + col_idx * self._cell_size,
                                    y + row_idx * self._cell_size,
                                    PIECE_COLORS.get(tag, WHITE))

        # Border
        pygame.draw.rect(surface, BORDER_COLOR, (x, y, board_w, board_h), 2)

    def _draw_piece(self, surface: pygame.Surface, board_x: int, board_y: int,
                    piece_data: Dict[str, Any]) -> None:
        """Overlay the falling piece on the board."""
        shape: List[List[int]] = piece_data.get("shape", [])
        px = piece_data.get("x", 0)
        py = piece_data.get("y", 0)
        color = PIECE_COLORS.get(piece_data.get("tag"), WHITE)

        for dy, row in enumerate(shape):
            for dx, value in enumerate(row):
                cell_y = py + dy
                if not value or cell_y < 0:  # Only draw inside the visible board
                    continue
                self._draw_cell(surface,
                                board_x + (px + dx) * self._cell_size,
                                board_y + cell_y * self._cell_size,
                                color)

    def _draw_cell(self, surface: pygame.Surface, x: int, y: int,
                   color: Tuple[int, int, int]) -> None:
        """Draw a single cell with 3D effect."""
        cs = self._cell_size

        # Main color
        pygame.draw.rect(surface, color, (x + 1, y + 1, cs - 2, cs - 2))

        # Highlight (lighter)
        highlight = tuple(min(255, c + 50) for c in color)
        pygame.draw.line(surface, highlight, (x + 2, y + 2), (x + cs - 3, y + 2))
        pygame.draw.line(surface, highlight, (x + 2, y + 2), (x + 2, y + cs - 3))

        # Shadow (darker)
        shadow = tuple(max(0, c - 50) for c in color)
        pygame.draw.line(surface, shadow, (x + cs - 2, y + 2), (x + cs - 2, y + cs - 2))
        pygame.draw.line(surface, shadow, (x + 2, y + cs - 2), (x + cs - 2, y + cs - 2))

    def _draw_preview(self, surface: pygame.Surface, x: int, y: int,
                      game_state: Dict[str, Any]) -> None:
        """Draw the next piece box."""
        box_w = self._preview_width - 5
        box_h = 5 * self._cell_size

        pygame.draw.rect(surface, DARK_GRAY, (x, y, box_w, box_h))
        pygame.draw.rect(surface, BORDER_COLOR, (x, y, box_w, box_h), 2)

        font = pygame.font.Font(None, 20)
        label = font.render("NEXT", True, TEXT_COLOR)
        surface.blit(label, (x + 5, y + 5))

        next_piece = game_state.get("next_piece")
        if next_piece:
            self._draw_mini_piece(surface, x + box_w // 2, y + box_h // 2 + 10, next_piece)

    def _draw_mini_piece(self, surface: pygame.Surface, cx: int, cy: int,
                         piece_data: Dict[str, Any]) -> None:
        """Draw a small piece preview centered at (cx, cy)."""
        shape: List[List[int]] = piece_data.get("shape", [])
        if not shape:
            return

        mini_size = self._cell_size * 2 // 3
        color = PIECE_COLORS.get(piece_data.get("tag"), WHITE)

        start_x = cx - len(shape[0]) * mini_size // 2
        start_y = cy - len(shape) * mini_size // 2

        for dy, row in enumerate(shape):
            for dx, value in enumerate(row):
                if value:
                    pygame.draw.rect(surface, color,
                                     (start_x + dx * mini_size + 1,
                                      start_y + dy * mini_size + 1,
                                      mini_size - 2, mini_size - 2))

    def _draw_info(self, surface: pygame.Surface, x: int, y: int,
                   game_state: Dict[str, Any]) -> None:
        """Draw score, level, and lines."""
        font = pygame.font.Font(None, 24)

        texts = [
            f"Score: {game_state.get('score', 0)}",
            f"Level: {game_state.get('level', 1)}",
            f"Lines: {game_state.get('lines_cleared', 0)}",
        ]

        spacing = self._board_width * self._cell_size // 3

        for i, text in enumerate(texts):
            label = font.render(text, True, TEXT_COLOR)
            surface.blit(label, (x + i * spacing, y + 10))

    def _draw_banner(self, surface: pygame.Surface, x: int, y: int, width: int, height: int,
                     lines: List[str], color: Tuple[int, int, int]) -> None:
        """Dim the board and print centered text over it."""
        board_w = width * self._cell_size
        board_h = height * self._cell_size

        shade = pygame.Surface((board_w, board_h), pygame.SRCALPHA)
        shade.fill(OVERLAY_COLOR)
        surface.blit(shade, (x, y))

        font = pygame.font.Font(None, 48)
        line_height = 50
        top = y + board_h // 2 - len(lines) * line_height // 2
        for i, text in enumerate(lines):
            label = font.render(text, True, color)
            surface.blit(label, (x + board_w // 2 - label.get_width() // 2,
                                 top + i * line_height))
