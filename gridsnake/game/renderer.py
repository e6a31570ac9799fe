"""
Snake Renderer - Pygame-based visualization of a session snapshot.
"""
import pygame
from typing import Any, Dict, Optional, Tuple

from ..core.renderer_interface import RendererInterface
from .grid_math import Direction, to_xy


# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
DARK_GRAY = (30, 30, 40)
GRID_COLOR = (50, 50, 60)
GAME_OVER_BORDER = (200, 60, 60)
SNAKE_HEAD_COLOR = (0, 220, 100)
SNAKE_BODY_COLOR = (0, 180, 80)
FOOD_COLOR = (220, 50, 50)
TEXT_COLOR = (220, 220, 220)
OVERLAY_COLOR = (255, 100, 100)


class SnakeRenderer(RendererInterface):
    """
    Renders a snake session using Pygame, implementing RendererInterface.

    Draws onto a caller-provided surface at an offset, so it can be embedded
    in a larger window.
    """

    def __init__(
        self,
        cell_size: int = 30,
        num_rows: int = 20,
        num_cols: int = 20,
        offset: Tuple[int, int] = (0, 0)
    ):
        """
        Initialize the renderer.

        Args:
            cell_size: Size of each grid cell in pixels
            num_rows: Grid rows
            num_cols: Grid columns
            offset: (x, y) offset of the board on the surface
        """
        self._cell_size = cell_size
        self._num_rows = num_rows
        self._num_cols = num_cols
        self._offset_x, self._offset_y = offset

    def get_preferred_size(self) -> Tuple[int, int]:
        """Get the board size in pixels."""
        return (self._num_cols * self._cell_size, self._num_rows * self._cell_size)

    def get_cell_size(self) -> int:
        return self._cell_size

    def cell_rect(self, index: int, cols: int, inset: int = 0) -> pygame.Rect:
        """Get the pixel rectangle of a cell."""
        x, y = to_xy(index, cols)
        return pygame.Rect(
            self._offset_x + x * self._cell_size + inset,
            self._offset_y + y * self._cell_size + inset,
            self._cell_size - 2 * inset,
            self._cell_size - 2 * inset
        )

    def render(self, game_state: Dict[str, Any], surface: Optional[pygame.Surface] = None) -> pygame.Surface:
        """
        Render a session snapshot to a surface.

        Args:
            game_state: Dictionary from GameSession.to_dict()
            surface: Pygame surface to draw on

        Returns:
            The surface that was rendered to
        """
        if surface is None:
            raise ValueError("No surface to render to")

        rows = game_state.get("rows", self._num_rows)
        cols = game_state.get("cols", self._num_cols)
        board_width = cols * self._cell_size
        board_height = rows * self._cell_size

        # Draw background
        board_rect = pygame.Rect(self._offset_x, self._offset_y, board_width, board_height)
        pygame.draw.rect(surface, DARK_GRAY, board_rect)

        # Draw grid lines (subtle)
        for x in range(cols + 1):
            start = (self._offset_x + x * self._cell_size, self._offset_y)
            end = (self._offset_x + x * self._cell_size, self._offset_y + board_height)
            pygame.draw.line(surface, GRID_COLOR, start, end)

        for y in range(rows + 1):
            start = (self._offset_x, self._offset_y + y * self._cell_size)
            end = (self._offset_x + board_width, self._offset_y + y * self._cell_size)
            pygame.draw.line(surface, GRID_COLOR, start, end)

        food = game_state.get("food")
        if food is not None:
            pygame.draw.rect(surface, FOOD_COLOR, self.cell_rect(food, cols, inset=2), border_radius=4)

        for i, segment in enumerate(game_state["snake"]):
            color = SNAKE_HEAD_COLOR if i == 0 else SNAKE_BODY_COLOR
            border_radius = 6 if i == 0 else 3
            pygame.draw.rect(surface, color, self.cell_rect(segment, cols, inset=1), border_radius=border_radius)

            if i == 0:
                self._draw_eyes(surface, segment, cols, game_state.get("direction", Direction.RIGHT))

        if game_state.get("game_over"):
            pygame.draw.rect(surface, GAME_OVER_BORDER, board_rect, width=3)

        return surface

    def _draw_eyes(self, surface: pygame.Surface, head: int, cols: int, direction: int):
        """Draw eyes on the snake's head."""
        rect = self.cell_rect(head, cols)
        cx, cy = rect.x + self._cell_size // 2, rect.y + self._cell_size // 2

        eye_radius = max(2, self._cell_size // 8)
        eye_offset = self._cell_size // 4

        # Position eyes based on direction
        if direction == Direction.RIGHT:
            positions = [(cx + 2, cy - eye_offset), (cx + 2, cy + eye_offset)]
        elif direction == Direction.DOWN:
            positions = [(cx - eye_offset, cy + 2), (cx + eye_offset, cy + 2)]
        elif direction == Direction.LEFT:
            positions = [(cx - 2, cy - eye_offset), (cx - 2, cy + eye_offset)]
        else:
            positions = [(cx - eye_offset, cy - 2), (cx + eye_offset, cy - 2)]

        for pos in positions:
            pygame.draw.circle(surface, WHITE, pos, eye_radius)
            pygame.draw.circle(surface, BLACK, pos, eye_radius // 2)


class StandaloneRenderer(SnakeRenderer):
    """
    Snake renderer with its own window, score line and status overlay.
    Used for human play mode.
    """

    PADDING = 40
    HEADER = 50
    FOOTER = 40

    def __init__(
        self,
        num_rows: int = 20,
        num_cols: int = 20,
        cell_size: int = 30,
        title: str = "Snake"
    ):
        """
        Initialize standalone renderer with its own window.

        Args:
            num_rows: Grid rows
            num_cols: Grid columns
            cell_size: Size of each cell in pixels
            title: Window title
        """
        super().__init__(cell_size, num_rows, num_cols, (self.PADDING, self.PADDING + self.HEADER))

        self.window_width = num_cols * cell_size + self.PADDING * 2
        self.window_height = num_rows * cell_size + self.PADDING * 2 + self.HEADER + self.FOOTER

        pygame.init()
        self.surface = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption(title)

        self.font = pygame.font.Font(None, 36)
        self.small_font = pygame.font.Font(None, 28)
        self.large_font = pygame.font.Font(None, 72)

    def render_frame(self, game_state: Dict[str, Any]) -> pygame.Surface:
        """Draw a full frame (board, length, status) and flip the display."""
        self.surface.fill(BLACK)
        self.render(game_state, self.surface)

        self._blit_centered(self.font.render(f"Length: {game_state['length']}", True, TEXT_COLOR), self.PADDING)

        if game_state.get("game_over"):
            self._blit_centered(self.large_font.render("GAME OVER", True, OVERLAY_COLOR), self.window_height // 2 - 60)
            hint = "Press R for a new game"
        elif game_state.get("paused"):
            self._blit_centered(self.large_font.render("PAUSED", True, TEXT_COLOR), self.window_height // 2 - 60)
            hint = "Press P to resume"
        else:
            hint = "Arrows/WASD: move  P: pause  R: restart  ESC: quit"

        self._blit_centered(self.small_font.render(hint, True, TEXT_COLOR), self.window_height - self.FOOTER)

        pygame.display.flip()
        return self.surface

    def _blit_centered(self, text: pygame.Surface, y: int):
        self.surface.blit(text, (self.window_width // 2 - text.get_width() // 2, y))

    def close(self):
        pygame.quit()
