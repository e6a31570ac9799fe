"""
Terminal Renderer - Rich-based text view of a session snapshot.
"""
from typing import Any, Dict, Optional, Tuple

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from ..core.renderer_interface import RendererInterface
from .snake_state import Cell

EMPTY_GLYPH = "·"
BODY_GLYPH = "o"
HEAD_GLYPH = "@"
FOOD_GLYPH = "*"


class TerminalRenderer(RendererInterface):
    """
    Renders a session as a character grid inside a rich Panel.

    render() returns a renderable; print it with a rich Console or use
    show() to print directly.
    """

    def __init__(self, num_rows: int = 20, num_cols: int = 20, console: Optional[Console] = None):
        self._num_rows = num_rows
        self._num_cols = num_cols
        self.console = console or Console()

    def get_preferred_size(self) -> Tuple[int, int]:
        """Board size in characters, including the panel border."""
        return (self._num_cols * 2 + 3, self._num_rows + 2)

    def board_text(self, game_state: Dict[str, Any]) -> Text:
        """Build the character grid for a snapshot."""
        rows = game_state.get("rows", self._num_rows)
        cols = game_state.get("cols", self._num_cols)
        board = game_state["board"]
        snake = game_state["snake"]
        head = snake[0] if snake else None

        text = Text()
        for y in range(rows):
            for x in range(cols):
                index = y * cols + x
                code = board[index]
                if index == head:
                    text.append(HEAD_GLYPH, style="bold green")
                elif code == Cell.BODY:
                    text.append(BODY_GLYPH, style="green")
                elif code == Cell.FOOD:
                    text.append(FOOD_GLYPH, style="bold red")
                else:
                    text.append(EMPTY_GLYPH, style="dim")
                if x < cols - 1:
                    text.append(" ")
            if y < rows - 1:
                text.append("\n")
        return text

    def status_text(self, game_state: Dict[str, Any]) -> Text:
        """Build the one-line status for a snapshot."""
        status = Text(f"Length: {game_state['length']}", style="bold")
        if game_state.get("game_over"):
            status.append("  GAME OVER", style="bold red")
        elif game_state.get("paused"):
            status.append("  PAUSED", style="yellow")
        return status

    def render(self, game_state: Dict[str, Any], surface: Any = None) -> Panel:
        """
        Render a session snapshot.

        Args:
            game_state: Dictionary from GameSession.to_dict()
            surface: Unused

        Returns:
            Rich Panel containing the board and status line
        """
        border = "red" if game_state.get("game_over") else "green"
        return Panel(
            Group(self.board_text(game_state), self.status_text(game_state)),
            title="Snake",
            border_style=border,
            expand=False,
        )

    def show(self, game_state: Dict[str, Any]):
        """Print a snapshot to the console."""
        self.console.print(self.render(game_state))
