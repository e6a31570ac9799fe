"""
Abstract renderer interface for gridsnake.

Renderers draw a session snapshot (GameSession.to_dict()) and never
modify it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple


class RendererInterface(ABC):
    """
    Abstract renderer for session visualization.
    """

    @abstractmethod
    def render(self, game_state: Dict[str, Any], surface: Any = None) -> Any:
        """
        Render a session snapshot.

        Args:
            game_state: Dictionary from GameSession.to_dict()
            surface: Render target, if the renderer draws onto one

        Returns:
            Renderer-specific result (the target surface or a renderable)
        """
        pass

    @abstractmethod
    def get_preferred_size(self) -> Tuple[int, int]:
        """
        Get the preferred render size.

        Returns:
            Tuple of (width, height) in renderer units
        """
        pass

    def get_cell_size(self) -> int:
        """
        Get the cell size for grid-based rendering.

        Returns:
            Cell size in renderer units (default 1)
        """
        return 1
