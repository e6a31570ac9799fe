"""
Core abstractions for gridsnake.

Provides the interface that all session renderers implement.
"""

from .renderer_interface import RendererInterface

__all__ = [
    'RendererInterface',
]
