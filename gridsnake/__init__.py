"""
gridsnake - Tick-driven snake simulation on a wrap-around grid.

Modules:
- core: Abstract interfaces for renderers
- game: Grid math, food placement, session state, engine, driver and input
- utils: Configuration and logging setup
"""

__version__ = "1.0.0"
