"""
Utilities for gridsnake: configuration loading and logging setup.
"""

from .config_loader import (
    Config,
    ConfigError,
    GameConfig,
    LoggingConfig,
    load_config,
    save_config,
)
from .logging_setup import setup_logging

__all__ = [
    'Config',
    'ConfigError',
    'GameConfig',
    'LoggingConfig',
    'load_config',
    'save_config',
    'setup_logging',
]
