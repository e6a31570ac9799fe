"""
Tests for the human play script's window handling.
"""

import argparse
import importlib.util
import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest


PROJECT_ROOT = Path(__file__).parent.parent


def load_play_human(monkeypatch):
    """Import scripts/play_human.py with args, logging and window stubbed."""
    path = PROJECT_ROOT / "scripts" / "play_human.py"
    spec = importlib.util.spec_from_file_location("play_human", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    monkeypatch.setattr(module, "parse_args", lambda: argparse.Namespace(
        config=str(PROJECT_ROOT / "config.yaml"), fps=60
    ))
    monkeypatch.setattr(module, "setup_logging", lambda config: logging.getLogger("gridsnake.play"))

    renderer = MagicMock()
    monkeypatch.setattr(module, "StandaloneRenderer", MagicMock(return_value=renderer))
    return module, renderer


class TestPlayHuman:
    """Tests for play_human.main()."""

    def test_window_closed_when_loop_raises(self, mock_pygame_module, monkeypatch):
        module, renderer = load_play_human(monkeypatch)
        renderer.render_frame.side_effect = RuntimeError("display lost")

        with pytest.raises(RuntimeError, match="display lost"):
            module.main()

        renderer.close.assert_called_once()

    def test_quit_event_exits_cleanly(self, mock_pygame_module, monkeypatch):
        module, renderer = load_play_human(monkeypatch)
        quit_event = MagicMock(type=mock_pygame_module.QUIT)
        monkeypatch.setattr(mock_pygame_module.event, "get", MagicMock(return_value=[quit_event]))

        assert module.main() == 0

        renderer.render_frame.assert_called_once()
        renderer.close.assert_called_once()
