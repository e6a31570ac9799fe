#!/usr/bin/env python3
"""
Human Play Mode - Play snake on a wrap-around board.

Controls:
    Arrow Keys or WASD: Move the snake
    P / Space: Pause or resume
    R: New game
    ESC: Quit

The game pauses when the window loses focus and resumes when it regains it.
"""
import argparse
import os
import sys
import warnings
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Suppress pygame messages
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
warnings.filterwarnings('ignore', category=UserWarning, module='pygame')

import pygame

from gridsnake.game import GameEngine, InputMapper, TickDriver
from gridsnake.game.renderer import StandaloneRenderer
from gridsnake.utils import load_config, setup_logging


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Play snake on a wrap-around board")
    parser.add_argument("--config", type=str, default=None, help="Path to config.yaml")
    parser.add_argument("--fps", type=int, default=60, help="Render rate (default: 60)")
    return parser.parse_args()


def main():
    """Main entry point for human play mode."""
    args = parse_args()
    config = load_config(args.config)
    logger = setup_logging(config.logging)

    game_config = config.game
    engine = GameEngine(game_config)
    controls = InputMapper(engine)

    renderer = StandaloneRenderer(
        num_rows=game_config.num_rows,
        num_cols=game_config.num_cols,
        cell_size=game_config.cell_size,
        title="Snake"
    )
    clock = pygame.time.Clock()
    high_length = 1

    try:
        with TickDriver(engine, game_config.tick_interval_ms) as driver:
            engine.resume()
            running = True

            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False

                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE:
                            running = False
                        else:
                            controls.handle_key(pygame.key.name(event.key))

                    elif event.type == pygame.WINDOWFOCUSLOST:
                        controls.focus_lost()

                    elif event.type == pygame.WINDOWFOCUSGAINED:
                        controls.focus_gained()

                if driver.error is not None:
                    logger.error("Game stopped: %s", driver.error)
                    running = False

                session = engine.session
                high_length = max(high_length, session.length)
                renderer.render_frame(session.to_dict())
                clock.tick(args.fps)
    finally:
        renderer.close()

    logger.info("Best length this run: %d", high_length)

    if driver.error is not None:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
