#!/usr/bin/env python3
"""
Headless simulation - Run the engine with a random steering policy.

Usage:
    python scripts/simulate.py --ticks 200 --seed 7
    python scripts/simulate.py --rows 10 --cols 10 --start 55 --show-every 20
"""
import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import numpy as np
from rich.console import Console

from gridsnake.game import BoardFullOrUnlucky, Direction, GameEngine, SessionState
from gridsnake.game.terminal_renderer import TerminalRenderer
from gridsnake.utils import load_config, setup_logging


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a headless snake simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/simulate.py --ticks 200 --seed 7
  python scripts/simulate.py --rows 10 --cols 10 --start 55 --show-every 20
"""
    )
    parser.add_argument("--config", type=str, default=None, help="Path to config.yaml")
    parser.add_argument("--ticks", type=int, default=100, help="Ticks to run (default: 100)")
    parser.add_argument("--rows", type=int, default=None, help="Override grid rows")
    parser.add_argument("--cols", type=int, default=None, help="Override grid columns")
    parser.add_argument("--start", type=int, default=None, help="Override start index")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food and steering")
    parser.add_argument(
        "--turn-chance",
        type=float,
        default=0.2,
        help="Probability of requesting a random turn each tick (default: 0.2)"
    )
    parser.add_argument(
        "--show-every",
        type=int,
        default=0,
        help="Print the board every N ticks (default: only at the end)"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    config = load_config(args.config)
    setup_logging(config.logging)

    game_config = config.game
    if args.rows is not None:
        game_config.num_rows = args.rows
    if args.cols is not None:
        game_config.num_cols = args.cols
    if args.start is not None:
        game_config.start_index = args.start
    if args.seed is not None:
        game_config.seed = args.seed

    console = Console()
    engine = GameEngine(game_config)
    renderer = TerminalRenderer(game_config.num_rows, game_config.num_cols, console=console)
    steering = np.random.default_rng(game_config.seed)
    directions = list(Direction)

    engine.resume()
    ticks_run = 0
    try:
        for ticks_run in range(1, args.ticks + 1):
            if steering.random() < args.turn_chance:
                engine.set_direction(directions[steering.integers(0, len(directions))])
            engine.tick()

            if args.show_every and ticks_run % args.show_every == 0:
                renderer.show(engine.snapshot())

            if engine.state == SessionState.GAME_OVER:
                break
    except BoardFullOrUnlucky as e:
        console.print(f"[bold red]Simulation aborted:[/bold red] {e}")
        return 1

    renderer.show(engine.snapshot())
    console.print(
        f"Ran {ticks_run} ticks, final length {engine.session.length}, "
        f"state {engine.state.value}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
