"""
Entry point for Neon Tetris.

Usage:
    python main.py
    python main.py --config config/settings.yaml
    python main.py --reduced-effects --log logs/games.csv
    python main.py --seed 42 --highscore ~/.neon_tetris/highscore.yaml
"""

from __future__ import annotations

import argparse
import pathlib
import sys

import yaml


def load_config(config_path: str | pathlib.Path) -> dict:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dict of configuration key-value pairs.

    Raises:
        FileNotFoundError: If the config file does not exist.
    """
    config_path = pathlib.Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Namespace with config, highscore, log, seed, and reduced_effects attributes.
    """
    parser = argparse.ArgumentParser(
        description="Neon Tetris — a falling-block puzzle game.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config/settings.yaml",
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "--highscore",
        type=str,
        default=None,
        help="Path to the highscore file (default: 'highscore_file' from the config).",
    )
    parser.add_argument(
        "--log",
        type=str,
        default=None,
        help="Append one CSV row per finished game to this file.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the piece randomizer (reproducible piece order).",
    )
    parser.add_argument(
        "--reduced-effects",
        action="store_true",
        help="Disable the neon glow and cap the frame rate.",
    )
    return parser.parse_args(argv)


def main() -> None:
    """Main entry point: parse args, load config, and start the game."""
    args = parse_args()
    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.seed is not None:
        config["seed"] = args.seed
    if args.reduced_effects:
        config["reduced_effects"] = True

    from src.play import play_manual
    play_manual(config, highscore_path=args.highscore, log_path=args.log)


if __name__ == "__main__":
    main()
