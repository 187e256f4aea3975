"""Command-line parsing for the Lights Out entry point."""
import argparse

from lightsout.config import GameConfig
from lightsout.constants import DEFAULT_CHANCE_LIGHT_STARTS_ON, DEFAULT_COLS, DEFAULT_ROWS

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with all options."""
    parser = argparse.ArgumentParser(
        prog="lightsout",
        description="Lights Out: switch every light off.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--rows", type=int, default=DEFAULT_ROWS,
        help="Number of board rows"
    )
    parser.add_argument(
        "--cols", type=int, default=DEFAULT_COLS,
        help="Number of board columns"
    )
    parser.add_argument(
        "--chance-light-starts-on", type=float, default=DEFAULT_CHANCE_LIGHT_STARTS_ON,
        dest="chance_light_starts_on",
        help="Probability each cell starts lit"
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed for reproducible starting boards"
    )
    parser.add_argument(
        "--log-level", default="WARNING", choices=LOG_LEVELS,
        help="Logging verbosity"
    )
    return parser


def parse_config(argv=None) -> tuple[GameConfig, str]:
    """Parse ``argv`` into a validated config and a log level name.

    Invalid values are reported through argparse, which exits with status 2.
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    try:
        config = GameConfig.from_args(args)
    except ValueError as exc:
        parser.error(str(exc))
    return config, args.log_level
