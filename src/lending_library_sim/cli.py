"""Command line entry point: run the simulation and print a report per day.

Usage:
    lending-library [--days N] [--seed S] [--log-level LEVEL]

Defaults come from ``SimulationConfig`` (``LENDING_LIBRARY_*`` environment
variables). Reports go to stdout, logs to stderr.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from .config import SimulationConfig, get_config
from .reporting import ConsoleReporter
from .simulation import run_simulation

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lending-library",
        description="Simulate a small lending library day by day",
    )
    parser.add_argument(
        "--days",
        type=int,
        help="Number of days to simulate (default: configured total_days)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the random generator, for reproducible runs",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> SimulationConfig:
    """Apply command line overrides on top of the environment configuration."""
    overrides = {
        "total_days": args.days,
        "seed": args.seed,
        "log_level": args.log_level,
    }
    base = get_config()
    return SimulationConfig.model_validate(
        base.model_dump() | {key: value for key, value in overrides.items() if value is not None}
    )


def main(argv: list[str] | None = None) -> int:
    """Run the simulation; returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = resolve_config(args)
    except ValidationError as e:
        logging.basicConfig(level=logging.ERROR, stream=sys.stderr)
        logger.error("Invalid configuration: %s", e)
        return 2

    logging.basicConfig(
        level=config.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    run_simulation(total_days=config.total_days, seed=config.seed, reporter=ConsoleReporter())
    return 0


if __name__ == "__main__":
    sys.exit(main())
