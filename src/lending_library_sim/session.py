"""
Process-wide simulation session for the MCP server.

The CLI builds its own state per run, but the MCP server keeps one
simulation alive between requests so that resources show what tools did.
The simulator is created lazily from configuration and can be replaced
with ``reset_simulator``.
"""

import logging

from .config import get_config
from .simulation import DaySimulator, LibraryState

logger = logging.getLogger(__name__)


class _SimulatorStore:
    """Internal storage for the simulator singleton."""

    _instance: DaySimulator | None = None


def create_simulator(seed: int | None = None, horizon: int | None = None) -> DaySimulator:
    """Build a simulator over a fresh catalog, defaulting to configured seed and horizon."""
    config = get_config()
    if seed is None:
        seed = config.seed
    if horizon is None:
        horizon = config.total_days
    logger.info("Creating simulation (seed=%s, horizon=%d days)", seed, horizon)
    return DaySimulator(LibraryState(seed=seed), horizon=horizon)


def get_simulator() -> DaySimulator:
    """Get or create the process-wide simulator."""
    if _SimulatorStore._instance is None:  # type: ignore[reportPrivateUsage]
        _SimulatorStore._instance = create_simulator()  # type: ignore[reportPrivateUsage]
    return _SimulatorStore._instance  # type: ignore[reportPrivateUsage]


def reset_simulator(seed: int | None = None) -> DaySimulator:
    """Replace the process-wide simulator with a fresh one and return it."""
    _SimulatorStore._instance = create_simulator(seed=seed)  # type: ignore[reportPrivateUsage]
    return _SimulatorStore._instance  # type: ignore[reportPrivateUsage]


def clear_simulator() -> None:
    """Forget the current simulator (useful for testing)."""
    _SimulatorStore._instance = None  # type: ignore[reportPrivateUsage]
