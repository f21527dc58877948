"""Run a complete simulation from a fresh catalog."""

import logging
from collections.abc import Callable, Iterable

from pydantic import BaseModel, Field

from ..models import LibrarySnapshot
from .day import DayOutcome, DaySimulator
from .state import DEFAULT_CATALOG_TITLES, LibraryState

logger = logging.getLogger(__name__)

DEFAULT_TOTAL_DAYS = 50

Reporter = Callable[[DayOutcome], None]


class SimulationRun(BaseModel):
    """Every day's outcome of one run."""

    seed: int | None = None
    total_days: int = Field(..., ge=1)
    outcomes: list[DayOutcome] = Field(default_factory=list)

    @property
    def final_snapshot(self) -> LibrarySnapshot:
        return self.outcomes[-1].snapshot


def run_simulation(
    total_days: int = DEFAULT_TOTAL_DAYS,
    seed: int | None = None,
    reporter: Reporter | None = None,
    titles: Iterable[str] = DEFAULT_CATALOG_TITLES,
) -> SimulationRun:
    """
    Simulate days 1..``total_days`` against a freshly initialized catalog.

    ``reporter`` is called with each day's outcome as soon as the day ends.
    """
    if total_days < 1:
        raise ValueError("total_days must be at least 1")

    simulator = DaySimulator(LibraryState(titles, seed=seed), horizon=total_days)
    run = SimulationRun(seed=seed, total_days=total_days)

    logger.info("Starting simulation: %d days, seed=%s", total_days, seed)
    while simulator.days_remaining:
        outcome = simulator.next_day()
        run.outcomes.append(outcome)
        if reporter is not None:
            reporter(outcome)

    final = run.final_snapshot
    logger.info(
        "Simulation finished: %d lost, %d returned late, %d readers still active",
        len(final.lost_books),
        len(final.late_returned_books),
        len(final.active_readers),
    )
    return run
