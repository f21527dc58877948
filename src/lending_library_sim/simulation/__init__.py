"""
Simulation core: library state, loan issuance and the daily loop.
"""

from .day import DayOutcome, DaySimulator, EventKind, LoanEvent, advance_day
from .lending import ARRIVAL_CHANCE, create_random_reader, issue_loan
from .runner import DEFAULT_TOTAL_DAYS, SimulationRun, run_simulation
from .state import (
    DEFAULT_CATALOG_TITLES,
    CatalogIntegrityError,
    LibraryState,
    SimulationError,
    SimulationHorizonError,
)

__all__ = [
    "ARRIVAL_CHANCE",
    "DEFAULT_CATALOG_TITLES",
    "DEFAULT_TOTAL_DAYS",
    "CatalogIntegrityError",
    "DayOutcome",
    "DaySimulator",
    "EventKind",
    "LibraryState",
    "LoanEvent",
    "SimulationError",
    "SimulationHorizonError",
    "SimulationRun",
    "advance_day",
    "create_random_reader",
    "issue_loan",
    "run_simulation",
]
