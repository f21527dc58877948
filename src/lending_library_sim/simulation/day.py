"""
The daily loop of the lending library simulation.

Each call to ``advance_day`` runs one day in a fixed order:

1. ARRIVAL: with a 50% chance a new reader of a random category arrives
   and borrows one random book from the shelf (nobody arrives when the
   shelf is empty).
2. RESOLUTION: every loan whose due day has passed is settled. Lost loans
   are written to the lost ledger on the first overdue day only; late
   loans go to the late ledger; non-lost books go back on the shelf.
3. DEPARTURE: readers left without loans leave the library.

A lost book never goes back on the shelf: its catalog entry stays taken
for the rest of the run.
"""

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..models import LibrarySnapshot, Reader
from .lending import ARRIVAL_CHANCE, create_random_reader, issue_loan, roll_percent
from .state import LibraryState, SimulationHorizonError

logger = logging.getLogger(__name__)


class EventKind(str, Enum):
    """Something that happened during a day."""

    ARRIVED = "arrived"
    LOST = "lost"
    RETURNED = "returned"
    RETURNED_LATE = "returned_late"
    DEPARTED = "departed"


class LoanEvent(BaseModel):
    """A single event of a simulated day."""

    kind: EventKind
    day: int
    reader: str
    title: str | None = None

    model_config = ConfigDict(frozen=True)


class DayOutcome(BaseModel):
    """Events of a day and the state observed at its end."""

    day: int = Field(..., ge=1)
    events: tuple[LoanEvent, ...] = ()
    snapshot: LibrarySnapshot

    def events_of(self, kind: EventKind) -> list[LoanEvent]:
        return [event for event in self.events if event.kind == kind]

    model_config = ConfigDict(frozen=True)


def _admit_reader(state: LibraryState, current_day: int, events: list[LoanEvent]) -> None:
    if roll_percent(state.rng) > ARRIVAL_CHANCE:
        return

    available = state.available_books()
    if not available:
        logger.debug("Day %d: a reader came but the shelf is empty", current_day)
        return

    book = state.rng.choice(available)
    reader = create_random_reader(state.rng, current_day)
    if issue_loan(reader, book, current_day, state.rng):
        state.active_readers.append(reader)
        events.append(
            LoanEvent(kind=EventKind.ARRIVED, day=current_day, reader=reader.name, title=book.title)
        )


def _resolve_loans(
    state: LibraryState, reader: Reader, current_day: int, events: list[LoanEvent]
) -> None:
    remaining = []
    for loan in reader.loans:
        if not loan.is_overdue(current_day):
            remaining.append(loan)
            continue

        if loan.is_lost:
            # The loan is dropped on every overdue day; only the first one counts as the loss
            if current_day == loan.return_due_day + 1:
                state.lost_ledger.append(loan)
                events.append(
                    LoanEvent(kind=EventKind.LOST, day=current_day, reader=reader.name, title=loan.title)
                )
                logger.info("Day %d: '%s' lost by reader %s", current_day, loan.title, reader.name)
            continue

        if loan.is_late:
            state.late_ledger.append(loan)

        catalog_book = state.find_catalog_book(loan.title)
        catalog_book.is_taken = False
        catalog_book.is_late = False

        kind = EventKind.RETURNED_LATE if loan.is_late else EventKind.RETURNED
        events.append(LoanEvent(kind=kind, day=current_day, reader=reader.name, title=loan.title))
        logger.debug("Day %d: '%s' returned by %s (%s)", current_day, loan.title, reader.name, kind.value)

    reader.loans = remaining


def advance_day(state: LibraryState, current_day: int) -> DayOutcome:
    """
    Run one simulated day against ``state``.

    Args:
        state: Library state to mutate
        current_day: Day being simulated, starting at 1

    Returns:
        The day's events and a snapshot of the state at the end of the day
    """
    events: list[LoanEvent] = []

    _admit_reader(state, current_day, events)

    for reader in state.active_readers:
        _resolve_loans(state, reader, current_day, events)

    staying = []
    for reader in state.active_readers:
        if reader.has_loans:
            staying.append(reader)
        else:
            events.append(LoanEvent(kind=EventKind.DEPARTED, day=current_day, reader=reader.name))
    state.active_readers = staying

    return DayOutcome(day=current_day, events=tuple(events), snapshot=state.snapshot(current_day))


class DaySimulator:
    """Drives ``advance_day`` one day at a time, optionally up to a horizon."""

    def __init__(self, state: LibraryState, horizon: int | None = None) -> None:
        if horizon is not None and horizon < 1:
            raise ValueError("Horizon must be at least one day")
        self.state = state
        self.horizon = horizon
        self.current_day = 0

    @property
    def days_remaining(self) -> int | None:
        if self.horizon is None:
            return None
        return self.horizon - self.current_day

    def next_day(self) -> DayOutcome:
        """Simulate the day after ``current_day``.

        Raises:
            SimulationHorizonError: If the horizon has already been reached
        """
        if self.horizon is not None and self.current_day >= self.horizon:
            raise SimulationHorizonError(f"Simulation horizon of {self.horizon} days reached")
        self.current_day += 1
        return advance_day(self.state, self.current_day)

    def snapshot(self) -> LibrarySnapshot:
        return self.state.snapshot(self.current_day)
