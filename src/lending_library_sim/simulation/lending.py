"""
Loan issuance for the lending library simulation.

The fate of a loan is decided once, when the book is handed out: a single
1..100 roll against the reader's profile marks it lost, late or on time,
and the due day is fixed at the same moment. Nothing about a loan is
re-rolled afterwards.
"""

import logging
import random

from ..models import Book, READER_PROFILES, Reader, ReaderKind

logger = logging.getLogger(__name__)

# Percent chance that a reader shows up on a given day
ARRIVAL_CHANCE = 50

# Loan window before any late days, inclusive
MIN_LOAN_DAYS = 6
MAX_LOAN_DAYS = 10


def roll_percent(rng: random.Random) -> int:
    """Draw a uniform integer in 1..100."""
    return rng.randint(1, 100)


def create_random_reader(rng: random.Random, day: int) -> Reader:
    """Create a reader of a uniformly chosen category arriving on ``day``."""
    kind = rng.choice(list(ReaderKind))
    return Reader.arrive(READER_PROFILES[kind], day)


def issue_loan(reader: Reader, book: Book, current_day: int, rng: random.Random) -> bool:
    """
    Lend a catalog ``book`` to ``reader``.

    The outcome is resolved here from a single roll: rolls up to the
    profile's loss chance lose the book; otherwise rolls up to loss + late
    chance make it late. Late loans of profiles with extra late days get
    1..max extra days on top of the 6..10 day window.

    Args:
        reader: Reader receiving the book
        book: Catalog entry to lend; updated in place
        current_day: Day of issuance
        rng: Shared random generator

    Returns:
        False without touching anything if the book is already taken,
        True once the reader holds a copy of the loan.
    """
    if book.is_taken:
        return False

    profile = reader.profile
    chance = roll_percent(rng)

    is_lost = chance <= profile.loss_chance
    is_late = not is_lost and chance <= profile.loss_chance + profile.late_chance

    due_day = current_day + rng.randint(MIN_LOAN_DAYS, MAX_LOAN_DAYS)
    if is_late and profile.max_extra_late_days > 0:
        due_day += rng.randint(1, profile.max_extra_late_days)

    # is_late first so the pair never passes through a lost-and-late state
    book.is_late = is_late
    book.is_lost = is_lost
    book.return_due_day = due_day
    book.is_taken = True

    reader.loans.append(book.model_copy())

    logger.debug(
        "Day %d: '%s' lent to %s until day %d (roll=%d, %s)",
        current_day,
        book.title,
        reader.name,
        due_day,
        chance,
        book.outlook.value,
    )
    return True
