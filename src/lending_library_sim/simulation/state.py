"""
Library state for the lending library simulation.

``LibraryState`` is the single owner of everything the simulation mutates:
the catalog, the active readers, the two append-only ledgers and the
random generator every probability decision draws from. It is created once
per run, handed to ``advance_day`` each day and inspected through
``snapshot``.
"""

import logging
import random
from collections.abc import Iterable

from ..models import Book, LibrarySnapshot, LoanView, Reader, ReaderView

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_TITLES: tuple[str, ...] = (
    "Crime and Punishment",
    "Clean Code",
    "War and Peace",
    "1984",
    "The Master and Margarita",
)


class SimulationError(Exception):
    """Base exception for simulation failures."""


class CatalogIntegrityError(SimulationError):
    """Raised when a loan refers to a title the catalog does not hold."""


class SimulationHorizonError(SimulationError):
    """Raised when asked to simulate past the configured number of days."""


class LibraryState:
    """Catalog, active readers, ledgers and the shared random generator."""

    def __init__(
        self,
        titles: Iterable[str] = DEFAULT_CATALOG_TITLES,
        *,
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        titles = list(titles)
        if len(set(titles)) != len(titles):
            raise ValueError("Catalog titles must be unique")

        self.catalog: list[Book] = [Book(title=title) for title in titles]
        self.active_readers: list[Reader] = []
        self.lost_ledger: list[Book] = []
        self.late_ledger: list[Book] = []
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)

        logger.debug("Library initialized with %d books (seed=%s)", len(self.catalog), seed)

    def available_books(self) -> list[Book]:
        """Catalog books currently on the shelf, in catalog order."""
        return [book for book in self.catalog if not book.is_taken]

    def find_catalog_book(self, title: str) -> Book:
        """Return the catalog entry for ``title``.

        Raises:
            CatalogIntegrityError: If no catalog book has that title
        """
        for book in self.catalog:
            if book.title == title:
                return book
        raise CatalogIntegrityError(f"Loan refers to unknown title: {title!r}")

    def snapshot(self, day: int) -> LibrarySnapshot:
        """Freeze the current state into a read-only view."""
        return LibrarySnapshot(
            day=day,
            available_books=tuple(book.title for book in self.available_books()),
            active_readers=tuple(
                ReaderView(
                    name=reader.name,
                    kind=reader.profile.kind,
                    profile_name=reader.profile.name,
                    loans=tuple(
                        LoanView(
                            title=loan.title,
                            return_due_day=loan.return_due_day,
                            outlook=loan.outlook,
                        )
                        for loan in reader.loans
                    ),
                )
                for reader in self.active_readers
            ),
            lost_books=tuple(book.title for book in self.lost_ledger),
            late_returned_books=tuple(book.title for book in self.late_ledger),
        )
