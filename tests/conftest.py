"""Test configuration and fixtures for the lending library simulation.

- Every test starts with a clean configuration and no running simulator
- ``ScriptedRandom`` pins the integer rolls a test cares about
- ``lend`` puts a hand-built loan into a state, bypassing the dice
"""

import os
import random
from collections.abc import Callable, Generator

import pytest

from lending_library_sim.config import reset_config
from lending_library_sim.models import Reader, ReaderKind, get_profile
from lending_library_sim.session import clear_simulator
from lending_library_sim.simulation import LibraryState


class ScriptedRandom(random.Random):
    """Random generator whose ``randint`` returns pre-scripted values in order.

    Everything else (``choice``) still comes from a generator seeded with 0.
    """

    def __init__(self, values: list[int]):
        super().__init__(0)
        self.values = list(values)

    def randint(self, a: int, b: int) -> int:
        value = self.values.pop(0)
        assert a <= value <= b, f"scripted value {value} outside [{a}, {b}]"
        return value


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop LENDING_LIBRARY_* variables and cached singletons around each test."""
    for key in list(os.environ):
        if key.upper().startswith("LENDING_LIBRARY_"):
            monkeypatch.delenv(key)
    reset_config()
    clear_simulator()
    yield
    reset_config()
    clear_simulator()


@pytest.fixture
def scripted_rng() -> Callable[[list[int]], ScriptedRandom]:
    return ScriptedRandom


@pytest.fixture
def state() -> LibraryState:
    """Default five-book catalog with a fixed seed."""
    return LibraryState(seed=1234)


@pytest.fixture
def lend() -> Callable[..., Reader]:
    """Give a catalog book to a new reader with a chosen fate and due day."""

    def _lend(
        state: LibraryState,
        title: str,
        due_day: int,
        *,
        lost: bool = False,
        late: bool = False,
        kind: ReaderKind = ReaderKind.ORDINARY,
        day: int = 1,
        reader: Reader | None = None,
    ) -> Reader:
        book = state.find_catalog_book(title)
        book.is_late = late
        book.is_lost = lost
        book.return_due_day = due_day
        book.is_taken = True

        if reader is None:
            reader = Reader.arrive(get_profile(kind), day)
            state.active_readers.append(reader)
        reader.loans.append(book.model_copy())
        return reader

    return _lend
