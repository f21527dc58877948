"""
Tests for the simulation models.

These tests verify that:
1. Reader profiles carry the fixed per-category values
2. Books reject contradictory loan outcomes
3. Readers are named after their profile and arrival day
4. Snapshots are read-only
"""

import pytest
from pydantic import ValidationError

from lending_library_sim.models import (
    READER_PROFILES,
    Book,
    LibrarySnapshot,
    LoanOutlook,
    Reader,
    ReaderKind,
    ReaderProfile,
    get_profile,
)


class TestReaderProfile:
    """Test suite for ReaderProfile and the profile table."""

    @pytest.mark.parametrize(
        ("kind", "name", "loss", "late", "extra"),
        [
            (ReaderKind.ORDINARY, "Ordinary", 5, 0, 0),
            (ReaderKind.GREEDY, "Greedy", 10, 5, 0),
            (ReaderKind.FORGETFUL, "Forgetful", 5, 30, 3),
        ],
    )
    def test_profile_table(self, kind, name, loss, late, extra):
        profile = READER_PROFILES[kind]

        assert profile.kind == kind
        assert profile.name == name
        assert profile.loss_chance == loss
        assert profile.late_chance == late
        assert profile.max_extra_late_days == extra

    def test_table_covers_every_kind(self):
        assert set(READER_PROFILES) == set(ReaderKind)

    def test_get_profile_accepts_values(self):
        assert get_profile("greedy") is READER_PROFILES[ReaderKind.GREEDY]
        assert get_profile(ReaderKind.FORGETFUL) is READER_PROFILES[ReaderKind.FORGETFUL]

    def test_get_profile_unknown_kind(self):
        with pytest.raises(ValueError):
            get_profile("careless")

    def test_profiles_are_immutable(self):
        profile = get_profile(ReaderKind.ORDINARY)

        with pytest.raises(ValidationError):
            profile.loss_chance = 50

    def test_combined_chances_cannot_exceed_100(self):
        with pytest.raises(ValidationError) as exc_info:
            ReaderProfile(kind=ReaderKind.GREEDY, name="Reckless", loss_chance=60, late_chance=41)
        assert "must not exceed 100" in str(exc_info.value)

    def test_chance_bounds(self):
        with pytest.raises(ValidationError):
            ReaderProfile(kind=ReaderKind.GREEDY, name="Bad", loss_chance=-1, late_chance=0)


class TestBook:
    """Test suite for the Book model."""

    def test_new_book_is_on_the_shelf(self):
        book = Book(title="1984")

        assert book.is_taken is False
        assert book.is_lost is False
        assert book.is_late is False
        assert book.return_due_day == 0
        assert book.outlook == LoanOutlook.ON_TIME

    def test_title_required(self):
        with pytest.raises(ValidationError):
            Book(title="")

    def test_lost_and_late_are_exclusive(self):
        with pytest.raises(ValidationError):
            Book(title="1984", is_lost=True, is_late=True)

    def test_exclusivity_checked_on_assignment(self):
        book = Book(title="1984", is_lost=True)

        with pytest.raises(ValidationError):
            book.is_late = True

    def test_outlook(self):
        assert Book(title="A", is_lost=True).outlook == LoanOutlook.WILL_BE_LOST
        assert Book(title="A", is_late=True).outlook == LoanOutlook.WILL_BE_LATE

    def test_is_overdue_only_after_due_day(self):
        book = Book(title="1984", return_due_day=10)

        assert book.is_overdue(9) is False
        assert book.is_overdue(10) is False
        assert book.is_overdue(11) is True

    def test_copy_is_independent(self):
        book = Book(title="1984", return_due_day=7, is_taken=True)
        loan = book.model_copy()

        book.is_taken = False

        assert loan.is_taken is True
        assert loan.return_due_day == 7


class TestReader:
    """Test suite for the Reader model."""

    def test_arrive_names_reader(self):
        reader = Reader.arrive(get_profile(ReaderKind.FORGETFUL), 12)

        assert reader.name == "Forgetful_12"
        assert reader.arrival_day == 12
        assert reader.loans == []
        assert reader.has_loans is False

    def test_profile_is_shared(self):
        first = Reader.arrive(get_profile(ReaderKind.GREEDY), 1)
        second = Reader.arrive(get_profile(ReaderKind.GREEDY), 2)

        assert first.profile == second.profile
        assert first.name != second.name


class TestLibrarySnapshot:
    """Test suite for the read-only snapshot."""

    def test_snapshot_is_frozen(self):
        snapshot = LibrarySnapshot(day=3, available_books=("1984",))

        with pytest.raises(ValidationError):
            snapshot.day = 4

    def test_day_cannot_be_negative(self):
        with pytest.raises(ValidationError):
            LibrarySnapshot(day=-1)
