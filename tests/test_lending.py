"""
Tests for loan issuance.

Rolls are scripted so each test states exactly which 1..100 value the
reader drew and which loan window was picked.
"""

import random

import pytest

from lending_library_sim.models import Book, LoanOutlook, Reader, ReaderKind, get_profile
from lending_library_sim.simulation import create_random_reader, issue_loan


def make_reader(kind: ReaderKind, day: int = 1) -> Reader:
    return Reader.arrive(get_profile(kind), day)


class TestIssueLoan:
    """Test suite for issue_loan."""

    def test_on_time_loan(self, scripted_rng):
        reader = make_reader(ReaderKind.ORDINARY)
        book = Book(title="1984")

        assert issue_loan(reader, book, 3, scripted_rng([50, 7])) is True

        assert book.is_taken is True
        assert book.return_due_day == 10
        assert len(reader.loans) == 1
        loan = reader.loans[0]
        assert loan.title == "1984"
        assert loan.return_due_day == 10
        assert loan.outlook == LoanOutlook.ON_TIME

    @pytest.mark.parametrize(
        ("kind", "roll", "expected"),
        [
            (ReaderKind.ORDINARY, 1, LoanOutlook.WILL_BE_LOST),
            (ReaderKind.ORDINARY, 5, LoanOutlook.WILL_BE_LOST),
            (ReaderKind.ORDINARY, 6, LoanOutlook.ON_TIME),
            (ReaderKind.GREEDY, 10, LoanOutlook.WILL_BE_LOST),
            (ReaderKind.GREEDY, 11, LoanOutlook.WILL_BE_LATE),
            (ReaderKind.GREEDY, 15, LoanOutlook.WILL_BE_LATE),
            (ReaderKind.GREEDY, 16, LoanOutlook.ON_TIME),
            (ReaderKind.FORGETFUL, 5, LoanOutlook.WILL_BE_LOST),
            (ReaderKind.FORGETFUL, 6, LoanOutlook.WILL_BE_LATE),
            (ReaderKind.FORGETFUL, 36, LoanOutlook.ON_TIME),
        ],
    )
    def test_single_roll_decides_outcome(self, scripted_rng, kind, roll, expected):
        """Loss and lateness come from one roll with cumulative thresholds."""
        reader = make_reader(kind)
        rolls = [roll, 6]
        if expected == LoanOutlook.WILL_BE_LATE and kind == ReaderKind.FORGETFUL:
            rolls.append(1)

        issue_loan(reader, Book(title="1984"), 1, scripted_rng(rolls))

        assert reader.loans[0].outlook == expected

    def test_forgetful_late_loan_gets_extra_days(self, scripted_rng):
        reader = make_reader(ReaderKind.FORGETFUL)
        rng = scripted_rng([35, 6, 3])

        issue_loan(reader, Book(title="War and Peace"), 4, rng)

        assert reader.loans[0].is_late is True
        assert reader.loans[0].return_due_day == 4 + 6 + 3
        assert rng.values == []

    def test_greedy_late_loan_gets_no_extra_days(self, scripted_rng):
        """A late outcome without extra late days keeps the base window."""
        reader = make_reader(ReaderKind.GREEDY)
        rng = scripted_rng([12, 8, 99])

        issue_loan(reader, Book(title="War and Peace"), 4, rng)

        assert reader.loans[0].is_late is True
        assert reader.loans[0].return_due_day == 12
        # no draw for extra days
        assert rng.values == [99]

    def test_lost_loan_gets_no_extra_days(self, scripted_rng):
        reader = make_reader(ReaderKind.FORGETFUL)
        rng = scripted_rng([2, 10, 99])

        issue_loan(reader, Book(title="Clean Code"), 1, rng)

        assert reader.loans[0].is_lost is True
        assert reader.loans[0].is_late is False
        assert reader.loans[0].return_due_day == 11
        assert rng.values == [99]

    def test_taken_book_is_refused(self, scripted_rng):
        reader = make_reader(ReaderKind.ORDINARY)
        book = Book(title="1984", return_due_day=9, is_taken=True)
        before = book.model_dump()
        rng = scripted_rng([50, 7])

        assert issue_loan(reader, book, 5, rng) is False

        assert book.model_dump() == before
        assert reader.loans == []
        assert rng.values == [50, 7]

    def test_loan_is_a_copy_of_the_catalog_book(self, scripted_rng):
        reader = make_reader(ReaderKind.ORDINARY)
        book = Book(title="1984")

        issue_loan(reader, book, 1, scripted_rng([50, 6]))
        book.is_taken = False
        book.return_due_day = 0

        assert reader.loans[0] is not book
        assert reader.loans[0].is_taken is True
        assert reader.loans[0].return_due_day == 7

    def test_due_day_within_window(self):
        rng = random.Random(99)
        for day in range(1, 200):
            reader = make_reader(ReaderKind.FORGETFUL, day)
            issue_loan(reader, Book(title="1984"), day, rng)
            loan = reader.loans[0]

            assert not (loan.is_lost and loan.is_late)
            upper = 10 + (3 if loan.is_late else 0)
            assert day + 6 <= loan.return_due_day <= day + upper


class TestCreateRandomReader:
    """Test suite for create_random_reader."""

    def test_reader_named_after_profile_and_day(self):
        reader = create_random_reader(random.Random(1), 17)

        assert reader.name == f"{reader.profile.name}_17"
        assert reader.arrival_day == 17
        assert reader.loans == []

    def test_all_kinds_are_drawn(self):
        rng = random.Random(5)
        kinds = {create_random_reader(rng, day).profile.kind for day in range(1, 100)}

        assert kinds == set(ReaderKind)

    def test_same_seed_same_readers(self):
        first_rng, second_rng = random.Random(3), random.Random(3)
        first = [create_random_reader(first_rng, d).name for d in range(1, 20)]
        second = [create_random_reader(second_rng, d).name for d in range(1, 20)]

        assert first == second
