"""
Text report of the library state after each day.

The report lists, in order: the books on the shelf, the active readers with
each loan's due day (flagged when the loan is already known to end lost or
late), the lost ledger and the late-return ledger.
"""

import sys
from typing import TextIO

from .models import LibrarySnapshot, LoanOutlook
from .simulation import DayOutcome

OUTLOOK_MARKERS = {
    LoanOutlook.WILL_BE_LOST: " - WILL BE LOST",
    LoanOutlook.WILL_BE_LATE: " - WILL BE LATE",
    LoanOutlook.ON_TIME: "",
}


def _section(title: str, items: list[str], empty_line: str) -> list[str]:
    lines = [f"{title}:"]
    if items:
        lines.extend(f" - {item}" for item in items)
    else:
        lines.append(f" - {empty_line}")
    return lines


def render_snapshot(snapshot: LibrarySnapshot) -> str:
    """Render the body of a day report (no header)."""
    lines = _section("Available books", list(snapshot.available_books), "No available books")

    lines.append("")
    lines.append("Active readers:")
    if not snapshot.active_readers:
        lines.append(" - No active readers")
    for reader in snapshot.active_readers:
        lines.append(f" - {reader.name} borrowed:")
        for loan in reader.loans:
            lines.append(
                f"     * {loan.title} (due day {loan.return_due_day}){OUTLOOK_MARKERS[loan.outlook]}"
            )

    lines.append("")
    lines.extend(_section("Lost books", list(snapshot.lost_books), "No lost books"))

    lines.append("")
    lines.extend(
        _section(
            "Late returned books (all time)",
            list(snapshot.late_returned_books),
            "No late returns",
        )
    )
    return "\n".join(lines)


def render_day(outcome: DayOutcome) -> str:
    """Render the full report for one day, header included."""
    return f"=== Day {outcome.day} ===\n\n{render_snapshot(outcome.snapshot)}\n"


class ConsoleReporter:
    """Writes each day's report to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def __call__(self, outcome: DayOutcome) -> None:
        self.stream.write(render_day(outcome))
        self.stream.write("\n")
        self.stream.flush()
