"""
Read-only views of the library state.

A ``LibrarySnapshot`` is taken at the end of every simulated day and is
everything an observer (the console report, the MCP resources, tests) is
allowed to see. Snapshots are frozen copies; changing the simulation later
does not change a snapshot already handed out.
"""

from pydantic import BaseModel, ConfigDict, Field

from .book import LoanOutlook
from .profile import ReaderKind


class LoanView(BaseModel):
    """One loan held by an active reader."""

    title: str
    return_due_day: int
    outlook: LoanOutlook

    model_config = ConfigDict(frozen=True)


class ReaderView(BaseModel):
    """An active reader and its outstanding loans."""

    name: str
    kind: ReaderKind
    profile_name: str
    loans: tuple[LoanView, ...] = ()

    model_config = ConfigDict(frozen=True)


class LibrarySnapshot(BaseModel):
    """State of the library at the end of a day."""

    day: int = Field(..., description="Day the snapshot was taken (0 before the first day)", ge=0)

    available_books: tuple[str, ...] = Field(
        default=(),
        description="Titles currently on the shelf, in catalog order",
    )

    active_readers: tuple[ReaderView, ...] = Field(
        default=(),
        description="Readers holding at least one loan, in arrival order",
    )

    lost_books: tuple[str, ...] = Field(
        default=(),
        description="Titles recorded as lost, oldest first",
    )

    late_returned_books: tuple[str, ...] = Field(
        default=(),
        description="Titles returned late, oldest first",
    )

    model_config = ConfigDict(frozen=True)
