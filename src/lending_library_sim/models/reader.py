"""
Reader model for the lending library simulation.

A reader exists only while holding at least one loan: it is created on
arrival together with its first loan and leaves once every loan has been
returned or lost.
"""

from pydantic import BaseModel, ConfigDict, Field

from .book import Book
from .profile import ReaderProfile


class Reader(BaseModel):
    """An active loan holder."""

    name: str = Field(
        ...,
        description="Unique reader name, '<profile name>_<arrival day>'",
        min_length=1,
        examples=["Greedy_7", "Forgetful_12"],
    )

    profile: ReaderProfile = Field(..., description="Shared, read-only behavior profile")

    arrival_day: int = Field(..., description="Day the reader arrived", ge=0)

    loans: list[Book] = Field(
        default_factory=list,
        description="Reader's copies of the books currently held, in borrowing order",
    )

    @classmethod
    def arrive(cls, profile: ReaderProfile, day: int) -> "Reader":
        """Create the reader arriving on ``day``; at most one arrives per day."""
        return cls(name=f"{profile.name}_{day}", profile=profile, arrival_day=day)

    @property
    def has_loans(self) -> bool:
        return bool(self.loans)

    model_config = ConfigDict(validate_assignment=True)
