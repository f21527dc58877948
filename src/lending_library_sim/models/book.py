"""
Book model for the lending library simulation.

The same model serves two roles:
- a catalog entry, owned by the library, whose ``is_taken`` flag says
  whether the physical copy is on the shelf
- a loan, the reader's own copy of the book's state at issuance, which
  carries the pre-decided fate of that loan (lost, late or on time)

The two copies are matched only by title.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LoanOutlook(str, Enum):
    """How a loan will end, as decided when it was issued."""

    ON_TIME = "on_time"
    WILL_BE_LOST = "will_be_lost"
    WILL_BE_LATE = "will_be_late"


class Book(BaseModel):
    """A single physical book or a reader's loan of it."""

    title: str = Field(
        ...,
        description="Title of the book; unique within the catalog",
        min_length=1,
        max_length=500,
        examples=["War and Peace", "Clean Code"],
    )

    return_due_day: int = Field(
        default=0,
        description="Day by which the book must come back",
        ge=0,
    )

    is_lost: bool = Field(
        default=False,
        description="The loan will never come back",
    )

    is_late: bool = Field(
        default=False,
        description="The loan comes back after extra days",
    )

    is_taken: bool = Field(
        default=False,
        description="The copy is out of the library",
    )

    @model_validator(mode="after")
    def validate_outcome(self) -> "Book":
        """A loan is either lost or late, never both."""
        if self.is_lost and self.is_late:
            raise ValueError("A book cannot be both lost and late")
        return self

    @property
    def outlook(self) -> LoanOutlook:
        if self.is_lost:
            return LoanOutlook.WILL_BE_LOST
        if self.is_late:
            return LoanOutlook.WILL_BE_LATE
        return LoanOutlook.ON_TIME

    def is_overdue(self, current_day: int) -> bool:
        """Check whether ``current_day`` is past the due day."""
        return current_day > self.return_due_day

    model_config = ConfigDict(
        # Catch contradictory flags as soon as they are set
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "title": "War and Peace",
                "return_due_day": 12,
                "is_lost": False,
                "is_late": True,
                "is_taken": True,
            }
        },
    )
