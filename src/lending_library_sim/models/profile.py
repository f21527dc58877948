"""
Reader profiles for the lending library simulation.

Every reader belongs to one of three categories. A category is nothing more
than four fixed values: how likely the reader is to lose a book, how likely
to bring it back late, how many extra days a late return can take, and a
display name. Profiles never change, so a single shared instance per
category is handed to every reader of that kind.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ReaderKind(str, Enum):
    """Category of reader."""

    ORDINARY = "ordinary"
    GREEDY = "greedy"
    FORGETFUL = "forgetful"


class ReaderProfile(BaseModel):
    """
    Borrowing behavior of one reader category.

    Both chances are percentages drawn against a single 1..100 roll at loan
    time: rolls up to ``loss_chance`` lose the book, rolls up to
    ``loss_chance + late_chance`` bring it back late.
    """

    kind: ReaderKind = Field(..., description="Reader category")

    name: str = Field(
        ...,
        description="Display name, also used as the prefix of reader names",
        min_length=1,
        examples=["Ordinary", "Greedy", "Forgetful"],
    )

    loss_chance: int = Field(
        ...,
        description="Percent chance that a loan is lost",
        ge=0,
        le=100,
    )

    late_chance: int = Field(
        ...,
        description="Percent chance that a loan that is not lost comes back late",
        ge=0,
        le=100,
    )

    max_extra_late_days: int = Field(
        default=0,
        description="Upper bound on extra days added to the due day of a late loan",
        ge=0,
    )

    @model_validator(mode="after")
    def validate_chances(self) -> "ReaderProfile":
        """Loss and lateness share one roll, so together they cannot exceed 100%."""
        if self.loss_chance + self.late_chance > 100:
            raise ValueError("loss_chance + late_chance must not exceed 100")
        return self

    model_config = ConfigDict(frozen=True)


READER_PROFILES: dict[ReaderKind, ReaderProfile] = {
    ReaderKind.ORDINARY: ReaderProfile(
        kind=ReaderKind.ORDINARY,
        name="Ordinary",
        loss_chance=5,
        late_chance=0,
        max_extra_late_days=0,
    ),
    ReaderKind.GREEDY: ReaderProfile(
        kind=ReaderKind.GREEDY,
        name="Greedy",
        loss_chance=10,
        late_chance=5,
        max_extra_late_days=0,
    ),
    ReaderKind.FORGETFUL: ReaderProfile(
        kind=ReaderKind.FORGETFUL,
        name="Forgetful",
        loss_chance=5,
        late_chance=30,
        max_extra_late_days=3,
    ),
}


def get_profile(kind: ReaderKind | str) -> ReaderProfile:
    """Look up the shared profile for a reader category."""
    return READER_PROFILES[ReaderKind(kind)]
