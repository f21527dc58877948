"""
Lending library simulation models.

Pydantic models for everything the simulation tracks:
- ReaderProfile: fixed behavior of each reader category
- Book: a catalog entry or a reader's loan of it
- Reader: an active loan holder
- LibrarySnapshot: read-only end-of-day view for observers
"""

from .book import Book, LoanOutlook
from .profile import READER_PROFILES, ReaderKind, ReaderProfile, get_profile
from .reader import Reader
from .snapshot import LibrarySnapshot, LoanView, ReaderView

__all__ = [
    "READER_PROFILES",
    "Book",
    "LibrarySnapshot",
    "LoanOutlook",
    "LoanView",
    "Reader",
    "ReaderKind",
    "ReaderProfile",
    "ReaderView",
    "get_profile",
]
