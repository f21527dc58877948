"""Library Resources - Simulation State Access

Exposes the running simulation's end-of-day state via read-only resources.

Resources:
- library://snapshot - Full state: shelf, readers, both ledgers
- library://catalog/available - Titles currently on the shelf
- library://readers/active - Active readers and their loans
- library://ledgers/lost - Titles recorded as lost
- library://ledgers/late - Titles returned late
"""

import logging
from typing import Any

from fastmcp.exceptions import ResourceError

from ..session import get_simulator

logger = logging.getLogger(__name__)


def _current_snapshot_dump() -> dict[str, Any]:
    return get_simulator().snapshot().model_dump(mode="json")


async def snapshot_handler() -> dict[str, Any]:
    """Returns the whole library state as of the last simulated day."""
    try:
        logger.debug("MCP Resource Request - snapshot")
        return _current_snapshot_dump()
    except Exception as e:
        logger.exception("Error in snapshot resource")
        raise ResourceError(f"Failed to retrieve library snapshot: {e!s}") from e


async def available_books_handler() -> dict[str, Any]:
    """Returns the titles on the shelf."""
    try:
        snapshot = _current_snapshot_dump()
        return {
            "day": snapshot["day"],
            "available_books": snapshot["available_books"],
            "total": len(snapshot["available_books"]),
        }
    except Exception as e:
        logger.exception("Error in catalog/available resource")
        raise ResourceError(f"Failed to retrieve available books: {e!s}") from e


async def active_readers_handler() -> dict[str, Any]:
    """Returns readers holding books, with each loan's due day and outlook."""
    try:
        snapshot = _current_snapshot_dump()
        return {
            "day": snapshot["day"],
            "active_readers": snapshot["active_readers"],
            "total": len(snapshot["active_readers"]),
        }
    except Exception as e:
        logger.exception("Error in readers/active resource")
        raise ResourceError(f"Failed to retrieve active readers: {e!s}") from e


async def lost_ledger_handler() -> dict[str, Any]:
    try:
        snapshot = _current_snapshot_dump()
        return {"day": snapshot["day"], "lost_books": snapshot["lost_books"]}
    except Exception as e:
        logger.exception("Error in ledgers/lost resource")
        raise ResourceError(f"Failed to retrieve lost ledger: {e!s}") from e


async def late_ledger_handler() -> dict[str, Any]:
    try:
        snapshot = _current_snapshot_dump()
        return {"day": snapshot["day"], "late_returned_books": snapshot["late_returned_books"]}
    except Exception as e:
        logger.exception("Error in ledgers/late resource")
        raise ResourceError(f"Failed to retrieve late ledger: {e!s}") from e


library_resources: list[dict[str, Any]] = [
    {
        "uri": "library://snapshot",
        "name": "Library Snapshot",
        "description": (
            "State of the simulated library at the end of the last simulated day: "
            "books on the shelf, active readers and their loans, lost and late ledgers."
        ),
        "mime_type": "application/json",
        "handler": snapshot_handler,
    },
    {
        "uri": "library://catalog/available",
        "name": "Available Books",
        "description": "Titles currently on the shelf and available for borrowing",
        "mime_type": "application/json",
        "handler": available_books_handler,
    },
    {
        "uri": "library://readers/active",
        "name": "Active Readers",
        "description": "Readers holding at least one book, with due days and expected outcome",
        "mime_type": "application/json",
        "handler": active_readers_handler,
    },
    {
        "uri": "library://ledgers/lost",
        "name": "Lost Books Ledger",
        "description": "Every book recorded as lost so far, oldest first",
        "mime_type": "application/json",
        "handler": lost_ledger_handler,
    },
    {
        "uri": "library://ledgers/late",
        "name": "Late Returns Ledger",
        "description": "Every book returned late so far, oldest first",
        "mime_type": "application/json",
        "handler": late_ledger_handler,
    },
]
