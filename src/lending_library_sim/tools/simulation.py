"""
Simulation tools for the lending library MCP server.

Tools are the only way to change the running simulation:
1. advance_days: Simulate one or more days and report what happened
2. reset_simulation: Start over from a fresh catalog, optionally seeded

Arguments are plain keyword parameters, so FastMCP publishes them as the
tool's input schema. Requests that cannot be served raise ``ToolError``,
which clients receive as a tool error rather than a result.
"""

import logging
from typing import Annotated, Any

from fastmcp.exceptions import ToolError
from pydantic import BaseModel, Field, ValidationError

from ..session import get_simulator, reset_simulator
from ..simulation import EventKind, SimulationError

logger = logging.getLogger(__name__)


# =============================================================================
# ADVANCE DAYS
# =============================================================================


class AdvanceDaysInput(BaseModel):
    """Validated arguments of the advance_days tool."""

    days: int = Field(
        default=1,
        description="Number of days to simulate",
        ge=1,
        le=365,
        examples=[1, 7, 50],
    )


async def advance_days_handler(
    days: Annotated[int, Field(description="Number of days to simulate", ge=1, le=365)] = 1,
) -> dict[str, Any]:
    """
    Handler for the advance_days tool.

    Refuses the whole request, without simulating anything, when it would
    run past the configured horizon.
    """
    try:
        params = AdvanceDaysInput(days=days)
    except ValidationError as e:
        logger.warning("Invalid advance_days parameters: %s", e)
        raise ToolError(f"Invalid advance_days parameters: {e}") from e

    simulator = get_simulator()
    remaining = simulator.days_remaining
    if remaining is not None and params.days > remaining:
        raise ToolError(
            f"Cannot advance {params.days} days: only {remaining} of "
            f"{simulator.horizon} simulated days remain"
        )

    try:
        outcomes = [simulator.next_day() for _ in range(params.days)]
    except SimulationError as e:
        logger.exception("Simulation failed while advancing days")
        raise ToolError(f"Simulation failed: {e!s}") from e

    events = [event for outcome in outcomes for event in outcome.events]
    lost = [event for event in events if event.kind == EventKind.LOST]
    late = [event for event in events if event.kind == EventKind.RETURNED_LATE]
    arrivals = [event for event in events if event.kind == EventKind.ARRIVED]
    snapshot = outcomes[-1].snapshot

    message = (
        f"Simulated day(s) {outcomes[0].day}-{outcomes[-1].day}: "
        f"{len(arrivals)} reader(s) arrived, {len(lost)} book(s) lost, "
        f"{len(late)} late return(s). "
        f"{len(snapshot.available_books)} book(s) on the shelf."
    )

    return {
        "message": message,
        "current_day": simulator.current_day,
        "days_remaining": simulator.days_remaining,
        "events": [event.model_dump(mode="json") for event in events],
        "snapshot": snapshot.model_dump(mode="json"),
    }


# =============================================================================
# RESET SIMULATION
# =============================================================================


class ResetSimulationInput(BaseModel):
    """Validated arguments of the reset_simulation tool."""

    seed: int | None = Field(
        default=None,
        description="Seed for a reproducible run; omitted means the configured seed",
        ge=0,
        examples=[7, 2024],
    )


async def reset_simulation_handler(
    seed: Annotated[
        int | None,
        Field(description="Seed for a reproducible run; omitted means the configured seed", ge=0),
    ] = None,
) -> dict[str, Any]:
    """Handler for the reset_simulation tool."""
    try:
        params = ResetSimulationInput(seed=seed)
    except ValidationError as e:
        logger.warning("Invalid reset_simulation parameters: %s", e)
        raise ToolError(f"Invalid reset_simulation parameters: {e}") from e

    simulator = reset_simulator(seed=params.seed)
    snapshot = simulator.snapshot()

    return {
        "message": (
            f"Simulation reset with {len(snapshot.available_books)} books on the shelf "
            f"and a horizon of {simulator.horizon} days."
        ),
        "seed": simulator.state.seed,
        "horizon": simulator.horizon,
        "snapshot": snapshot.model_dump(mode="json"),
    }


advance_days = {
    "name": "advance_days",
    "description": (
        "Simulate one or more days of the library. Each day a reader may arrive and "
        "borrow a book, overdue loans are settled (returned, returned late or lost) and "
        "readers without books leave. Returns the day's events and the resulting state."
    ),
    "handler": advance_days_handler,
}

reset_simulation = {
    "name": "reset_simulation",
    "description": (
        "Discard the current simulation and start again from a fresh catalog on day 0. "
        "Pass a seed to make the new run reproducible."
    ),
    "handler": reset_simulation_handler,
}
