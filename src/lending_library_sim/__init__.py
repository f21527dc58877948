"""
Lending Library Simulation Package.

This package simulates a small lending library over a sequence of days:
readers arrive, borrow whatever is on the shelf, and either return their
books on time, return them late, or lose them, depending on the kind of
reader they are.

Key Components:
- models: Pydantic models for profiles, books, readers and snapshots
- simulation: Library state, loan issuance and the daily loop
- reporting: Text rendering of the state after each day
- config: Configuration management with pydantic-settings
- resources / tools: MCP endpoints exposing the running simulation
"""

__version__ = "0.1.0"

from .simulation import DaySimulator, LibraryState, advance_day, run_simulation

__all__ = [
    "DaySimulator",
    "LibraryState",
    "__version__",
    "advance_day",
    "run_simulation",
]
