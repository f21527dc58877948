"""MCP tools for the lending library simulation.

Tools change the running simulation; resources only read it.
"""

from .simulation import advance_days, reset_simulation

all_tools = [
    advance_days,
    reset_simulation,
]

__all__ = [
    "advance_days",
    "all_tools",
    "reset_simulation",
]
