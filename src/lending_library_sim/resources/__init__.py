"""MCP resources for the lending library simulation.

Resources are read-only views of the simulation state; advancing the
simulation is done through tools.
"""

from .library import library_resources

all_resources = library_resources

__all__ = [
    "all_resources",
    "library_resources",
]
