"""Tests for MCP server construction."""

from fastmcp import FastMCP

from lending_library_sim.config import SimulationConfig
from lending_library_sim.server import create_server


class TestCreateServer:
    def test_server_uses_configured_name(self):
        mcp = create_server(SimulationConfig(server_name="sim-under-test"))

        assert isinstance(mcp, FastMCP)
        assert mcp.name == "sim-under-test"

    def test_server_from_default_config(self):
        assert create_server().name == "lending-library"
