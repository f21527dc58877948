"""Lending library MCP server.

Keeps one simulation alive and exposes it to MCP clients:
- resources (library://...) read the state at the end of the last day
- tools advance the simulation or reset it

Logs go to stderr so stdout stays clean for the stdio transport.
"""

import logging
import signal
import sys
from typing import Any

from fastmcp import FastMCP

from .config import SimulationConfig, get_config
from .resources import all_resources
from .tools import all_tools

logger = logging.getLogger(__name__)


def create_server(config: SimulationConfig | None = None) -> FastMCP:
    """Create the FastMCP server and register all resources and tools."""
    config = config or get_config()

    mcp = FastMCP(
        name=config.server_name,
        instructions=(
            "Lending library simulation. Read library://snapshot (or the narrower "
            "library:// resources) to see the shelf, active readers and the lost and "
            "late ledgers. Call advance_days to simulate more days and "
            "reset_simulation to start over."
        ),
    )

    for resource in all_resources:
        logger.debug("Registering resource: %s with URI: %s", resource["name"], resource["uri"])
        mcp.resource(
            uri=resource["uri"],
            name=resource["name"],
            description=resource["description"],
            mime_type=resource["mime_type"],
        )(resource["handler"])

    for tool in all_tools:
        logger.debug("Registering tool: %s", tool["name"])
        mcp.tool(
            name=tool["name"],
            description=tool["description"],
        )(tool["handler"])

    logger.info("Registered %d resources and %d tools", len(all_resources), len(all_tools))
    return mcp


def main() -> None:
    """Entry point for ``lending-library-mcp``."""
    config = get_config()

    logging.basicConfig(
        level=config.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    if not config.is_development:
        logging.getLogger("fastmcp").setLevel(logging.WARNING)

    logger.info("Lending Library MCP Server v%s (transport: %s)", config.server_version, config.transport)

    def signal_handler(signum: int, _frame: Any) -> None:
        logger.info("Received signal %s, shutting down", signum)
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        mcp = create_server(config)
        if config.transport == "stdio":
            mcp.run(transport="stdio")
        else:
            mcp.run(transport="streamable-http", host=config.http_host, port=config.http_port)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception:
        logger.exception("Fatal error in MCP server")
        sys.exit(1)


if __name__ == "__main__":
    main()
