"""Configuration management for the lending library simulation.

Settings come from environment variables (``LENDING_LIBRARY_`` prefix) or a
``.env`` file and cover three areas:
1. Simulation run - how many days to simulate and which seed to use
2. Server metadata and transport - for the MCP server entry point
3. Logging - verbosity for both entry points

Loss and lateness probabilities are deliberately absent: they are fixed
per reader profile in ``models.profile``.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SimulationConfig(BaseSettings):
    """Settings shared by the CLI and the MCP server."""

    model_config = SettingsConfigDict(
        # LENDING_LIBRARY_TOTAL_DAYS, LENDING_LIBRARY_SEED, ...
        env_prefix="LENDING_LIBRARY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Simulation Run ===

    total_days: int = Field(
        default=50,
        description="Number of days to simulate (also the server's horizon)",
        ge=1,
        le=10_000,
    )

    seed: int | None = Field(
        default=None,
        description="Seed for the shared random generator; unset means a fresh seed per run",
        ge=0,
    )

    # === Server Metadata ===

    server_name: str = Field(
        default="lending-library",
        description="MCP server name used in protocol handshake",
        pattern=r"^[a-z0-9-]+$",
    )

    server_version: str = Field(
        default="0.1.0",
        description="Server version for capability negotiation",
        pattern=r"^\d+\.\d+\.\d+(-[a-zA-Z0-9.]+)?$",
    )

    # === Transport Configuration ===

    transport: str = Field(
        default="stdio",
        description="Transport used by the MCP server",
        pattern=r"^(stdio|streamable_http)$",
    )

    http_host: str = Field(
        default="127.0.0.1",
        description="Host for the Streamable HTTP transport",
    )

    http_port: int = Field(
        default=8080,
        description="Port for the Streamable HTTP transport",
        ge=1024,
        le=65535,
    )

    # === Logging ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    @field_validator("server_name")
    @classmethod
    def validate_server_name(cls, v: str) -> str:
        """Keep server names short enough to be readable in client listings."""
        if len(v) < 3:
            raise ValueError("Server name must be at least 3 characters")
        if len(v) > 50:
            raise ValueError("Server name must not exceed 50 characters")
        return v

    @field_validator("http_port")
    @classmethod
    def validate_http_port(cls, v: int) -> int:
        reserved_ports = {3306, 5432}
        if v in reserved_ports:
            raise ValueError(f"Port {v} is commonly reserved, choose another")
        return v

    @property
    def is_development(self) -> bool:
        """True when running with debug output."""
        return self.debug or self.log_level == "DEBUG"

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    @property
    def server_info(self) -> dict[str, str]:
        """Server information sent during the MCP handshake."""
        return {
            "name": self.server_name,
            "version": self.server_version,
            "transport": self.transport,
        }


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: SimulationConfig | None = None


def get_config() -> SimulationConfig:
    """Get or create the process-wide configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = SimulationConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Drop the cached configuration so the next ``get_config`` re-reads the environment."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
