"""
Configuration Management
========================

Centralized configuration for the server. All environment variables are
read, validated and typed here. The only required value is the Todoist
API token; everything else has a default.

Usage:
    from todoist_mcp.utils.config import get_config

    config = get_config()
    print(config.todoist.rest_url)
    print(config.server.name)
"""

import os
import sys
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from todoist_mcp import __version__

DEFAULT_REST_URL = "https://api.todoist.com/rest/v2"
DEFAULT_SYNC_URL = "https://api.todoist.com/sync/v9"


def _required(name: str) -> str:
    """
    Get a required environment variable.

    Raises:
        ValueError: If the variable is not set
    """
    value = os.getenv(name)
    if not value:
        raise ValueError(
            f"Missing required environment variable: {name}\n"
            f"Please set it in your .env file or as an environment variable."
        )
    return value


def _optional(name: str, default: str) -> str:
    """Get an optional environment variable with a default."""
    return os.getenv(name) or default


def _optional_float(name: str, default: float) -> float:
    """
    Get an optional float environment variable.

    Falls back to the default when unset or unparseable.
    """
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        print(f"Warning: {name} is not a valid number, using default: {default}", file=sys.stderr)
        return default


# ==============================================================================
# Configuration Dataclasses
# ==============================================================================

@dataclass(frozen=True)
class TodoistConfig:
    """Todoist API configuration."""
    api_token: str          # Personal API token from Todoist settings
    rest_url: str           # Base URL of the REST API
    sync_url: str           # Base URL of the Sync API (quick add lives there)
    timeout_seconds: float  # Per-request HTTP timeout


@dataclass(frozen=True)
class ServerConfig:
    """MCP server identity."""
    name: str
    version: str


@dataclass(frozen=True)
class Config:
    """
    Root configuration object.

    Access via:
        config = get_config()
        config.todoist.api_token
        config.server.name
    """
    todoist: TodoistConfig
    server: ServerConfig
    log_level: str


def load_config() -> Config:
    """
    Load and validate all configuration from the environment.

    Loads a .env file first (searching up from the working directory),
    then reads the process environment.

    Raises:
        ValueError: If TODOIST_API_TOKEN is missing
    """
    load_dotenv(find_dotenv(usecwd=True))

    return Config(
        todoist=TodoistConfig(
            api_token=_required("TODOIST_API_TOKEN"),
            rest_url=_optional("TODOIST_REST_URL", DEFAULT_REST_URL).rstrip("/"),
            sync_url=_optional("TODOIST_SYNC_URL", DEFAULT_SYNC_URL).rstrip("/"),
            timeout_seconds=_optional_float("TODOIST_TIMEOUT_SECONDS", 30.0),
        ),
        server=ServerConfig(
            name=_optional("MCP_SERVER_NAME", "todoist-mcp"),
            version=__version__,
        ),
        log_level=_optional("LOG_LEVEL", "info"),
    )


# ==============================================================================
# Singleton
# ==============================================================================

_config_instance: Config | None = None


def get_config() -> Config:
    """
    Get the singleton configuration instance.

    Loaded on first access and cached for subsequent calls.
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = load_config()
    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config_instance
    _config_instance = None
