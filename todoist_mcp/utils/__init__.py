"""
Utilities Module
================

Common utilities shared across the server:
- logger: Structured logging with levels and context
- config: Centralized configuration management
"""

from todoist_mcp.utils.logger import Logger
from todoist_mcp.utils.config import get_config, Config

__all__ = ["Logger", "get_config", "Config"]
