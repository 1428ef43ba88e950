"""
Todoist MCP Server
==================

Exposes a Todoist account to AI agents over the Model Context Protocol.

This package provides:
- Tools for creating, querying, updating and completing tasks
- Daily and weekly planning documents served as MCP resources
- Planning prompt templates that embed live task data
"""

__version__ = "1.0.0"
