"""
Todoist MCP Server - Main Entry Point
=====================================

This is the main entry point for the server. It:
1. Loads configuration (exits with status 1 without TODOIST_API_TOKEN)
2. Creates the Todoist client
3. Declares tools, resources and prompts
4. Serves MCP over stdio

Run with:
    python -m todoist_mcp.main

Or after installing:
    todoist-mcp
"""

import asyncio
import sys

from todoist_mcp.dispatcher import Dispatcher
from todoist_mcp.registry import build_registry
from todoist_mcp.server import serve
from todoist_mcp.todoist import TodoistClient
from todoist_mcp.utils.config import get_config
from todoist_mcp.utils.logger import Logger, set_log_level

main_logger = Logger("Main")


async def main():
    """
    Main async entry point.

    Initializes all components and serves until stdin closes.
    """
    main_logger.info("Starting Todoist MCP server...")

    # 1. Load configuration
    try:
        config = get_config()
    except ValueError as e:
        main_logger.error("Invalid configuration", e)
        sys.exit(1)

    set_log_level(config.log_level)

    # 2. Create the Todoist client, shared by every handler
    client = TodoistClient(config.todoist)

    # 3. Declare tools, resources and prompts
    registry = build_registry(client)
    dispatcher = Dispatcher(registry)

    # 4. Serve
    await serve(dispatcher, config.server)


def run():
    """
    Synchronous entry point.

    This is called when running with the `todoist-mcp` command.
    """
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
