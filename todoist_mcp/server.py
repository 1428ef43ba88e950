"""
MCP Server
==========

Binds the dispatcher to the Model Context Protocol using the official
`mcp` SDK. The SDK owns framing and JSON-RPC; this module only converts
between SDK types and the dispatcher's own shapes. Error envelopes from
resource reads and prompt requests are reported as JSON-RPC errors.

Exposed capabilities:
- tools/list, tools/call
- resources/list, resources/read
- prompts/list, prompts/get
"""

from typing import Any

import mcp.types as types
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from pydantic import AnyUrl

from todoist_mcp.dispatcher import Dispatcher
from todoist_mcp.tools import ToolResult
from todoist_mcp.utils.config import ServerConfig
from todoist_mcp.utils.logger import Logger

logger = Logger("Server")


def _protocol_error(result: ToolResult) -> McpError:
    return McpError(types.ErrorData(code=types.INTERNAL_ERROR, message=result.text))


def create_server(dispatcher: Dispatcher, config: ServerConfig) -> Server:
    """
    Build an MCP server whose handlers delegate to the dispatcher.

    Args:
        dispatcher: Routes every request
        config: Server name and version announced to clients
    """
    server = Server(config.name, version=config.version)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [types.Tool(**tool.to_dict()) for tool in dispatcher.list_tools()]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        result = await dispatcher.call_tool(name, arguments)
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=result.text)],
            isError=result.is_error,
        )

    @server.list_resources()
    async def list_resources() -> list[types.Resource]:
        return [
            types.Resource(
                uri=AnyUrl(resource.uri),
                name=resource.name,
                description=resource.description,
                mimeType=resource.mime_type,
            )
            for resource in dispatcher.list_resources()
        ]

    @server.read_resource()
    async def read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        resource_uri = str(uri)
        result = await dispatcher.read_resource(resource_uri)
        if result.is_error:
            raise _protocol_error(result)
        resource = dispatcher.registry.get_resource(resource_uri)
        return [ReadResourceContents(content=result.text, mime_type=resource.mime_type)]

    @server.list_prompts()
    async def list_prompts() -> list[types.Prompt]:
        return [
            types.Prompt(
                name=prompt.name,
                description=prompt.description,
                arguments=[
                    types.PromptArgument(
                        name=argument.name,
                        description=argument.description,
                        required=argument.required,
                    )
                    for argument in prompt.arguments
                ],
            )
            for prompt in dispatcher.list_prompts()
        ]

    @server.get_prompt()
    async def get_prompt(name: str, arguments: dict[str, str] | None) -> types.GetPromptResult:
        result = await dispatcher.get_prompt(name, arguments)
        if isinstance(result, ToolResult):
            raise _protocol_error(result)
        return types.GetPromptResult(
            description=result.description,
            messages=[
                types.PromptMessage(
                    role=message.role,
                    content=types.TextContent(type="text", text=message.content),
                )
                for message in result.messages
            ],
        )

    return server


async def serve(dispatcher: Dispatcher, config: ServerConfig) -> None:
    """Run the server over stdio until the client disconnects."""
    server = create_server(dispatcher, config)
    async with stdio_server() as (read_stream, write_stream):
        logger.info(f"{config.name} {config.version} running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())
