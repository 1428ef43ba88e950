"""
MCP Tools
=========

Tools are the operations an AI agent can invoke. Each one is a thin
adapter over a single Todoist API call:

1. The agent calls a tool by name with JSON arguments
2. The arguments are validated into the tool's argument record
3. The adapter forwards them to the Todoist client
4. The result is rendered as text and wrapped in a ToolResult

This module provides:
- ToolResult: the uniform success/error envelope
- MCPTool: the declaration of one tool (name, description, argument record)
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from pydantic import BaseModel


@dataclass(frozen=True)
class ToolResult:
    """
    Envelope returned for every tool call.

    Attributes:
        text: The text shown to the agent
        is_error: True when the handler or its remote call failed
    """
    text: str
    is_error: bool = False

    @classmethod
    def ok(cls, text: str) -> "ToolResult":
        return cls(text=text)

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(text=f"Error: {message}", is_error=True)

    def to_dict(self) -> dict:
        """Convert to the wire shape: {"content": [...], "isError": bool}."""
        return {
            "content": [{"type": "text", "text": self.text}],
            "isError": self.is_error,
        }


@dataclass(frozen=True)
class MCPTool:
    """
    Definition of a tool.

    Attributes:
        name: Unique identifier for the tool
        description: What the tool does (shown to the agent)
        arguments: Pydantic model the raw arguments are validated into
        execute: Async handler receiving the validated record, returning text

    Example:
        async def _close(args: CloseTaskArgs) -> str:
            await client.close_task(args.task_id)
            return f"Task {args.task_id} marked as complete."

        tool = MCPTool(
            name="close_task",
            description="Mark a task as complete",
            arguments=CloseTaskArgs,
            execute=_close,
        )
    """
    name: str
    description: str
    arguments: type[BaseModel]
    execute: Callable[[Any], Awaitable[str]]

    @property
    def input_schema(self) -> dict:
        """JSON Schema of the arguments, keyed by the names the agent sends."""
        return self.arguments.model_json_schema(by_alias=True)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


__all__ = ["MCPTool", "ToolResult"]
