"""
Operation Dispatcher
====================

Routes a named request to its handler.

Tool calls always come back as a ToolResult envelope:
1. Unknown tool name -> error envelope
2. Arguments that fail validation -> error envelope
3. Handler or Todoist failure -> error envelope with the failure message
4. Otherwise -> success envelope with the handler's text

Resource reads and prompt requests follow the same rules: an unknown URI or
prompt name, or a failed Todoist query, comes back as an error envelope.
No handler exception ever escapes the dispatcher.
"""

from typing import Any

from pydantic import ValidationError

from todoist_mcp.planning import PlanningResource
from todoist_mcp.prompts import PromptResult, PromptTemplate
from todoist_mcp.registry import OperationRegistry
from todoist_mcp.tools import MCPTool, ToolResult
from todoist_mcp.utils.logger import Logger

logger = Logger("Dispatcher")


def _describe_validation_error(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "arguments"
        problems.append(f"{location}: {item['msg']}")
    return "; ".join(problems)


class Dispatcher:
    """
    Invokes exactly one handler per request.

    Example:
        dispatcher = Dispatcher(build_registry(client))

        result = await dispatcher.call_tool("get_tasks_by_filter", {"filter": "today"})
        if result.is_error:
            ...
    """

    def __init__(self, registry: OperationRegistry):
        self.registry = registry

    def list_tools(self) -> list[MCPTool]:
        return self.registry.tools

    def list_resources(self) -> list[PlanningResource]:
        return self.registry.resources

    def list_prompts(self) -> list[PromptTemplate]:
        return self.registry.prompts

    async def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
        """
        Execute a tool by name.

        Args:
            name: The tool name
            arguments: Raw JSON arguments from the agent

        Returns:
            ToolResult envelope, never raises
        """
        tool = self.registry.get_tool(name)
        if tool is None:
            logger.warning(f"Unknown tool requested: {name}")
            return ToolResult.error(f"Unknown tool: {name}")

        try:
            args = tool.arguments.model_validate(arguments or {})
        except ValidationError as e:
            logger.warning(f"Invalid arguments for {name}")
            return ToolResult.error(f"Invalid arguments for {name}: {_describe_validation_error(e)}")

        tool_logger = logger.child(name)
        try:
            tool_logger.info("Executing tool")
            text = await tool.execute(args)
        except Exception as e:
            tool_logger.error("Tool execution failed", e)
            return ToolResult.error(str(e))

        return ToolResult.ok(text)

    async def read_resource(self, uri: str) -> ToolResult:
        """
        Render a planning document.

        Returns:
            ToolResult whose text is the document, or an error envelope
            for an unknown URI or a failed query. Never raises.
        """
        resource = self.registry.get_resource(uri)
        if resource is None:
            logger.warning(f"Unknown resource requested: {uri}")
            return ToolResult.error(f"Unknown resource: {uri}")

        resource_logger = logger.child(resource.name)
        try:
            resource_logger.info(f"Reading resource: {uri}")
            text = await resource.render()
        except Exception as e:
            resource_logger.error("Resource read failed", e)
            return ToolResult.error(str(e))

        return ToolResult.ok(text)

    async def get_prompt(
        self, name: str, arguments: dict[str, str] | None = None
    ) -> PromptResult | ToolResult:
        """
        Render a prompt template.

        Returns:
            The assembled PromptResult, or a ToolResult error envelope for an
            unknown name or a failed view. Never raises.
        """
        prompt = self.registry.get_prompt(name)
        if prompt is None:
            logger.warning(f"Unknown prompt requested: {name}")
            return ToolResult.error(f"Unknown prompt: {name}")

        prompt_logger = logger.child(name)
        try:
            prompt_logger.info("Building prompt")
            return await prompt.build(arguments or {})
        except Exception as e:
            prompt_logger.error("Prompt build failed", e)
            return ToolResult.error(str(e))
