"""
Operation Registry
==================

Declares everything the server exposes: tools, planning resources and
prompt templates. The registry is filled once at startup by
build_registry() and only read afterwards.

Example:
    registry = build_registry(client)

    tool = registry.get_tool("get_tasks_by_filter")
    schema = tool.input_schema
"""

from datetime import date
from typing import Callable

from todoist_mcp.planning import PlanningResource, PlanningViews, planning_resources
from todoist_mcp.prompts import PromptAssembler, PromptTemplate
from todoist_mcp.todoist import TodoistClient
from todoist_mcp.tools import MCPTool
from todoist_mcp.tools.project_tools import ProjectTools
from todoist_mcp.tools.task_tools import TaskTools
from todoist_mcp.utils.logger import Logger

logger = Logger("Registry")


class OperationRegistry:
    """Name-keyed declarations of tools, resources and prompts."""

    def __init__(self):
        self._tools: dict[str, MCPTool] = {}
        self._resources: dict[str, PlanningResource] = {}
        self._prompts: dict[str, PromptTemplate] = {}

    def register_tool(self, tool: MCPTool) -> None:
        """
        Register a tool.

        Raises:
            ValueError: If a tool with this name already exists
        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool
        logger.debug(f"Registered tool: {tool.name}")

    def register_resource(self, resource: PlanningResource) -> None:
        if resource.uri in self._resources:
            raise ValueError(f"Resource '{resource.uri}' is already registered")
        self._resources[resource.uri] = resource
        logger.debug(f"Registered resource: {resource.uri}")

    def register_prompt(self, prompt: PromptTemplate) -> None:
        if prompt.name in self._prompts:
            raise ValueError(f"Prompt '{prompt.name}' is already registered")
        self._prompts[prompt.name] = prompt
        logger.debug(f"Registered prompt: {prompt.name}")

    def get_tool(self, name: str) -> MCPTool | None:
        return self._tools.get(name)

    def get_resource(self, uri: str) -> PlanningResource | None:
        return self._resources.get(uri)

    def get_prompt(self, name: str) -> PromptTemplate | None:
        return self._prompts.get(name)

    @property
    def tools(self) -> list[MCPTool]:
        return list(self._tools.values())

    @property
    def resources(self) -> list[PlanningResource]:
        return list(self._resources.values())

    @property
    def prompts(self) -> list[PromptTemplate]:
        return list(self._prompts.values())


def build_registry(
    client: TodoistClient,
    today: Callable[[], date] = date.today
) -> OperationRegistry:
    """
    Declare every tool, resource and prompt against one Todoist client.

    Args:
        client: Shared Todoist client, injected into every handler
        today: Returns the current calendar date (for the planning views)
    """
    registry = OperationRegistry()
    views = PlanningViews(client, today=today)

    for tool in TaskTools(client).tools() + ProjectTools(client).tools():
        registry.register_tool(tool)
    for resource in planning_resources(views):
        registry.register_resource(resource)
    for prompt in PromptAssembler(views).templates():
        registry.register_prompt(prompt)

    logger.info(
        f"Registered {len(registry.tools)} tools, "
        f"{len(registry.resources)} resources, {len(registry.prompts)} prompts"
    )
    return registry
