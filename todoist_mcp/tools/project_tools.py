"""
Todoist Project Tools
=====================

Lets the agent discover projects so it can target them by ID in other
task tools.
"""

from todoist_mcp.todoist import TodoistClient
from todoist_mcp.tools import MCPTool
from todoist_mcp.tools.arguments import GetProjectsArgs
from todoist_mcp.tools.formatting import format_project


class ProjectTools:
    """Project tool handlers bound to one Todoist client."""

    def __init__(self, client: TodoistClient):
        self.client = client

    async def get_projects(self, args: GetProjectsArgs) -> str:
        projects = await self.client.list_projects()
        if not projects:
            return "No projects found."
        lines = "\n".join(format_project(project) for project in projects)
        return f"Found {len(projects)} projects:\n\n{lines}"

    def tools(self) -> list[MCPTool]:
        return [
            MCPTool(
                name="get_projects",
                description="List all projects with their IDs.",
                arguments=GetProjectsArgs,
                execute=self.get_projects,
            ),
        ]
