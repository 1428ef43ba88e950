"""
Todoist Remote Service
======================

The async HTTP client for Todoist and the domain shapes it returns.
"""

from todoist_mcp.todoist.client import TodoistAPIError, TodoistClient
from todoist_mcp.todoist.models import Due, Project, Task

__all__ = ["TodoistAPIError", "TodoistClient", "Due", "Project", "Task"]
