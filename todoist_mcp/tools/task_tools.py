"""
Todoist Task Tools
==================

Tools for working with Todoist tasks.

These tools allow the agent to:
- Create tasks, either field by field or with quick add syntax
- List tasks by project/section/label or by filter expression
- Update, complete, reopen and delete tasks

Each handler is a thin adapter: it forwards the validated arguments to
the Todoist client and renders the result. Handlers never catch errors;
failures propagate to the dispatcher, which turns them into error
envelopes.
"""

from todoist_mcp.todoist import TodoistClient
from todoist_mcp.tools import MCPTool
from todoist_mcp.tools.arguments import (
    CloseTaskArgs,
    CreateTaskArgs,
    DeleteTaskArgs,
    GetTasksArgs,
    GetTasksByFilterArgs,
    QuickAddTaskArgs,
    ReopenTaskArgs,
    UpdateTaskArgs,
)
from todoist_mcp.tools.formatting import format_task, format_tasks
from todoist_mcp.utils.logger import Logger

logger = Logger("TaskTools")


class TaskTools:
    """
    Task tool handlers bound to one Todoist client.

    Example:
        task_tools = TaskTools(client)
        for tool in task_tools.tools():
            registry.register_tool(tool)
    """

    def __init__(self, client: TodoistClient):
        self.client = client

    # ==========================================================================
    # Tool: Create Task
    # ==========================================================================

    async def create_task(self, args: CreateTaskArgs) -> str:
        task = await self.client.create_task(args.remote_fields())
        logger.info(f"Created task {task.id}")
        return f"Task created:\n{format_task(task)}"

    # ==========================================================================
    # Tool: Get Tasks
    # ==========================================================================

    async def get_tasks(self, args: GetTasksArgs) -> str:
        tasks = await self.client.list_tasks(
            project_id=args.project_id,
            section_id=args.section_id,
            label=args.label,
            ids=args.ids,
        )
        if not tasks:
            return "No tasks found."
        return f"Found {len(tasks)} tasks:\n\n{format_tasks(tasks)}"

    # ==========================================================================
    # Tool: Get Tasks By Filter
    # ==========================================================================

    async def get_tasks_by_filter(self, args: GetTasksByFilterArgs) -> str:
        tasks = await self.client.list_tasks(filter=args.filter, lang=args.lang)
        if not tasks:
            return f'No tasks found matching filter: "{args.filter}"'
        return f'Found {len(tasks)} tasks with filter "{args.filter}":\n\n{format_tasks(tasks)}'

    # ==========================================================================
    # Tool: Update Task
    # ==========================================================================

    async def update_task(self, args: UpdateTaskArgs) -> str:
        task = await self.client.update_task(args.task_id, args.update_fields())
        logger.info(f"Updated task {task.id}")
        return f"Task updated:\n{format_task(task)}"

    # ==========================================================================
    # Tools: Close / Reopen / Delete
    # ==========================================================================

    async def close_task(self, args: CloseTaskArgs) -> str:
        await self.client.close_task(args.task_id)
        return f"Task {args.task_id} marked as complete."

    async def reopen_task(self, args: ReopenTaskArgs) -> str:
        await self.client.reopen_task(args.task_id)
        return f"Task {args.task_id} reopened."

    async def delete_task(self, args: DeleteTaskArgs) -> str:
        await self.client.delete_task(args.task_id)
        logger.info(f"Deleted task {args.task_id}")
        return f"Task {args.task_id} deleted."

    # ==========================================================================
    # Tool: Quick Add
    # ==========================================================================

    async def quick_add_task(self, args: QuickAddTaskArgs) -> str:
        task = await self.client.quick_add_task(
            args.text,
            note=args.note,
            reminder=args.reminder,
            auto_reminder=args.auto_reminder,
        )
        return f"Task added:\n{format_task(task)}"

    def tools(self) -> list[MCPTool]:
        """Declarations of every task tool, in registration order."""
        return [
            MCPTool(
                name="create_task",
                description=(
                    "Create a new task in Todoist. Priority runs from 1 (normal) to 4 (urgent). "
                    "Set the due date with dueString (natural language), dueDate or dueDatetime."
                ),
                arguments=CreateTaskArgs,
                execute=self.create_task,
            ),
            MCPTool(
                name="get_tasks",
                description="List active tasks, optionally limited to a project, section, label or set of IDs.",
                arguments=GetTasksArgs,
                execute=self.get_tasks,
            ),
            MCPTool(
                name="get_tasks_by_filter",
                description=(
                    "List active tasks matching a Todoist filter expression, e.g. 'today', "
                    "'overdue', 'p1', '7 days', '#Work & @urgent', 'assigned to: me'."
                ),
                arguments=GetTasksByFilterArgs,
                execute=self.get_tasks_by_filter,
            ),
            MCPTool(
                name="update_task",
                description="Update fields of an existing task. Only the fields given are changed.",
                arguments=UpdateTaskArgs,
                execute=self.update_task,
            ),
            MCPTool(
                name="close_task",
                description="Mark a task as complete.",
                arguments=CloseTaskArgs,
                execute=self.close_task,
            ),
            MCPTool(
                name="reopen_task",
                description="Reopen a completed task.",
                arguments=ReopenTaskArgs,
                execute=self.reopen_task,
            ),
            MCPTool(
                name="delete_task",
                description="Permanently delete a task.",
                arguments=DeleteTaskArgs,
                execute=self.delete_task,
            ),
            MCPTool(
                name="quick_add_task",
                description=(
                    "Add a task using Todoist quick add syntax. Dates, #projects, @labels and "
                    "priorities (p1-p4) are parsed from the text."
                ),
                arguments=QuickAddTaskArgs,
                execute=self.quick_add_task,
            ),
        ]
