"""
Tool argument records.

One pydantic model per tool. Raw JSON arguments are validated into the
matching record once, before any handler runs, so handlers only ever see
well-formed, typed input. Field aliases are the camelCase names agents
send; field names are the snake_case names the Todoist API expects.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

MAX_FILTER_LENGTH = 1024

# 4 is urgent, 1 is normal (Todoist REST scale)
Priority = Literal[1, 2, 3, 4]

TaskId = Annotated[str, Field(min_length=1, description="ID of the task")]

PRIORITY_DESCRIPTION = "Priority from 1 (normal) to 4 (urgent)"


class ToolArguments(BaseModel):
    """Base for all argument records."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def remote_fields(self, exclude: set[str] | None = None) -> dict[str, Any]:
        """
        Fields that were set, keyed by their Todoist API names.

        Unset optional fields are dropped so the API keeps its defaults.
        """
        return self.model_dump(exclude_none=True, exclude=exclude)


class CreateTaskArgs(ToolArguments):
    content: str = Field(min_length=1, description="Task title")
    description: str | None = Field(None, description="Task description")
    project_id: str | None = Field(None, alias="projectId", description="Project to add the task to (defaults to Inbox)")
    section_id: str | None = Field(None, alias="sectionId", description="Section to add the task to")
    parent_id: str | None = Field(None, alias="parentId", description="Parent task ID for subtasks")
    order: int | None = Field(None, description="Position among sibling tasks")
    labels: list[str] | None = Field(None, description="Label names")
    priority: Priority | None = Field(None, description=PRIORITY_DESCRIPTION)
    due_string: str | None = Field(None, alias="dueString", description="Natural language due date ('tomorrow at 5pm')")
    due_date: str | None = Field(None, alias="dueDate", description="Due date as YYYY-MM-DD")
    due_datetime: str | None = Field(None, alias="dueDatetime", description="Due date and time in RFC 3339 format")
    due_lang: str | None = Field(None, alias="dueLang", description="Language of dueString")
    assignee_id: str | None = Field(None, alias="assigneeId", description="User to assign the task to")


class GetTasksArgs(ToolArguments):
    project_id: str | None = Field(None, alias="projectId", description="Only tasks in this project")
    section_id: str | None = Field(None, alias="sectionId", description="Only tasks in this section")
    label: str | None = Field(None, description="Only tasks with this label")
    ids: list[str] | None = Field(None, description="Only these task IDs")


class GetTasksByFilterArgs(ToolArguments):
    filter: str = Field(
        min_length=1,
        max_length=MAX_FILTER_LENGTH,
        description="Filter expression (e.g., 'today', 'overdue', 'p1', '7 days', '#Work & @urgent')",
    )
    lang: str | None = Field(None, description="Language of the filter expression")


class UpdateTaskArgs(ToolArguments):
    task_id: TaskId
    content: str | None = Field(None, min_length=1, description="New task title")
    description: str | None = Field(None, description="New description")
    labels: list[str] | None = Field(None, description="Replacement label names")
    priority: Priority | None = Field(None, description=PRIORITY_DESCRIPTION)
    due_string: str | None = Field(None, alias="dueString", description="Natural language due date")
    due_date: str | None = Field(None, alias="dueDate", description="Due date as YYYY-MM-DD")
    due_datetime: str | None = Field(None, alias="dueDatetime", description="Due date and time in RFC 3339 format")

    def update_fields(self) -> dict[str, Any]:
        return self.remote_fields(exclude={"task_id"})


class CloseTaskArgs(ToolArguments):
    task_id: TaskId


class ReopenTaskArgs(ToolArguments):
    task_id: TaskId


class DeleteTaskArgs(ToolArguments):
    task_id: TaskId


class GetProjectsArgs(ToolArguments):
    pass


class QuickAddTaskArgs(ToolArguments):
    text: str = Field(
        min_length=1,
        description="Task text in quick add syntax, e.g. 'Pay rent tomorrow p1 #Home @bills'",
    )
    note: str | None = Field(None, description="Comment to attach to the task")
    reminder: str | None = Field(None, description="Reminder in natural language")
    auto_reminder: bool | None = Field(
        None, alias="autoReminder", description="Add the default reminder when the task has a due time"
    )
