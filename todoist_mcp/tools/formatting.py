"""
Text rendering of tasks and projects for agent consumption.
"""

from todoist_mcp.todoist.models import Project, Task

PRIORITY_LABELS = {2: "Low", 3: "Medium", 4: "High"}


def priority_label(priority: int) -> str:
    """Display label for a priority, falling back to the raw number."""
    return PRIORITY_LABELS.get(priority, str(priority))


def format_task(task: Task) -> str:
    """
    Render one task as a block of lines.

    Content and ID are always shown. Other fields get a line only when they
    carry data; priority 1 is the default and is left out.
    """
    parts = [f"• {task.content} (ID: {task.id})"]

    if task.description:
        parts.append(f"  Description: {task.description}")
    if task.due:
        parts.append(f"  Due: {task.due.string}")
    if task.priority > 1:
        parts.append(f"  Priority: {priority_label(task.priority)}")
    if task.labels:
        parts.append(f"  Labels: {', '.join(task.labels)}")
    if task.project_id:
        parts.append(f"  Project ID: {task.project_id}")

    return "\n".join(parts)


def format_tasks(tasks: list[Task]) -> str:
    return "\n\n".join(format_task(task) for task in tasks)


def format_project(project: Project) -> str:
    line = f"• {project.name} (ID: {project.id})"
    if project.is_shared:
        line += " [shared]"
    return line
