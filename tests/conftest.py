from datetime import date
from typing import Any

import pytest

from todoist_mcp.dispatcher import Dispatcher
from todoist_mcp.registry import build_registry
from todoist_mcp.todoist import Due, Project, Task

TODAY = date(2024, 5, 1)


def make_task(
    task_id: str,
    content: str,
    priority: int = 1,
    due_date: str | None = None,
    **fields: Any
) -> Task:
    due = Due(date=due_date, string=due_date) if due_date else None
    return Task(id=task_id, content=content, priority=priority, due=due, **fields)


class FakeTodoistClient:
    """In-memory stand-in for TodoistClient that records every call."""

    def __init__(self):
        self.tasks: list[Task] = []
        self.tasks_by_filter: dict[str, list[Task]] = {}
        self.failures: dict[str, Exception] = {}
        self.projects: list[Project] = []
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def _maybe_fail(self, key: str) -> None:
        if key in self.failures:
            raise self.failures[key]

    async def list_tasks(self, filter=None, lang=None, project_id=None, section_id=None, label=None, ids=None):
        self.calls.append((
            "list_tasks",
            {"filter": filter, "lang": lang, "project_id": project_id,
             "section_id": section_id, "label": label, "ids": ids},
        ))
        if filter is not None:
            self._maybe_fail(filter)
            return list(self.tasks_by_filter.get(filter, []))
        self._maybe_fail("list_tasks")
        return list(self.tasks)

    async def create_task(self, fields):
        self.calls.append(("create_task", fields))
        self._maybe_fail("create_task")
        return Task(
            id="new-1",
            content=fields["content"],
            description=fields.get("description", ""),
            priority=fields.get("priority", 1),
            labels=fields.get("labels", []),
            project_id=fields.get("project_id"),
        )

    async def update_task(self, task_id, fields):
        self.calls.append(("update_task", {"task_id": task_id, **fields}))
        self._maybe_fail("update_task")
        return Task(id=task_id, content=fields.get("content", "Unchanged task"))

    async def close_task(self, task_id):
        self.calls.append(("close_task", {"task_id": task_id}))
        self._maybe_fail("close_task")

    async def reopen_task(self, task_id):
        self.calls.append(("reopen_task", {"task_id": task_id}))
        self._maybe_fail("reopen_task")

    async def delete_task(self, task_id):
        self.calls.append(("delete_task", {"task_id": task_id}))
        self._maybe_fail("delete_task")

    async def list_projects(self):
        self.calls.append(("list_projects", {}))
        self._maybe_fail("list_projects")
        return list(self.projects)

    async def quick_add_task(self, text, note=None, reminder=None, auto_reminder=None):
        self.calls.append((
            "quick_add_task",
            {"text": text, "note": note, "reminder": reminder, "auto_reminder": auto_reminder},
        ))
        self._maybe_fail("quick_add_task")
        return Task(id="quick-1", content=text)


@pytest.fixture
def fake_client() -> FakeTodoistClient:
    return FakeTodoistClient()


@pytest.fixture
def registry(fake_client):
    return build_registry(fake_client, today=lambda: TODAY)


@pytest.fixture
def dispatcher(registry) -> Dispatcher:
    return Dispatcher(registry)
