"""
Todoist domain shapes.

Read-only snapshots of remote objects, built from the REST API's JSON and
discarded at the end of each request.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Due:
    """
    Due information of a task.

    Attributes:
        date: Calendar date in ISO format (YYYY-MM-DD)
        string: Human-readable display string ("tomorrow at 5pm")
        datetime: Full timestamp when the task has a due time
        is_recurring: Whether the due date repeats
        lang: Language the due string was parsed in
    """
    date: str
    string: str
    datetime: str | None = None
    is_recurring: bool = False
    lang: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Due":
        return cls(
            date=data.get("date", ""),
            string=data.get("string") or data.get("date", ""),
            datetime=data.get("datetime"),
            is_recurring=bool(data.get("is_recurring", False)),
            lang=data.get("lang"),
        )


@dataclass(frozen=True)
class Task:
    """
    A Todoist task.

    Priority follows the REST API scale: 4 is urgent, 1 is normal.
    """
    id: str
    content: str
    description: str = ""
    due: Due | None = None
    priority: int = 1
    labels: list[str] = field(default_factory=list)
    project_id: str | None = None
    section_id: str | None = None
    parent_id: str | None = None
    url: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Task":
        due = data.get("due")
        return cls(
            id=str(data["id"]),
            content=data.get("content", ""),
            description=data.get("description") or "",
            due=Due.from_api(due) if due else None,
            priority=int(data.get("priority") or 1),
            labels=list(data.get("labels") or []),
            project_id=_optional_id(data.get("project_id")),
            section_id=_optional_id(data.get("section_id")),
            parent_id=_optional_id(data.get("parent_id")),
            url=data.get("url"),
        )


@dataclass(frozen=True)
class Project:
    """A Todoist project."""
    id: str
    name: str
    is_shared: bool = False
    color: str | None = None
    is_favorite: bool = False
    url: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Project":
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            is_shared=bool(data.get("is_shared", False)),
            color=data.get("color"),
            is_favorite=bool(data.get("is_favorite", False)),
            url=data.get("url"),
        )


def _optional_id(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)
