"""
Planning Resources
==================

Read-only markdown documents derived from several Todoist queries:

- todoist://planning/daily: overdue tasks plus today's tasks by priority
- todoist://planning/weekly: the next seven days grouped by date
"""

from dataclasses import dataclass
from typing import Awaitable, Callable

from todoist_mcp.planning.views import PlanningView, PlanningViews, Section

DAILY_URI = "todoist://planning/daily"
WEEKLY_URI = "todoist://planning/weekly"
MARKDOWN = "text/markdown"


@dataclass(frozen=True)
class PlanningResource:
    """
    Declaration of a readable document.

    Attributes:
        uri: Address the agent reads the document by
        name: Short display name
        description: What the document contains
        mime_type: Content type of the rendered text
        render: Async callable producing the document text
    """
    uri: str
    name: str
    description: str
    mime_type: str
    render: Callable[[], Awaitable[str]]


def planning_resources(views: PlanningViews) -> list[PlanningResource]:
    return [
        PlanningResource(
            uri=DAILY_URI,
            name="Daily Plan",
            description="Overdue tasks and today's tasks grouped by priority",
            mime_type=MARKDOWN,
            render=views.daily,
        ),
        PlanningResource(
            uri=WEEKLY_URI,
            name="Weekly Plan",
            description="Tasks due in the next 7 days grouped by date",
            mime_type=MARKDOWN,
            render=views.weekly,
        ),
    ]


__all__ = [
    "DAILY_URI",
    "WEEKLY_URI",
    "PlanningResource",
    "PlanningView",
    "PlanningViews",
    "Section",
    "planning_resources",
]
