"""
Planning Views
==============

Builds the daily and weekly planning documents from Todoist filter queries.

Todoist's filter grammar can select tasks but cannot order groups of them,
so the grouping happens here:

Daily view:
    1. "overdue" and "today" are queried concurrently
    2. Overdue tasks are listed as returned
    3. Today's tasks are split into Urgent (p4), High Priority (p3) and
       Normal (p1-p2) buckets, always in that order
    4. A summary line counts both sets

Weekly view:
    1. "7 days" is queried
    2. Tasks are grouped by calendar date, dates sorted ascending
    3. Tasks without a due date are left out
    4. A summary line counts the tasks

Within a bucket or date, tasks keep the order the API returned them in.
"""

import asyncio
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from typing import Callable

from todoist_mcp.todoist import Task, TodoistClient
from todoist_mcp.utils.logger import Logger

logger = Logger("Planning")

OVERDUE_FILTER = "overdue"
TODAY_FILTER = "today"
WEEK_FILTER = "7 days"

URGENT = "Urgent"
HIGH = "High Priority"
NORMAL = "Normal"

# Bucket order is fixed, independent of input order
PRIORITY_BUCKETS = (URGENT, HIGH, NORMAL)


@dataclass
class Section:
    """A heading followed by an ordered list of lines."""
    heading: str
    lines: list[str] = field(default_factory=list)
    level: int = 2

    def render(self) -> str:
        header = f"{'#' * self.level} {self.heading}"
        if not self.lines:
            return header
        return "\n".join([header, *self.lines])


@dataclass
class PlanningView:
    """
    A derived planning document.

    Attributes:
        title: Top-level heading
        sections: Ordered sections
        summary: Closing line (counts, or the empty-view notice)
    """
    title: str
    sections: list[Section] = field(default_factory=list)
    summary: str = ""

    def render(self) -> str:
        blocks = [f"# {self.title}"]
        blocks.extend(section.render() for section in self.sections)
        if self.summary:
            blocks.append(self.summary)
        return "\n\n".join(blocks)


def priority_bucket(task: Task) -> str:
    """Bucket of a task for the daily view: 4 urgent, 3 high, anything lower normal."""
    if task.priority >= 4:
        return URGENT
    if task.priority == 3:
        return HIGH
    return NORMAL


def bucket_by_priority(tasks: list[Task]) -> dict[str, list[Task]]:
    """
    Partition tasks into the three priority buckets.

    Every bucket is present in the result, in fixed order, possibly empty.
    """
    buckets: dict[str, list[Task]] = {name: [] for name in PRIORITY_BUCKETS}
    for task in tasks:
        buckets[priority_bucket(task)].append(task)
    return buckets


def group_by_due_date(tasks: list[Task]) -> dict[str, list[Task]]:
    """
    Group tasks by the calendar date of their due date, dates ascending.

    ISO dates sort chronologically as strings. Undated tasks are dropped.
    """
    groups: dict[str, list[Task]] = defaultdict(list)
    for task in tasks:
        if task.due is None or not task.due.date:
            continue
        groups[task.due.date[:10]].append(task)
    return {key: groups[key] for key in sorted(groups)}


def _task_line(task: Task) -> str:
    return f"- {task.content}"


class PlanningViews:
    """
    Renders the planning documents.

    Example:
        views = PlanningViews(client)
        markdown = await views.daily()
    """

    def __init__(
        self,
        client: TodoistClient,
        today: Callable[[], date] = date.today
    ):
        """
        Args:
            client: Todoist client used for the filter queries
            today: Returns the current calendar date
        """
        self.client = client
        self.today = today

    async def build_daily(self) -> PlanningView:
        # Fail fast: if either query raises, no document is produced
        overdue, due_today = await asyncio.gather(
            self.client.list_tasks(filter=OVERDUE_FILTER),
            self.client.list_tasks(filter=TODAY_FILTER),
        )
        logger.debug(f"Daily view: {len(overdue)} overdue, {len(due_today)} today")

        view = PlanningView(title=f"Daily Plan for {self.today().strftime('%A, %B %d, %Y')}")

        if overdue:
            view.sections.append(Section("Overdue", [_task_line(task) for task in overdue]))

        if not due_today:
            view.sections.append(Section("Today", ["No tasks scheduled for today."]))
        else:
            view.sections.append(Section("Today"))
            for name, tasks in bucket_by_priority(due_today).items():
                if tasks:
                    view.sections.append(Section(name, [_task_line(task) for task in tasks], level=3))

        view.summary = f"Summary: {len(overdue)} overdue, {len(due_today)} today"
        return view

    async def build_weekly(self) -> PlanningView:
        tasks = await self.client.list_tasks(filter=WEEK_FILTER)
        view = PlanningView(title="Weekly Plan")

        if not tasks:
            view.summary = "Nothing scheduled for the next 7 days."
            return view

        today_key = self.today().isoformat()
        for key, group in group_by_due_date(tasks).items():
            heading = f"{date.fromisoformat(key).strftime('%A')}, {key}"
            if key == today_key:
                heading += " (Today)"
            view.sections.append(Section(heading, [_task_line(task) for task in group]))

        view.summary = f"Total: {len(tasks)} tasks"
        return view

    async def daily(self) -> str:
        return (await self.build_daily()).render()

    async def weekly(self) -> str:
        return (await self.build_weekly()).render()
