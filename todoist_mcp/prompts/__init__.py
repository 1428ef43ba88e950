"""
Prompt Templates
================

Conversation templates the agent can request by name. Each template
embeds a live planning document into a single user message followed by
a fixed list of requests:

- daily_planner: today's plan, asks for prioritization, scheduling,
  capacity and next actions
- task_manager: the week ahead plus optional free-text context, asks for
  organization, workflow, tool and planning advice
"""

from dataclasses import dataclass, field
from typing import Awaitable, Callable

from todoist_mcp.errors import UnknownOperationError
from todoist_mcp.planning import PlanningViews
from todoist_mcp.utils.logger import Logger

logger = Logger("Prompts")


@dataclass(frozen=True)
class PromptArgument:
    name: str
    description: str
    required: bool = False


@dataclass(frozen=True)
class PromptMessage:
    role: str
    content: str


@dataclass
class PromptResult:
    """A rendered prompt: description plus ordered messages."""
    description: str
    messages: list[PromptMessage] = field(default_factory=list)


@dataclass(frozen=True)
class PromptTemplate:
    """
    Declaration of a prompt.

    Attributes:
        name: Name the agent requests the prompt by
        description: What the prompt is for
        arguments: Declared arguments
        build: Async callable rendering the prompt from its arguments
    """
    name: str
    description: str
    arguments: tuple[PromptArgument, ...]
    build: Callable[[dict[str, str]], Awaitable[PromptResult]]


DAILY_PLANNER_REQUEST = """Please help me plan my day:
1. Prioritize: which tasks should I tackle first, and why?
2. Schedule: suggest a realistic order and time blocks for today.
3. Capacity: is this workload achievable today? What should be deferred?
4. Actions: list concrete next steps, including tasks to reschedule or close."""

TASK_MANAGER_REQUEST = """Please help me manage these tasks:
1. Organization: how should these tasks be grouped into projects, sections and labels?
2. Workflow: what order and rhythm would get them done with the least friction?
3. Tools: which Todoist features (filters, recurring dates, priorities, reminders) would help?
4. Planning: what should the plan for the coming week look like?"""


class PromptAssembler:
    """
    Builds prompts from live planning views.

    Example:
        assembler = PromptAssembler(views)
        result = await assembler.build("task_manager", {"context": "Exam week"})
    """

    def __init__(self, views: PlanningViews):
        self.views = views

    async def daily_planner(self, arguments: dict[str, str]) -> PromptResult:
        daily = await self.views.daily()
        text = f"Here is my task overview for today:\n\n{daily}\n\n{DAILY_PLANNER_REQUEST}"
        return PromptResult(
            description="Plan the day from overdue and today's tasks",
            messages=[PromptMessage(role="user", content=text)],
        )

    async def task_manager(self, arguments: dict[str, str]) -> PromptResult:
        weekly = await self.views.weekly()
        text = f"Here are my tasks for the coming week:\n\n{weekly}"
        context = (arguments.get("context") or "").strip()
        if context:
            text += f"\n\nAdditional context: {context}"
        text += f"\n\n{TASK_MANAGER_REQUEST}"
        return PromptResult(
            description="Organize and plan the week's tasks",
            messages=[PromptMessage(role="user", content=text)],
        )

    def templates(self) -> list[PromptTemplate]:
        return [
            PromptTemplate(
                name="daily_planner",
                description="Plan today using overdue tasks and today's tasks by priority",
                arguments=(),
                build=self.daily_planner,
            ),
            PromptTemplate(
                name="task_manager",
                description="Get help organizing the tasks due in the next 7 days",
                arguments=(
                    PromptArgument(
                        name="context",
                        description="Anything else the assistant should know (goals, constraints, deadlines)",
                    ),
                ),
                build=self.task_manager,
            ),
        ]

    async def build(self, name: str, arguments: dict[str, str] | None = None) -> PromptResult:
        """
        Render a prompt by name.

        Raises:
            UnknownOperationError: If no template has this name
        """
        for template in self.templates():
            if template.name == name:
                logger.debug(f"Building prompt {name}")
                return await template.build(arguments or {})
        raise UnknownOperationError(f"Unknown prompt: {name}")


__all__ = [
    "PromptArgument",
    "PromptAssembler",
    "PromptMessage",
    "PromptResult",
    "PromptTemplate",
]
