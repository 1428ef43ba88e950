"""
Todoist API Client
==================

Async client for the Todoist REST API (tasks and projects) and the Sync
API's quick-add endpoint.

API Notes:
- Uses httpx for async HTTP requests
- Authenticates with a personal API token as a bearer token
- Any HTTP status >= 400, and any transport failure, raises
  TodoistAPIError with a human-readable message
- There is no retry; a failed call fails the enclosing operation

The client only holds configuration. Each request opens its own
httpx.AsyncClient, so one instance can be shared by concurrent requests.
"""

from typing import Any

import httpx

from todoist_mcp.todoist.models import Project, Task
from todoist_mcp.utils.config import TodoistConfig
from todoist_mcp.utils.logger import Logger

logger = Logger("TodoistClient")


class TodoistAPIError(Exception):
    """
    A failed call to the Todoist API.

    Attributes:
        message: Human-readable description, shown to the agent verbatim
        status_code: HTTP status when the server answered, else None
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class TodoistClient:
    """
    Thin async wrapper over the Todoist HTTP APIs.

    Example:
        client = TodoistClient(config.todoist)

        tasks = await client.list_tasks(filter="today")
        task = await client.create_task({"content": "Buy milk", "priority": 4})
        await client.close_task(task.id)
    """

    def __init__(
        self,
        config: TodoistConfig,
        transport: httpx.AsyncBaseTransport | None = None
    ):
        """
        Initialize the client.

        Args:
            config: Token, base URLs and timeout
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.config = config
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_token}",
            "Accept": "application/json",
        }

    async def _request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None
    ) -> Any:
        """
        Make an authenticated request.

        Returns:
            Decoded JSON body, or None for empty responses (204)

        Raises:
            TodoistAPIError: On transport failure or HTTP status >= 400
        """
        logger.debug(f"{method} {url}", {"params": params} if params else None)

        try:
            async with httpx.AsyncClient(
                headers=self._headers(),
                timeout=self.config.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.request(method, url, params=params, json=json, data=data)
        except httpx.HTTPError as e:
            raise TodoistAPIError(f"Request to Todoist failed: {e}") from e

        if response.status_code >= 400:
            detail = response.text.strip() or response.reason_phrase
            raise TodoistAPIError(
                f"Todoist API returned {response.status_code}: {detail}",
                status_code=response.status_code,
            )

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # ==========================================================================
    # Tasks
    # ==========================================================================

    async def list_tasks(
        self,
        filter: str | None = None,
        lang: str | None = None,
        project_id: str | None = None,
        section_id: str | None = None,
        label: str | None = None,
        ids: list[str] | None = None
    ) -> list[Task]:
        """
        List active tasks.

        Args:
            filter: Filter expression in Todoist's query grammar, sent verbatim
            lang: Language of the filter expression
            project_id: Only tasks in this project
            section_id: Only tasks in this section
            label: Only tasks carrying this label
            ids: Only these task ids
        """
        params: dict[str, Any] = {}
        if filter is not None:
            params["filter"] = filter
        if lang is not None:
            params["lang"] = lang
        if project_id is not None:
            params["project_id"] = project_id
        if section_id is not None:
            params["section_id"] = section_id
        if label is not None:
            params["label"] = label
        if ids:
            params["ids"] = ",".join(ids)

        result = await self._request("GET", f"{self.config.rest_url}/tasks", params=params)
        return [Task.from_api(item) for item in result or []]

    async def create_task(self, fields: dict[str, Any]) -> Task:
        """Create a task. `fields` uses the REST API's snake_case names."""
        result = await self._request("POST", f"{self.config.rest_url}/tasks", json=fields)
        return Task.from_api(result)

    async def update_task(self, task_id: str, fields: dict[str, Any]) -> Task:
        """
        Update a task and return its new state.

        An empty `fields` dict is a valid request that leaves the task as is.
        """
        url = f"{self.config.rest_url}/tasks/{task_id}"
        result = await self._request("POST", url, json=fields)
        if result is None:
            # Some API versions answer 204; fetch the task instead
            result = await self._request("GET", url)
        return Task.from_api(result)

    async def close_task(self, task_id: str) -> None:
        await self._request("POST", f"{self.config.rest_url}/tasks/{task_id}/close")

    async def reopen_task(self, task_id: str) -> None:
        await self._request("POST", f"{self.config.rest_url}/tasks/{task_id}/reopen")

    async def delete_task(self, task_id: str) -> None:
        await self._request("DELETE", f"{self.config.rest_url}/tasks/{task_id}")

    async def quick_add_task(
        self,
        text: str,
        note: str | None = None,
        reminder: str | None = None,
        auto_reminder: bool | None = None
    ) -> Task:
        """
        Add a task from natural-language text ("Pay rent tomorrow p1 #Home").

        Uses the Sync API's quick add endpoint, which parses dates, projects,
        labels and priority out of the text.
        """
        data: dict[str, Any] = {"text": text}
        if note is not None:
            data["note"] = note
        if reminder is not None:
            data["reminder"] = reminder
        if auto_reminder is not None:
            data["auto_reminder"] = "true" if auto_reminder else "false"

        result = await self._request("POST", f"{self.config.sync_url}/quick/add", data=data)
        return Task.from_api(result)

    # ==========================================================================
    # Projects
    # ==========================================================================

    async def list_projects(self) -> list[Project]:
        result = await self._request("GET", f"{self.config.rest_url}/projects")
        return [Project.from_api(item) for item in result or []]
