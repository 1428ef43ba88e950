import json
from urllib.parse import parse_qs

import httpx
import pytest

from todoist_mcp.todoist import TodoistAPIError, TodoistClient
from todoist_mcp.utils.config import TodoistConfig

CONFIG = TodoistConfig(
    api_token="secret-token",
    rest_url="https://todoist.test/rest/v2",
    sync_url="https://todoist.test/sync/v9",
    timeout_seconds=5.0,
)

TASK_JSON = {
    "id": "2995104339",
    "content": "Buy Milk",
    "description": "",
    "due": {"date": "2024-05-01", "string": "today", "is_recurring": False, "lang": "en"},
    "priority": 4,
    "labels": ["errands"],
    "project_id": "2203306141",
    "section_id": None,
    "parent_id": None,
    "url": "https://todoist.com/showTask?id=2995104339",
}


def make_client(handler) -> tuple[TodoistClient, list[httpx.Request]]:
    requests: list[httpx.Request] = []

    def recording(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    return TodoistClient(CONFIG, transport=httpx.MockTransport(recording)), requests


async def test_list_tasks_sends_filter_and_token():
    client, requests = make_client(lambda request: httpx.Response(200, json=[TASK_JSON]))

    tasks = await client.list_tasks(filter="today & p1", lang="en")

    request = requests[0]
    assert request.method == "GET"
    assert request.url.path == "/rest/v2/tasks"
    assert request.url.params["filter"] == "today & p1"
    assert request.url.params["lang"] == "en"
    assert request.headers["Authorization"] == "Bearer secret-token"

    (task,) = tasks
    assert task.id == "2995104339"
    assert task.due.date == "2024-05-01"
    assert task.due.string == "today"
    assert task.priority == 4
    assert task.labels == ["errands"]
    assert task.section_id is None


async def test_list_tasks_joins_ids():
    client, requests = make_client(lambda request: httpx.Response(200, json=[]))

    assert await client.list_tasks(project_id="p1", ids=["1", "2"]) == []
    assert requests[0].url.params["ids"] == "1,2"
    assert requests[0].url.params["project_id"] == "p1"
    assert "filter" not in requests[0].url.params


async def test_create_task_posts_json():
    client, requests = make_client(lambda request: httpx.Response(200, json=TASK_JSON))

    task = await client.create_task({"content": "Buy Milk", "priority": 4})

    assert requests[0].method == "POST"
    assert json.loads(requests[0].content) == {"content": "Buy Milk", "priority": 4}
    assert task.content == "Buy Milk"


async def test_update_task_falls_back_to_fetch_on_empty_response():
    def handler(request):
        if request.method == "POST":
            return httpx.Response(204)
        return httpx.Response(200, json=TASK_JSON)

    client, requests = make_client(handler)

    task = await client.update_task("2995104339", {})

    assert [r.method for r in requests] == ["POST", "GET"]
    assert requests[0].url.path == "/rest/v2/tasks/2995104339"
    assert task.id == "2995104339"


@pytest.mark.parametrize(
    "method_name, http_method, path",
    [
        ("close_task", "POST", "/rest/v2/tasks/42/close"),
        ("reopen_task", "POST", "/rest/v2/tasks/42/reopen"),
        ("delete_task", "DELETE", "/rest/v2/tasks/42"),
    ],
)
async def test_task_lifecycle_calls(method_name, http_method, path):
    client, requests = make_client(lambda request: httpx.Response(204))

    assert await getattr(client, method_name)("42") is None
    assert requests[0].method == http_method
    assert requests[0].url.path == path


async def test_list_projects():
    projects_json = [
        {"id": "1", "name": "Inbox", "is_shared": False},
        {"id": "2", "name": "Team", "is_shared": True, "color": "blue"},
    ]
    client, requests = make_client(lambda request: httpx.Response(200, json=projects_json))

    projects = await client.list_projects()

    assert requests[0].url.path == "/rest/v2/projects"
    assert [(p.name, p.is_shared) for p in projects] == [("Inbox", False), ("Team", True)]


async def test_quick_add_posts_form_to_sync_api():
    client, requests = make_client(lambda request: httpx.Response(200, json=TASK_JSON))

    task = await client.quick_add_task("Buy Milk today p1", note="2 litres", auto_reminder=True)

    request = requests[0]
    assert request.url.path == "/sync/v9/quick/add"
    form = parse_qs(request.content.decode())
    assert form == {"text": ["Buy Milk today p1"], "note": ["2 litres"], "auto_reminder": ["true"]}
    assert task.id == "2995104339"


async def test_http_error_raises_with_status_and_body():
    client, _ = make_client(lambda request: httpx.Response(400, text="Invalid filter"))

    with pytest.raises(TodoistAPIError) as excinfo:
        await client.list_tasks(filter="((")

    assert excinfo.value.status_code == 400
    assert str(excinfo.value) == "Todoist API returned 400: Invalid filter"


async def test_transport_error_raises_api_error():
    def handler(request):
        raise httpx.ConnectError("name resolution failed", request=request)

    client, _ = make_client(handler)

    with pytest.raises(TodoistAPIError, match="Request to Todoist failed"):
        await client.list_projects()
