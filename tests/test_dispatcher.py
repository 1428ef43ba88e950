import pytest

from todoist_mcp.planning import DAILY_URI, WEEKLY_URI
from todoist_mcp.registry import OperationRegistry
from todoist_mcp.todoist import TodoistAPIError
from todoist_mcp.tools import MCPTool, ToolResult
from todoist_mcp.tools.arguments import GetProjectsArgs

TOOL_NAMES = [
    "create_task",
    "get_tasks",
    "get_tasks_by_filter",
    "update_task",
    "close_task",
    "reopen_task",
    "delete_task",
    "quick_add_task",
    "get_projects",
]


def test_registry_declares_every_operation(dispatcher):
    assert [tool.name for tool in dispatcher.list_tools()] == TOOL_NAMES
    assert [resource.uri for resource in dispatcher.list_resources()] == [DAILY_URI, WEEKLY_URI]
    assert all(resource.mime_type == "text/markdown" for resource in dispatcher.list_resources())
    assert [prompt.name for prompt in dispatcher.list_prompts()] == ["daily_planner", "task_manager"]


def test_prompt_arguments_are_declared(registry):
    assert registry.get_prompt("daily_planner").arguments == ()
    (context,) = registry.get_prompt("task_manager").arguments
    assert context.name == "context"
    assert not context.required


def test_tool_schemas_are_objects(dispatcher):
    for tool in dispatcher.list_tools():
        assert tool.input_schema["type"] == "object"


def test_priority_schema_is_constrained(registry):
    schema = registry.get_tool("create_task").input_schema
    priority = schema["properties"]["priority"]["anyOf"][0]

    assert priority["enum"] == [1, 2, 3, 4]


def test_duplicate_registration_is_rejected():
    async def _noop(args):
        return ""

    registry = OperationRegistry()
    tool = MCPTool(name="get_projects", description="", arguments=GetProjectsArgs, execute=_noop)
    registry.register_tool(tool)

    with pytest.raises(ValueError):
        registry.register_tool(tool)


@pytest.mark.parametrize("name", ["", "todoist_get_tasks", "drop_everything"])
async def test_unknown_tool_yields_error_envelope(dispatcher, name):
    result = await dispatcher.call_tool(name, {})

    assert result.is_error
    assert result.text == f"Error: Unknown tool: {name}"


async def test_invalid_arguments_yield_error_envelope(dispatcher, fake_client):
    result = await dispatcher.call_tool("get_tasks_by_filter", {"filter": ""})

    assert result.is_error
    assert result.text.startswith("Error: Invalid arguments for get_tasks_by_filter: filter:")
    assert fake_client.calls == []


async def test_remote_failure_message_is_passed_through(dispatcher, fake_client):
    fake_client.failures["close_task"] = TodoistAPIError("Todoist API returned 404: Task not found", status_code=404)

    result = await dispatcher.call_tool("close_task", {"task_id": "missing"})

    assert result.is_error
    assert result.text == "Error: Todoist API returned 404: Task not found"
    assert result.to_dict()["isError"] is True


async def test_unexpected_handler_error_is_contained(dispatcher, fake_client):
    fake_client.failures["list_projects"] = RuntimeError("connection reset")

    result = await dispatcher.call_tool("get_projects", {})

    assert result.is_error
    assert result.text == "Error: connection reset"


async def test_one_handler_invocation_per_call(dispatcher, fake_client):
    fake_client.failures["delete_task"] = TodoistAPIError("rate limited", status_code=429)

    await dispatcher.call_tool("delete_task", {"task_id": "1"})

    assert [name for name, _ in fake_client.calls] == ["delete_task"]


async def test_read_resource_renders_document(dispatcher):
    result = await dispatcher.read_resource(DAILY_URI)

    assert not result.is_error
    assert result.text.startswith("# Daily Plan for Wednesday, May 01, 2024")


async def test_unknown_resource_yields_error_envelope(dispatcher, fake_client):
    result = await dispatcher.read_resource("todoist://planning/monthly")

    assert result.is_error
    assert result.text == "Error: Unknown resource: todoist://planning/monthly"
    assert fake_client.calls == []


async def test_unknown_prompt_yields_error_envelope(dispatcher, fake_client):
    result = await dispatcher.get_prompt("standup", {})

    assert isinstance(result, ToolResult)
    assert result.is_error
    assert result.text == "Error: Unknown prompt: standup"
    assert fake_client.calls == []


@pytest.mark.parametrize("uri, failing_filter", [(DAILY_URI, "overdue"), (WEEKLY_URI, "7 days")])
async def test_failed_view_query_is_contained(dispatcher, fake_client, uri, failing_filter):
    fake_client.failures[failing_filter] = TodoistAPIError("Todoist API returned 503: Service Unavailable")

    result = await dispatcher.read_resource(uri)

    assert result.is_error
    assert result.text == "Error: Todoist API returned 503: Service Unavailable"


async def test_unexpected_view_error_is_contained(dispatcher, fake_client):
    fake_client.failures["today"] = RuntimeError("boom")

    result = await dispatcher.read_resource(DAILY_URI)

    assert result.is_error
    assert result.text == "Error: boom"
