import pytest
from pydantic import ValidationError

from todoist_mcp.tools.arguments import (
    MAX_FILTER_LENGTH,
    CloseTaskArgs,
    CreateTaskArgs,
    GetTasksByFilterArgs,
    UpdateTaskArgs,
)


def test_filter_length_bounds():
    GetTasksByFilterArgs.model_validate({"filter": "x"})
    GetTasksByFilterArgs.model_validate({"filter": "x" * MAX_FILTER_LENGTH})

    with pytest.raises(ValidationError):
        GetTasksByFilterArgs.model_validate({"filter": ""})
    with pytest.raises(ValidationError):
        GetTasksByFilterArgs.model_validate({"filter": "x" * (MAX_FILTER_LENGTH + 1)})


@pytest.mark.parametrize("priority", [0, 5, -1])
def test_priority_outside_scale_is_rejected(priority):
    with pytest.raises(ValidationError):
        CreateTaskArgs.model_validate({"content": "Task", "priority": priority})


def test_task_id_must_be_non_empty():
    with pytest.raises(ValidationError):
        CloseTaskArgs.model_validate({"task_id": ""})
    with pytest.raises(ValidationError):
        CloseTaskArgs.model_validate({})


def test_unknown_arguments_are_rejected():
    with pytest.raises(ValidationError):
        CloseTaskArgs.model_validate({"task_id": "1", "force": True})


def test_create_task_maps_camel_case_to_remote_names():
    args = CreateTaskArgs.model_validate({
        "content": "Call mom",
        "projectId": "p1",
        "dueString": "tomorrow",
        "priority": 4,
    })

    assert args.remote_fields() == {
        "content": "Call mom",
        "project_id": "p1",
        "due_string": "tomorrow",
        "priority": 4,
    }


def test_update_fields_exclude_task_id_and_unset_fields():
    args = UpdateTaskArgs.model_validate({"task_id": "X", "dueDate": "2024-05-03"})

    assert args.task_id == "X"
    assert args.update_fields() == {"due_date": "2024-05-03"}


def test_update_with_only_task_id_has_no_fields():
    assert UpdateTaskArgs.model_validate({"task_id": "X"}).update_fields() == {}


def test_input_schema_uses_agent_facing_names():
    schema = CreateTaskArgs.model_json_schema(by_alias=True)

    assert "projectId" in schema["properties"]
    assert "project_id" not in schema["properties"]
    assert schema["required"] == ["content"]


def test_filter_schema_declares_length_limits():
    schema = GetTasksByFilterArgs.model_json_schema(by_alias=True)

    assert schema["properties"]["filter"]["minLength"] == 1
    assert schema["properties"]["filter"]["maxLength"] == MAX_FILTER_LENGTH
