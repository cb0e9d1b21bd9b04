# tests/test_task_models.py

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from taskkeeper.tasks.errors import TaskStoreError, ValidationError
from taskkeeper.tasks.task_models import Task, TaskInput, TaskStatus


def test_status_values_are_the_wire_literals() -> None:
    assert [s.value for s in TaskStatus] == ["A Fazer", "Em Progresso", "Concluída"]
    assert TaskStatus.DONE == "Concluída"


def test_status_parse_accepts_literals_and_members() -> None:
    assert TaskStatus.parse("Em Progresso") is TaskStatus.IN_PROGRESS
    assert TaskStatus.parse(TaskStatus.DONE) is TaskStatus.DONE


@pytest.mark.parametrize("raw", ["bogus", "", "done", "a fazer", None, 1])
def test_status_parse_rejects_unknown_values(raw) -> None:
    with pytest.raises(ValidationError) as excinfo:
        TaskStatus.parse(raw)
    assert "'A Fazer', 'Em Progresso', 'Concluída'" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)
    assert isinstance(excinfo.value, TaskStoreError)


def test_task_to_dict_renders_wire_form() -> None:
    ts = datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)
    task = Task(
        id="7",
        title="Write report",
        description="quarterly",
        status=TaskStatus.IN_PROGRESS,
        created_at=ts,
        updated_at=ts,
    )
    assert task.to_dict() == {
        "id": "7",
        "title": "Write report",
        "description": "quarterly",
        "status": "Em Progresso",
        "created_at": "2024-05-01T08:30:00+00:00",
        "updated_at": "2024-05-01T08:30:00+00:00",
    }


def test_task_to_dict_omits_empty_description() -> None:
    ts = datetime(2024, 5, 1, tzinfo=timezone.utc)
    task = Task(id="1", title="t", status=TaskStatus.TODO, created_at=ts, updated_at=ts)
    assert "description" not in task.to_dict()


def test_task_input_from_mapping_keeps_known_present_fields() -> None:
    data = TaskInput.from_mapping(
        {"title": "A", "description": None, "status": "Concluída", "id": "ignored"}
    )
    assert data == TaskInput(title="A", description=None, status="Concluída")
    assert not data.is_empty()
    assert TaskInput.from_mapping({}).is_empty()


def test_task_input_from_mapping_rejects_non_strings() -> None:
    with pytest.raises(ValidationError, match="title must be a string"):
        TaskInput.from_mapping({"title": 42})
