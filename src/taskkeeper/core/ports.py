# src/taskkeeper/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the outer layers.

Commands and connectors depend on this Protocol instead of the concrete store,
so tests can swap in a fake repo.
"""

from typing import Protocol

from ..tasks.task_models import Task, TaskInput


class TaskRepo(Protocol):
    # Reads: shared access, never raise
    def list_tasks(self) -> list[Task]: ...
    def get_task(self, task_id: str) -> Task | None: ...
    def count_tasks(self) -> int: ...

    # Writes: raise ValidationError / NotFoundError
    def add_task(self, data: TaskInput) -> Task: ...
    def update_task(self, task_id: str, data: TaskInput) -> Task: ...
    def delete_task(self, task_id: str) -> bool: ...
