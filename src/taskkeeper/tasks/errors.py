# src/taskkeeper/tasks/errors.py

from __future__ import annotations


class TaskStoreError(Exception):
    """Base class for errors raised by the task store."""


class ValidationError(TaskStoreError, ValueError):
    """Input rejected: missing title or unknown status."""


class NotFoundError(TaskStoreError, LookupError):
    def __init__(self, task_id: str) -> None:
        super().__init__(f"task not found: {task_id}")
        self.task_id = task_id
