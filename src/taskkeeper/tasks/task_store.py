# src/taskkeeper/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from .errors import NotFoundError, ValidationError
from .rwlock import ReadWriteLock
from .task_models import Task, TaskInput, TaskStatus

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _require_title(title: str | None) -> str:
    if not title:
        raise ValidationError("title is required")
    return title


class TaskStore:
    """
    In-memory task store.

    Records are frozen `Task` values keyed by id. An update builds a new value
    and swaps it into the mapping, so a task handed to a caller never changes
    underneath them.

    Ids come from a counter that only grows: "1", "2", ... and are never reused,
    even after delete.

    Thread-safety:
    - one ReadWriteLock guards the mapping and the counter
    - list/get/count take it shared, add/update/delete take it exclusive
    """

    def __init__(self, *, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or _utc_now
        self._lock = ReadWriteLock()
        self._tasks: dict[str, Task] = {}
        self._last_id = 0
        logger.info("TaskStore ready (in-memory)")

    # ---- low-level helpers ----

    def _next_id(self) -> str:
        # caller holds the write lock
        self._last_id += 1
        return str(self._last_id)

    @staticmethod
    def _copy(task: Task) -> Task:
        return replace(task)

    @staticmethod
    def _changes_for(data: TaskInput) -> dict[str, Any]:
        """
        Validate every present field of an update before anything is applied.

        Raises ValidationError on the first bad field; nothing is written in that case.
        """
        changes: dict[str, Any] = {}
        if data.title is not None:
            changes["title"] = _require_title(data.title)
        if data.description is not None:
            changes["description"] = data.description
        if data.status is not None:
            changes["status"] = TaskStatus.parse(data.status)
        return changes

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._lock.read():
            return len(self._tasks)

    def list_tasks(self) -> list[Task]:
        """Snapshot of all tasks. Order is not guaranteed."""
        with self._lock.read():
            return [self._copy(t) for t in self._tasks.values()]

    def get_task(self, task_id: str) -> Task | None:
        with self._lock.read():
            task = self._tasks.get(task_id)
            return self._copy(task) if task is not None else None

    def add_task(self, data: TaskInput) -> Task:
        title = _require_title(data.title)
        # Empty status on create means "use the default".
        status = TaskStatus.parse(data.status) if data.status else TaskStatus.TODO
        description = data.description or ""

        with self._lock.write():
            now = self._clock()
            task = Task(
                id=self._next_id(),
                title=title,
                description=description,
                status=status,
                created_at=now,
                updated_at=now,
            )
            self._tasks[task.id] = task

        logger.debug("Task added id=%s status=%s", task.id, task.status.value)
        return self._copy(task)

    def update_task(self, task_id: str, data: TaskInput) -> Task:
        """
        Overwrite the present fields of `data` on task `task_id`.

        All-or-nothing: if any present field is invalid the stored task is left
        untouched. updated_at is refreshed on every successful call, even when
        `data` carries no fields.
        """
        with self._lock.write():
            existing = self._tasks.get(task_id)
            if existing is None:
                raise NotFoundError(task_id)

            changes = self._changes_for(data)
            updated_at = max(self._clock(), existing.created_at)
            task = replace(existing, **changes, updated_at=updated_at)
            self._tasks[task_id] = task

        logger.debug(
            "Task updated id=%s fields=%s status=%s",
            task_id,
            ",".join(sorted(changes)) or "-",
            task.status.value,
        )
        return self._copy(task)

    def delete_task(self, task_id: str) -> bool:
        with self._lock.write():
            removed = self._tasks.pop(task_id, None)

        if removed is None:
            return False
        logger.debug("Task deleted id=%s", task_id)
        return True
