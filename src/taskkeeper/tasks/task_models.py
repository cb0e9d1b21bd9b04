# src/taskkeeper/tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from .errors import ValidationError

_INPUT_FIELDS = ("title", "description", "status")


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    The member values are the wire vocabulary. There is no transition graph:
    any status may follow any other.
    """

    TODO = "A Fazer"
    IN_PROGRESS = "Em Progresso"
    DONE = "Concluída"

    @classmethod
    def parse(cls, raw: Any) -> TaskStatus:
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except ValueError:
            allowed = ", ".join(f"'{s.value}'" for s in cls)
            raise ValidationError(f"invalid status {raw!r}: use {allowed}") from None


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form. Empty description is omitted."""
        out: dict[str, Any] = {"id": self.id, "title": self.title}
        if self.description:
            out["description"] = self.description
        out["status"] = self.status.value
        out["created_at"] = self.created_at.isoformat()
        out["updated_at"] = self.updated_at.isoformat()
        return out


@dataclass(frozen=True, slots=True)
class TaskInput:
    """
    Partial set of task fields.

    None means "absent": keep the stored value on update, use the default on create.
    """

    title: str | None = None
    description: str | None = None
    status: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TaskInput:
        values: dict[str, str | None] = {}
        for name in _INPUT_FIELDS:
            raw = data.get(name)
            if raw is None:
                continue
            if not isinstance(raw, str):
                raise ValidationError(f"{name} must be a string")
            values[name] = raw
        return cls(**values)

    def is_empty(self) -> bool:
        return self.title is None and self.description is None and self.status is None
