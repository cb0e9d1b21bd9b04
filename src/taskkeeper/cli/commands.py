# src/taskkeeper/cli/commands.py

from __future__ import annotations

import json
import logging
import re
from collections import Counter
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.errors import TaskStoreError
from ..tasks.task_models import Task, TaskInput, TaskStatus

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)

_UPDATE_FIELD_RE = re.compile(r"\b(title|description|status)=")


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Store errors (validation, not found) come back as reply text.
        """
        if not line.startswith("/"):
            return None

        name, _, rest = line[1:].strip().partition(" ")
        if not name:
            return "Empty command. Use /help to list available commands."

        name = name.lower()
        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, rest.strip())
        except TaskStoreError as e:
            logger.debug("Command /%s rejected: %s", name, e)
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _render(task: Task) -> str:
    return json.dumps(task.to_dict(), ensure_ascii=False)


def _id_sort_key(task: Task) -> tuple[int, str]:
    # Ids are opaque; shorter-then-lexical keeps counter ids in numeric order.
    return (len(task.id), task.id)


def parse_add_args(args: str) -> TaskInput:
    """`<title> [| <description> [| <status>]]` -> TaskInput."""
    parts = [p.strip() for p in args.split("|", 2)]
    title = parts[0] if parts else ""
    description = parts[1] if len(parts) > 1 else None
    status = parts[2] if len(parts) > 2 and parts[2] else None
    return TaskInput(title=title, description=description, status=status)


def parse_update_args(args: str) -> tuple[str, TaskInput]:
    """
    `<id> field=value ...` -> (id, TaskInput).

    A value runs until the next `field=` marker, so it may contain spaces.
    """
    task_id, _, rest = args.partition(" ")
    pieces = _UPDATE_FIELD_RE.split(rest.strip())
    # pieces: [leading, field1, value1, field2, value2, ...]
    values: dict[str, str] = {}
    for field_name, value in zip(pieces[1::2], pieces[2::2]):
        values[field_name] = value.strip()
    return task_id, TaskInput.from_mapping(values)


def cmd_help(state: AppState, args: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: str) -> str:
    tasks = sorted(state.task_store.list_tasks(), key=_id_sort_key)
    if not tasks:
        return "No tasks."
    lines = [f"Tasks ({len(tasks)}):"]
    for t in tasks:
        desc = f" - {t.description}" if t.description else ""
        lines.append(f"  #{t.id} [{t.status.value}] {t.title}{desc}")
    return "\n".join(lines)


def cmd_get(state: AppState, args: str) -> str:
    if not args:
        return "Usage: /get <id>"
    task = state.task_store.get_task(args)
    if task is None:
        return f"No task with id={args}."
    return _render(task)


def cmd_add(state: AppState, args: str) -> str:
    """
    /add Buy milk
    /add Buy milk | 2 litres
    /add Buy milk | 2 litres | Em Progresso
    """
    task = state.task_store.add_task(parse_add_args(args))
    return f"Created: {_render(task)}"


def cmd_update(state: AppState, args: str) -> str:
    """
    /update 3 status=Concluída
    /update 3 title=Buy oat milk description=
    """
    task_id, data = parse_update_args(args)
    if not task_id:
        return "Usage: /update <id> title=... description=... status=..."
    task = state.task_store.update_task(task_id, data)
    return f"Updated: {_render(task)}"


def cmd_delete(state: AppState, args: str) -> str:
    if not args:
        return "Usage: /delete <id>"
    if state.task_store.delete_task(args):
        return f"Deleted task id={args}."
    return f"No task with id={args}."


def cmd_statuses(state: AppState, args: str) -> str:
    return "Allowed statuses: " + ", ".join(s.value for s in TaskStatus)


def cmd_stats(state: AppState, args: str) -> str:
    tasks = state.task_store.list_tasks()
    by_status = Counter(t.status for t in tasks)
    lines = [f"Total tasks: {len(tasks)}"]
    for s in TaskStatus:
        lines.append(f"  {s.value}: {by_status.get(s, 0)}")
    return "\n".join(lines)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="List all tasks.", aliases=["ls"])
registry.register("get", cmd_get, help_text="Show one task as JSON: /get <id>.")
registry.register(
    "add", cmd_add, help_text="Create a task: /add <title> [| <description> [| <status>]]."
)
registry.register(
    "update",
    cmd_update,
    help_text="Update fields: /update <id> title=... description=... status=...",
)
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
registry.register("statuses", cmd_statuses, help_text="List allowed status values.")
registry.register("stats", cmd_stats, help_text="Count tasks per status.")
