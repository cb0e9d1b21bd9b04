# src/taskkeeper/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so commands can read them (app name, etc).
    settings: Any
    task_store: TaskRepo
