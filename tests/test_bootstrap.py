# tests/test_bootstrap.py

from __future__ import annotations

import logging
from pathlib import Path

from taskkeeper.cli.bootstrap import create_initial_state
from taskkeeper.logging_setup import setup_logging
from taskkeeper.tasks.task_models import TaskInput
from taskkeeper.tasks.task_store import TaskStore


def test_create_initial_state_wires_a_fresh_store(settings) -> None:
    state = create_initial_state(settings=settings)
    assert isinstance(state.task_store, TaskStore)
    assert state.task_store.count_tasks() == 0
    assert state.settings is settings

    # Each call builds an isolated store.
    state.task_store.add_task(TaskInput(title="only here"))
    assert create_initial_state(settings=settings).task_store.count_tasks() == 0


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        setup_logging(log_dir=tmp_path, console_level=logging.WARNING)
        logging.getLogger("taskkeeper.test").debug("hello from test")
        for h in root.handlers:
            h.flush()
        assert "hello from test" in (tmp_path / "taskkeeper.log").read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
