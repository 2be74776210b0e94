# tests/conftest.py

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_keeper.storage.kv_store import MemoryKeyValueStore
from task_keeper.tasks.task_models import Task
from task_keeper.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment / .env.
    """
    return SimpleNamespace(
        app_name="task_keeper-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        store_backend="sqlite",
        store_path=tmp_path / "data" / "tasks.sqlite3",
        storage_key="FavoriteTasks",
    )


@pytest.fixture()
def kv() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture()
def store(kv: MemoryKeyValueStore) -> TaskStore:
    return TaskStore(kv)


@pytest.fixture()
def make_task():
    """Factory for tasks with fixed, timezone-aware timestamps."""
    base = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)

    def _make(title: str, **kwargs) -> Task:
        kwargs.setdefault("created_date", base)
        return Task(title=title, **kwargs)

    return _make


@pytest.fixture()
def restore_root_logging():
    """Put root logger handlers back after tests that call setup_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)
