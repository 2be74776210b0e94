# src/task_keeper/bootstrap.py

"""
Composition root.

- loads settings once (or takes them injected),
- ensures local (gitignored) directories exist,
- wires the configured key-value backend into a TaskStore.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import StoreBackend, get_settings
from .core.ports import KeyValueStore
from .logging_setup import setup_logging
from .storage.kv_store import FileKeyValueStore, MemoryKeyValueStore, SQLiteKeyValueStore
from .tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_key_value_store(settings) -> KeyValueStore:
    backend = StoreBackend.parse(str(getattr(settings, "store_backend", "") or ""))
    path = Path(settings.store_path)

    if backend is StoreBackend.MEMORY:
        return MemoryKeyValueStore()
    if backend is StoreBackend.FILE:
        return FileKeyValueStore(path)
    return SQLiteKeyValueStore(path)


def create_task_store(*, settings=None, configure_logging: bool = False) -> TaskStore:
    """
    Build a TaskStore from the provided settings.

    If settings is None, falls back to get_settings(). Logging is left alone
    unless configure_logging is set; host applications usually own it.
    """
    if settings is None:
        settings = get_settings()

    data_dir = Path(getattr(settings, "data_dir", ".local/task_keeper"))
    data_dir.mkdir(parents=True, exist_ok=True)

    if configure_logging:
        setup_logging(
            log_dir=data_dir,
            console_level=getattr(settings, "log_level", None),
        )

    kv = create_key_value_store(settings)
    store = TaskStore(kv, key=settings.storage_key)
    logger.info(
        "TaskStore ready backend=%s key=%s",
        type(kv).__name__,
        store.key,
    )
    return store
