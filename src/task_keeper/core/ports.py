# src/task_keeper/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task layer.

TaskStore depends on a KeyValueStore Protocol instead of a concrete backend,
so storage stays swappable (SQLite, files, in-memory for tests).
"""

from typing import Protocol


class KeyValueStore(Protocol):
    """Opaque durable blob store addressed by string keys."""

    def get(self, key: str) -> bytes | None: ...
    def set(self, key: str, value: bytes) -> None: ...
    def delete(self, key: str) -> None: ...
