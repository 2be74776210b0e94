# src/task_keeper/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.ports import KeyValueStore
from .task_codec import DecodeError, EncodeError, decode_tasks, encode_tasks
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "FavoriteTasks"


class TaskStore:
    """
    Ordered task list persisted as one blob under a single key.

    Every operation reads and/or rewrites the whole collection. There is no
    locking: concurrent upserts race and the last write wins.

    Failure policy:
    - encode failure: logged, nothing written, save_all() returns False
    - decode failure: logged, load_all() returns []
    Backend I/O errors are not swallowed.
    """

    def __init__(self, kv: KeyValueStore, *, key: str = DEFAULT_STORAGE_KEY) -> None:
        if not key:
            raise ValueError("storage key is required")
        self._kv = kv
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    # ---- whole-collection API ----

    def save_all(self, tasks: Iterable[Task]) -> bool:
        tasks = list(tasks)
        try:
            data = encode_tasks(tasks)
        except EncodeError:
            logger.exception("Failed to encode %d tasks; store left unchanged.", len(tasks))
            return False

        self._kv.set(self._key, data)
        logger.debug("Saved %d tasks key=%s bytes=%d", len(tasks), self._key, len(data))
        return True

    def load_all(self) -> list[Task]:
        data = self._kv.get(self._key)
        if data is None:
            return []
        try:
            tasks = decode_tasks(data)
        except DecodeError:
            logger.exception("Failed to decode tasks key=%s; returning empty list.", self._key)
            return []
        logger.debug("Loaded %d tasks key=%s", len(tasks), self._key)
        return tasks

    # ---- single-record helpers ----

    def upsert(self, task: Task) -> bool:
        """
        Replace the stored task with the same id in place, or append it.
        Unrelated entries keep their order.
        """
        tasks = self.load_all()
        for i, existing in enumerate(tasks):
            if existing.id == task.id:
                tasks[i] = task
                logger.debug("Task updated id=%s index=%d", task.id, i)
                break
        else:
            tasks.append(task)
            logger.debug("Task added id=%s index=%d", task.id, len(tasks) - 1)
        return self.save_all(tasks)

    def get(self, task_id: str) -> Task | None:
        for task in self.load_all():
            if task.id == task_id:
                return task
        return None

    def remove(self, task_id: str) -> bool:
        tasks = self.load_all()
        kept = [t for t in tasks if t.id != task_id]
        if len(kept) == len(tasks):
            return False
        logger.debug("Task removed id=%s", task_id)
        return self.save_all(kept)

    def set_complete(self, task_id: str, complete: bool = True) -> Task | None:
        task = self.get(task_id)
        if task is None:
            return None
        task.set_complete(complete)
        self.upsert(task)
        return task
