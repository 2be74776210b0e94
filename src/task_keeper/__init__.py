"""Task records persisted as one blob in a key-value store."""

from .tasks.task_codec import DecodeError, EncodeError, TaskStoreError
from .tasks.task_models import Task
from .tasks.task_store import DEFAULT_STORAGE_KEY, TaskStore

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "DecodeError",
    "EncodeError",
    "Task",
    "TaskStore",
    "TaskStoreError",
]
