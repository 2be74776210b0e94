# src/task_keeper/tasks/task_codec.py

"""
JSON wire format for a list of tasks.

The persisted value is a UTF-8 JSON array; each element uses the field names
id, title, note, dueDate, createdDate, isComplete, completedDate.
Timestamps are ISO-8601 strings with a UTC offset.

Decoding is all-or-nothing: one bad element fails the whole blob.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from .task_models import Task, as_utc


class TaskStoreError(Exception):
    """Base class for task persistence errors."""


class EncodeError(TaskStoreError):
    """A task list could not be serialized."""


class DecodeError(TaskStoreError):
    """A stored blob could not be turned back into tasks."""


_REQUIRED_KEYS = ("id", "title", "dueDate", "createdDate")


def _ts_to_str(value: Any, name: str) -> str:
    if not isinstance(value, datetime):
        raise EncodeError(f"{name} must be a datetime, got {type(value).__name__}")
    return as_utc(value).isoformat()


def _str_to_ts(raw: Any, name: str) -> datetime:
    if not isinstance(raw, str):
        raise DecodeError(f"{name} must be an ISO-8601 string, got {type(raw).__name__}")
    try:
        value = datetime.fromisoformat(raw)
    except ValueError as e:
        raise DecodeError(f"{name} is not a valid timestamp: {raw!r}") from e
    return as_utc(value)


def task_to_dict(task: Task) -> dict[str, Any]:
    """
    Serialize one task, refusing anything task_from_dict() would reject.

    A blob that cannot be read back would empty the whole list on the next load.
    """
    if not isinstance(task.id, str) or not task.id:
        raise EncodeError("id must be a non-empty string")
    if not isinstance(task.title, str) or not task.title.strip():
        raise EncodeError(f"title must be a non-empty string (id={task.id})")
    if task.note is not None and not isinstance(task.note, str):
        raise EncodeError(f"note must be a string or None (id={task.id})")
    if not isinstance(task.is_complete, bool):
        raise EncodeError(f"is_complete must be a bool (id={task.id})")
    if task.is_complete != (task.completed_date is not None):
        raise EncodeError(f"is_complete and completed_date disagree (id={task.id})")

    return {
        "id": task.id,
        "title": task.title,
        "note": task.note,
        "dueDate": _ts_to_str(task.due_date, "due_date"),
        "createdDate": _ts_to_str(task.created_date, "created_date"),
        "isComplete": task.is_complete,
        "completedDate": (
            _ts_to_str(task.completed_date, "completed_date")
            if task.completed_date is not None
            else None
        ),
    }


def task_from_dict(item: Any) -> Task:
    if not isinstance(item, dict):
        raise DecodeError(f"task entry must be an object, got {type(item).__name__}")

    missing = [k for k in _REQUIRED_KEYS if item.get(k) is None]
    if missing:
        raise DecodeError(f"task entry is missing keys: {', '.join(missing)}")

    task_id = item["id"]
    title = item["title"]
    note = item.get("note")
    is_complete = item.get("isComplete", False)
    raw_completed = item.get("completedDate")

    if not isinstance(task_id, str) or not task_id:
        raise DecodeError("id must be a non-empty string")
    if not isinstance(title, str):
        raise DecodeError("title must be a string")
    if note is not None and not isinstance(note, str):
        raise DecodeError("note must be a string or null")
    if not isinstance(is_complete, bool):
        raise DecodeError("isComplete must be a boolean")

    completed_date = (
        _str_to_ts(raw_completed, "completedDate") if raw_completed is not None else None
    )

    try:
        return Task(
            id=task_id,
            title=title,
            note=note,
            due_date=_str_to_ts(item["dueDate"], "dueDate"),
            created_date=_str_to_ts(item["createdDate"], "createdDate"),
            is_complete=is_complete,
            completed_date=completed_date,
        )
    except ValueError as e:
        raise DecodeError(f"invalid task entry id={task_id}: {e}") from e


def encode_tasks(tasks: Iterable[Task]) -> bytes:
    try:
        payload = [task_to_dict(t) for t in tasks]
        return json.dumps(payload, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError, AttributeError) as e:
        raise EncodeError(f"failed to encode tasks: {e}") from e


def decode_tasks(data: bytes) -> list[Task]:
    try:
        raw = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise DecodeError(f"stored value is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise DecodeError(f"stored value must be a JSON array, got {type(raw).__name__}")

    return [task_from_dict(item) for item in raw]
