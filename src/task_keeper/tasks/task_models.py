# src/task_keeper/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Naive values are taken to be UTC; aware values are converted to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def new_task_id() -> str:
    return str(uuid.uuid4()).upper()


@dataclass(slots=True)
class Task:
    """
    A single to-do item.

    Completion is coupled to `completed_date`:
    - is_complete True  -> completed_date is set
    - is_complete False -> completed_date is None

    Treat `is_complete` and `completed_date` as read-only and change them
    through set_complete()/toggle_complete(). A task whose pair was assigned
    out of sync is refused by the codec rather than saved.

    All timestamps are held as aware UTC datetimes; naive inputs are read as UTC.
    `due_date` defaults to the creation time.
    """

    title: str
    note: str | None = None
    due_date: datetime | None = None
    created_date: datetime = field(default_factory=utc_now)
    id: str = field(default_factory=new_task_id)
    is_complete: bool = False
    completed_date: datetime | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValueError("title is required")
        if not self.id:
            raise ValueError("id must not be empty")

        self.created_date = as_utc(self.created_date)
        self.due_date = as_utc(self.due_date) if self.due_date is not None else self.created_date

        # Normalize the completion pair on construction.
        self.is_complete = bool(self.is_complete)
        if not self.is_complete:
            self.completed_date = None
        elif self.completed_date is None:
            self.completed_date = utc_now()
        else:
            self.completed_date = as_utc(self.completed_date)

    def set_complete(self, complete: bool, *, now: datetime | None = None) -> None:
        """
        Mark the task complete/incomplete.

        completed_date is stamped only on a False -> True transition and
        cleared on True -> False; repeating the current value is a no-op.
        """
        complete = bool(complete)
        if complete == self.is_complete:
            return
        self.is_complete = complete
        self.completed_date = as_utc(now or utc_now()) if complete else None

    def toggle_complete(self, *, now: datetime | None = None) -> bool:
        self.set_complete(not self.is_complete, now=now)
        return self.is_complete
