# src/todolist/tasks/task_models.py

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def now_ms() -> int:
    """Current wall-clock time in milliseconds since epoch."""
    return int(time.time() * 1000)


def format_timestamp(timestamp_ms: int) -> str:
    """Format epoch milliseconds as local 'yyyy-MM-dd HH:mm:ss'."""
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime(TIMESTAMP_FORMAT)


@dataclass(slots=True, eq=False)
class TaskItem:
    """
    One to-do item.

    Equality is identity: two rows with the same description are still
    different tasks, and the controller removes cached rows by identity.
    """

    id: int
    description: str
    timestamp: int

    def display(self) -> str:
        return f"{self.description} ({format_timestamp(self.timestamp)})"

    def __str__(self) -> str:
        return self.display()


class AddStatus(StrEnum):
    ACCEPTED = "accepted"
    REJECTED_EMPTY = "rejected_empty"
    STORAGE_FAILED = "storage_failed"


@dataclass(slots=True, frozen=True)
class AddResult:
    status: AddStatus
    task: TaskItem | None = None

    @property
    def accepted(self) -> bool:
        return self.status is AddStatus.ACCEPTED
