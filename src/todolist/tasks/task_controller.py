# src/todolist/tasks/task_controller.py

from __future__ import annotations

"""
List controller.

Owns the in-memory task list that mirrors storage and mediates user actions.
All mutations go through one lock, so add/delete/refresh never interleave.
"""

import logging
import threading

from ..core import strings
from ..core.ports import Clock, Notifier, TaskRepo, ToastSink
from .task_models import AddResult, AddStatus, TaskItem, now_ms
from .task_store import CREATE_FAILED

logger = logging.getLogger(__name__)


class TaskListController:
    def __init__(
        self,
        repo: TaskRepo,
        notifier: Notifier,
        toast: ToastSink,
        *,
        clock: Clock = now_ms,
    ) -> None:
        self._repo = repo
        self._notifier = notifier
        self._toast = toast
        self._clock = clock
        self._tasks: list[TaskItem] = []
        self._lock = threading.RLock()

    @property
    def tasks(self) -> tuple[TaskItem, ...]:
        """Snapshot of the cached list, newest first."""
        with self._lock:
            return tuple(self._tasks)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def refresh(self) -> None:
        """Reload the cache verbatim from storage."""
        with self._lock:
            loaded = self._repo.list_all()
            self._tasks.clear()
            self._tasks.extend(loaded)
            logger.debug("Task list refreshed count=%d", len(self._tasks))

    def _insert_sorted(self, task: TaskItem) -> None:
        # Keep newest-first order; on a timestamp tie the new row goes first.
        for idx, existing in enumerate(self._tasks):
            if existing.timestamp <= task.timestamp:
                self._tasks.insert(idx, task)
                return
        self._tasks.append(task)

    def add(self, description: str | None) -> AddResult:
        text = (description or "").strip()
        if not text:
            return AddResult(AddStatus.REJECTED_EMPTY)

        with self._lock:
            timestamp = self._clock()
            new_id = self._repo.create(text, timestamp)
            if new_id == CREATE_FAILED:
                logger.warning("Task create failed description=%r", text)
                self._toast(strings.DB_ERROR)
                return AddResult(AddStatus.STORAGE_FAILED)

            task = TaskItem(id=new_id, description=text, timestamp=timestamp)
            self._insert_sorted(task)

        logger.info("Task added id=%s", task.id)
        self._notifier.notify(strings.TASK_ADDED_TITLE, strings.task_added_message(task.description))
        return AddResult(AddStatus.ACCEPTED, task)

    def delete(self, task: TaskItem) -> int:
        """
        Delete a task from storage and from the cache.

        Returns the number of rows storage removed (0 or 1).
        """
        with self._lock:
            removed = self._repo.delete_by_id(task.id)
            self._remove_cached(task)

        logger.info("Task deleted id=%s rows=%s", task.id, removed)
        self._notifier.notify(
            strings.TASK_DELETED_TITLE, strings.task_deleted_message(task.description)
        )
        return removed

    def _remove_cached(self, task: TaskItem) -> None:
        for idx, existing in enumerate(self._tasks):
            if existing is task:
                del self._tasks[idx]
                return
        for idx, existing in enumerate(self._tasks):
            if existing.id == task.id:
                del self._tasks[idx]
                return
