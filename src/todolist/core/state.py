# src/todolist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..notifications.dispatcher import NotificationDispatcher
from ..tasks.task_controller import TaskListController
from ..tasks.task_store import TaskStore
from .ports import ToastSink


@dataclass
class AppState:
    # Settings object (real Settings or a test namespace).
    settings: object

    task_store: TaskStore
    notifications: NotificationDispatcher
    controller: TaskListController
    toast: ToastSink
