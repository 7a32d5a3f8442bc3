# src/todolist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controller and the notification dispatcher depend on Protocols instead of
concrete implementations, so the console host, the SQLite store and test fakes
are interchangeable.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..notifications.dispatcher import NotificationChannel, PermissionState
    from ..tasks.task_models import TaskItem

ToastSink = Callable[[str], None]
# Short, transient user-visible message shown in the same interaction.

Clock = Callable[[], int]
# Returns epoch milliseconds.


class TaskRepo(Protocol):
    def create(self, description: str, timestamp: int) -> int: ...
    def list_all(self) -> list[TaskItem]: ...
    def delete_by_id(self, task_id: int) -> int: ...
    def update_description(self, task_id: int, description: str) -> int: ...


class NotificationHost(Protocol):
    """Host-side notification service: displays (title, body, id)."""

    def create_channel(self, channel: NotificationChannel) -> None: ...
    def post(self, *, channel_id: str, title: str, body: str, notification_id: int) -> None: ...


class PermissionHost(Protocol):
    """
    Host-managed notification permission.

    The state is owned by the host; the app only checks it and asks for it.
    """

    def check(self) -> PermissionState: ...
    def request(self) -> PermissionState: ...


class Notifier(Protocol):
    def notify(self, title: str, body: str) -> int | None: ...
