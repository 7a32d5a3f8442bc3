# src/todolist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- ensures local (gitignored) directories exist,
- wires the SQLite store, the notification dispatcher and the controller into AppState,
- runs the screen start sequence (channel, initial load, permission request).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import print_toast
from ..core.ports import NotificationHost, PermissionHost, ToastSink
from ..core.state import AppState
from ..notifications.console import ConsoleNotificationService, SettingsPermissionHost
from ..notifications.dispatcher import NotificationDispatcher
from ..tasks.task_controller import TaskListController
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    settings=None,
    notification_host: NotificationHost | None = None,
    permission_host: PermissionHost | None = None,
    toast: ToastSink | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Hosts are injectable for tests; by default the console implementations are used.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    toast = toast or print_toast
    if notification_host is None:
        notification_host = ConsoleNotificationService()
    if permission_host is None:
        permission_host = SettingsPermissionHost(
            settings.notification_permission, app_name=settings.app_name
        )

    store = TaskStore(settings.db_path)
    notifications = NotificationDispatcher(
        notification_host,
        permission_host,
        toast,
        requires_channel=settings.notification_channels,
        requires_permission=settings.require_notification_permission,
        enabled=settings.notifications_enabled,
    )
    controller = TaskListController(store, notifications, toast)

    return AppState(
        settings=settings,
        task_store=store,
        notifications=notifications,
        controller=controller,
        toast=toast,
    )


def start_screen(state: AppState) -> None:
    """Screen start: create the channel, load tasks, then ask for permission."""
    state.notifications.ensure_channel()
    state.controller.refresh()
    logger.info("Loaded %d tasks.", len(state.controller))
    if getattr(state.settings, "notifications_enabled", True):
        state.notifications.request_permission()
