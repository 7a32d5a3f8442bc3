# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todolist.cli.bootstrap import create_initial_state
from todolist.core.state import AppState
from todolist.notifications.dispatcher import NotificationDispatcher
from todolist.tasks.task_controller import TaskListController
from todolist.tasks.task_store import TaskStore

from .fakes import FakeNotificationHost, FakePermissionHost, StepClock, ToastRecorder


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todolist-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        db_path=tmp_path / "data" / "todo_list.db",
        notifications_enabled=True,
        notification_permission="granted",
        require_notification_permission=True,
        notification_channels=True,
    )


@pytest.fixture()
def store(tmp_path: Path) -> TaskStore:
    return TaskStore(tmp_path / "todo_list.db")


@pytest.fixture()
def host() -> FakeNotificationHost:
    return FakeNotificationHost()


@pytest.fixture()
def permissions() -> FakePermissionHost:
    return FakePermissionHost()


@pytest.fixture()
def toasts() -> ToastRecorder:
    return ToastRecorder()


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture()
def dispatcher(host, permissions, toasts) -> NotificationDispatcher:
    return NotificationDispatcher(host, permissions, toasts)


@pytest.fixture()
def controller(store, dispatcher, toasts, clock) -> TaskListController:
    return TaskListController(store, dispatcher, toasts, clock=clock)


@pytest.fixture()
def state(settings, host, permissions, toasts) -> AppState:
    """
    AppState wired through the real composition root with fake hosts.

    NOTE: the SQLite store is real because its behavior is part of what we test.
    """
    return create_initial_state(
        settings=settings,
        notification_host=host,
        permission_host=permissions,
        toast=toasts,
    )
