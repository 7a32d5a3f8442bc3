# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from todolist.notifications.dispatcher import NotificationChannel, PermissionState
from todolist.tasks.task_store import CREATE_FAILED


@dataclass(slots=True)
class PostedNotification:
    channel_id: str
    title: str
    body: str
    notification_id: int


@dataclass(slots=True)
class FakeNotificationHost:
    """Records channels and posted notifications instead of showing them."""

    channels: list[NotificationChannel] = field(default_factory=list)
    posted: list[PostedNotification] = field(default_factory=list)
    fail: bool = False

    def create_channel(self, channel: NotificationChannel) -> None:
        if channel not in self.channels:
            self.channels.append(channel)

    def post(self, *, channel_id: str, title: str, body: str, notification_id: int) -> None:
        if self.fail:
            raise OSError("notification service unavailable")
        self.posted.append(PostedNotification(channel_id, title, body, notification_id))


@dataclass(slots=True)
class FakePermissionHost:
    """Permission host with a scripted answer for request()."""

    state: PermissionState = PermissionState.GRANTED
    answer: PermissionState = PermissionState.GRANTED
    requests: int = 0

    def check(self) -> PermissionState:
        return self.state

    def request(self) -> PermissionState:
        self.requests += 1
        self.state = self.answer
        return self.state


class ToastRecorder:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, text: str) -> None:
        self.messages.append(text)


class StepClock:
    """Deterministic clock: start, start+step, start+2*step, ... (epoch ms)."""

    def __init__(self, start: int = 1_700_000_000_000, step: int = 1000) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> int:
        value = self.now
        self.now += self.step
        return value


class FailingCreateRepo:
    """Wraps a real store but reports every insert as failed."""

    def __init__(self, inner) -> None:
        self._inner = inner

    def create(self, description: str, timestamp: int) -> int:
        return CREATE_FAILED

    def list_all(self):
        return self._inner.list_all()

    def delete_by_id(self, task_id: int) -> int:
        return self._inner.delete_by_id(task_id)

    def update_description(self, task_id: int, description: str) -> int:
        return self._inner.update_description(task_id, description)
