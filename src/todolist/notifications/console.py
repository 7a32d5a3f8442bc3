# src/todolist/notifications/console.py

"""Terminal implementations of the notification host and the permission host."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..core import strings
from .dispatcher import NotificationChannel, PermissionState

logger = logging.getLogger(__name__)

Printer = Callable[[str], None]
Prompt = Callable[[str], str]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


class ConsoleNotificationService:
    """Shows notifications as highlighted lines in the terminal."""

    def __init__(self, printer: Printer = print) -> None:
        self._printer = printer
        self._channels: dict[str, NotificationChannel] = {}

    @property
    def channels(self) -> dict[str, NotificationChannel]:
        return dict(self._channels)

    def create_channel(self, channel: NotificationChannel) -> None:
        if channel.id in self._channels:
            return
        self._channels[channel.id] = channel
        logger.debug("Channel created id=%s name=%s", channel.id, channel.name)

    def post(self, *, channel_id: str, title: str, body: str, notification_id: int) -> None:
        channel = self._channels.get(channel_id)
        if channel is None:
            logger.warning("Posting to unknown channel id=%s", channel_id)
        self._printer(f"[{_ts_local()}] [NOTIFY #{notification_id}] {title}: {body}")


class SettingsPermissionHost:
    """
    Permission state held for the session.

    Modes:
    - "granted" / "denied": fixed answer, request() does not prompt
    - "ask": NOT_REQUESTED until request() asks the user once
    """

    def __init__(self, mode: str = "ask", *, app_name: str = "todolist", prompt: Prompt = input) -> None:
        self._app_name = app_name
        self._prompt = prompt
        self._asked = False
        if mode == "granted":
            self._state = PermissionState.GRANTED
        elif mode == "denied":
            self._state = PermissionState.DENIED
        else:
            self._state = PermissionState.NOT_REQUESTED

    def check(self) -> PermissionState:
        return self._state

    def request(self) -> PermissionState:
        if self._state is not PermissionState.NOT_REQUESTED or self._asked:
            return self._state

        self._asked = True
        try:
            answer = self._prompt(strings.PERMISSION_PROMPT.format(app_name=self._app_name))
        except (EOFError, KeyboardInterrupt):
            answer = ""

        granted = answer.strip().lower() in {"y", "yes"}
        self._state = PermissionState.GRANTED if granted else PermissionState.DENIED
        return self._state
