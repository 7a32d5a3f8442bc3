# src/todolist/notifications/dispatcher.py

from __future__ import annotations

"""
Notification dispatcher.

Fire-and-forget local notifications for add/delete events:
- creates the notification channel (idempotent, safe on every startup),
- gates each post on the host permission when the host requires one,
- gives every notification a strictly increasing id so they stack in the tray.
"""

import itertools
import logging
import threading
from dataclasses import dataclass
from enum import StrEnum

from ..core import strings
from ..core.ports import NotificationHost, PermissionHost, ToastSink

logger = logging.getLogger(__name__)

DEFAULT_CHANNEL_ID = "task_notification_channel"


class PermissionState(StrEnum):
    GRANTED = "granted"
    DENIED = "denied"
    NOT_REQUESTED = "not_requested"


class Importance(StrEnum):
    LOW = "low"
    DEFAULT = "default"
    HIGH = "high"


@dataclass(slots=True, frozen=True)
class NotificationChannel:
    id: str = DEFAULT_CHANNEL_ID
    name: str = strings.CHANNEL_NAME
    description: str = strings.CHANNEL_DESCRIPTION
    importance: Importance = Importance.DEFAULT


class NotificationDispatcher:
    def __init__(
        self,
        host: NotificationHost,
        permissions: PermissionHost,
        toast: ToastSink,
        *,
        channel: NotificationChannel | None = None,
        requires_channel: bool = True,
        requires_permission: bool = True,
        enabled: bool = True,
    ) -> None:
        self._host = host
        self._permissions = permissions
        self._toast = toast
        self._channel = channel or NotificationChannel()
        self._requires_channel = requires_channel
        self._requires_permission = requires_permission
        self._enabled = enabled
        self._ids = itertools.count()
        self._ids_lock = threading.Lock()

    @property
    def channel(self) -> NotificationChannel:
        return self._channel

    def ensure_channel(self) -> None:
        if not self._requires_channel:
            return
        self._host.create_channel(self._channel)
        logger.debug("Notification channel ensured id=%s", self._channel.id)

    def permission_state(self) -> PermissionState:
        if not self._requires_permission:
            return PermissionState.GRANTED
        return self._permissions.check()

    def request_permission(self) -> PermissionState:
        """
        Ask the host for permission if it is required and not yet granted.

        Shows a toast with the outcome of an actual request.
        """
        if not self._requires_permission:
            return PermissionState.GRANTED

        state = self._permissions.check()
        if state is PermissionState.GRANTED:
            return state

        state = self._permissions.request()
        if state is PermissionState.GRANTED:
            self._toast(strings.PERMISSION_GRANTED)
        else:
            self._toast(strings.PERMISSION_DENIED)
        logger.info("Notification permission request result=%s", state)
        return state

    def _next_id(self) -> int:
        with self._ids_lock:
            return next(self._ids)

    def notify(self, title: str, body: str) -> int | None:
        """
        Post a notification. Returns its id, or None when it was skipped.

        No retry and no delivery confirmation.
        """
        if not self._enabled:
            logger.debug("Notifications disabled; skipped title=%r", title)
            return None

        if self.permission_state() is not PermissionState.GRANTED:
            self._toast(strings.PERMISSION_MISSING)
            logger.info("Notification skipped (no permission) title=%r", title)
            return None

        notification_id = self._next_id()
        try:
            self._host.post(
                channel_id=self._channel.id,
                title=title,
                body=body,
                notification_id=notification_id,
            )
        except Exception:
            logger.exception("Notification post failed id=%s", notification_id)
            return None

        logger.debug("Notification posted id=%s title=%r", notification_id, title)
        return notification_id
