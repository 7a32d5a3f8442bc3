# src/todolist/core/strings.py

"""User-facing texts (titles, toasts, row labels) kept in one place."""

from __future__ import annotations

CHANNEL_NAME = "Task Notifications"
CHANNEL_DESCRIPTION = "Notifications for added and deleted tasks"

TASK_ADDED_TITLE = "Task Added"
TASK_ADDED_MESSAGE = "Task '{description}' was added."
TASK_DELETED_TITLE = "Task Deleted"
TASK_DELETED_MESSAGE = "Task '{description}' was deleted."

CREATED_ON_FORMAT = "Created on: {time}"

DB_ERROR = "Error adding task to database."

PERMISSION_GRANTED = "Notification permission granted."
PERMISSION_DENIED = "Notification permission denied. You won't see task notifications."
PERMISSION_MISSING = "Notification permission not granted. Cannot show notification."
PERMISSION_PROMPT = "Allow {app_name} to send you notifications? [y/N]: "

EMPTY_LIST = "(no tasks yet - type something to add one)"


def task_added_message(description: str) -> str:
    return TASK_ADDED_MESSAGE.format(description=description)


def task_deleted_message(description: str) -> str:
    return TASK_DELETED_MESSAGE.format(description=description)


def created_on(formatted_time: str) -> str:
    return CREATED_ON_FORMAT.format(time=formatted_time)
