# src/todolist/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..connectors.list_view import render_list, task_at
from ..core.state import AppState

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /del, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Anything else you type is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_list(state.controller.tasks)


def cmd_refresh(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if emit:
        emit(f"Reloading tasks from {state.task_store.db_path}...")
    state.controller.refresh()
    return render_list(state.controller.tasks)


def cmd_delete(state: AppState, args: list[str]) -> str:
    """
    /del <n>  -> delete row n of the list as currently shown
    """
    if len(args) != 1:
        return "Usage: /del <row number>."
    try:
        position = int(args[0])
    except ValueError:
        return f"Not a row number: {args[0]}."

    task = task_at(state.controller.tasks, position)
    if task is None:
        return f"No task at row {position}."

    logger.debug("Delete requested row=%s task_id=%s", position, task.id)
    state.controller.delete(task)
    return render_list(state.controller.tasks)


def cmd_status(state: AppState, args: list[str]) -> str:
    permission = state.notifications.permission_state()
    return (
        "Status:\n"
        f"  Database: {state.task_store.db_path}\n"
        f"  Tasks stored: {state.task_store.count()}\n"
        f"  Tasks shown: {len(state.controller)}\n"
        f"  Notification channel: {state.notifications.channel.id}\n"
        f"  Notification permission: {permission}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("refresh", cmd_refresh, help_text="Reload the task list from storage.")
registry.register(
    "del", cmd_delete, help_text="Delete a task: /del <row number>.", aliases=["rm", "delete"]
)
registry.register("status", cmd_status, help_text="Show storage and notification status.")
