# src/todolist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from .list_view import render_list

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")

Reader = Callable[[str], str]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


def print_toast(text: str) -> None:
    _print_ts(f"[TOAST] {text}")


def handle_line(state: AppState, line: str) -> str | None:
    """
    Process one input line: a slash command or a new task.

    Returns the text to show, or None when nothing changed on screen
    (empty input is ignored without feedback).
    """
    cmd_response = command_registry.handle(state, line, emit=_print_ts)
    if cmd_response is not None:
        return cmd_response

    result = state.controller.add(line)
    if not result.accepted:
        return None
    return render_list(state.controller.tasks)


def run_console_loop(state: AppState, *, reader: Reader = input) -> None:
    logger.info("Console screen started.")
    _print_ts("[CONSOLE] Type a task and press Enter to add it. Use /help for commands, /exit to quit.\n")
    print(render_list(state.controller.tasks), flush=True)

    while True:
        try:
            user_input = reader(">>> New task: ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        try:
            response = handle_line(state, user_input)
        except Exception:
            logger.exception("Console handler crashed.")
            response = "Internal error while handling input."

        if response is not None:
            print(response, flush=True)

    logger.info("Console screen finished.")
