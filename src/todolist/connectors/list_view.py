# src/todolist/connectors/list_view.py

"""
List adapter for the console screen.

Each task becomes one row: a numbered title line and a "Created on" line.
The row number is the row's delete control (/del <n>).
"""

from __future__ import annotations

from collections.abc import Sequence

from ..core import strings
from ..tasks.task_models import TaskItem, format_timestamp


def render_row(position: int, task: TaskItem) -> list[str]:
    return [
        f"{position:>3}. {task.description}",
        f"     {strings.created_on(format_timestamp(task.timestamp))}",
    ]


def render_list(tasks: Sequence[TaskItem]) -> str:
    if not tasks:
        return strings.EMPTY_LIST
    lines: list[str] = []
    for position, task in enumerate(tasks, start=1):
        lines.extend(render_row(position, task))
    return "\n".join(lines)


def task_at(tasks: Sequence[TaskItem], position: int) -> TaskItem | None:
    """Resolve a 1-based row number to its task (None if out of range)."""
    if position < 1 or position > len(tasks):
        return None
    return tasks[position - 1]
