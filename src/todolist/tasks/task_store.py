# src/todolist/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from pathlib import Path

from .task_models import TaskItem

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

# Returned by create() when the insert did not happen.
CREATE_FAILED = -1


class TaskStore:
    """
    SQLite task store: one table, single-statement operations.

    Schema policy:
    - PRAGMA user_version holds SCHEMA_VERSION
    - any other stored version drops and recreates the tasks table (data is lost)

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "todo_list.db") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        try:
            total = self.count()
        except sqlite3.Error:
            total = -1
        logger.info("TaskStore ready db=%s total=%s", self._db_path, total)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    @staticmethod
    def _create_table(cur: sqlite3.Cursor) -> None:
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS tasks (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                description TEXT NOT NULL,
                timestamp INTEGER NOT NULL
            )
            """
        )

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            (version,) = cur.execute("PRAGMA user_version").fetchone()
            version = int(version)

            if version not in (0, SCHEMA_VERSION):
                cur.execute("DROP TABLE IF EXISTS tasks")
                logger.warning(
                    "TaskStore schema v%s -> v%s: tasks table dropped and recreated",
                    version,
                    SCHEMA_VERSION,
                )

            self._create_table(cur)
            # PRAGMA does not accept bound parameters.
            cur.execute(f"PRAGMA user_version = {int(SCHEMA_VERSION)}")
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> TaskItem:
        return TaskItem(
            id=int(row["id"]),
            description=str(row["description"]),
            timestamp=int(row["timestamp"]),
        )

    # ---- public API ----

    def count(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)
        finally:
            conn.close()

    def create(self, description: str, timestamp: int) -> int:
        """
        Insert a task and return its new id.

        Returns CREATE_FAILED if the write fails; callers must check it.
        """
        if description is None:
            raise ValueError("description is required")

        try:
            conn = self._get_conn()
        except sqlite3.Error:
            logger.exception("TaskStore create: cannot open db=%s", self._db_path)
            return CREATE_FAILED

        try:
            cur = conn.cursor()
            cur.execute(
                "INSERT INTO tasks(description, timestamp) VALUES (?, ?)",
                (description, int(timestamp)),
            )
            conn.commit()
            rowid = cur.lastrowid
            if rowid is None:
                logger.error("SQLite did not return lastrowid for tasks insert")
                return CREATE_FAILED
            task_id = int(rowid)
            logger.debug("Task added id=%s timestamp=%s", task_id, timestamp)
            return task_id
        except sqlite3.Error:
            logger.exception("TaskStore create failed db=%s", self._db_path)
            return CREATE_FAILED
        finally:
            conn.close()

    def list_all(self) -> list[TaskItem]:
        """All tasks, newest first (timestamp DESC)."""
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT id, description, timestamp FROM tasks ORDER BY timestamp DESC")
            return [self._row_to_task(r) for r in cur.fetchall()]
        finally:
            conn.close()

    def delete_by_id(self, task_id: int) -> int:
        """Delete one task. Returns rows affected (0 when the id does not exist)."""
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("DELETE FROM tasks WHERE id = ?", (int(task_id),))
            conn.commit()
            logger.debug("Task delete id=%s rows=%s", task_id, cur.rowcount)
            return cur.rowcount
        finally:
            conn.close()

    def update_description(self, task_id: int, description: str) -> int:
        """Replace a task's description. The timestamp is left untouched."""
        if description is None:
            raise ValueError("description is required")

        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                "UPDATE tasks SET description = ? WHERE id = ?",
                (description, int(task_id)),
            )
            conn.commit()
            return cur.rowcount
        finally:
            conn.close()
