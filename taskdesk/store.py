"""SQLite storage of tasks."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from datetime import date, datetime
from os import PathLike
from typing import Iterable

from taskdesk.status import TaskStatus, status_from_db

_DATE_FORMAT = "%Y-%m-%d"
_COLUMNS = "id, title, description, due_date, status"


class TaskStoreError(Exception):
    """A database operation on the task store failed."""


class TaskNotFoundError(TaskStoreError, LookupError):
    """No task has the requested id."""


@dataclass(frozen=True)
class Task:
    """One row of the tasks table."""

    id: int
    title: str
    description: str
    due_date: date | None
    status: TaskStatus


def _format_date(value: date | None) -> str | None:
    return None if value is None else value.strftime(_DATE_FORMAT)


def _parse_date(text: str | None) -> date | None:
    if not text:
        return None
    try:
        return datetime.strptime(text, _DATE_FORMAT).date()
    except ValueError:
        return None


def _row_to_task(row: tuple) -> Task:
    task_id, title, description, due_date, status = row
    return Task(
        id=int(task_id),
        title=title,
        description=description or "",
        due_date=_parse_date(due_date),
        status=status_from_db(status or ""),
    )


class TaskStore:
    """Tasks kept in an SQLite connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._conn = connection

    def __enter__(self) -> TaskStore:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _execute(self, sql: str, params: Iterable = ()) -> sqlite3.Cursor:
        try:
            with self._conn:
                return self._conn.execute(sql, tuple(params))
        except sqlite3.Error as exc:
            raise TaskStoreError(str(exc)) from exc

    def _select(self, sql: str, params: Iterable = ()) -> list[Task]:
        try:
            rows = self._conn.execute(sql, tuple(params)).fetchall()
        except sqlite3.Error as exc:
            raise TaskStoreError(str(exc)) from exc
        return [_row_to_task(row) for row in rows]

    def create_table(self) -> None:
        """Create the tasks table if it does not exist."""
        self._execute(
            "CREATE TABLE IF NOT EXISTS tasks (id INTEGER PRIMARY KEY AUTOINCREMENT, "
            "title TEXT NOT NULL, description TEXT, due_date TEXT, status TEXT NOT NULL)"
        )

    def add_task(
        self,
        title: str,
        description: str,
        due_date: date | None,
        status: TaskStatus,
    ) -> int:
        """Insert a task and return its id. An empty description is stored as NULL."""
        cursor = self._execute(
            "INSERT INTO tasks(title, description, due_date, status) VALUES (?, ?, ?, ?)",
            (title, description or None, _format_date(due_date), status.value),
        )
        return int(cursor.lastrowid)

    def get_task(self, task_id: int) -> Task:
        """Return the task with the given id."""
        tasks = self._select(f"SELECT {_COLUMNS} FROM tasks WHERE id = ?", (task_id,))
        if not tasks:
            raise TaskNotFoundError(f"task {task_id} not found")
        return tasks[0]

    def update_task(
        self,
        task_id: int,
        title: str,
        description: str,
        due_date: date | None,
        status: TaskStatus,
    ) -> None:
        """Overwrite every field of a task."""
        self._execute(
            "UPDATE tasks SET title = ?, description = ?, due_date = ?, status = ? WHERE id = ?",
            (title, description or None, _format_date(due_date), status.value, task_id),
        )

    def delete_task(self, task_id: int) -> None:
        """Remove a task."""
        self._execute("DELETE FROM tasks WHERE id = ?", (task_id,))

    def complete_task(self, task_id: int) -> None:
        """Mark a task as completed."""
        self._execute(
            "UPDATE tasks SET status = ? WHERE id = ?",
            (TaskStatus.COMPLETED.value, task_id),
        )

    def list_tasks(self) -> list[Task]:
        """Return every task."""
        return self._select(f"SELECT {_COLUMNS} FROM tasks ORDER BY id")

    def filter_by_status(self, status: TaskStatus | None) -> list[Task]:
        """Return the tasks with the given status; None returns every task."""
        if status is None:
            return self.list_tasks()
        return self._select(
            f"SELECT {_COLUMNS} FROM tasks WHERE status = ? ORDER BY id",
            (status.value,),
        )

    def search(self, text: str) -> list[Task]:
        """Return the tasks in which any column contains the text; empty text returns all."""
        if not text:
            return self.list_tasks()
        pattern = f"%{text}%"
        return self._select(
            f"SELECT {_COLUMNS} FROM tasks WHERE id LIKE ? OR title LIKE ? "
            "OR description LIKE ? OR due_date LIKE ? OR status LIKE ? ORDER BY id",
            (pattern,) * 5,
        )

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()


def open_store(path: str | PathLike) -> TaskStore:
    """Open the database at path, creating the tasks table if needed."""
    try:
        connection = sqlite3.connect(path)
    except sqlite3.Error as exc:
        raise TaskStoreError(str(exc)) from exc
    store = TaskStore(connection)
    try:
        store.create_table()
    except TaskStoreError:
        store.close()
        raise
    return store