"""Toolkit-independent logic behind the task list and the task form."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from taskdesk.status import FORM_ORDER, TaskStatus
from taskdesk.store import Task, TaskStore

NEW_TASK_TITLE = "Nova Tarefa"
EDIT_TASK_TITLE = "Editar Tarefa"


class ValidationError(ValueError):
    """The data entered in a form cannot be saved."""


class NoSelectionError(LookupError):
    """An action needs a selected row and none is selected."""


@dataclass(frozen=True)
class TaskDraft:
    """The values of a task as entered in the form."""

    title: str
    description: str
    due_date: date | None
    status: TaskStatus


class TaskListController:
    """Holds the rows shown in the task list and performs actions on them."""

    def __init__(self, store: TaskStore) -> None:
        self._store = store
        self._tasks: list[Task] = []
        self.reload()

    @property
    def tasks(self) -> list[Task]:
        """The rows currently shown, in display order."""
        return list(self._tasks)

    def reload(self) -> None:
        """Show every task."""
        self._tasks = self._store.list_tasks()

    def set_status_filter(self, status: TaskStatus | None) -> None:
        """Show only tasks with the given status; None shows every task."""
        self._tasks = self._store.filter_by_status(status)

    def set_search(self, text: str) -> None:
        """Show tasks in which any column contains text; empty text shows all."""
        self._tasks = self._store.search(text)

    def task_id_at(self, row: int | None) -> int:
        """Return the id of the task in the given row."""
        if row is None or not 0 <= row < len(self._tasks):
            raise NoSelectionError("no task selected")
        return self._tasks[row].id

    def delete_at(self, row: int | None) -> None:
        """Delete the task in the given row and show every task again."""
        self._store.delete_task(self.task_id_at(row))
        self.reload()

    def complete_at(self, row: int | None) -> None:
        """Mark the task in the given row as completed and show every task again."""
        self._store.complete_task(self.task_id_at(row))
        self.reload()


class TaskFormController:
    """Loads and saves the task edited in a form; task_id None means a new task."""

    def __init__(self, store: TaskStore, task_id: int | None = None) -> None:
        self._store = store
        self._task_id = task_id
        self._task = None if task_id is None else store.get_task(task_id)

    @property
    def is_new(self) -> bool:
        """True when the form creates a task rather than editing one."""
        return self._task_id is None

    @property
    def task_id(self) -> int | None:
        """Id of the edited task, or of the created one after it was saved."""
        return self._task_id

    @property
    def window_title(self) -> str:
        """Title of the form window."""
        return NEW_TASK_TITLE if self.is_new else EDIT_TASK_TITLE

    def initial_draft(self) -> TaskDraft:
        """Values the form starts with."""
        if self._task is None:
            return TaskDraft(
                title="",
                description="",
                due_date=date.today(),
                status=FORM_ORDER[0],
            )
        return TaskDraft(
            title=self._task.title,
            description=self._task.description,
            due_date=self._task.due_date,
            status=self._task.status,
        )

    def save(self, draft: TaskDraft) -> int:
        """Store the draft and return the task id."""
        if not draft.title:
            raise ValidationError('O campo "Título" não pode ficar em branco')
        if self._task_id is None:
            self._task_id = self._store.add_task(
                draft.title, draft.description, draft.due_date, draft.status
            )
            return self._task_id
        self._store.update_task(
            self._task_id, draft.title, draft.description, draft.due_date, draft.status
        )
        return self._task_id