"""Task status values as stored in the database and as shown to the user."""

from __future__ import annotations

from enum import Enum

ALL_LABEL = "Todas"


class TaskStatus(Enum):
    """Status of a task; the value is the text stored in the database."""

    PENDING = "pendente"
    COMPLETED = "concluida"
    IN_PROGRESS = "em_andamento"

    @property
    def label(self) -> str:
        """Human-readable name of the status."""
        return _LABELS[self]


_LABELS = {
    TaskStatus.PENDING: "Pendente",
    TaskStatus.COMPLETED: "Concluída",
    TaskStatus.IN_PROGRESS: "Em andamento",
}

# Order of the choices in the task form.
FORM_ORDER = (TaskStatus.PENDING, TaskStatus.COMPLETED, TaskStatus.IN_PROGRESS)

# Order of the choices in the list filter (after the "all" entry).
FILTER_ORDER = (TaskStatus.PENDING, TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED)


def status_from_db(value: str) -> TaskStatus:
    """Map a stored status text to a status.

    Text that is neither pending nor completed is taken as in progress.
    """
    if value == TaskStatus.PENDING.value:
        return TaskStatus.PENDING
    if value == TaskStatus.COMPLETED.value:
        return TaskStatus.COMPLETED
    return TaskStatus.IN_PROGRESS


def status_from_label(label: str) -> TaskStatus:
    """Map a displayed label back to its status; raise ValueError if unknown."""
    for status, text in _LABELS.items():
        if text == label:
            return status
    raise ValueError(f"unknown status label: {label!r}")