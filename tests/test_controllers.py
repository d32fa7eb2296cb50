import sqlite3
from datetime import date

import pytest

from taskdesk.controllers import (
    NoSelectionError,
    TaskDraft,
    TaskFormController,
    TaskListController,
    ValidationError,
)
from taskdesk.status import TaskStatus
from taskdesk.store import TaskNotFoundError, TaskStore


@pytest.fixture
def store():
    task_store = TaskStore(sqlite3.connect(":memory:"))
    task_store.create_table()
    yield task_store
    task_store.close()


@pytest.fixture
def filled(store):
    store.add_task("Comprar pão", "padaria", date(2024, 1, 2), TaskStatus.PENDING)
    store.add_task("Relatório", "", date(2024, 2, 3), TaskStatus.IN_PROGRESS)
    store.add_task("Pagar conta", "luz", None, TaskStatus.COMPLETED)
    return store


def test_reload_lists_all_in_id_order(filled):
    controller = TaskListController(filled)
    titles = [task.title for task in controller.tasks]
    assert titles == ["Comprar pão", "Relatório", "Pagar conta"]


def test_status_filter(filled):
    controller = TaskListController(filled)
    controller.set_status_filter(TaskStatus.IN_PROGRESS)
    assert [task.title for task in controller.tasks] == ["Relatório"]
    controller.set_status_filter(None)
    assert len(controller.tasks) == 3


def test_search_matches_any_column(filled):
    controller = TaskListController(filled)
    controller.set_search("luz")
    assert [task.title for task in controller.tasks] == ["Pagar conta"]
    controller.set_search("")
    assert len(controller.tasks) == 3


@pytest.mark.parametrize("row", [None, -1, 3])
def test_task_id_at_without_selection(filled, row):
    controller = TaskListController(filled)
    with pytest.raises(NoSelectionError):
        controller.task_id_at(row)


def test_task_id_at_follows_rows(filled):
    controller = TaskListController(filled)
    controller.set_status_filter(TaskStatus.COMPLETED)
    assert controller.task_id_at(0) == filled.filter_by_status(TaskStatus.COMPLETED)[0].id


def test_delete_at_removes_and_reloads(filled):
    controller = TaskListController(filled)
    controller.set_status_filter(TaskStatus.PENDING)
    removed = controller.task_id_at(0)
    controller.delete_at(0)
    assert removed not in [task.id for task in controller.tasks]
    assert len(controller.tasks) == 2


def test_delete_at_without_selection_keeps_rows(filled):
    controller = TaskListController(filled)
    with pytest.raises(NoSelectionError):
        controller.delete_at(None)
    assert len(filled.list_tasks()) == 3


def test_complete_at(filled):
    controller = TaskListController(filled)
    task_id = controller.task_id_at(1)
    controller.complete_at(1)
    assert filled.get_task(task_id).status is TaskStatus.COMPLETED


def test_new_form_initial_draft(store):
    form = TaskFormController(store, None)
    draft = form.initial_draft()
    assert form.is_new
    assert draft.title == ""
    assert draft.status is TaskStatus.PENDING
    assert draft.due_date == date.today()


def test_new_form_save_inserts(store):
    form = TaskFormController(store, None)
    draft = TaskDraft("Estudar", "capítulo 3", date(2024, 5, 6), TaskStatus.IN_PROGRESS)
    task_id = form.save(draft)
    task = store.get_task(task_id)
    assert (task.title, task.description, task.due_date, task.status) == (
        draft.title,
        draft.description,
        draft.due_date,
        draft.status,
    )
    assert form.task_id == task_id


def test_save_rejects_empty_title(store):
    form = TaskFormController(store, None)
    with pytest.raises(ValidationError):
        form.save(TaskDraft("", "x", date(2024, 1, 1), TaskStatus.PENDING))
    assert store.list_tasks() == []


def test_edit_form_loads_and_updates(filled):
    task = filled.list_tasks()[0]
    form = TaskFormController(filled, task.id)
    assert not form.is_new
    assert form.window_title == "Editar Tarefa"
    draft = form.initial_draft()
    assert (draft.title, draft.description, draft.due_date, draft.status) == (
        task.title,
        task.description,
        task.due_date,
        task.status,
    )
    changed = TaskDraft("Novo título", "", draft.due_date, TaskStatus.COMPLETED)
    assert form.save(changed) == task.id
    updated = filled.get_task(task.id)
    assert updated.title == "Novo título"
    assert updated.description == ""
    assert updated.status is TaskStatus.COMPLETED
    assert len(filled.list_tasks()) == 3


def test_edit_form_missing_task(store):
    with pytest.raises(TaskNotFoundError):
        TaskFormController(store, 42)