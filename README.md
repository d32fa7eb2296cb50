# taskdesk

taskdesk is a small desktop task manager. Each task has a title, an optional
description, a due date and a status: pending (`Pendente`), in progress
(`Em andamento`) or completed (`Concluída`). Tasks are kept in a local SQLite
database. The window's text is in Brazilian Portuguese.

## Installing

```
pip install .
```

The window uses Tkinter, which comes with most Python installations. The
package has no other dependencies.

## Running

```
taskdesk
```

The program creates the directory `db` in the current directory if it is
missing, opens or creates `db/tasks.db` in it, and shows the main window. Use
`--db-dir` to keep the database in another directory:

```
taskdesk --db-dir ~/tasks
```

If the database cannot be opened, the program prints an error and exits with
status 1.

From the main window you can:

- type in the search box to show only the tasks in which any column contains
  the text;
- pick a status in the filter to show only tasks with that status, or `Todas`
  for all of them;
- add a new task, or edit the task in the selected row. Only one form is open
  at a time, and the title must not be empty. A new task's date is written
  `dd/MM/yyyy`, and an edited task's date is written `dd-MM-yyyy`;
- mark the selected task as completed, after you confirm;
- delete the selected task, after you confirm.

## Using the store from Python

The storage layer in `taskdesk.store` can be used without the window:

```python
from datetime import date

from taskdesk.status import TaskStatus
from taskdesk.store import open_store

with open_store("tasks.db") as store:
    task_id = store.add_task("Write report", "", date(2024, 5, 10), TaskStatus.PENDING)
    store.complete_task(task_id)
    for task in store.search("report"):
        print(task.id, task.title, task.due_date, task.status.label)
```

`TaskStore` also has `get_task`, `update_task`, `delete_task`, `list_tasks`
and `filter_by_status` (where `None` returns every task). Tasks come back as
`Task` objects, ordered by id. An empty description is stored as NULL and read
back as `""`.

Store operations raise `TaskStoreError` when they fail. Looking up a task that
does not exist raises `TaskNotFoundError`.

`taskdesk.controllers` holds the logic behind the two windows, without any
Tkinter code: `TaskListController` keeps the rows on display and deletes or
completes a row, and `TaskFormController` loads a task into a `TaskDraft` and
saves it. Saving a draft with an empty title raises `ValidationError`, and
acting on a row that does not exist raises `NoSelectionError`.

## What it does not do

There is no command-line way to add, edit or list tasks; the `taskdesk`
command only opens the window. Tasks have no reminders, priorities or
recurrence, and the database is local to one machine.

## Running the tests

```
pip install .[test]
pytest
```