"""Tkinter windows for the task list and the task form."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Callable

from taskdesk.controllers import (
    NoSelectionError,
    TaskDraft,
    TaskFormController,
    TaskListController,
    ValidationError,
)
from taskdesk.status import ALL_LABEL, FILTER_ORDER, FORM_ORDER, status_from_label
from taskdesk.store import TaskNotFoundError, TaskStore, TaskStoreError

NEW_DATE_PATTERN = "dd/MM/yyyy"
EDIT_DATE_PATTERN = "dd-MM-yyyy"

_TOKENS = re.compile(r"yyyy|MM|dd|.", re.S)
_TOKEN_CODES = {"yyyy": "%Y", "MM": "%m", "dd": "%d", "%": "%%"}

_HEADINGS = (
    ("id", "ID"),
    ("title", "Título"),
    ("description", "Descrição"),
    ("due_date", "Data Limite"),
    ("status", "Status"),
)


def _strftime_pattern(pattern: str) -> str:
    return "".join(_TOKEN_CODES.get(token, token) for token in _TOKENS.findall(pattern))


def format_display_date(value: date | None, pattern: str) -> str:
    """Format a date with a pattern such as 'dd/MM/yyyy'; None gives ''."""
    if value is None:
        return ""
    return value.strftime(_strftime_pattern(pattern))


def parse_display_date(text: str, pattern: str) -> date:
    """Parse text written with a pattern such as 'dd/MM/yyyy'; raise ValueError if invalid."""
    return datetime.strptime(text.strip(), _strftime_pattern(pattern)).date()


class MainWindow:
    """The task list with its search box, status filter and action buttons."""

    def __init__(self, master, store: TaskStore) -> None:
        import tkinter as tk
        from tkinter import ttk

        self._master = master
        self._store = store
        self._controller = TaskListController(store)
        self._form: TaskFormWindow | None = None

        master.title("Gerenciador de Tarefas")
        self.frame = ttk.Frame(master, padding=6)
        self.frame.pack(fill="both", expand=True)

        menu = ttk.Frame(self.frame)
        menu.pack(side="left", fill="y", padx=(0, 6))

        ttk.Label(menu, text="Buscar...").pack(fill="x")
        self._search_var = tk.StringVar()
        ttk.Entry(menu, textvariable=self._search_var).pack(fill="x", pady=2)
        self._search_var.trace_add("write", lambda *_: self._on_search())

        self._filter = ttk.Combobox(
            menu,
            values=[ALL_LABEL, *(status.label for status in FILTER_ORDER)],
            state="readonly",
        )
        self._filter.current(0)
        self._filter.bind("<<ComboboxSelected>>", lambda _event: self._on_filter())
        self._filter.pack(fill="x", pady=2)

        for text, command in (
            ("Nova Tarefa", self._new_task),
            ("Editar Tarefa", self._edit_task),
            ("Completar Tarefa", self._complete_task),
            ("Excluir Tarefa", self._delete_task),
        ):
            ttk.Button(menu, text=text, command=command).pack(fill="x", pady=2)

        self._tree = ttk.Treeview(
            self.frame,
            columns=[key for key, _ in _HEADINGS],
            show="headings",
            selectmode="browse",
        )
        for key, heading in _HEADINGS:
            self._tree.heading(key, text=heading)
            stretch = key in ("title", "description")
            self._tree.column(key, stretch=stretch, width=200 if stretch else 90)
        self._tree.pack(side="left", fill="both", expand=True)

        self.refresh()

    def refresh(self) -> None:
        """Reload every task from the store and redraw the list."""
        try:
            self._controller.reload()
        except TaskStoreError as exc:
            self._error("ERRO", f"Falha ao carregar tarefas:\n{exc}")
            return
        self._populate()

    def _populate(self) -> None:
        self._tree.delete(*self._tree.get_children())
        for index, task in enumerate(self._controller.tasks):
            self._tree.insert(
                "",
                "end",
                iid=str(index),
                values=(
                    task.id,
                    task.title,
                    task.description,
                    task.due_date.isoformat() if task.due_date else "",
                    task.status.value,
                ),
            )

    def _selected_row(self) -> int | None:
        selection = self._tree.selection()
        return int(selection[0]) if selection else None

    def _info(self, title: str, message: str) -> None:
        from tkinter import messagebox

        messagebox.showinfo(title, message, parent=self._master)

    def _error(self, title: str, message: str) -> None:
        from tkinter import messagebox

        messagebox.showerror(title, message, parent=self._master)

    def _ask(self, title: str, message: str) -> bool:
        from tkinter import messagebox

        return messagebox.askyesno(title, message, parent=self._master)

    def _on_search(self) -> None:
        try:
            self._controller.set_search(self._search_var.get())
        except TaskStoreError as exc:
            self._error("ERRO", f"Falha ao buscar dados:\n{exc}")
            self._master.destroy()
            return
        self._populate()

    def _on_filter(self) -> None:
        label = self._filter.get()
        status = None if label == ALL_LABEL else status_from_label(label)
        try:
            self._controller.set_status_filter(status)
        except TaskStoreError as exc:
            self._error("ERRO", f"Falha ao filtrar tarefas:\n{exc}")
            return
        self._populate()

    def _open_form(self, task_id: int | None) -> None:
        if self._form is not None:
            return
        form = TaskFormWindow(self._master, self._store, task_id, self._form_closed)
        if form.is_open:
            self._form = form

    def _form_closed(self) -> None:
        self._form = None
        self.refresh()

    def _new_task(self) -> None:
        self._open_form(None)

    def _edit_task(self) -> None:
        try:
            task_id = self._controller.task_id_at(self._selected_row())
        except NoSelectionError:
            self._info("Atenção", "Selecione uma linha para editar.")
            return
        self._open_form(task_id)

    def _delete_task(self) -> None:
        row = self._selected_row()
        try:
            self._controller.task_id_at(row)
        except NoSelectionError:
            self._info("Atenção", "Selecione uma tarefa para excluir.")
            return
        if not self._ask("Excluir Tarefa", "Tem certeza que deseja excluir esta tarefa ?"):
            return
        try:
            self._controller.delete_at(row)
        except TaskStoreError as exc:
            self._error("ERRO", f"Erro ao excluir tarefa:\n{exc}")
            return
        self._info("SUCESSO", "Tarefa excluida com sucesso.")
        self._populate()

    def _complete_task(self) -> None:
        row = self._selected_row()
        try:
            self._controller.task_id_at(row)
        except NoSelectionError:
            self._info("Atenção", "Selecione uma tarefa para mudar o status.")
            return
        if not self._ask("Atenção", 'Deseja alterar status da tarefa para "Concluida" ?'):
            return
        try:
            self._controller.complete_at(row)
        except TaskStoreError as exc:
            self._error("ERRO", f"Erro ao alterar status da tarefa:\n{exc}")
            return
        self._info("Sucesso", "Tarefa concluida com sucesso.")
        self._populate()


class TaskFormWindow:
    """A window to create a task (task_id None) or edit an existing one."""

    def __init__(
        self,
        master,
        store: TaskStore,
        task_id: int | None = None,
        on_close: Callable[[], None] | None = None,
    ) -> None:
        import tkinter as tk
        from tkinter import messagebox, ttk

        self._on_close = on_close
        self.is_open = True
        try:
            self._controller = TaskFormController(store, task_id)
        except (TaskNotFoundError, TaskStoreError):
            messagebox.showerror("ERROR", "TAREFA NÃO ENCONTRADA", parent=master)
            self.is_open = False
            if on_close is not None:
                on_close()
            return

        draft = self._controller.initial_draft()
        self._pattern = NEW_DATE_PATTERN if self._controller.is_new else EDIT_DATE_PATTERN

        self.window = tk.Toplevel(master)
        self.window.title(self._controller.window_title)
        self.window.protocol("WM_DELETE_WINDOW", self.close)

        form = ttk.Frame(self.window, padding=6)
        form.pack(fill="both", expand=True)

        ttk.Label(form, text="Título").grid(row=0, column=0, sticky="w")
        self._title_var = tk.StringVar(value=draft.title)
        title_entry = ttk.Entry(form, textvariable=self._title_var)
        title_entry.grid(row=0, column=1, columnspan=3, sticky="ew", pady=2)

        ttk.Label(form, text="Descrição").grid(row=1, column=0, sticky="nw")
        self._description = tk.Text(form, width=40, height=6, wrap="word")
        self._description.insert("1.0", draft.description)
        self._description.grid(row=1, column=1, columnspan=3, sticky="nsew", pady=2)

        ttk.Label(form, text="Data Limite").grid(row=2, column=0, sticky="w")
        self._date_var = tk.StringVar(value=format_display_date(draft.due_date, self._pattern))
        ttk.Entry(form, textvariable=self._date_var, width=12).grid(
            row=2, column=1, sticky="w", pady=2
        )
        ttk.Label(form, text="Status").grid(row=2, column=2, sticky="e", padx=4)
        self._status = ttk.Combobox(
            form, values=[status.label for status in FORM_ORDER], state="readonly"
        )
        self._status.set(draft.status.label)
        self._status.grid(row=2, column=3, sticky="ew", pady=2)

        buttons = ttk.Frame(form)
        buttons.grid(row=3, column=0, columnspan=4, sticky="e", pady=(6, 0))
        ttk.Button(buttons, text="Salvar", command=self._save).pack(side="left", padx=2)
        ttk.Button(buttons, text="Cancelar", command=self.close).pack(side="left", padx=2)

        form.columnconfigure(1, weight=1)
        form.columnconfigure(3, weight=1)
        form.rowconfigure(1, weight=1)
        title_entry.focus_set()

    def close(self) -> None:
        """Close the window and notify the owner."""
        if not self.is_open:
            return
        self.is_open = False
        self.window.destroy()
        if self._on_close is not None:
            self._on_close()

    def _save(self) -> None:
        from tkinter import messagebox

        try:
            due_date = parse_display_date(self._date_var.get(), self._pattern)
        except ValueError:
            messagebox.showerror(
                "Erro", f"Data inválida, use o formato {self._pattern}", parent=self.window
            )
            return
        draft = TaskDraft(
            title=self._title_var.get(),
            description=self._description.get("1.0", "end-1c"),
            due_date=due_date,
            status=status_from_label(self._status.get()),
        )
        is_new = self._controller.is_new
        try:
            self._controller.save(draft)
        except ValidationError as exc:
            messagebox.showinfo("Atenção", str(exc), parent=self.window)
            return
        except TaskStoreError as exc:
            prefix = "Erro ao adicionar tarefa" if is_new else "Falha ao Atualizar Tarefa"
            messagebox.showerror("ERRO", f"{prefix}:\n{exc}", parent=self.window)
            return
        if is_new:
            messagebox.showinfo("Sucesso", "Tarefa adicionada com sucesso.", parent=self.window)
        else:
            messagebox.showinfo("SUCESSO", "Tarefa Atualizada", parent=self.window)
        self.close()