"""Command that opens the task database and starts the task manager window."""

from __future__ import annotations

import argparse
import sys
from os import PathLike
from pathlib import Path

from taskdesk.store import TaskStore, TaskStoreError, open_store

DATABASE_NAME = "tasks.db"


def open_database(directory: str | PathLike = "db") -> TaskStore:
    """Create directory if needed and open the task database inside it."""
    folder = Path(directory)
    try:
        folder.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise TaskStoreError(str(exc)) from exc
    return open_store(folder / DATABASE_NAME)


def main(argv: list[str] | None = None) -> int:
    """Run the task manager; return the process exit status."""
    parser = argparse.ArgumentParser(prog="taskdesk", description="Gerenciador de tarefas")
    parser.add_argument(
        "--db-dir",
        default="db",
        help="directory that holds the task database (default: db)",
    )
    args = parser.parse_args(argv)

    try:
        store = open_database(args.db_dir)
    except TaskStoreError as exc:
        print(f"Erro ao abrir banco de dados\n{exc}", file=sys.stderr)
        return 1

    with store:
        import tkinter as tk

        from taskdesk.gui import MainWindow

        root = tk.Tk()
        MainWindow(root, store)
        root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())