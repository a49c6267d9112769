"""Watch mode: rerun the next exercise whenever an exercise file changes."""

from __future__ import annotations

import errno
import os
import sys
import threading
from collections.abc import Callable
from pathlib import Path

import click
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from golings.screens import run_next_exercise, show_hint, show_list


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, on_change: Callable[[str], None]) -> None:
        super().__init__()
        self._on_change = on_change

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._on_change(os.fsdecode(event.src_path))

    def on_moved(self, event: FileSystemEvent) -> None:
        self._on_change(os.fsdecode(event.src_path))


def watch_events(
    on_change: Callable[[str], None], root: str | os.PathLike[str] | None = None
):
    """Start watching a directory tree and return the running observer.

    ``on_change`` receives the path of every written or renamed entry.
    The tree defaults to ``exercises`` under the current directory.
    """
    directory = Path(root) if root is not None else Path.cwd() / "exercises"
    if not directory.is_dir():
        raise FileNotFoundError(errno.ENOENT, "no such directory", str(directory))
    observer = Observer()
    observer.schedule(_ChangeHandler(on_change), str(directory), recursive=True)
    observer.start()
    return observer


def handle_command(command: str, info_file: str) -> bool:
    """Act on one typed command; False means the user asked to leave."""
    if command == "list":
        show_list(info_file)
    elif command == "hint":
        show_hint(info_file)
    elif command in ("quit", "exit"):
        click.secho("Bye by golings o/", fg="green")
        return False
    else:
        click.secho("only list or hint commands are available", fg="yellow")
    return True


def watch(info_file: str) -> None:
    """Run the next exercise, then rerun it on every change until told to quit."""
    lock = threading.Lock()

    def rerun(_path: str) -> None:
        with lock:
            run_next_exercise(info_file)

    with lock:
        run_next_exercise(info_file)

    observer = watch_events(rerun)
    try:
        for line in sys.stdin:
            with lock:
                if not handle_command(line.removesuffix("\n"), info_file):
                    return
        click.echo("EOF", err=True)
    finally:
        observer.stop()
        observer.join()