"""Full-screen reports shown by the interactive watch mode."""

from __future__ import annotations

import subprocess
import sys

import click

from golings.catalog import list_exercises, next_pending, progress
from golings.exercise import Result, State
from golings.table import render_list

_CATALOG_ERRORS = (LookupError, OSError, ValueError)


def _say(text: str, fg: str | None = None, *, err: bool = False) -> None:
    """Print coloured text, adding a newline only when it lacks one."""
    click.secho(text, fg=fg, nl=not text.endswith("\n"), err=err)


def _report_failure(result: Result) -> None:
    _say(f"Failed to compile the exercise {result.exercise.path}\n\n", "cyan")
    _say("Check the output below: \n\n", "white")
    _say(result.err, "red")
    _say(result.out, "red")
    _say(
        "If you feel stuck, ask a hint by executing "
        f"`golings hint {result.exercise.name}`",
        "yellow",
    )


def clear_screen() -> None:
    """Clear the terminal with the platform's own command."""
    if sys.platform.startswith("win"):
        command = ["cmd", "/c", "cls"]
    else:
        command = ["clear"]
    try:
        completed = subprocess.run(command, check=False)
    except OSError:
        failed = True
    else:
        failed = completed.returncode != 0
    if failed:
        _say("Clear terminal command error", "red")


def show_hint(info_file: str) -> None:
    """Clear the screen and show the hint of the next pending exercise."""
    clear_screen()
    try:
        exercise = next_pending(info_file)
    except _CATALOG_ERRORS:
        _say("Failed to find next exercises", "red")
        return
    _say(exercise.hint, "yellow")


def show_list(info_file: str) -> None:
    """Clear the screen and show the table of all exercises."""
    clear_screen()
    try:
        exercises = list_exercises(info_file)
    except _CATALOG_ERRORS:
        _say("Failed to list exercises", "red")
        exercises = []
    click.echo(render_list(exercises))


def run_next_exercise(info_file: str) -> None:
    """Clear the screen, report progress and run the next pending exercise."""
    clear_screen()

    try:
        fraction, done, total = progress(info_file)
    except _CATALOG_ERRORS as exc:
        click.echo(str(exc), err=True)
    else:
        _say(f"Progress: {done}/{total} ({fraction * 100:.2f}%)\n\n", "blue")

    try:
        exercise = next_pending(info_file)
    except _CATALOG_ERRORS:
        _say("Failed to find next exercises", "red")
        return

    result = exercise.run()
    if not result.ok:
        _report_failure(result)
        return

    _say("Congratulations!\n\n", "green")
    _say("Here is the output of your program:\n\n", "green")
    _say(result.out, "cyan")
    if result.exercise.state() is State.PENDING:
        _say("Remove the 'I AM NOT DONE' from the file to keep going\n", "white")
        _say("exercise is still pending", "red")