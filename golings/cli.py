"""The golings command line."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NoReturn

import click

from golings.catalog import (
    ExerciseNotFoundError,
    find,
    list_exercises,
    next_pending,
)
from golings.exercise import Exercise, Result, State
from golings.table import render_list
from golings.version import (
    DEFAULT_COMMIT,
    DEFAULT_DATE,
    DEFAULT_VERSION,
    build_version,
)
from golings.watcher import watch

_CATALOG_ERRORS = (LookupError, OSError, ValueError)


def _say(text: str, fg: str | None = None) -> None:
    click.secho(text, fg=fg, nl=not text.endswith("\n"))


def _fail(ctx: click.Context, message: str) -> NoReturn:
    _say(message, "red")
    ctx.exit(1)
    raise AssertionError("unreachable")


def _lookup(target: str, info_file: str) -> Exercise:
    if target == "next":
        return next_pending(info_file)
    return find(target, info_file)


def _report_failure(result: Result, *, with_hint: bool) -> None:
    _say(f"Failed to compile the exercise {result.exercise.path}\n\n", "cyan")
    _say("Check the output below: \n\n", "white")
    _say(result.err, "red")
    _say(result.out, "red")
    if with_hint:
        _say(
            "If you feel stuck, ask a hint by executing "
            f"`golings hint {result.exercise.name}`",
            "yellow",
        )


def build_cli(version: str, info_file: str = "info.toml") -> click.Group:
    """The command group, reading exercises from ``info_file``."""

    @click.group(name="golings", help="Learn go through interactive exercises")
    @click.version_option(
        version, prog_name="golings", message="%(prog)s version %(version)s"
    )
    def cli() -> None:
        pass

    @cli.command(name="hint", help="Get a hint for an exercise")
    @click.argument("exercise_name", metavar="<exercise name>")
    @click.pass_context
    def hint(ctx: click.Context, exercise_name: str) -> None:
        try:
            exercise = _lookup(exercise_name, info_file)
        except _CATALOG_ERRORS as exc:
            _fail(ctx, str(exc))
        _say(exercise.hint, "yellow")

    @cli.command(name="list", help="List all exercises")
    @click.pass_context
    def list_command(ctx: click.Context) -> None:
        try:
            exercises = list_exercises(info_file)
        except _CATALOG_ERRORS as exc:
            _fail(ctx, str(exc))
        click.echo(render_list(exercises))

    @cli.command(
        name="run",
        short_help="Run a single exercise",
        help=(
            "Run a single exercise.\n\n"
            "example next pending exercise : golings run next\n\n"
            "example specific exercise : golings run variables1"
        ),
    )
    @click.argument("target", metavar="next | <exercise name>")
    @click.pass_context
    def run(ctx: click.Context, target: str) -> None:
        try:
            exercise = _lookup(target, info_file)
        except ExerciseNotFoundError:
            _say(f"No exercise found for '{target}'", "white")
            ctx.exit(1)
            return
        except _CATALOG_ERRORS as exc:
            _fail(ctx, str(exc))

        _say(f"Running exercise: {exercise.name}", "white")
        result = exercise.run()
        _say("\nRunning complete!\n\n", "white")

        if not result.ok:
            _report_failure(result, with_hint=True)
            ctx.exit(1)
            return

        _say(f"✅ Successfully tested {exercise.path}!\n\n", "green")
        _say("Congratulations!\n\n", "green")
        _say("Here is the output of your program:\n\n", "green")
        _say(result.out, "cyan")
        if result.exercise.state() is State.PENDING:
            _say("Remove the 'I AM NOT DONE' from the file to keep going\n", "white")
            ctx.exit(1)

    @cli.command(name="verify", help="Verify all exercises")
    @click.pass_context
    def verify(ctx: click.Context) -> None:
        try:
            exercises = list_exercises(info_file)
        except _CATALOG_ERRORS as exc:
            _fail(ctx, str(exc))

        with click.progressbar(
            length=len(exercises),
            label="Running exercises",
            width=50,
            show_eta=False,
        ) as bar:
            for exercise in exercises:
                bar.label = f"Running {exercise.name}"
                result = exercise.run()
                bar.update(1)
                if result.err:
                    click.echo("\n")
                    _report_failure(result, with_hint=False)
                    ctx.exit(1)

        _say("Congratulations!!!", "green")
        _say("You passed all the exercises", "green")

    @cli.command(name="watch", help="Verify exercises when files are edited")
    @click.pass_context
    def watch_command(ctx: click.Context) -> None:
        try:
            watch(info_file)
        except OSError as exc:
            _fail(ctx, str(exc))

    return cli


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    cli = build_cli(build_version(DEFAULT_VERSION, DEFAULT_COMMIT, DEFAULT_DATE))
    try:
        outcome = cli.main(
            args=list(argv) if argv is not None else None,
            prog_name="golings",
            standalone_mode=False,
        )
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        return 1
    return outcome if isinstance(outcome, int) else 0