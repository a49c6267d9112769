"""Reading the exercise list from the info file and querying it."""

from __future__ import annotations

import os
import tomllib
from dataclasses import fields

from golings.exercise import Exercise, State

_FIELDS = {f.name for f in fields(Exercise)}


class ExerciseNotFoundError(LookupError):
    """No exercise with the requested name exists."""

    def __init__(self, message: str = "exercise not found") -> None:
        super().__init__(message)


class NoPendingExercisesError(LookupError):
    """Every exercise is already done."""

    def __init__(self, message: str = "no pending exercises") -> None:
        super().__init__(message)


def _exercise_from_table(table: object) -> Exercise:
    if not isinstance(table, dict):
        raise ValueError("each exercise must be a table")
    values: dict[str, str] = {}
    for key, value in table.items():
        field = key.lower()
        if field not in _FIELDS:
            continue
        if not isinstance(value, str):
            raise ValueError(f"exercise field {key!r} must be a string")
        values[field] = value
    return Exercise(**values)


def list_exercises(info_file: str | os.PathLike[str]) -> list[Exercise]:
    """All exercises described in the info file, in file order."""
    with open(info_file, "rb") as handle:
        data = tomllib.load(handle)
    entries = next(
        (value for key, value in data.items() if key.lower() == "exercises"), []
    )
    if not isinstance(entries, list):
        raise ValueError("'exercises' must be an array of tables")
    return [_exercise_from_table(entry) for entry in entries]


def next_pending(info_file: str | os.PathLike[str]) -> Exercise:
    """The first exercise that is still pending."""
    for exercise in list_exercises(info_file):
        if exercise.state() is State.PENDING:
            return exercise
    raise NoPendingExercisesError()


def find(name: str, info_file: str | os.PathLike[str]) -> Exercise:
    """The exercise with the given name."""
    for exercise in list_exercises(info_file):
        if exercise.name == name:
            return exercise
    raise ExerciseNotFoundError()


def progress(info_file: str | os.PathLike[str]) -> tuple[float, int, int]:
    """Fraction of exercises done, the number done and the total."""
    exercises = list_exercises(info_file)
    done = sum(1 for exercise in exercises if exercise.state() is State.DONE)
    total = len(exercises)
    fraction = done / total if total else float("nan")
    return fraction, done, total