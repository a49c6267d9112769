"""Exercises, their completion state and how they are run."""

from __future__ import annotations

import enum
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path

# A line that still carries the marker, optionally after "//" or "///".
_NOT_DONE = re.compile(
    rb"^[\t\n\f\r ]*///?[\t\n\f\r ]*I[\t\n\f\r ]+AM[\t\n\f\r ]+NOT[\t\n\f\r ]+DONE",
    re.MULTILINE,
)


class State(enum.Enum):
    """Whether an exercise is still to be solved."""

    PENDING = 1
    DONE = 2

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Exercise:
    """One exercise as described in the info file."""

    name: str = ""
    path: str = ""
    mode: str = ""
    hint: str = ""

    def state(self) -> State:
        """Pending while the file is unreadable or still holds the marker."""
        try:
            data = Path(self.path).read_bytes()
        except OSError:
            return State.PENDING
        return State.PENDING if _NOT_DONE.search(data) else State.DONE

    def run(self) -> Result:
        """Compile or test the exercise with the go tool and capture its output."""
        try:
            completed = subprocess.run(
                ["go", *build_args(self)],
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError:
            return Result(exercise=self, out="", err="", returncode=None)
        return Result(
            exercise=self,
            out=completed.stdout,
            err=completed.stderr,
            returncode=completed.returncode,
        )


@dataclass(frozen=True)
class Result:
    """Output of one run of an exercise."""

    exercise: Exercise
    out: str = ""
    err: str = ""
    returncode: int | None = 0

    @property
    def ok(self) -> bool:
        """True when the go tool ran and exited successfully."""
        return self.returncode == 0


def build_args(exercise: Exercise) -> list[str]:
    """Arguments for the go tool: run for compile mode, race-enabled tests otherwise."""
    if exercise.mode == "compile":
        args = ["run"]
    else:
        args = ["test", "-v", "-race"]
    args.append(f"./{exercise.path}")
    return args