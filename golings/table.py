"""Rendering the exercise list as a text table."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable
from typing import TextIO

from golings.exercise import Exercise

_HEADER = ("Name", "Path", "State")


def _width(text: str) -> int:
    total = 0
    for char in text:
        if unicodedata.combining(char):
            continue
        total += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return total


def _pad(text: str, width: int) -> str:
    return text + " " * (width - _width(text))


def render_list(exercises: Iterable[Exercise]) -> str:
    """A boxed table of name, path and state for each exercise."""
    header = [title.upper() for title in _HEADER]
    rows = [[ex.name, ex.path, str(ex.state())] for ex in exercises]
    widths = [
        max(_width(cell) for cell in column) for column in zip(header, *rows)
    ]
    border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def line(cells: list[str]) -> str:
        return "|" + "|".join(f" {_pad(c, w)} " for c, w in zip(cells, widths)) + "|"

    lines = [border, line(header)]
    if rows:
        lines.append(border)
        lines.extend(line(row) for row in rows)
    lines.append(border)
    return "\n".join(lines)


def print_list(out: TextIO, exercises: Iterable[Exercise]) -> None:
    """Write the exercise table to a text stream."""
    out.write(render_list(exercises) + "\n")