import subprocess
from unittest import mock

import pytest

from golings.exercise import Exercise, Result, State, build_args


def _write(tmp_path, text, name="exercise1.go"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_marker_present_is_pending(tmp_path):
    path = _write(
        tmp_path,
        "// exercise1.go\n\t\t\t\t// I AM NOT DONE\n\t\t\t\tpackage main\n\n"
        "\t\t\t\tfunc main() {\n\n\t\t\t\t}\n",
    )
    ex = Exercise(path=path)
    assert ex.state() is State.PENDING
    assert str(ex.state()) == "Pending"


def test_empty_file_is_done(tmp_path):
    ex = Exercise(path=_write(tmp_path, ""))
    assert ex.state() is State.DONE
    assert str(ex.state()) == "Done"


def test_missing_file_is_pending(tmp_path):
    ex = Exercise(path=str(tmp_path / "absent.go"))
    assert ex.state() is State.PENDING


@pytest.mark.parametrize(
    "text",
    [
        "/// I AM NOT DONE\n",
        "//I AM NOT DONE\n",
        "package main\n  //  I   AM  NOT   DONE\n",
    ],
)
def test_marker_variants_are_pending(tmp_path, text):
    assert Exercise(path=_write(tmp_path, text)).state() is State.PENDING


@pytest.mark.parametrize(
    "text",
    [
        "x := 1 // I AM NOT DONE\n",
        "// I AM DONE\n",
        "/* I AM NOT DONE */\n",
    ],
)
def test_marker_not_at_line_start_is_done(tmp_path, text):
    assert Exercise(path=_write(tmp_path, text)).state() is State.DONE


def test_build_args_compile_mode():
    ex = Exercise(name="a", path="exercises/a/main.go", mode="compile")
    assert build_args(ex) == ["run", "./exercises/a/main.go"]


def test_build_args_test_mode():
    ex = Exercise(name="b", path="exercises/b", mode="test")
    assert build_args(ex) == ["test", "-v", "-race", "./exercises/b"]


def test_run_captures_output():
    ex = Exercise(name="a", path="a/main.go", mode="compile")
    completed = subprocess.CompletedProcess(
        args=[], returncode=0, stdout="hello\n", stderr=""
    )
    with mock.patch("golings.exercise.subprocess.run", return_value=completed) as run:
        result = ex.run()
    assert run.call_args.args[0] == ["go", "run", "./a/main.go"]
    assert result == Result(exercise=ex, out="hello\n", err="", returncode=0)
    assert result.ok


def test_run_failure_is_not_ok():
    ex = Exercise(name="a", path="a", mode="test")
    completed = subprocess.CompletedProcess(
        args=[], returncode=2, stdout="", stderr="syntax error"
    )
    with mock.patch("golings.exercise.subprocess.run", return_value=completed):
        result = ex.run()
    assert result.err == "syntax error"
    assert result.ok is False


def test_run_without_go_tool():
    ex = Exercise(name="a", path="a", mode="compile")
    with mock.patch(
        "golings.exercise.subprocess.run", side_effect=FileNotFoundError("go")
    ):
        result = ex.run()
    assert result.ok is False
    assert result.err == ""
    assert result.exercise == ex