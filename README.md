# golings

Small exercises that get you used to reading and writing Go. Each exercise is a
Go program or test file that does not compile or does not pass yet; your job is
to fix it. `golings` keeps track of which exercises are done, runs them for you
and shows their hints.

## Requirements

- Python 3.11 or later
- A Go toolchain on your `PATH` (exercises are run with `go run` or `go test`)

## Installing

```
pip install .
```

## Describing the exercises

`golings` reads the exercises from a file named `info.toml` in the directory
you run it from. Each exercise is one entry of the `exercises` array:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1/main.go"
mode = "compile"
hint = "Declare the variable before using it."
```

- `mode = "compile"` runs the exercise with `go run ./<path>`; any other mode
  runs it with `go test -v -race ./<path>`.
- The exercises are taken in the order they appear in the file.

An exercise counts as pending while its file holds a line that starts (after
optional whitespace) with `//` or `///` followed by `I AM NOT DONE`, for example

```go
// I AM NOT DONE
```

A file that cannot be read also counts as pending. Remove the marker line once
you are happy with your solution to move on.

## Commands

```
golings list              # table of every exercise: name, path and state
golings run next          # run the next pending exercise
golings run variables1    # run a given exercise
golings hint next         # hint for the next pending exercise
golings hint variables1   # hint for a given exercise
golings verify            # run every exercise in order, stop at the first failure
golings watch             # rerun the next pending exercise whenever a file changes
golings --version
```

- `run` exits with status 1 when the exercise is not found, when `go` fails, or
  when the exercise ran but its file still carries the `I AM NOT DONE` marker.
- `verify` shows a progress bar and stops, with status 1, at the first exercise
  whose run writes anything to standard error.
- `watch` first runs the next pending exercise, showing the overall progress,
  then watches the `exercises` directory under the current directory (it must
  exist) and reruns the next pending exercise whenever a file in it is written
  or renamed. While it is running, type one of these and press Enter:
  - `list` to show the exercise table
  - `hint` to show the hint for the current exercise
  - `quit` or `exit` to leave

  Watch mode also ends when standard input is closed.
- `--version` prints the version followed by the commit, build date and the
  platform's OS and architecture names.

## Using it from Python

The pieces behind the commands can be used on their own:

```python
from golings.catalog import list_exercises, find, next_pending, progress
from golings.table import render_list

exercises = list_exercises("info.toml")
print(render_list(exercises))

fraction, done, total = progress("info.toml")
exercise = find("variables1", "info.toml")   # raises ExerciseNotFoundError
pending = next_pending("info.toml")          # raises NoPendingExercisesError
result = pending.run()                       # Result with out, err, returncode, ok
print(pending.state())                       # State.PENDING or State.DONE
```

`golings.cli.main(argv)` runs the command line and returns its exit status.

## What it does not include

The package does not come with any exercises or an `info.toml`: you supply the
Go exercise files and the file that describes them.

## Running the tests

```
pip install ".[test]"
pytest
```