# rustlings

A command-line tool for working through small Rust exercises. It compiles
each exercise with `rustc`, runs the program or its tests, and shows you
where to carry on. The package also holds worked Python solutions of the
exercise topics.

## Installation

```
pip install .
```

`rustc` must be on your `PATH`; every command except `--version` checks for
it and exits with status 1 if it cannot be started. Exercises in clippy mode
also need `cargo` with Clippy installed.

## What you need to provide

The package does not ship the Rust exercise files themselves. Run the tool
from a directory that holds:

- `info.toml`, with an `[[exercises]]` entry per exercise giving its `name`,
  `path`, `mode` (`compile`, `test` or `clippy`) and `hint`;
- the exercise files those paths point to (watch mode watches `./exercises`);
- `default_out.txt`, which is printed when no command is given.

Without `info.toml` in the current directory the tool prints a message and
exits with status 1.

## Usage

```
rustlings                 # print the banner and default_out.txt
rustlings verify          # check every exercise in order, stop at the first unfinished one
rustlings watch           # verify, then re-verify whenever a .rs file under ./exercises changes
rustlings run NAME        # compile and run (or test) a single exercise
rustlings run next        # run the first exercise that is not done yet
rustlings hint NAME       # print the hint for an exercise
rustlings list            # show every exercise with its status and a progress line
rustlings --version       # print v4.6.0
```

The same entry point is available as `python -m rustlings.cli`.

`list` accepts `--paths`/`-p`, `--names`/`-n`, `--filter`/`-f PATTERNS`
(comma separated, matched against names and paths), `--unsolved`/`-u` and
`--solved`/`-s`. The global `--nocapture` switch prints the output of test
exercises when they pass.

`verify` and `run` exit with status 1 when an exercise fails to compile,
fails its tests, or (for `verify`) is still pending. `run` and `hint` exit
with status 1 when no exercise has the given name.

An exercise counts as pending while its file still holds an
`// I AM NOT DONE` comment; `verify` then shows the lines around it. Remove
that line once you are happy with your solution to move on.

In watch mode, type `hint`, `clear`, `quit` or `help` at the prompt.

Set `NO_EMOJI` in the environment to use plain symbols instead of emoji.

## Library

- `rustlings.exercise`: `Exercise`, `Mode`, `State`, `ContextLine`,
  `load_exercises(text)` for the contents of `info.toml`, and
  `Exercise.compile()`, `run()`, `state()` and `looks_done()`. Failures
  raise `ExerciseFailed` carrying an `ExerciseOutput`.
- `rustlings.verify`: `verify(exercises, verbose)` raises
  `VerificationFailed` at the first unfinished exercise.
- `rustlings.run`: `run(exercise, verbose)` raises `RunFailed`.
- `rustlings.cli`: `main(argv)`, `find_exercise`, `list_exercises`, `watch`.

## The exercise topics in Python

`rustlings.exercises` holds worked solutions as Python modules, each with
its own tests:

- `quizzes`, `control_flow`, `basics`, `primitives`
- `from_into`, `from_str`, `try_from_into` (conversions)
- `errors`, `climate` (error handling)
- `iterators`, `progress`, `collections`, `shared`
- `structs`, `enums`, `generics`, `misc`

```
pip install .[test]
pytest
```