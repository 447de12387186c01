"""Exercises: their description, compilation, execution and progress state."""

from __future__ import annotations

import contextlib
import enum
import os
import re
import subprocess
import threading
import tomllib
import weakref
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary binary path unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def _remove(path: str) -> None:
    with contextlib.suppress(OSError):
        os.remove(path)


def clean() -> None:
    """Remove the temporary binary, if there is one."""
    _remove(temp_file())


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the `I AM NOT DONE` marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Progress of an exercise: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    @property
    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a compiler or exercise binary."""

    stdout: str
    stderr: str


class ExerciseFailed(Exception):
    """Compiling or running an exercise failed."""

    def __init__(self, output: ExerciseOutput):
        super().__init__(output.stderr or output.stdout)
        self.output = output


def _execute(argv: Sequence[str]) -> subprocess.CompletedProcess:
    return subprocess.run(list(argv), capture_output=True, check=False)


def _output(completed: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(completed.stdout or b"").decode("utf-8", "replace"),
        stderr=(completed.stderr or b"").decode("utf-8", "replace"),
    )


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


@dataclass(frozen=True)
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))
        object.__setattr__(self, "mode", Mode(self.mode))

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> CompiledExercise:
        """Build the exercise; raise ExerciseFailed with the compiler output."""
        target = temp_file()
        path = str(self.path)
        match self.mode:
            case Mode.COMPILE:
                completed = _execute(["rustc", path, "-o", target, *RUSTC_COLOR_ARGS])
            case Mode.TEST:
                completed = _execute(
                    ["rustc", "--test", path, "-o", target, *RUSTC_COLOR_ARGS]
                )
            case Mode.CLIPPY:
                completed = self._clippy(path, target)
        if completed.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseFailed(_output(completed))

    def _clippy(self, path: str, target: str) -> subprocess.CompletedProcess:
        name = self.name
        cargo_toml = (
            f'[package]\nname = "{name}"\nversion = "0.0.1"\nedition = "2018"\n'
            f'[[bin]]\nname = "{name}"\npath = "{name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as err:
            if "NO_EMOJI" in os.environ:
                message = "Failed to write Clippy Cargo.toml file."
            else:
                message = "Failed to write 📎 Clippy 📎 Cargo.toml file."
            raise OSError(message) from err
        # Build a binary too so clippy exercises can be run afterwards.
        _execute(["rustc", path, "-o", target, *RUSTC_COLOR_ARGS])
        # Clippy only reports every lint after a clean build.
        _execute(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS]
        )
        return _execute(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
            ]
        )

    def run(self) -> ExerciseOutput:
        """Run the built binary; raise ExerciseFailed if it exits unsuccessfully."""
        arg = "--show-output" if self.mode is Mode.TEST else ""
        completed = _execute([temp_file(), arg])
        output = _output(completed)
        if completed.returncode != 0:
            raise ExerciseFailed(output)
        return output

    def state(self) -> State:
        """Read the source and report whether the `I AM NOT DONE` marker remains."""
        source = self.path.read_bytes().decode("utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _lines(source)
        marker = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)), None
        )
        if marker is None:
            raise RuntimeError(f"{self.path}: marker found but not on a single line")
        first = max(marker - CONTEXT, 0)
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == marker)
                for i, line in enumerate(lines[first : marker + CONTEXT + 1], start=first)
            )
        )

    def looks_done(self) -> bool:
        """Whether the marker has been removed; the code itself is not checked."""
        return self.state().done


class CompiledExercise:
    """A built exercise; closing it removes the temporary binary."""

    def __init__(self, exercise: Exercise):
        self.exercise = exercise
        self._finalizer = weakref.finalize(self, _remove, temp_file())

    def run(self) -> ExerciseOutput:
        return self.exercise.run()

    def close(self) -> None:
        self._finalizer()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def load_exercises(text: str) -> list[Exercise]:
    """Parse the exercise list from the contents of info.toml."""
    data = tomllib.loads(text)
    return [
        Exercise(
            name=entry["name"],
            path=Path(entry["path"]),
            mode=Mode(entry["mode"]),
            hint=entry["hint"],
        )
        for entry in data["exercises"]
    ]