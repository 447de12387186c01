"""Checking exercises in order, stopping at the first one not yet passing."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.status import Status
from rich.text import Text

from rustlings.exercise import CompiledExercise, Exercise, ExerciseFailed, Mode
from rustlings.ui import success, use_emoji, warn

SEPARATOR = "===================="


class VerificationFailed(Exception):
    """An exercise did not compile, did not pass, or is still marked pending."""

    def __init__(self, exercise: Exercise):
        super().__init__(f"{exercise} is not finished")
        self.exercise = exercise


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


def _status(message: str) -> Status:
    return Console().status(message)


def verify(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Check each exercise in turn; raise VerificationFailed at the first failure."""
    for exercise in exercises:
        match exercise.mode:
            case Mode.TEST:
                passed = _compile_and_test(exercise, interactive=True, verbose=verbose)
            case Mode.COMPILE:
                passed = _compile_and_run_interactively(exercise)
            case Mode.CLIPPY:
                passed = _compile_only(exercise)
        if not passed:
            raise VerificationFailed(exercise)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Build and run an exercise's tests without prompting."""
    if not _compile_and_test(exercise, interactive=False, verbose=verbose):
        raise VerificationFailed(exercise)


def _compile(exercise: Exercise, status: Status) -> CompiledExercise | None:
    try:
        return exercise.compile()
    except ExerciseFailed as failure:
        status.stop()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(failure.output.stderr)
        return None


def _compile_only(exercise: Exercise) -> bool:
    with _status(f"Compiling {exercise}...") as status:
        compiled = _compile(exercise, status)
        if compiled is None:
            return False
        compiled.close()
    success(f"Successfully compiled {exercise}!")
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _status(f"Compiling {exercise}...") as status:
        compiled = _compile(exercise, status)
        if compiled is None:
            return False
        status.update(f"Running {exercise}...")
        with compiled:
            try:
                output = compiled.run()
            except ExerciseFailed as failure:
                status.stop()
                warn(f"Ran {exercise} with errors")
                print(failure.output.stdout)
                print(failure.output.stderr)
                return False
    success(f"Successfully ran {exercise}!")
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    with _status(f"Testing {exercise}...") as status:
        compiled = _compile(exercise, status)
        if compiled is None:
            return False
        with compiled:
            try:
                output = compiled.run()
            except ExerciseFailed as failure:
                status.stop()
                warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
                print(failure.output.stdout)
                return False
    if verbose:
        print(output.stdout)
    success(f"Successfully tested {exercise}")
    return prompt_for_completion(exercise, None) if interactive else True


def prompt_for_completion(exercise: Exercise, prompt_output: str | None) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is."""
    state = exercise.state()
    if state.done:
        return True

    no_emoji = not use_emoji()
    match exercise.mode:
        case Mode.COMPILE:
            success_msg = "The code is compiling!"
        case Mode.TEST:
            success_msg = "The code is compiling, and the tests pass!"
        case Mode.CLIPPY:
            success_msg = (
                "The code is compiling, and Clippy is happy!"
                if no_emoji
                else "The code is compiling, and 📎 Clippy 📎 is happy!"
            )

    console = _console()
    print()
    if no_emoji:
        print(f"~*~ {success_msg} ~*~")
    else:
        print(f"🎉 🎉  {success_msg} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        console.print(Text(SEPARATOR, style="bold"))
        print(prompt_output)
        console.print(Text(SEPARATOR, style="bold"))
        print()

    print("You can keep working on this exercise,")
    console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    print()
    for context_line in state.context:
        line = (
            Text(context_line.line, style="bold")
            if context_line.important
            else Text(context_line.line)
        )
        console.print(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"), " ", ("|", "blue"), "  ", line
            )
        )
    return False