"""Running a single exercise and showing its output."""

from __future__ import annotations

from rich.console import Console

from rustlings.exercise import Exercise, ExerciseFailed, Mode
from rustlings.ui import success, warn
from rustlings.verify import VerificationFailed, test


class RunFailed(Exception):
    """The exercise did not compile or exited unsuccessfully."""

    def __init__(self, exercise: Exercise):
        super().__init__(f"running {exercise} failed")
        self.exercise = exercise


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Build and run one exercise; raise RunFailed if it does not succeed."""
    if exercise.mode is Mode.TEST:
        try:
            test(exercise, verbose)
        except VerificationFailed as failure:
            raise RunFailed(exercise) from failure
    else:
        _compile_and_run(exercise)


def _compile_and_run(exercise: Exercise) -> None:
    with Console().status(f"Compiling {exercise}...") as status:
        try:
            compiled = exercise.compile()
        except ExerciseFailed as failure:
            status.stop()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(failure.output.stderr)
            raise RunFailed(exercise) from failure

        status.update(f"Running {exercise}...")
        with compiled:
            try:
                output = compiled.run()
            except ExerciseFailed as failure:
                status.stop()
                print(failure.output.stdout)
                print(failure.output.stderr)
                warn(f"Ran {exercise} with errors")
                raise RunFailed(exercise) from failure

    print(output.stdout)
    success(f"Successfully ran {exercise}")