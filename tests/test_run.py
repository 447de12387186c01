import subprocess
from pathlib import Path

import pytest

from rustlings.exercise import Exercise, Mode, temp_file
from rustlings.run import RunFailed, run

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "fn main() {\n}\n"


class FakeToolchain:
    def __init__(self, compile_ok=True, run_ok=True, stdout=b"", stderr=b""):
        self.compile_ok = compile_ok
        self.run_ok = run_ok
        self.stdout = stdout
        self.stderr = stderr
        self.calls = []

    def __call__(self, argv, **kwargs):
        self.calls.append(list(argv))
        ok = self.compile_ok if argv[0] in ("rustc", "cargo") else self.run_ok
        return subprocess.CompletedProcess(argv, 0 if ok else 1, self.stdout, self.stderr)


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NO_EMOJI", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    return tmp_path


def make(directory, name, body, mode=Mode.COMPILE):
    path = directory / f"{name}.rs"
    path.write_text(body)
    return Exercise(name=name, path=path, mode=mode, hint="")


def test_run_single_compile_success(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(stdout=b"printed by program"))
    exercise = make(workspace, "compSuccess", FINISHED)
    run(exercise)
    out = capsys.readouterr().out
    assert "printed by program" in out
    assert f"Successfully ran {exercise}" in out


def test_run_single_compile_failure(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(compile_ok=False, stderr=b"expected pattern"))
    exercise = make(workspace, "compFailure", FINISHED)
    with pytest.raises(RunFailed) as info:
        run(exercise)
    assert info.value.exercise == exercise
    out = capsys.readouterr().out
    assert f"Compilation of {exercise} failed!, Compiler error message:" in out
    assert "expected pattern" in out


def test_run_binary_failure(workspace, monkeypatch, capsys):
    monkeypatch.setattr(
        subprocess, "run", FakeToolchain(run_ok=False, stdout=b"partial", stderr=b"panicked")
    )
    exercise = make(workspace, "crashes", FINISHED)
    with pytest.raises(RunFailed):
        run(exercise)
    out = capsys.readouterr().out
    assert "partial" in out
    assert "panicked" in out
    assert f"Ran {exercise} with errors" in out


def test_run_single_test_failure(workspace, monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(run_ok=False))
    exercise = make(workspace, "testNotPassed", FINISHED, Mode.TEST)
    with pytest.raises(RunFailed) as info:
        run(exercise)
    assert info.value.exercise == exercise


def test_run_single_test_success_with_output(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(stdout=b"THIS TEST TOO SHALL PASS"))
    exercise = make(workspace, "testSuccess", FINISHED, Mode.TEST)
    run(exercise, verbose=True)
    assert "THIS TEST TOO SHALL PAS" in capsys.readouterr().out


def test_run_single_test_success_without_output(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(stdout=b"THIS TEST TOO SHALL PASS"))
    exercise = make(workspace, "testSuccess", FINISHED, Mode.TEST)
    run(exercise, verbose=False)
    assert "THIS TEST TOO SHALL PAS" not in capsys.readouterr().out


def test_run_compile_exercise_does_not_prompt(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain())
    exercise = make(workspace, "pending_exercise", PENDING)
    run(exercise)
    assert "I AM NOT DONE" not in capsys.readouterr().out


def test_run_test_exercise_does_not_prompt(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain())
    exercise = make(workspace, "pending_test_exercise", PENDING, Mode.TEST)
    run(exercise)
    assert "I AM NOT DONE" not in capsys.readouterr().out


def test_run_removes_binary(workspace, monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeToolchain())
    Path(temp_file()).touch()
    exercise = make(workspace, "compSuccess", FINISHED)
    run(exercise)
    assert not Path(temp_file()).exists()