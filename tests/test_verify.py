import subprocess

import pytest

from rustlings.exercise import Exercise, Mode
from rustlings.verify import VerificationFailed, prompt_for_completion, test, verify

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


def test_verify_all_success(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain())
    first = make(workspace, "compSuccess", FINISHED)
    second = make(workspace, "testSuccess", FINISHED, Mode.TEST)
    verify([first, second])
    out = capsys.readouterr().out
    assert f"Successfully ran {first}!" in out
    assert f"Successfully tested {second}" in out


def test_verify_fails_on_compile_error(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(compile_ok=False, stderr=b"E0001"))
    exercise = make(workspace, "compFailure", FINISHED)
    with pytest.raises(VerificationFailed) as info:
        verify([exercise])
    assert info.value.exercise == exercise
    out = capsys.readouterr().out
    assert "Compiling of" in out
    assert "E0001" in out


def test_verify_stops_at_first_failure(workspace, monkeypatch):
    fake = FakeToolchain()
    monkeypatch.setattr(subprocess, "run", fake)
    pending = make(workspace, "pending", PENDING)
    later = make(workspace, "later", FINISHED)
    with pytest.raises(VerificationFailed) as info:
        verify([pending, later])
    assert info.value.exercise == pending
    assert not any(str(later.path) in call for call in fake.calls)


def test_verify_pending_shows_output_and_context(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(stdout=b"program says hi"))
    exercise = make(workspace, "pending", PENDING)
    with pytest.raises(VerificationFailed):
        verify([exercise])
    out = capsys.readouterr().out
    assert "Output:" in out
    assert "program says hi" in out
    assert "// I AM NOT DONE" in out
    assert "The code is compiling!" in out


def test_verify_failed_test_shows_stdout(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(run_ok=False, stdout=b"assertion failed"))
    exercise = make(workspace, "testNotPassed", FINISHED, Mode.TEST)
    with pytest.raises(VerificationFailed):
        verify([exercise])
    out = capsys.readouterr().out
    assert "Testing of" in out
    assert "assertion failed" in out


def test_verify_clippy_compiles_only(workspace, monkeypatch, capsys):
    fake = FakeToolchain()
    monkeypatch.setattr(subprocess, "run", fake)
    (workspace / "exercises" / "clippy").mkdir(parents=True)
    exercise = make(workspace, "clippy1", FINISHED, Mode.CLIPPY)
    verify([exercise])
    assert f"Successfully compiled {exercise}!" in capsys.readouterr().out
    assert all(call[0] in ("rustc", "cargo") for call in fake.calls)


def test_test_does_not_prompt(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain())
    exercise = make(workspace, "pending_test_exercise", PENDING, Mode.TEST)
    test(exercise)
    out = capsys.readouterr().out
    assert "I AM NOT DONE" not in out
    assert "Successfully tested" in out


def test_test_verbose_prints_output(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(stdout=b"THIS TEST TOO SHALL PASS"))
    exercise = make(workspace, "testSuccess", FINISHED, Mode.TEST)
    test(exercise, verbose=True)
    assert "THIS TEST TOO SHALL PASS" in capsys.readouterr().out


def test_test_quiet_hides_output(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(stdout=b"THIS TEST TOO SHALL PASS"))
    exercise = make(workspace, "testSuccess", FINISHED, Mode.TEST)
    test(exercise, verbose=False)
    assert "THIS TEST TOO SHALL PASS" not in capsys.readouterr().out


def test_test_failure_raises(workspace, monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(run_ok=False))
    exercise = make(workspace, "testFailure", FINISHED, Mode.TEST)
    with pytest.raises(VerificationFailed) as info:
        test(exercise)
    assert info.value.exercise == exercise


def test_prompt_done_returns_true(workspace, capsys):
    exercise = make(workspace, "done", FINISHED)
    assert prompt_for_completion(exercise, "ignored") is True
    assert capsys.readouterr().out == ""


def test_prompt_pending_without_emoji(workspace, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    exercise = make(workspace, "pending", PENDING, Mode.TEST)
    assert prompt_for_completion(exercise, None) is False
    out = capsys.readouterr().out
    assert "~*~ The code is compiling, and the tests pass! ~*~" in out
    assert "Output:" not in out
    assert " 3 |  // I AM NOT DONE" in out
    assert " 5 |  fn main() {" in out


def test_prompt_clippy_message(workspace, capsys):
    exercise = make(workspace, "clippy1", PENDING, Mode.CLIPPY)
    assert prompt_for_completion(exercise, None) is False
    assert "The code is compiling, and 📎 Clippy 📎 is happy!" in capsys.readouterr().out