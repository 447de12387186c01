"""Command line entry point: list, run, verify, hint and watch exercises."""

from __future__ import annotations

import argparse
import enum
import os
import queue
import subprocess
import sys
import threading
from collections.abc import Iterable, Sequence
from itertools import chain, dropwhile
from pathlib import Path

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_MODIFIED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from rustlings.exercise import Exercise, load_exercises
from rustlings.run import RunFailed, run
from rustlings.ui import emoji
from rustlings.verify import VerificationFailed, verify

VERSION = "4.6.0"
WATCHED_DIRECTORY = "./exercises"
POLL_SECONDS = 1.0
DEBOUNCE_SECONDS = 2.0

BANNER = r"""
       welcome to...                      
                 _   _ _                  
  _ __ _   _ ___| |_| (_)_ __   __ _ ___  
 | '__| | | / __| __| | | '_ \ / _` / __| 
 | |  | |_| \__ \ |_| | | | | | (_| \__ \ 
 |_|   \__,_|___/\__|_|_|_| |_|\__, |___/ 
                               |___/      
"""

FINISH_LINE = """\
+----------------------------------------------------+
|          You made it to the Fe-nish line!          |
+--------------------------  ------------------------+
                          \\/                         
     ▒▒          ▒▒▒▒▒▒▒▒      ▒▒▒▒▒▒▒▒          ▒▒   
   ▒▒▒▒  ▒▒    ▒▒        ▒▒  ▒▒        ▒▒    ▒▒  ▒▒▒▒ 
   ▒▒▒▒  ▒▒  ▒▒            ▒▒            ▒▒  ▒▒  ▒▒▒▒ 
 ░░▒▒▒▒░░▒▒  ▒▒            ▒▒            ▒▒  ▒▒░░▒▒▒▒ 
   ▓▓▓▓▓▓▓▓  ▓▓      ▓▓██  ▓▓  ▓▓██      ▓▓  ▓▓▓▓▓▓▓▓ 
     ▒▒▒▒    ▒▒      ████  ▒▒  ████      ▒▒░░  ▒▒▒▒   
       ▒▒  ▒▒▒▒▒▒        ▒▒▒▒▒▒        ▒▒▒▒▒▒  ▒▒     
         ▒▒▒▒▒▒▒▒▒▒▓▓▓▓▓▓▒▒▒▒▒▒▒▒▓▓▒▒▓▓▒▒▒▒▒▒▒▒       
           ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒         
             ▒▒▒▒▒▒▒▒▒▒██▒▒▒▒▒▒██▒▒▒▒▒▒▒▒▒▒           
           ▒▒  ▒▒▒▒▒▒▒▒▒▒██████▒▒▒▒▒▒▒▒▒▒  ▒▒         
         ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒       
       ▒▒    ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒    ▒▒     
       ▒▒  ▒▒    ▒▒                  ▒▒    ▒▒  ▒▒     
           ▒▒  ▒▒                      ▒▒  ▒▒         """

WATCH_HELP = """\
Commands available to you in watch mode:
  hint  - prints the current exercise's hint
  clear - clears the screen
  quit  - quits watch mode
  help  - displays this help message

Watch mode automatically re-evaluates the current exercise
when you edit a file's contents."""


class WatchStatus(enum.Enum):
    """How watch mode ended."""

    FINISHED = "finished"
    UNFINISHED = "unfinished"


class ExerciseNotFound(LookupError):
    """No exercise matches the requested name."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class _UsageError(Exception):
    pass


class _ParserExit(Exception):
    def __init__(self, status: int, message: str | None):
        super().__init__(message)
        self.status = status
        self.message = message


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise _UsageError(f"{self.format_usage()}{self.prog}: error: {message}")

    def exit(self, status=0, message=None):
        raise _ParserExit(status, message)


def _build_parser() -> _ArgumentParser:
    parser = _ArgumentParser(
        prog="rustlings",
        description="Rustlings is a collection of small exercises to get you used "
        "to writing and reading Rust code",
    )
    parser.add_argument(
        "--nocapture", action="store_true", help="show outputs from the test exercises"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="show the executable version"
    )
    commands = parser.add_subparsers(dest="command", metavar="command")
    commands.add_parser(
        "verify", help="Verifies all exercises according to the recommended order"
    )
    commands.add_parser("watch", help="Reruns `verify` when files were edited")
    run_parser = commands.add_parser("run", help="Runs/Tests a single exercise")
    run_parser.add_argument("name", help="the name of the exercise")
    hint_parser = commands.add_parser("hint", help="Returns a hint for the given exercise")
    hint_parser.add_argument("name", help="the name of the exercise")
    list_parser = commands.add_parser(
        "list", help="Lists the exercises available in Rustlings"
    )
    list_parser.add_argument(
        "-p", "--paths", action="store_true", help="show only the paths of the exercises"
    )
    list_parser.add_argument(
        "-n", "--names", action="store_true", help="show only the names of the exercises"
    )
    list_parser.add_argument(
        "-f",
        "--filter",
        default=None,
        help="provide a string to match exercise names; "
        "comma separated patterns are acceptable",
    )
    list_parser.add_argument(
        "-u", "--unsolved", action="store_true", help="display only exercises not yet solved"
    )
    list_parser.add_argument(
        "-s",
        "--solved",
        action="store_true",
        help="display only exercises that have been solved",
    )
    return parser


def rustc_exists() -> bool:
    """Whether `rustc --version` can be started and succeeds."""
    try:
        completed = subprocess.run(
            ["rustc", "--version"], stdout=subprocess.DEVNULL, check=False
        )
    except OSError:
        return False
    return completed.returncode == 0


def find_exercise(name: str, exercises: Iterable[Exercise]) -> Exercise:
    """Find an exercise by name; `next` picks the first one not yet done."""
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise ExerciseNotFound(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise ExerciseNotFound(f"No exercise found for '{name}'!")
    return found


def list_exercises(
    exercises: Sequence[Exercise],
    paths: bool = False,
    names: bool = False,
    filter: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
) -> int:
    """Print the exercises that match and a progress line; return how many are done."""
    if not paths and not names:
        print(f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}")
    patterns = [p for p in (filter or "").lower().split(",") if p.strip()]
    done_count = 0
    for exercise in exercises:
        fname = str(exercise.path)
        matches = any(p in exercise.name or p in fname for p in patterns)
        done = exercise.looks_done()
        if done:
            done_count += 1
        wanted = (done and solved) or (not done and unsolved) or (not solved and not unsolved)
        if wanted and (matches or filter is None):
            if paths:
                line = fname
            elif names:
                line = exercise.name
            else:
                status = "Done" if done else "Pending"
                line = f"{exercise.name:<17}\t{fname:<46}\t{status:<7}"
            sys.stdout.write(line + "\n")
    total = len(exercises)
    percentage = done_count / total * 100 if total else float("nan")
    print(
        f"Progress: You completed {done_count} / {total} exercises ({percentage:.2f} %)."
    )
    return done_count


class _SharedHint:
    def __init__(self, text: str):
        self._lock = threading.Lock()
        self._text = text

    def get(self) -> str:
        with self._lock:
            return self._text

    def set(self, text: str) -> None:
        with self._lock:
            self._text = text


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, changes: queue.Queue):
        super().__init__()
        self._changes = changes

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        if event.event_type in (EVENT_TYPE_CREATED, EVENT_TYPE_MODIFIED):
            self._changes.put(os.fsdecode(event.src_path))


def _clear_screen() -> None:
    print("\x1bc")


def _watch_shell(hint: _SharedHint, should_quit: threading.Event) -> None:
    while True:
        try:
            raw = sys.stdin.readline()
        except OSError as err:
            print(f"error reading command: {err}")
            continue
        except ValueError:
            return
        if raw == "":
            return
        command = raw.strip()
        if command == "hint":
            print(hint.get())
        elif command == "clear":
            print("\x1b[2J\x1b[1;1H")
        elif command == "quit":
            should_quit.set()
            print("Bye!")
        elif command == "help":
            print(WATCH_HELP)
        else:
            print(f"unknown command: {command}")


def _spawn_watch_shell(hint: _SharedHint, should_quit: threading.Event) -> None:
    print(
        "Welcome to watch mode! You can type 'help' to get an overview "
        "of the commands you can use here."
    )
    threading.Thread(target=_watch_shell, args=(hint, should_quit), daemon=True).start()


def _next_changes(changes: queue.Queue) -> list[str]:
    """Wait briefly for a change, then gather the burst of changes that follows."""
    try:
        first = changes.get(timeout=POLL_SECONDS)
    except queue.Empty:
        return []
    paths = {first: None}
    while True:
        try:
            paths[changes.get(timeout=DEBOUNCE_SECONDS)] = None
        except queue.Empty:
            return list(paths)


def _ends_with(path: Path, suffix: Path) -> bool:
    tail = suffix.parts
    return len(tail) <= len(path.parts) and path.parts[len(path.parts) - len(tail):] == tail


def watch(exercises: Iterable[Exercise], verbose: bool = False) -> WatchStatus:
    """Verify exercises, then re-verify whenever an exercise file changes."""
    exercises = list(exercises)
    changes: queue.Queue = queue.Queue()
    should_quit = threading.Event()
    observer = Observer()
    observer.schedule(_ChangeHandler(changes), WATCHED_DIRECTORY, recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, verbose)
        except VerificationFailed as failure:
            hint = _SharedHint(failure.exercise.hint)
        else:
            return WatchStatus.FINISHED
        _spawn_watch_shell(hint, should_quit)
        while True:
            for changed in _next_changes(changes):
                path = Path(changed)
                if path.suffix != ".rs" or not path.exists():
                    continue
                filepath = path.resolve()
                pending = chain(
                    dropwhile(lambda e: not _ends_with(filepath, e.path), exercises),
                    (
                        e
                        for e in exercises
                        if not e.looks_done() and not _ends_with(filepath, e.path)
                    ),
                )
                _clear_screen()
                try:
                    verify(pending, verbose)
                except VerificationFailed as failure:
                    hint.set(failure.exercise.hint)
                else:
                    return WatchStatus.FINISHED
            if should_quit.is_set():
                return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()


def _print_finished() -> None:
    mark = emoji("🎉", "★")
    print(f"{mark} All exercises completed! {mark}")
    print()
    print(FINISH_LINE)
    print()
    print("We hope you enjoyed learning about the various aspects of Rust!")
    print("If you noticed any issues, please don't hesitate to report them to our repo.")
    print("You can also contribute your own exercises to help the greater community!")
    print()
    print("Before reporting an issue or contributing, please read our guidelines")
    print("in CONTRIBUTING.md.")


def _watch_command(exercises: list[Exercise], verbose: bool) -> int:
    try:
        status = watch(exercises, verbose)
    except OSError as err:
        print(f"Error: Could not watch your progress. Error message was {err!r}.")
        print(
            "Most likely you've run out of disk space or your 'inotify limit' "
            "has been reached."
        )
        return 1
    if status is WatchStatus.FINISHED:
        _print_finished()
    else:
        print("We hope you're enjoying learning about Rust!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `rustlings watch` again"
        )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    try:
        args = _build_parser().parse_args(argv)
    except _ParserExit as stop:
        if stop.message:
            sys.stderr.write(stop.message)
        return stop.status
    except _UsageError as err:
        print(err, file=sys.stderr)
        return 1

    if args.version:
        print(f"v{VERSION}")
        return 0

    if args.command is None:
        print(BANNER)

    if not Path("info.toml").exists():
        print(f"{os.path.abspath(sys.argv[0])} must be run from the rustlings directory")
        print("Try `cd rustlings/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises(Path("info.toml").read_text(encoding="utf-8"))
    verbose = args.nocapture

    match args.command:
        case None:
            print(Path("default_out.txt").read_text(encoding="utf-8"))
        case "list":
            try:
                list_exercises(
                    exercises,
                    paths=args.paths,
                    names=args.names,
                    filter=args.filter,
                    unsolved=args.unsolved,
                    solved=args.solved,
                )
            except BrokenPipeError:
                return 0
            except OSError:
                return 1
        case "run" | "hint":
            try:
                exercise = find_exercise(args.name, exercises)
            except ExerciseNotFound as err:
                print(err)
                return 1
            if args.command == "hint":
                print(exercise.hint)
            else:
                try:
                    run(exercise, verbose)
                except RunFailed:
                    return 1
        case "verify":
            try:
                verify(exercises, verbose)
            except VerificationFailed:
                return 1
        case "watch":
            return _watch_command(exercises, verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())