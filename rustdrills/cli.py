"""Command-line interface: list, run, verify, reset and watch exercises."""

from __future__ import annotations

import argparse
import enum
import itertools
import os
import queue
import subprocess
import sys
import threading
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Sequence

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from rustdrills.exercise import Exercise, load_exercises
from rustdrills.project import RustAnalyzerProject
from rustdrills.run import reset, run
from rustdrills.verify import VerificationError, verify

_DEBOUNCE_SECONDS = 1.0
_WATCHED_EVENTS = frozenset({"created", "modified", "moved"})

WELCOME = """\
       welcome to...
  +-----------------------------+
  |         rustdrills          |
  +-----------------------------+"""

DEFAULT_OUT = """\
Thanks for installing rustdrills!

Is this your first time? Don't worry, rustdrills was made for beginners! We are
going to teach you a lot of things about Rust, but before we can get
started, here's a couple of notes about how rustdrills operates:

1. The central concept behind rustdrills is that you solve exercises. These
   exercises usually have some sort of syntax error in them, which will cause
   them to fail compilation or testing. Sometimes there's a logic error instead
   of a syntax error. No matter what error, it's your job to find it and fix it!
   You'll know when you fixed it because then, the exercise will compile and
   rustdrills will be able to move on to the next exercise.
2. If you run rustdrills in watch mode (which we recommend), it'll automatically
   start with the first exercise. Don't get confused by an error message popping
   up as soon as you run rustdrills! This is part of the exercise that you're
   supposed to solve, so open the exercise file in an editor and start your
   detective work!
3. If you're stuck on an exercise, there is a helpful hint you can view by typing
   'hint' (in watch mode), or running `rustdrills hint exercise_name`.
4. If an exercise doesn't make sense to you, feel free to open an issue in the
   project's tracker. We look at every issue, and sometimes, other learners do
   too so you can help each other out!
5. If you want to use `rust-analyzer` with exercises, which provides features like
   autocompletion, run the command `rustdrills lsp`.

Got all that? Great! To get started, run `rustdrills watch` in order to get the first
exercise. Make sure to have your editor open!"""

FINISH_LINE = """\
+----------------------------------------------------+
|          You made it to the Fe-nish line!          |
+----------------------------------------------------+

We hope you enjoyed learning about the various aspects of Rust!
If you noticed any issues, please don't hesitate to report them.
You can also contribute your own exercises to help the greater community!"""

_WATCH_HELP = """\
Commands available to you in watch mode:
  hint   - prints the current exercise's hint
  clear  - clears the screen
  quit   - quits watch mode
  !<cmd> - executes a command, like `!rustc --explain E0381`
  help   - displays this help message

Watch mode automatically re-evaluates the current exercise
when you edit a file's contents."""


class WatchStatus(enum.Enum):
    """How watch mode ended."""

    FINISHED = "finished"
    UNFINISHED = "unfinished"


def rustc_exists() -> bool:
    """Whether `rustc --version` can be run successfully."""
    try:
        result = subprocess.run(
            ["rustc", "--version"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        return False
    return result.returncode == 0


def find_exercise(name: str, exercises: Sequence[Exercise]) -> Exercise:
    """The exercise called name, or the first pending one for "next".

    Raises LookupError when there is no such exercise.
    """
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise LookupError(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise LookupError(f"No exercise found for '{name}'!")
    return found


def list_exercises(
    exercises: Sequence[Exercise],
    paths: bool = False,
    names: bool = False,
    filter: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
) -> int:
    """Print the selected exercises and overall progress; return the number done."""
    if not paths and not names:
        print(f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}")
    filters = [f for f in (filter or "").lower().split(",") if f.strip()]
    exercises_done = 0
    for exercise in exercises:
        fname = str(exercise.path)
        matches_filter = any(f in exercise.name or f in fname for f in filters)
        done = exercise.looks_done()
        if done:
            exercises_done += 1
        status = "Done" if done else "Pending"
        wanted = (done and solved) or (not done and unsolved) or (not solved and not unsolved)
        if wanted and (matches_filter or filter is None):
            if paths:
                line = f"{fname}\n"
            elif names:
                line = f"{exercise.name}\n"
            else:
                line = f"{exercise.name:<17}\t{fname:<46}\t{status:<7}\n"
            sys.stdout.write(line)
    total = len(exercises)
    percentage = exercises_done / total * 100.0 if total else float("nan")
    print(
        f"Progress: You completed {exercises_done} / {total} exercises "
        f"({percentage:.1f} %)."
    )
    return exercises_done


class _SharedHint:
    """The hint of the exercise that failed last, shared with the watch shell."""

    def __init__(self, hint: str) -> None:
        self.lock = threading.Lock()
        self.hint = hint


def _run_shell_command(command: str) -> None:
    parts = command.split()
    if not parts:
        print("no command provided")
        return
    try:
        subprocess.run(parts)
    except OSError as exc:
        print(f"failed to execute command `{command}`: {exc}")


def _watch_shell(shared: _SharedHint, should_quit: threading.Event) -> None:
    while True:
        try:
            raw = sys.stdin.readline()
        except (OSError, ValueError) as exc:
            print(f"error reading command: {exc}")
            return
        if not raw:
            return
        command = raw.strip()
        if command == "hint":
            with shared.lock:
                print(shared.hint)
        elif command == "clear":
            print("\x1b[2J\x1b[1;1H")
        elif command == "quit":
            should_quit.set()
            print("Bye!")
        elif command == "help":
            print(_WATCH_HELP)
        elif command.startswith("!"):
            _run_shell_command(command[1:])
        else:
            print(f"unknown command: {command}")


def _spawn_watch_shell(shared: _SharedHint, should_quit: threading.Event) -> None:
    print(
        "Welcome to watch mode! You can type 'help' to get an overview of "
        "the commands you can use here."
    )
    threading.Thread(target=_watch_shell, args=(shared, should_quit), daemon=True).start()


class _ChangeCollector(FileSystemEventHandler):
    """Queue the paths of files that were created, modified or moved."""

    def __init__(self, changes: queue.Queue) -> None:
        super().__init__()
        self._changes = changes

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type not in _WATCHED_EVENTS:
            return
        for raw in (event.src_path, getattr(event, "dest_path", "")):
            if raw:
                self._changes.put(Path(os.fsdecode(raw)))


def _ends_with(path: Path, suffix: Path) -> bool:
    tail = suffix.parts
    return 0 < len(tail) <= len(path.parts) and path.parts[-len(tail):] == tail


def _clear_screen() -> None:
    print("\x1bc")


def _next_batch(changes: queue.Queue) -> set[Path]:
    """Wait up to a second for a change, then gather the rest until things are quiet."""
    try:
        batch = {changes.get(timeout=_DEBOUNCE_SECONDS)}
    except queue.Empty:
        return set()
    while True:
        try:
            batch.add(changes.get(timeout=_DEBOUNCE_SECONDS))
        except queue.Empty:
            return batch


def watch(
    exercises: Sequence[Exercise], verbose: bool = False, success_hints: bool = False
) -> WatchStatus:
    """Verify exercises again whenever a file under ./exercises changes."""
    changes: queue.Queue = queue.Queue()
    should_quit = threading.Event()
    observer = Observer()
    observer.schedule(_ChangeCollector(changes), "./exercises", recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, (0, len(exercises)), verbose, success_hints)
        except VerificationError as exc:
            shared = _SharedHint(exc.exercise.hint)
        else:
            return WatchStatus.FINISHED
        _spawn_watch_shell(shared, should_quit)
        while True:
            for changed in sorted(_next_batch(changes)):
                if changed.suffix != ".rs" or not changed.exists():
                    continue
                filepath = changed.resolve()
                current = next((e for e in exercises if _ends_with(filepath, e.path)), None)
                pending = itertools.chain(
                    [current] if current is not None else [],
                    (
                        e
                        for e in exercises
                        if not e.looks_done() and not _ends_with(filepath, e.path)
                    ),
                )
                num_done = sum(
                    1
                    for e in exercises
                    if e.looks_done() and not _ends_with(filepath, e.path)
                )
                _clear_screen()
                try:
                    verify(pending, (num_done, len(exercises)), verbose, success_hints)
                except VerificationError as exc:
                    with shared.lock:
                        shared.hint = exc.exercise.hint
                else:
                    return WatchStatus.FINISHED
            if should_quit.is_set():
                return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()


def _package_version() -> str:
    try:
        return version("rustdrills")
    except PackageNotFoundError:
        return "0.0.0"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rustdrills",
        description="A collection of small exercises to get you used to "
        "writing and reading Rust code",
    )
    parser.add_argument("--version", action="version", version=_package_version())
    parser.add_argument(
        "--nocapture", action="store_true", help="Show outputs from the test exercises"
    )
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("verify", help="Verify all exercises according to the recommended order")
    watch_parser = sub.add_parser("watch", help="Rerun `verify` when files were edited")
    watch_parser.add_argument(
        "--success-hints", action="store_true", help="Show hints on success"
    )
    for name, help_text in (
        ("run", "Run/Test a single exercise"),
        ("reset", 'Reset a single exercise using "git stash -- <filename>"'),
        ("hint", "Return a hint for the given exercise"),
    ):
        command = sub.add_parser(name, help=help_text)
        command.add_argument("name", help="The name of the exercise")
    list_parser = sub.add_parser("list", help="List the exercises available")
    list_parser.add_argument(
        "-p", "--paths", action="store_true", help="Show only the paths of the exercises"
    )
    list_parser.add_argument(
        "-n", "--names", action="store_true", help="Show only the names of the exercises"
    )
    list_parser.add_argument(
        "-f",
        "--filter",
        help="Provide a string to match exercise names. "
        "Comma separated patterns are accepted",
    )
    list_parser.add_argument(
        "-u", "--unsolved", action="store_true", help="Display only exercises not yet solved"
    )
    list_parser.add_argument(
        "-s", "--solved", action="store_true", help="Display only exercises that have been solved"
    )
    sub.add_parser("lsp", help="Enable rust-analyzer for exercises")
    return parser


def _lsp() -> int:
    project = RustAnalyzerProject()
    try:
        project.get_sysroot_src()
    except OSError:
        print("Couldn't find toolchain path, do you have `rustc` installed?", file=sys.stderr)
        return 1
    try:
        project.exercises_to_json()
    except OSError:
        print("Couldn't parse exercises files", file=sys.stderr)
        return 1
    if not project.crates:
        print("Failed find any exercises, make sure you're in the `rustdrills` folder")
        return 0
    try:
        project.write_to_disk()
    except OSError:
        print("Failed to write rust-project.json to disk for rust-analyzer")
        return 0
    print("Successfully generated rust-project.json")
    print("rust-analyzer will now parse exercises, restart your language server or editor")
    return 0


def _watch(exercises: Sequence[Exercise], verbose: bool, success_hints: bool) -> int:
    try:
        status = watch(exercises, verbose, success_hints)
    except OSError as exc:
        print(f"Error: Could not watch your progress. Error message was {exc!r}.")
        print(
            "Most likely you've run out of disk space or your 'inotify limit' "
            "has been reached."
        )
        return 1
    if status is WatchStatus.FINISHED:
        print("🎉 All exercises completed! 🎉")
        print(f"\n{FINISH_LINE}\n")
    else:
        print("We hope you're enjoying learning about Rust!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `rustdrills watch` again"
        )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = _build_parser().parse_args(argv)

    if args.command is None:
        print(f"\n{WELCOME}\n")

    if not Path("info.toml").exists():
        print(f"{sys.argv[0]} must be run from the rustdrills directory")
        print("Try `cd rustdrills/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises("info.toml")
    verbose = args.nocapture

    if args.command is None:
        print(f"{DEFAULT_OUT}\n")
        return 0

    try:
        match args.command:
            case "list":
                try:
                    list_exercises(
                        exercises,
                        args.paths,
                        args.names,
                        args.filter,
                        args.unsolved,
                        args.solved,
                    )
                except BrokenPipeError:
                    return 0
                except OSError:
                    return 1
            case "run":
                run(find_exercise(args.name, exercises), verbose)
            case "reset":
                exercise = find_exercise(args.name, exercises)
                try:
                    reset(exercise).wait()
                except OSError:
                    return 1
            case "hint":
                print(find_exercise(args.name, exercises).hint)
            case "verify":
                verify(exercises, (0, len(exercises)), verbose, False)
            case "lsp":
                return _lsp()
            case "watch":
                return _watch(exercises, verbose, args.success_hints)
    except LookupError as exc:
        print(exc)
        return 1
    except VerificationError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())