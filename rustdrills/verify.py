"""Check exercises in order, stopping at the first one that is not finished."""

from __future__ import annotations

import itertools
import os
import sys
import threading
from typing import Iterable, TextIO

from rustdrills.exercise import CompiledExercise, Exercise, ExerciseError, Mode
from rustdrills.ui import success, warn


class VerificationError(Exception):
    """An exercise failed to compile, failed to run, or is still pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} is not finished")
        self.exercise = exercise


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _bold(text: str) -> str:
    return f"\x1b[1m{text}\x1b[0m" if _is_tty(sys.stdout) else text


def _blue_bold(text: str) -> str:
    return f"\x1b[34;1m{text}\x1b[0m" if _is_tty(sys.stdout) else text


def _blue(text: str) -> str:
    return f"\x1b[34m{text}\x1b[0m" if _is_tty(sys.stdout) else text


class _Spinner:
    """A spinner on stderr that ticks while work is going on; silent off a terminal."""

    _FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"

    def __init__(self, message: str, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stderr
        self._message = message
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def set_message(self, message: str) -> None:
        with self._lock:
            self._message = message

    def __enter__(self) -> _Spinner:
        if _is_tty(self._stream):
            self._thread = threading.Thread(target=self._tick, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *args) -> None:
        self.finish_and_clear()

    def finish_and_clear(self) -> None:
        """Stop ticking and erase the spinner line."""
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        self._stream.write("\r\x1b[2K")
        self._stream.flush()

    def _tick(self) -> None:
        for frame in itertools.cycle(self._FRAMES):
            with self._lock:
                line = f"\r\x1b[2K{frame} {self._message}"
            self._stream.write(line)
            self._stream.flush()
            if self._stop.wait(0.1):
                break


class _ProgressBar:
    """A progress line on stderr; silent off a terminal."""

    _WIDTH = 60

    def __init__(self, total: int, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stderr
        self._total = total

    def update(self, position: int, message: str) -> None:
        if not _is_tty(self._stream):
            return
        filled = self._WIDTH * position // self._total if self._total else self._WIDTH
        filled = min(filled, self._WIDTH)
        if filled < self._WIDTH:
            bar = "#" * filled + ">" + "-" * (self._WIDTH - filled - 1)
        else:
            bar = "#" * self._WIDTH
        self._stream.write(
            f"\r\x1b[2KProgress: [{bar}] {position}/{self._total} {message}\n"
        )
        self._stream.flush()


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int],
    verbose: bool = False,
    success_hints: bool = False,
) -> None:
    """Compile and run each exercise in turn.

    Raises VerificationError naming the first exercise that fails or is pending.
    """
    num_done, total = progress
    bar = _ProgressBar(total)
    percentage = num_done / total * 100.0 if total else 100.0
    position = num_done
    bar.update(position, f"({percentage:.1f} %)")

    for exercise in exercises:
        match exercise.mode:
            case Mode.TEST:
                finished = _compile_and_test(
                    exercise, interactive=True, verbose=verbose, success_hints=success_hints
                )
            case Mode.COMPILE:
                finished = _compile_and_run_interactively(exercise, success_hints)
            case Mode.CLIPPY:
                finished = _compile_only(exercise, success_hints)
            case other:
                raise TypeError(f"unknown mode: {other!r}")
        if not finished:
            raise VerificationError(exercise)
        if total:
            percentage += 100.0 / total
        position += 1
        bar.update(position, f"({percentage:.1f} %)")


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise's tests without prompting; raise VerificationError on failure."""
    if not _compile_and_test(exercise, interactive=False, verbose=verbose, success_hints=False):
        raise VerificationError(exercise)


def _compile(exercise: Exercise, spinner: _Spinner) -> CompiledExercise | None:
    try:
        return exercise.compile()
    except ExerciseError as exc:
        spinner.finish_and_clear()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(exc.output.stderr)
        return None


def _compile_only(exercise: Exercise, success_hints: bool) -> bool:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        compiled = _compile(exercise, spinner)
    if compiled is None:
        return False
    compiled.close()
    return _prompt_for_completion(exercise, None, success_hints)


def _compile_and_run_interactively(exercise: Exercise, success_hints: bool) -> bool:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        compiled = _compile(exercise, spinner)
        if compiled is None:
            return False
        spinner.set_message(f"Running {exercise}...")
        with compiled:
            try:
                output = compiled.run()
            except ExerciseError as exc:
                spinner.finish_and_clear()
                warn(f"Ran {exercise} with errors")
                print(exc.output.stdout)
                print(exc.output.stderr)
                return False
    return _prompt_for_completion(exercise, output.stdout, success_hints)


def _compile_and_test(
    exercise: Exercise, *, interactive: bool, verbose: bool, success_hints: bool
) -> bool:
    with _Spinner(f"Testing {exercise}...") as spinner:
        compiled = _compile(exercise, spinner)
        if compiled is None:
            return False
        with compiled:
            try:
                output = compiled.run()
            except ExerciseError as exc:
                spinner.finish_and_clear()
                warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
                print(exc.output.stdout)
                return False
    if verbose:
        print(output.stdout)
    if interactive:
        return _prompt_for_completion(exercise, None, success_hints)
    return True


def _separator() -> str:
    return _bold("====================")


def _prompt_for_completion(
    exercise: Exercise, prompt_output: str | None, success_hints: bool
) -> bool:
    context = exercise.state().context
    if not context:
        return True

    match exercise.mode:
        case Mode.COMPILE:
            success(f"Successfully ran {exercise}!")
        case Mode.TEST:
            success(f"Successfully tested {exercise}!")
        case Mode.CLIPPY:
            success(f"Successfully compiled {exercise}!")

    no_emoji = "NO_EMOJI" in os.environ
    if no_emoji:
        clippy_success_msg = "The code is compiling, and Clippy is happy!"
    else:
        clippy_success_msg = "The code is compiling, and 📎 Clippy 📎 is happy!"

    success_msg = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_success_msg,
    }[exercise.mode]

    print()
    if no_emoji:
        print(f"~*~ {success_msg} ~*~")
    else:
        print(f"🎉 🎉  {success_msg} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        print(_separator())
        print(prompt_output)
        print(_separator())
        print()
    if success_hints:
        print("Hints:")
        print(_separator())
        print(exercise.hint)
        print(_separator())
        print()

    print("You can keep working on this exercise,")
    print(
        "or jump into the next one by removing the "
        f"{_bold('`I AM NOT DONE`')} comment:"
    )
    print()
    for context_line in context:
        line = _bold(context_line.line) if context_line.important else context_line.line
        number = f"{context_line.number:>2}"
        print(f"{_blue_bold(number)} {_blue('|')}  {line}")

    return False