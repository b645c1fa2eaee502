"""Run a single exercise, or reset it from version control."""

from __future__ import annotations

import subprocess

from rustdrills.exercise import Exercise, ExerciseError, Mode
from rustdrills.ui import success, warn
from rustdrills.verify import VerificationError, _Spinner, test


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise, or its tests; raise VerificationError on failure."""
    match exercise.mode:
        case Mode.TEST:
            test(exercise, verbose)
        case Mode.COMPILE | Mode.CLIPPY:
            _compile_and_run(exercise)
        case other:
            raise TypeError(f"unknown mode: {other!r}")


def reset(exercise: Exercise) -> subprocess.Popen:
    """Stash local changes to the exercise with git; raise OSError if git cannot start."""
    return subprocess.Popen(["git", "stash", "--", str(exercise.path)])


def _compile_and_run(exercise: Exercise) -> None:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        try:
            compiled = exercise.compile()
        except ExerciseError as exc:
            spinner.finish_and_clear()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(exc.output.stderr)
            raise VerificationError(exercise) from exc

        spinner.set_message(f"Running {exercise}...")
        with compiled:
            try:
                output = compiled.run()
            except ExerciseError as exc:
                spinner.finish_and_clear()
                print(exc.output.stdout)
                print(exc.output.stderr)
                warn(f"Ran {exercise} with errors")
                raise VerificationError(exercise) from exc

    print(output.stdout)
    success(f"Successfully ran {exercise}")