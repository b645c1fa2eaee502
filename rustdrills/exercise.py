"""Exercises: their metadata, compilation, execution and completion state."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
RUSTC_NO_DEBUG_ARGS = ("-C", "strip=debuginfo")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/22_clippy/Cargo.toml"

_RUSTC_FLAGS = (*RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS, *RUSTC_NO_DEBUG_ARGS)


def _temp_file() -> str:
    """A temporary binary name unique to this process and thread."""
    return os.path.join(os.curdir, f"temp_{os.getpid()}_{threading.get_ident()}")


def _clean(binary: str) -> None:
    try:
        os.remove(binary)
    except OSError:
        pass


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a compiler or of a compiled binary."""

    stdout: str
    stderr: str


class ExerciseError(Exception):
    """Compiling or running an exercise failed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or output.stdout)
        self.output = output


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=result.stdout.decode("utf-8", errors="replace"),
        stderr=result.stderr.decode("utf-8", errors="replace"),
    )


class CompiledExercise:
    """A compiled exercise binary, removed from disk on close."""

    def __init__(self, exercise: Exercise, binary: str) -> None:
        self.exercise = exercise
        self.binary = binary

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExerciseError if it exits unsuccessfully."""
        args = ["--show-output"] if self.exercise.mode is Mode.TEST else []
        result = subprocess.run([self.binary, *args], capture_output=True)
        output = _output(result)
        if result.returncode != 0:
            raise ExerciseError(output)
        return output

    def close(self) -> None:
        _clean(self.binary)

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *args) -> None:
        self.close()


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise ExerciseError with the compiler output on failure."""
        binary = _temp_file()
        source = str(self.path)
        match self.mode:
            case Mode.COMPILE:
                result = subprocess.run(
                    ["rustc", source, "-o", binary, *_RUSTC_FLAGS], capture_output=True
                )
            case Mode.TEST:
                result = subprocess.run(
                    ["rustc", "--test", source, "-o", binary, *_RUSTC_FLAGS],
                    capture_output=True,
                )
            case Mode.CLIPPY:
                result = self._clippy(source, binary)
        if result.returncode == 0:
            return CompiledExercise(self, binary)
        _clean(binary)
        raise ExerciseError(_output(result))

    def _clippy(self, source: str, binary: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        if "NO_EMOJI" in os.environ:
            error_message = "Failed to write Clippy Cargo.toml file."
        else:
            error_message = "Failed to write 📎 Clippy 📎 Cargo.toml file."
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as exc:
            raise OSError(error_message) from exc
        # Build a binary as well so the exercise can be run; a compile failure
        # here shows up again in the clippy run below.
        subprocess.run(["rustc", source, "-o", binary, *_RUSTC_FLAGS], capture_output=True)
        # Clippy only reports every lint after a clean build.
        subprocess.run(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS],
            capture_output=True,
        )
        return subprocess.run(
            [
                "cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--", "-D", "warnings", "-D", "clippy::float_cmp",
            ],
            capture_output=True,
        )

    def state(self) -> State:
        """Read the source and report whether the pending marker is still there."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)), None
        )
        if matched is None:
            raise ValueError(f"no single line of {self.path} holds the pending marker")
        low = max(matched - CONTEXT, 0)
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines[low : matched + CONTEXT + 1], start=low)
            )
        )

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed from the source."""
        return not self.state().context


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Load the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    try:
        return [
            Exercise(
                name=entry["name"],
                path=Path(entry["path"]),
                mode=Mode(entry["mode"]),
                hint=entry["hint"],
            )
            for entry in data["exercises"]
        ]
    except KeyError as exc:
        raise ValueError(f"missing field {exc} in {path}") from exc