from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from rustdrills.exercise import ContextLine, ExerciseError, ExerciseOutput, Mode, State
from rustdrills.verify import VerificationError, test, verify

PENDING = (
    ContextLine(line="// fake_exercise", number=1, important=False),
    ContextLine(line="", number=2, important=False),
    ContextLine(line="// I AM NOT DONE", number=3, important=True),
    ContextLine(line="", number=4, important=False),
    ContextLine(line="fn main() {", number=5, important=False),
)


@dataclass
class FakeCompiled:
    output: ExerciseOutput
    runs: bool
    closed: bool = False

    def run(self) -> ExerciseOutput:
        if not self.runs:
            raise ExerciseError(self.output)
        return self.output

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> FakeCompiled:
        return self

    def __exit__(self, *args) -> None:
        self.close()


@dataclass
class FakeExercise:
    name: str
    mode: Mode
    hint: str = ""
    compiles: bool = True
    runs: bool = True
    stdout: str = ""
    stderr: str = ""
    pending: tuple = ()
    compiled: list = field(default_factory=list)

    def compile(self) -> FakeCompiled:
        if not self.compiles:
            raise ExerciseError(ExerciseOutput(stdout="", stderr=self.stderr))
        compiled = FakeCompiled(ExerciseOutput(self.stdout, self.stderr), self.runs)
        self.compiled.append(compiled)
        return compiled

    def state(self) -> State:
        return State(self.pending)

    def __str__(self) -> str:
        return f"exercises/{self.name}.rs"


def test_all_finished_exercises_are_compiled_and_cleaned():
    exercises = [
        FakeExercise("a", Mode.COMPILE),
        FakeExercise("b", Mode.TEST),
        FakeExercise("c", Mode.CLIPPY),
    ]
    assert verify(exercises, (0, len(exercises))) is None
    assert [len(e.compiled) for e in exercises] == [1, 1, 1]
    assert all(c.closed for e in exercises for c in e.compiled)


def test_stops_at_first_compile_failure(capsys):
    first = FakeExercise("first", Mode.COMPILE)
    broken = FakeExercise("broken", Mode.COMPILE, compiles=False, stderr="expected expression")
    last = FakeExercise("last", Mode.COMPILE)
    with pytest.raises(VerificationError) as info:
        verify([first, broken, last], (0, 3))
    assert info.value.exercise is broken
    assert last.compiled == []
    out = capsys.readouterr().out
    assert "Compiling of exercises/broken.rs failed! Please try again." in out
    assert "expected expression" in out


def test_pending_compile_exercise_prompts(capsys):
    pending = FakeExercise("pend", Mode.COMPILE, stdout="hello out", pending=PENDING)
    with pytest.raises(VerificationError) as info:
        verify([pending], (0, 1))
    assert info.value.exercise is pending
    out = capsys.readouterr().out
    assert "Successfully ran exercises/pend.rs!" in out
    assert "Output:" in out
    assert "hello out" in out
    assert "You can keep working on this exercise," in out
    assert " 3 |  // I AM NOT DONE" in out


def test_success_hints_are_shown(capsys):
    pending = FakeExercise("h", Mode.TEST, hint="look closer", pending=PENDING)
    with pytest.raises(VerificationError):
        verify([pending], (0, 1), success_hints=True)
    out = capsys.readouterr().out
    assert "Hints:" in out
    assert "look closer" in out
    assert "Successfully tested exercises/h.rs!" in out


def test_messages_without_emoji(capsys, monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    pending = FakeExercise("lint", Mode.CLIPPY, pending=PENDING)
    with pytest.raises(VerificationError):
        verify([pending], (0, 1))
    out = capsys.readouterr().out
    assert "~*~ The code is compiling, and Clippy is happy! ~*~" in out
    assert "Successfully compiled exercises/lint.rs!" in out


def test_failing_tests_stop_verification(capsys):
    failing = FakeExercise("t", Mode.TEST, runs=False, stdout="assertion failed")
    with pytest.raises(VerificationError) as info:
        verify([failing], (0, 1))
    assert info.value.exercise is failing
    out = capsys.readouterr().out
    assert "Testing of exercises/t.rs failed!" in out
    assert "assertion failed" in out


def test_binary_failure_reports_errors(capsys):
    failing = FakeExercise("r", Mode.COMPILE, runs=False, stderr="panicked")
    with pytest.raises(VerificationError):
        verify([failing], (0, 1))
    out = capsys.readouterr().out
    assert "Ran exercises/r.rs with errors" in out
    assert "panicked" in out
    assert failing.compiled[0].closed


def test_test_does_not_prompt_and_shows_output_when_verbose(capsys):
    pending = FakeExercise("p", Mode.TEST, stdout="THIS TEST TOO SHALL PASS", pending=PENDING)
    test(pending, verbose=True)
    out = capsys.readouterr().out
    assert "THIS TEST TOO SHALL PASS" in out
    assert "I AM NOT DONE" not in out


def test_test_hides_output_when_not_verbose(capsys):
    passing = FakeExercise("p", Mode.TEST, stdout="THIS TEST TOO SHALL PASS")
    test(passing)
    assert "THIS TEST TOO SHALL PASS" not in capsys.readouterr().out
    assert passing.compiled[0].closed


def test_test_raises_on_failure():
    failing = FakeExercise("f", Mode.TEST, runs=False)
    with pytest.raises(VerificationError) as info:
        test(failing)
    assert info.value.exercise is failing