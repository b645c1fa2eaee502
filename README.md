# rustdrills

A command-line runner for small Rust exercises. It compiles each exercise with
`rustc`, runs the program or its tests (or lints it with `cargo clippy`), and
tells you how far along you are.

Every exercise carries an `// I AM NOT DONE` marker. When an exercise compiles
and passes but still has the marker, the runner shows the lines around it and
waits; remove the marker and the runner moves on to the next exercise.

## Requirements

- Python 3.11 or later
- A Rust toolchain with `rustc` on your `PATH` (and `cargo clippy` for
  exercises in clippy mode)
- `git`, for the `reset` command

## Installation

```
pip install rustdrills
```

## Setting up an exercise directory

Run the commands from a directory that holds an `info.toml` file. It lists the
exercises in the order they should be done:

```toml
[[exercises]]
name = "intro1"
path = "exercises/00_intro/intro1.rs"
mode = "compile"   # or "test", or "clippy"
hint = "Remove the I AM NOT DONE comment to move on."
```

`compile` exercises are built and run as programs, `test` exercises are built
with `rustc --test` and their tests are run, and `clippy` exercises are linted
with `cargo clippy -- -D warnings -D clippy::float_cmp` using a `Cargo.toml`
written to `./exercises/22_clippy/Cargo.toml`.

If `info.toml` is missing, or `rustc --version` cannot be run, every command
exits with status 1.

## Usage

```
rustdrills                 # welcome text and a short introduction
rustdrills watch           # verify the exercises in order, re-checking on every save
rustdrills verify          # verify all exercises once, in order
rustdrills run intro1      # compile and run (or test) a single exercise
rustdrills run next        # run the first exercise that is not done yet
rustdrills hint intro1     # show the hint for an exercise
rustdrills reset intro1    # git stash your changes to an exercise
rustdrills list            # list every exercise with its status and overall progress
rustdrills lsp             # write rust-project.json for rust-analyzer
```

- `list` accepts `-p/--paths`, `-n/--names`, `-f/--filter PATTERN[,PATTERN...]`,
  `-s/--solved` and `-u/--unsolved`.
- `watch` accepts `--success-hints` to show an exercise's hint once it passes.
- `--nocapture`, given before the command, prints the output of test exercises.
- `lsp` takes the standard library sources from `RUST_SRC_PATH`, or else from
  `rustc --print sysroot`, and adds a crate for every `.rs` file under
  `./exercises`.

Watch mode watches `./exercises` for changed `.rs` files. While it runs you can
type `hint`, `clear`, `quit`, `help`, or `!<cmd>` to run a command such as
`!rustc --explain E0381`.

Set `NO_EMOJI` in the environment to get plain-text status markers.

## Using the runner from Python

```python
from rustdrills.exercise import load_exercises
from rustdrills.verify import VerificationError, verify

exercises = load_exercises("info.toml")
try:
    verify(exercises, (0, len(exercises)))
except VerificationError as exc:
    print("stopped at", exc.exercise.name)
```

`Exercise.state()` reports the context lines around the pending marker, and
`Exercise.compile()` returns a `CompiledExercise` that removes its binary when
closed or used as a context manager.

## Worked solutions

The `rustdrills.drills` package holds Python counterparts of exercise
solutions, each with its own tests:

- `quizzes`: `calculate_price_of_apples`, `transformer`, `ReportCard`
- `control_flow`: `bigger`, `foo_if_fizz`, `animal_habitat`, `sale_price`
- `sequences`: `vec_loop`, `vec_map`, `fill_vec` and friends
- `messages`: a `State` driven by `ChangeColor`, `Echo`, `Move` and `Quit`
- `rectangles`: `is_even` and a validated `Rectangle`
- `strings`: `trim_me`, `compose_me`, `replace_me`
- `hashmaps`: fruit baskets and `build_scores_table`
- `options`: `maybe_icecream`
- `errors`: `generate_nametag_text`, `total_cost`, `remaining_tokens`
- `positive`: `PositiveNonzeroInteger` and `parse_pos_nonzero`
- `traits`: `Wrapper`, `append_bar`, `Licensed` and friends
- `iterators`: `capitalize_first`, `divide`, `factorial` and friends
- `conslist`: `Cons`, `create_empty_list`, `create_non_empty_list`
- `progress`: `Progress` and the counting functions

## What is not included

- The package does not ship any exercise files or an `info.toml`; the runner
  works on whatever exercise directory you point it at.
- There are no worked solutions for the struct exercises or the type
  conversion exercises.

## Running the tests

```
pip install "rustdrills[test]"
pytest
```