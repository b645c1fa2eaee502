"""A runner for small Rust exercises, with worked solutions in Python."""

__version__ = "0.1.0"