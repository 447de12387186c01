"""A tool that compiles, runs and checks small Rust exercises, with worked Python solutions of the topics."""

__version__ = "4.6.0"