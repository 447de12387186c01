"""Booleans, characters, arrays, slices and tuples."""

from __future__ import annotations

import unicodedata
from collections.abc import Sequence

_NUMERIC_CATEGORIES = frozenset({"Nd", "Nl", "No"})


def greeting(is_morning: bool, is_evening: bool) -> list[str]:
    """Greetings for the time of day."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    return lines


def classify_char(c: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if c.isalpha():
        return "Alphabetical!"
    if unicodedata.category(c) in _NUMERIC_CATEGORIES:
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def array_size_message(a: Sequence) -> str:
    """Comment on the size of an array."""
    if len(a) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def middle_slice(a: Sequence[int]) -> list[int]:
    """The elements at positions 1 to 3."""
    if len(a) < 4:
        raise IndexError(f"range end index 4 out of range for slice of length {len(a)}")
    return list(a[1:4])


def _display(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def describe_cat(cat: tuple[str, float]) -> str:
    """Describe a cat given as a (name, age) pair."""
    name, age = cat
    return f"{name} is {_display(age)} years old."


def second(numbers: tuple) -> object:
    """The second element of a tuple."""
    return numbers[1]