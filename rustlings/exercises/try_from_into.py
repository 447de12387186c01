"""Fallible conversion of three integers into an RGB colour."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


class IntoColorError(ValueError):
    """A value could not be converted into a colour."""


class BadLength(IntoColorError):
    """The sequence does not hold exactly three components."""

    def __init__(self, length: int):
        super().__init__(f"expected 3 components, got {length}")
        self.length = length


class IntConversion(IntoColorError):
    """A component lies outside 0..=255."""

    def __init__(self, value: int):
        super().__init__(f"{value} is not a valid colour component")
        self.value = value


def _component(value: int) -> int:
    if not 0 <= value <= 255:
        raise IntConversion(value)
    return value


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..=255."""

    red: int
    green: int
    blue: int

    @classmethod
    def try_from(cls, value: Sequence[int]) -> Color:
        """Build a colour from a tuple, list or other sequence of three integers."""
        if len(value) != 3:
            raise BadLength(len(value))
        red, green, blue = (_component(v) for v in value)
        return cls(red=red, green=green, blue=blue)