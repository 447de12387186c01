"""Generic containers, report cards and appending "Bar"."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Generic, TypeVar

T = TypeVar("T")


def shopping_list() -> list[str]:
    """A shopping list with milk on it."""
    items: list[str] = []
    items.append("milk")
    return items


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


def _display(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class ReportCard(Generic[T]):
    """A student's grade, numeric or alphabetical."""

    grade: T
    student_name: str
    student_age: int

    def print(self) -> str:
        """One line describing the student's result."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_display(self.grade)}"
        )


@singledispatch
def append_bar(value):
    """Append "Bar" to a string or to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]