"""Parsing a person from text, reporting what was wrong with it."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1
_DIGITS = frozenset("0123456789")


class ParsePersonErrorKind(enum.Enum):
    """Why a person could not be parsed."""

    EMPTY = "empty input"
    BAD_LEN = "incorrect number of fields"
    NO_NAME = "no name"
    PARSE_INT = "error parsing age"


class ParsePersonError(ValueError):
    """Raised when text does not describe a person."""

    def __init__(self, kind: ParsePersonErrorKind, detail: str | None = None):
        message = kind.value if detail is None else f"{kind.value}: {detail}"
        super().__init__(message)
        self.kind = kind
        self.detail = detail


def _parse_usize(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text.removeprefix("+")
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


@dataclass(frozen=True)
class Person:
    """A person with a name and an age."""

    name: str
    age: int

    @classmethod
    def from_str(cls, s: str) -> Person:
        """Parse exactly "name,age"; raise ParsePersonError otherwise."""
        if not s:
            raise ParsePersonError(ParsePersonErrorKind.EMPTY)
        fields = s.split(",")
        if len(fields) != 2:
            raise ParsePersonError(ParsePersonErrorKind.BAD_LEN)
        name, age_text = fields
        if not name:
            raise ParsePersonError(ParsePersonErrorKind.NO_NAME)
        try:
            age = _parse_usize(age_text)
        except ValueError as err:
            raise ParsePersonError(ParsePersonErrorKind.PARSE_INT, str(err)) from err
        return cls(name=name, age=age)