"""Building a person from text, falling back to a default on bad input."""

from __future__ import annotations

import re
from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_age(text: str) -> int | None:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text.removeprefix("+"))
    return value if value <= _USIZE_MAX else None


@dataclass(frozen=True)
class Person:
    """A person with a name and an age."""

    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        """The fallback person: John, aged 30."""
        return cls(name="John", age=30)

    @classmethod
    def parse(cls, s: str) -> Person:
        """Read "name,age"; any malformed input gives the default person."""
        if not s:
            return cls.default()
        name, _, rest = s.partition(",")
        age = _parse_age(rest)
        if not name or age is None:
            return cls.default()
        return cls(name=name, age=age)