"""Options, moving values, macros, modules and lint-friendly code."""

from __future__ import annotations

import time
from collections.abc import Iterable

_MISSING = object()
_SECRET_RECIPE = "Ginger"
_FRUIT = "Pear"
_VEGGIE = "Cucumber"


def option_numbers() -> list[int]:
    """Five numbers computed from their positions."""
    return [(i * 1235 + 2) // (4 * 16) for i in range(5)]


def describe_word(word: str | None) -> str:
    """Describe an optional word."""
    if word is not None:
        return f"The word is: {word}"
    return "The optional word doesn't contain anything"


def drain_values(values: list[int | None]) -> list[str]:
    """Pop values from the end until the list is empty or a missing value is met."""
    lines = []
    while values:
        integer = values.pop()
        if integer is None:
            break
        lines.append(f"current value: {integer}")
    return lines


def describe_point(point: tuple[int, int] | None) -> str:
    """Describe an optional (x, y) point."""
    match point:
        case (x, y):
            return f"Co-ordinates are {x},{y} "
        case _:
            return "no match"


def fill_vec(values: Iterable[int] | None = None) -> list[int]:
    """A new list of the values followed by 22, 44 and 66."""
    filled = list(values) if values is not None else []
    filled.extend((22, 44, 66))
    return filled


def accumulate(start: int) -> int:
    """Add 100 and then 1000 to the starting value."""
    x = start
    x += 100
    x += 1000
    return x


def my_macro(val: object = _MISSING) -> str:
    """The macro's message, with or without a value."""
    if val is _MISSING:
        return "Check out my macro!"
    return f"Look at this other macro: {val}"


def make_sausage() -> str:
    """Make a sausage from the secret recipe."""
    _ = _SECRET_RECIPE
    return "sausage!"


def favourite_snacks() -> str:
    """The favourite fruit and vegetable."""
    return f"favorite snacks: {_FRUIT} and {_VEGGIE}"


def seconds_since_epoch() -> int:
    """Whole seconds since 1970-01-01 00:00:00 UTC."""
    now = time.time()
    if now < 0:
        raise RuntimeError("SystemTime before UNIX EPOCH!")
    return int(now)


def floats_differ(x: float, y: float) -> bool:
    """Whether two floats are different."""
    return y != x


def add_if_some(res: int, option: int | None) -> int:
    """Add the optional value to res when there is one."""
    if option is not None:
        res += option
    return res