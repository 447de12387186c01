"""Iterating over collections, capitalising words, dividing and factorials."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

I32_MIN, I32_MAX = -(2**31), 2**31 - 1
U64_MAX = 2**64 - 1

FAVOURITE_FRUITS = ("banana", "custard apple", "avocado", "peach", "raspberry")
DIVIDENDS = (27, 297, 38502, 81)
DIVISOR = 27


def favourite_fruits() -> Iterator[str]:
    """An iterator over the favourite fruits, in order."""
    return iter(FAVOURITE_FRUITS)


def capitalize_first(text: str) -> str:
    """Upper-case the first character of the text: "hello" gives "Hello"."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise each word: ["hello", "world"] gives ["Hello", "World"]."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise each word and join them: ["hello", " ", "world"] gives "Hello World"."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division that does not give a whole result."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int):
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZero(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Divide a by b when a is a multiple of b; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZero()
    if a == I32_MIN and b == -1:
        raise OverflowError("attempt to divide with overflow")
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def result_with_list() -> list[int]:
    """Divide each of the numbers by 27; the first failure is raised."""
    return [divide(n, DIVISOR) for n in DIVIDENDS]


def list_of_results() -> list[int | DivisionError]:
    """Divide each of the numbers by 27, keeping each quotient or error in place."""
    results: list[int | DivisionError] = []
    for n in DIVIDENDS:
        try:
            results.append(divide(n, DIVISOR))
        except DivisionError as err:
            results.append(err)
    return results


def factorial(num: int) -> int:
    """The product of 1 to num, limited to an unsigned 64-bit result."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = math.prod(range(1, num + 1))
    if result > U64_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result