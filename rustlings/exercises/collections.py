"""Vectors and hash maps: fruit baskets and doubled numbers."""

from __future__ import annotations

import enum
from collections.abc import Iterable, MutableMapping

NEW_FRUIT_COUNT = 11


class Fruit(enum.Enum):
    """Kinds of fruit that may go in a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds of fruit and at least five fruits."""
    return {"banana": 2, "apple": 1, "mango": 3}


def fill_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add every kind of fruit missing from the basket, leaving present ones alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, NEW_FRUIT_COUNT)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a growable list holding the same elements."""
    a = (10, 20, 30, 40)
    return a, list(a)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Each value multiplied by two."""
    return [value * 2 for value in values]