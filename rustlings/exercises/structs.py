"""Classic, tuple and unit structs; orders built from a template; packages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class ColorClassicStruct:
    """A colour with named fields."""

    name: str
    hex: str


class ColorTupleStruct(NamedTuple):
    """A colour whose fields are reached by position."""

    name: str
    hex: str


@dataclass(frozen=True)
class UnitStruct:
    """A struct with no fields."""

    def __repr__(self) -> str:
        return "UnitStruct"


@dataclass(frozen=True)
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """The order that new orders are based on."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A parcel sent from one country to another."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Package must have positive weight!")

    def is_international(self) -> bool:
        """Whether the package crosses a border."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Transport fee in cents for the package's weight."""
        return self.weight_in_grams * cents_per_gram