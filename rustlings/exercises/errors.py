"""Name tags, token costs and positive non-zero integers, with their errors."""

from __future__ import annotations

import enum
from dataclasses import dataclass

I32_MIN, I32_MAX = -(2**31), 2**31 - 1
I64_MIN, I64_MAX = -(2**63), 2**63 - 1
PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, low: int, high: int) -> int:
    """Parse a decimal integer strictly: optional sign, ASCII digits, in range."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not all("0" <= c <= "9" for c in digits):
        raise ValueError("invalid digit found in string")
    if text[0] == "-" and low == 0:
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is refused with ValueError."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1."""
    quantity = _parse_int(item_quantity, I32_MIN, I32_MAX)
    cost = quantity * COST_PER_ITEM + PROCESSING_FEE
    if not I32_MIN <= cost <= I32_MAX:
        raise OverflowError("attempt to compute the cost overflowed")
    return cost


def purchase(tokens: int, item_quantity: str) -> tuple[int, str]:
    """Try to buy the items; return the tokens left and a message."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return tokens, "You can't afford that many!"
    tokens -= cost
    return tokens, f"You now have {tokens} tokens."


class CreationErrorKind(enum.Enum):
    """Why a positive non-zero integer could not be created."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """The value is not positive and non-zero."""

    def __init__(self, kind: CreationErrorKind):
        super().__init__(kind.value)
        self.kind = kind


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed into a positive non-zero integer."""

    def __init__(self, cause: ValueError):
        super().__init__(str(cause))
        self.cause = cause

    @property
    def creation(self) -> CreationErrorKind | None:
        """The creation failure, or None when the text was not a number."""
        if isinstance(self.cause, CreationError):
            return self.cause.kind
        return None

    @property
    def is_parse_int(self) -> bool:
        """Whether the text itself could not be read as an integer."""
        return not isinstance(self.cause, CreationError)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    @classmethod
    def new(cls, value: int) -> PositiveNonzeroInteger:
        """Wrap the value; raise CreationError if it is zero or negative."""
        if value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if value == 0:
            raise CreationError(CreationErrorKind.ZERO)
        return cls(value)

    @classmethod
    def from_str(cls, s: str) -> PositiveNonzeroInteger:
        """Parse a 64-bit integer and wrap it; raise ParsePosNonzeroError."""
        try:
            value = _parse_int(s, I64_MIN, I64_MAX)
        except ValueError as err:
            raise ParsePosNonzeroError(err) from err
        try:
            return cls.new(value)
        except CreationError as err:
            raise ParsePosNonzeroError(err) from err


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer."""
    return PositiveNonzeroInteger.from_str(s)