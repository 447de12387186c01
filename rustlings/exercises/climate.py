"""Parsing a climate record of city, year and temperature."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_U32_MAX = 2**32 - 1
_FLOAT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


class ParseClimateErrorKind(enum.Enum):
    """Why a climate record could not be parsed."""

    EMPTY = "empty input"
    BAD_LEN = "incorrect number of fields"
    NO_CITY = "no city name"
    PARSE_INT = "error parsing year"
    PARSE_FLOAT = "error parsing temperature"


class ParseClimateError(ValueError):
    """Raised when text is not a valid climate record."""

    def __init__(self, kind: ParseClimateErrorKind, source: ValueError | None = None):
        message = kind.value if source is None else f"{kind.value}: {source}"
        super().__init__(message)
        self.kind = kind
        self.source = source


def _parse_u32(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text.removeprefix("+")
    if not digits or not all("0" <= c <= "9" for c in digits):
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _U32_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def _parse_float(text: str) -> float:
    if not text:
        raise ValueError("cannot parse float from empty string")
    if not _FLOAT.fullmatch(text):
        raise ValueError("invalid float literal")
    return float(text)


@dataclass(frozen=True)
class Climate:
    """A city's temperature in a given year."""

    city: str
    year: int
    temp: float

    @classmethod
    def from_str(cls, s: str) -> Climate:
        """Parse "city,year,temp"; raise ParseClimateError on bad input."""
        if not s:
            raise ParseClimateError(ParseClimateErrorKind.EMPTY)
        fields = s.split(",")
        if len(fields) != 3:
            raise ParseClimateError(ParseClimateErrorKind.BAD_LEN)
        city, year_text, temp_text = fields
        if not city:
            raise ParseClimateError(ParseClimateErrorKind.NO_CITY)
        try:
            year = _parse_u32(year_text)
        except ValueError as err:
            raise ParseClimateError(ParseClimateErrorKind.PARSE_INT, err) from err
        try:
            temp = _parse_float(temp_text)
        except ValueError as err:
            raise ParseClimateError(ParseClimateErrorKind.PARSE_FLOAT, err) from err
        return cls(city=city, year=year, temp=temp)