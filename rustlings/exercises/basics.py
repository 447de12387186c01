"""Variables, functions and strings."""

NUMBER = 3
COLOR_WORDS = frozenset({"green", "blue", "red"})


def variables_lines() -> list[str]:
    """The lines printed by the variable exercises, in order."""
    x = 5
    lines = [f"x has the value {x}"]

    x = 4
    lines.append("Ten!" if x == 10 else "Not ten!")

    x = 3
    lines.append(f"Number {x}")
    x = 5
    lines.append(f"Number {x}")

    x = 32
    lines.append(f"Number {x}")

    number = "T-H-R-E-E"
    lines.append(f"Spell a Number : {number}")
    count = 3
    lines.append(f"Number plus two is : {count + 2}")

    lines.append(f"Number {NUMBER}")
    return lines


def call_me(num: int) -> list[str]:
    """One ring line per call, numbered from 1."""
    return [f"Ring! Call number {i + 1}" for i in range(num)]


def is_even(num: int) -> bool:
    """Whether the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """The number multiplied by itself."""
    return num * num


def current_favorite_color() -> str:
    """The current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colour words."""
    return attempt in COLOR_WORDS