"""Quiz exercises: prices, string values, doubling and greetings."""

I8_MIN, I8_MAX = -128, 127


def _check_i8(value: int) -> int:
    if not I8_MIN <= value <= I8_MAX:
        raise OverflowError(f"{value} does not fit in a signed 8-bit integer")
    return value


def calculate_apple_price(n: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought at once."""
    _check_i8(n)
    return _check_i8(n if n > 40 else n * 2)


def quiz2_values() -> list[str]:
    """The strings built from a mix of literals and owned values."""
    return [
        "blue",
        "red",
        "hi",
        "rust is fun!",
        "nice weather",
        "Interpolation {}".format("Station"),
        "abc"[0:1],
        "  hello there ".strip(),
        "Happy Monday!".replace("Mon", "Tues"),
        "mY sHiFt KeY iS sTiCkY".lower(),
    ]


def times_two(num: int) -> int:
    """Double a number."""
    return num * 2


def my_macro(val: object) -> str:
    """Greet the given value."""
    return f"Hello {val}"