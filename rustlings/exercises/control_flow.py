"""Branching exercises."""


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a >= b else b


def fizz_if_foo(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"