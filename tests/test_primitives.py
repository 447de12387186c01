import pytest

from rustlings.exercises.primitives import (
    array_size_message,
    classify_char,
    describe_cat,
    greeting,
    middle_slice,
    second,
)


def test_slice_out_of_array():
    assert middle_slice([1, 2, 3, 4, 5]) == [2, 3, 4]


def test_slice_too_short():
    with pytest.raises(IndexError):
        middle_slice([1, 2, 3])


def test_indexing_tuple():
    assert second((1, 2, 3)) == 2


def test_greeting():
    assert greeting(True, False) == ["Good morning!"]
    assert greeting(True, True) == ["Good morning!", "Good evening!"]
    assert greeting(False, False) == []


@pytest.mark.parametrize(
    "char, expected",
    [
        ("C", "Alphabetical!"),
        ("é", "Alphabetical!"),
        ("1", "Numerical!"),
        ("?", "Neither alphabetic nor numeric!"),
        ("🦀", "Neither alphabetic nor numeric!"),
    ],
)
def test_classify_char(char, expected):
    assert classify_char(char) == expected


def test_classify_char_rejects_strings():
    with pytest.raises(ValueError):
        classify_char("ab")


def test_array_size_message():
    assert array_size_message([0] * 100) == "Wow, that's a big array!"
    assert array_size_message([0] * 99) == "Meh, I eat arrays like that for breakfast."


def test_describe_cat():
    assert describe_cat(("Furry McFurson", 3.5)) == "Furry McFurson is 3.5 years old."
    assert describe_cat(("Tom", 3.0)) == "Tom is 3 years old."