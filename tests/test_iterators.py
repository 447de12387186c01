import pytest

from rustlings.exercises.iterators import (
    DivideByZero,
    DivisionError,
    NotDivisibleError,
    capitalize_first,
    capitalize_words_string,
    capitalize_words_vector,
    divide,
    factorial,
    favourite_fruits,
    list_of_results,
    result_with_list,
)


def test_favourite_fruits_in_order():
    fruits = favourite_fruits()
    assert next(fruits) == "banana"
    assert next(fruits) == "custard apple"
    assert next(fruits) == "avocado"
    assert next(fruits) == "peach"
    assert next(fruits) == "raspberry"
    assert next(fruits, None) is None


def test_success():
    assert capitalize_first("hello") == "Hello"


def test_empty():
    assert capitalize_first("") == ""


def test_iterate_string_vec():
    assert capitalize_words_vector(["hello", "world"]) == ["Hello", "World"]


def test_iterate_into_string():
    assert capitalize_words_string(["hello", " ", "world"]) == "Hello World"


def test_divide_success():
    assert divide(81, 9) == 9


def test_not_divisible():
    with pytest.raises(NotDivisibleError) as info:
        divide(81, 6)
    assert (info.value.dividend, info.value.divisor) == (81, 6)


def test_divide_by_0():
    with pytest.raises(DivideByZero):
        divide(81, 0)


def test_divide_0_by_something():
    assert divide(0, 81) == 0


def test_divide_negative_exact():
    assert divide(-81, 9) == -9


def test_errors_share_a_base():
    with pytest.raises(DivisionError):
        divide(1, 0)


def test_result_with_list():
    assert result_with_list() == [1, 11, 1426, 3]


def test_list_of_results():
    assert list_of_results() == [1, 11, 1426, 3]


@pytest.mark.parametrize(("num", "expected"), [(1, 1), (2, 2), (4, 24), (0, 1)])
def test_factorial(num, expected):
    assert factorial(num) == expected


def test_factorial_overflow():
    with pytest.raises(OverflowError):
        factorial(21)