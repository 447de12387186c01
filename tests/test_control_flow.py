from rustlings.exercises.control_flow import bigger, fizz_if_foo


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_equal_numbers():
    assert bigger(7, 7) == 7


def test_foo_for_fizz():
    assert fizz_if_foo("fizz") == "foo"


def test_bar_for_fuzz():
    assert fizz_if_foo("fuzz") == "bar"


def test_default_to_baz():
    assert fizz_if_foo("literally anything") == "baz"