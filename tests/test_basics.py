import pytest

from drillbook.solutions.basics import (
    animal_habitat,
    bigger,
    compose_me,
    foo_if_fizz,
    is_a_color_word,
    replace_me,
    sale_price,
    trim_me,
)


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_equal_numbers():
    assert bigger(42, 42) == 42


def test_foo_for_fizz():
    assert foo_if_fizz("fizz") == "foo"


def test_bar_for_fuzz():
    assert foo_if_fizz("fuzz") == "bar"


def test_default_to_baz():
    assert foo_if_fizz("literally anything") == "baz"


@pytest.mark.parametrize(
    "animal, habitat",
    [
        ("gopher", "Burrow"),
        ("snake", "Desert"),
        ("crab", "Beach"),
        ("dinosaur", "Unknown"),
    ],
)
def test_animal_habitat(animal, habitat):
    assert animal_habitat(animal) == habitat


def test_sale_price_odd():
    assert sale_price(51) == 48


def test_sale_price_even():
    assert sale_price(50) == 40


@pytest.mark.parametrize("word", ["green", "blue", "red"])
def test_known_color_words(word):
    assert is_a_color_word(word) is True


@pytest.mark.parametrize("word", ["purple", "Green", ""])
def test_unknown_color_words(word):
    assert is_a_color_word(word) is False


def test_trim_a_string():
    assert trim_me("Hello!     ") == "Hello!"
    assert trim_me("  What's up!") == "What's up!"
    assert trim_me("   Hola!  ") == "Hola!"


def test_compose_a_string():
    assert compose_me("Hello") == "Hello world!"
    assert compose_me("Goodbye") == "Goodbye world!"


def test_replace_a_string():
    assert replace_me("I think cars are cool") == "I think balloons are cool"
    assert replace_me("I love to look at cars") == "I love to look at balloons"