from drillbook.solutions.pointers import (
    Cons,
    abs_all,
    create_empty_list,
    create_non_empty_list,
)


def test_create_empty_list():
    assert create_empty_list() is None


def test_create_non_empty_list():
    non_empty = create_non_empty_list()
    assert non_empty != create_empty_list()
    assert non_empty == Cons(1, Cons(2, None))
    assert list(non_empty) == [1, 2]


def test_reference_mutation():
    values = (-1, 0, 1)
    result = abs_all(values)
    assert result is not values
    assert list(result) == [1, 0, 1]
    assert values == (-1, 0, 1)


def test_reference_no_mutation():
    values = (0, 1, 2)
    result = abs_all(values)
    assert result is values
    assert result == (0, 1, 2)


def test_owned_no_mutation():
    values = [0, 1, 2]
    result = abs_all(values)
    assert result is values
    assert result == [0, 1, 2]


def test_owned_mutation():
    values = [-1, 0, 1]
    assert abs_all(values) == [1, 0, 1]