import pytest

from skirmish.core import Point
from skirmish.grouper import Grouper, sort_values


def make(*values, capacity=1):
    bag = Grouper(capacity)
    for value in values:
        bag.append(value)
    return bag


def test_append_grows_capacity_one_at_a_time():
    bag = Grouper(2)
    bag.append("a")
    bag.append("b")
    assert bag.capacity == 2
    bag.append("c")
    assert bag.capacity == 3
    assert list(bag) == ["a", "b", "c"]
    assert len(bag) == 3


def test_append_within_capacity_keeps_capacity():
    bag = Grouper(5)
    bag.append(1)
    assert bag.capacity == 5
    assert len(bag) == 1


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Grouper(-1)


def test_replace_first_does_not_change_size():
    bag = make(1, 2, 3)
    bag.replace_first(9)
    assert list(bag) == [9, 2, 3]
    empty = Grouper(3)
    empty.replace_first(4)
    assert len(empty) == 0


def test_first_and_last():
    bag = make("x", "y", "z")
    assert bag.first() == "x"
    assert bag.last() == "z"


def test_first_last_empty_raise():
    bag = Grouper()
    with pytest.raises(IndexError):
        bag.first()
    with pytest.raises(IndexError):
        bag.last()


def test_getitem_setitem():
    bag = make(1, 2, 3)
    bag[1] = 20
    assert bag[1] == 20
    assert bag[-1] == 3
    with pytest.raises(IndexError):
        bag[3]
    with pytest.raises(IndexError):
        bag[5] = 0


def test_insert_middle_shifts_right():
    bag = make(1, 2, 3, capacity=3)
    bag.insert(1, 7)
    assert list(bag) == [1, 7, 2, 3]
    assert bag.capacity == 4


def test_insert_with_spare_capacity():
    bag = make(1, 2, 3, capacity=10)
    bag.insert(0, 0)
    assert list(bag) == [0, 1, 2, 3]
    assert bag.capacity == 10


def test_insert_at_last_position_replaces():
    bag = make(1, 2, 3)
    bag.insert(2, 8)
    assert list(bag) == [1, 2, 8]


def test_insert_out_of_range():
    with pytest.raises(IndexError):
        make(1, 2).insert(2, 5)
    with pytest.raises(IndexError):
        Grouper().insert(0, 5)


def test_erase():
    bag = make("a", "b", "c")
    bag.erase(1)
    assert list(bag) == ["a", "c"]
    assert bag.capacity == 3


def test_erase_last_remaining_refused():
    bag = make("only")
    with pytest.raises(IndexError):
        bag.erase(0)
    assert list(bag) == ["only"]


def test_erase_out_of_range():
    with pytest.raises(IndexError):
        make(1, 2).erase(4)


def test_sort_values_numbers():
    bag = make(5, 1, 4, 2)
    assert sort_values(bag) is True
    assert list(bag) == [1, 2, 4, 5]


def test_sort_values_characters():
    bag = make("c", "a", "b")
    assert sort_values(bag) is True
    assert list(bag) == ["a", "b", "c"]


def test_sort_values_two_elements_untouched():
    bag = make(9, 3)
    assert sort_values(bag) is True
    assert list(bag) == [9, 3]


def test_sort_values_rejects_non_plain():
    bag = make(Point(2, 2), Point(1, 1), Point(0, 0))
    assert sort_values(bag) is False
    assert bag.first() == Point(2, 2)


def test_sort_values_on_plain_list():
    values = [3.5, -1.0, 2.25]
    assert sort_values(values) is True
    assert values == sorted([3.5, -1.0, 2.25])