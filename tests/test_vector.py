import random

import pytest

from topview.vector import Vector, insertion_sort, quick_sort


def by_value(a, b):
    return a - b


def by_key(a, b):
    return a[0] - b[0]


def make(values, owner=True):
    return Vector(compare=by_value, owner=owner, items=values)


def test_add_appends_in_order():
    v = make([])
    for value in (3, 1, 2):
        v.add(value)
    assert list(v) == [3, 1, 2]
    assert len(v) == 3


def test_insert_in_middle_and_past_end():
    v = make([1, 2, 3])
    v.insert(1, 9)
    v.insert(100, 7)
    assert list(v) == [1, 9, 2, 3, 7]


def test_insert_negative_raises():
    with pytest.raises(IndexError):
        make([1]).insert(-1, 5)


def test_take_returns_and_shifts():
    v = make([10, 20, 30])
    assert v.take(1) == 20
    assert list(v) == [10, 30]


def test_take_out_of_range_raises():
    with pytest.raises(IndexError):
        make([1, 2]).take(2)


def test_remove_owner_returns_none():
    v = make([4, 5, 6], owner=True)
    assert v.remove(0) is None
    assert list(v) == [5, 6]


def test_remove_non_owner_returns_item():
    v = make([4, 5, 6], owner=False)
    assert v.remove(2) == 6
    assert list(v) == [4, 5]


def test_move_up_and_down():
    v = make([1, 2, 3])
    v.move_up(2)
    assert list(v) == [1, 3, 2]
    v.move_down(0)
    assert list(v) == [3, 1, 2]


def test_move_at_edges_is_noop():
    v = make([1, 2, 3])
    v.move_up(0)
    v.move_down(2)
    assert list(v) == [1, 2, 3]


def test_move_out_of_range_raises():
    with pytest.raises(IndexError):
        make([1]).move_up(3)
    with pytest.raises(IndexError):
        make([]).move_down(0)


def test_set_replaces_and_extends():
    v = make([1, 2])
    v.set(0, 8)
    v.set(2, 9)
    assert list(v) == [8, 2, 9]
    v.set(5, 1)
    assert len(v) == 6
    assert v[5] == 1
    assert v[3] is None


def test_index_of():
    v = make([5, 6, 7])
    assert v.index_of(6, by_value) == 1
    assert v.index_of(42, by_value) == -1


def test_prune_empties():
    v = make([1, 2, 3])
    v.prune()
    assert len(v) == 0


@pytest.mark.parametrize("seed", range(5))
def test_quick_sort_matches_sorted(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(rng.randint(0, 60))]
    v = make(values)
    v.quick_sort()
    assert list(v) == sorted(values)


@pytest.mark.parametrize("seed", range(5))
def test_insertion_sort_is_stable(seed):
    rng = random.Random(seed)
    pairs = [(rng.randint(0, 5), i) for i in range(40)]
    v = Vector(compare=by_key, items=pairs)
    v.insertion_sort()
    assert list(v) == sorted(pairs, key=lambda p: p[0])


def test_module_level_sorts_in_place():
    data = [9, 3, 7, 1, 1, 0]
    quick_sort(data, by_value)
    assert data == sorted([9, 3, 7, 1, 1, 0])
    other = [2, 1]
    insertion_sort(other, by_value)
    assert other == [1, 2]


def test_sort_without_compare_raises():
    with pytest.raises(TypeError):
        Vector(items=[2, 1]).quick_sort()
    with pytest.raises(TypeError):
        Vector(items=[2, 1]).insertion_sort()