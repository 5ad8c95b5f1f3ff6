import pytest
from eqset import OrderedSet


def test_sorted_iteration():
    s = OrderedSet([3, 1, 2, 3])
    assert list(s) == [1, 2, 3]
    assert len(s) == 3
    assert 2 in s
    assert 4 not in s
    assert repr(s) == "OrderedSet([1, 2, 3])"


def test_add_remove():
    s = OrderedSet()
    s.add("b")
    s.add("a")
    s.add("b")
    assert list(s) == ["a", "b"]
    s.remove("a")
    assert list(s) == ["b"]
    with pytest.raises(KeyError):
        s.remove("a")
    s.discard("a")
    s.discard("b")
    assert len(s) == 0


def test_first_last():
    s = OrderedSet([5, -1, 3])
    assert s.first() == -1
    assert s.last() == 5
    with pytest.raises(KeyError):
        OrderedSet().first()
    with pytest.raises(KeyError):
        OrderedSet().last()


def test_copy_is_independent():
    s = OrderedSet([1, 2])
    t = s.copy()
    t.add(0)
    assert list(s) == [1, 2]
    assert list(t) == [0, 1, 2]


def test_set_operations():
    a = OrderedSet([1, 2, 3])
    b = OrderedSet([3, 4])
    assert list(a | b) == [1, 2, 3, 4]
    assert list(a & b) == [3]
    assert list(a - b) == [1, 2]
    assert list(a ^ b) == [1, 2, 4]
    assert list(a.union([0], [9])) == [0, 1, 2, 3, 9]
    assert list(a.intersection([2, 3], [3])) == [3]
    assert list(a.difference([1], [2])) == [3]
    assert list(a.symmetric_difference([3, 5])) == [1, 2, 5]
    assert a == OrderedSet([3, 2, 1])


def test_operators_require_sets():
    with pytest.raises(TypeError):
        OrderedSet([1]) | [1]
    with pytest.raises(TypeError):
        OrderedSet([1]) - [1]


def test_reflected_operators():
    assert list({0, 2} | OrderedSet([1])) == [0, 1, 2]
    assert list(frozenset([1, 2]) & OrderedSet([2, 3])) == [2]
    assert list({1, 2, 3} - OrderedSet([2])) == [1, 3]
    assert list({1, 2} ^ OrderedSet([2, 3])) == [1, 3]
    with pytest.raises(TypeError):
        [1] | OrderedSet([2])
    with pytest.raises(TypeError):
        [1] - OrderedSet([2])


def test_merges_keep_sorted_order():
    a = OrderedSet([9, 1, 5])
    b = OrderedSet([6, 5, 0])
    assert list(a.union(b, [3, 10])) == [0, 1, 3, 5, 6, 9, 10]
    assert list(a.difference(b)) == [1, 9]
    assert list(a.intersection(b, [5, 9])) == [5]
    assert list(a.symmetric_difference(b)) == [0, 1, 6, 9]
    # unions are new sets
    c = a.union()
    c.add(2)
    assert list(a) == [1, 5, 9]


def test_equality():
    assert OrderedSet([2, 1]) == OrderedSet([1, 2])
    assert OrderedSet([1]) != OrderedSet([2])
    assert not OrderedSet([1]) == {1}
    assert not OrderedSet([1]) == [1]
    with pytest.raises(TypeError):
        hash(OrderedSet())
