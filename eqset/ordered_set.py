from bisect import bisect_left, insort
from collections.abc import Iterable, Iterator, MutableSet, Set


class OrderedSet(MutableSet):
    def __init__(self, iterable: Iterable = ()):
        """
        An OrderedSet is a set whose elements are kept sorted, so its
        elements must be totally ordered by ``<``.

        Iteration is in ascending order. Membership, insertion and removal
        locate the element by binary search.

        Args:
          iterable: An iterable with which to initialise the set elements.
        """

        self._elements: list = []

        for element in iterable:
            self.add(element)

    def _index(self, obj) -> int:
        """Return the position of obj, or -1 if it is not a member."""

        i = bisect_left(self._elements, obj)
        if i < len(self._elements) and not obj < self._elements[i]:
            return i
        return -1

    def __contains__(self, obj) -> bool:
        return self._index(obj) >= 0

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator:
        return iter(self._elements)

    def __repr__(self) -> str:
        return "OrderedSet([{}])".format(", ".join(map(repr, self._elements)))

    def copy(self) -> "OrderedSet":
        """Return a shallow copy of this set"""

        ret = type(self)()
        ret._elements = self._elements.copy()

        return ret

    def add(self, obj) -> None:
        """Add obj to this set."""

        if obj not in self:
            insort(self._elements, obj)

    def remove(self, obj) -> None:
        """Remove obj from this set, it must be a member."""

        i = self._index(obj)
        if i < 0:
            raise KeyError(obj)
        del self._elements[i]

    def discard(self, obj) -> None:
        """Remove obj from this set if it is present."""

        i = self._index(obj)
        if i >= 0:
            del self._elements[i]

    def first(self):
        """Return the smallest element."""

        if not self._elements:
            raise KeyError("first() of an empty OrderedSet")
        return self._elements[0]

    def last(self):
        """Return the largest element."""

        if not self._elements:
            raise KeyError("last() of an empty OrderedSet")
        return self._elements[-1]

    def __eq__(self, other):
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return self._elements == other._elements

    __hash__ = None

    def _sorted(self, other: Iterable) -> list:
        # The elements of other in ascending order without duplicates.
        if isinstance(other, OrderedSet):
            return other._elements
        return type(self)(other)._elements

    def _merged(self, others, keep) -> "OrderedSet":
        """Merge the sorted elements of this set with each of others in turn.

        ``keep(in_self, in_other)`` decides which elements of each merge
        survive into the next one.
        """

        elements = self._elements
        for other in others:
            elements = [x for x, in_a, in_b in _merge(elements, self._sorted(other))
                        if keep(in_a, in_b)]

        ret = type(self)()
        ret._elements = list(elements)
        return ret

    def union(self, *others: Iterable) -> "OrderedSet":
        """Return a new set with elements from this set and others."""
        return self._merged(others, lambda in_a, in_b: True)

    def difference(self, *others: Iterable) -> "OrderedSet":
        """Return a new set with elements from this set that are not in others."""
        return self._merged(others, lambda in_a, in_b: in_a and not in_b)

    def intersection(self, *others: Iterable) -> "OrderedSet":
        """Return a new set with elements common to this set and all others."""
        return self._merged(others, lambda in_a, in_b: in_a and in_b)

    def symmetric_difference(self, other: Iterable) -> "OrderedSet":
        """Return a new set with elements in exactly one of this set and other."""
        return self._merged([other], lambda in_a, in_b: in_a != in_b)

    def _operand(self, other) -> Set:
        if not isinstance(other, Set):
            raise TypeError("unsupported operand type: {}".format(type(other).__name__))
        return other

    def __or__(self, other: Set) -> "OrderedSet":
        return self.union(self._operand(other))

    __ror__ = __or__

    def __and__(self, other: Set) -> "OrderedSet":
        return self.intersection(self._operand(other))

    __rand__ = __and__

    def __sub__(self, other: Set) -> "OrderedSet":
        return self.difference(self._operand(other))

    def __rsub__(self, other: Set) -> "OrderedSet":
        return type(self)(self._operand(other)).difference(self)

    def __xor__(self, other: Set) -> "OrderedSet":
        return self.symmetric_difference(self._operand(other))

    __rxor__ = __xor__


def _merge(a, b):
    """Walk two ascending lists together.

    Yields ``(element, in_a, in_b)`` for every element of either list, in
    ascending order.
    """
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            yield a[i], True, False
            i += 1
        elif b[j] < a[i]:
            yield b[j], False, True
            j += 1
        else:
            yield a[i], True, True
            i += 1
            j += 1
    for x in a[i:]:
        yield x, True, False
    for x in b[j:]:
        yield x, False, True
