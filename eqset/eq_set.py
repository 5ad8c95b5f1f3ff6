from collections.abc import Iterable, Iterator, Set
from functools import reduce
from typing import Any, Callable, Generic, Optional, Protocol, Tuple, TypeVar

from .checks import check_invariant, invariant_checks_enabled
from .listutil import append, filter_list, partition, remove_opt, size_eq, size_less_than
from .ordered_set import OrderedSet

T = TypeVar("T")
U = TypeVar("U")
S = TypeVar("S")


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any) -> bool: ...


class EqSet(Set, Generic[T]):
    """An immutable set of elements that only need to support ``==``.

    The elements are stored in a tuple without duplicates. They are never
    hashed and never ordered, so every operation is a linear scan (or a
    product of linear scans for operations on two sets). Operations never
    modify a set; they return a new one, or the set itself when the result
    is equal to it.

    The order of the backing tuple is not part of the interface. It shows
    through iteration and :meth:`to_string`, nowhere else.

    Args:
        iterable (Iterable): The elements of the set. Duplicates are dropped.

    """
    __slots__ = ["_elements"]

    def __init__(self, iterable: Iterable[T] = ()):
        elements = []
        for x in iterable:
            if x not in elements:
                elements.append(x)
        self._elements: Tuple[T, ...] = tuple(elements)

    @classmethod
    def _wrap(cls, elements) -> "EqSet":
        # Wrap a sequence already free of duplicates.
        elements = tuple(elements)
        if invariant_checks_enabled():
            check_invariant(elements)
        ret = cls.__new__(cls)
        ret._elements = elements
        return ret

    @classmethod
    def empty(cls) -> "EqSet":
        """Return the set with no elements."""
        return cls._wrap(())

    @classmethod
    def singleton(cls, x: T) -> "EqSet[T]":
        """Return the set containing exactly x."""
        return cls._wrap((x,))

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> "EqSet[T]":
        """Drain an iterable or iterator into a set."""
        return cls(iterable)

    @classmethod
    def range(cls, b: int, e: int) -> "EqSet[int]":
        """Return the set of integers in ``[b, e)``, empty if ``b >= e``."""
        return cls._wrap(range(b, e))

    @classmethod
    def unfold(cls, f: Callable[[S], Optional[Tuple[T, S]]], state: S) -> "EqSet[T]":
        """Build a set by repeatedly applying f to a state.

        Args:
            f (function): Maps a state to a pair ``(element, next_state)``,
                or to None to stop.
            state: The initial state.

        Returns:
            EqSet: Every element produced before f returned None.

        """
        elements = []
        while True:
            step = f(state)
            if step is None:
                break
            x, state = step
            if x not in elements:
                elements.append(x)
        return cls._wrap(elements)

    def _coerce(self, other) -> "EqSet":
        return other if isinstance(other, EqSet) else type(self)(other)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, x) -> bool:
        return x in self._elements

    def size(self) -> int:
        return len(self._elements)

    def is_empty(self) -> bool:
        return not self._elements

    def non_empty(self) -> bool:
        return bool(self._elements)

    def member_of(self, x) -> bool:
        """Return True if some element of this set equals x."""
        return x in self._elements

    def insert(self, x: T) -> "EqSet[T]":
        """Return this set with x added."""
        if x in self._elements:
            return self
        return self._wrap(self._elements + (x,))

    def remove(self, x) -> "EqSet[T]":
        """Return this set without x. Removing a non-member is a no-op."""
        elements = remove_opt(x, self._elements)
        if elements is None:
            return self
        return self._wrap(elements)

    def replace(self, src, dst: T) -> "EqSet[T]":
        """Replace src by dst if src is a member, otherwise return this set.

        dst collapses into an existing element equal to it.
        """
        elements = remove_opt(src, self._elements)
        if elements is None:
            return self
        return self._wrap(elements).insert(dst)

    def union(self, other: Iterable[T]) -> "EqSet[T]":
        """Return a set with the elements of this set and other.

        Inserts every element of other into this set, so elements present
        in both sets collapse.
        """
        other = self._coerce(other)
        if not other._elements:
            return self
        if not self._elements:
            return other
        new = [x for x in other._elements if x not in self._elements]
        if not new:
            return self
        return self._wrap(append(self._elements, new))

    def intersection(self, other: Iterable) -> "EqSet[T]":
        """Return the elements of this set that are members of other."""
        other = self._coerce(other)
        return self._wrap(filter_list(other.member_of, self._elements))

    def difference(self, other: Iterable) -> "EqSet[T]":
        """Return the elements of this set that are not members of other.

        Removes every element of other from this set in turn.
        """
        other = self._coerce(other)
        elements = self._elements
        removed = False
        for x in other._elements:
            if not elements:
                break
            remaining = remove_opt(x, elements)
            if remaining is not None:
                elements = remaining
                removed = True
        if not removed:
            return self
        return self._wrap(elements)

    def symmetric_difference(self, other: Iterable[T]) -> "EqSet[T]":
        """Return the elements that are members of exactly one of the two sets."""
        other = self._coerce(other)
        return self.difference(other).union(other.difference(self))

    def is_subset_of(self, other: Iterable) -> bool:
        """Return True if every element of this set is a member of other."""
        other = self._coerce(other)
        if size_less_than(other._elements, self._elements):
            return False
        return all(x in other._elements for x in self._elements)

    def is_proper_subset_of(self, other: Iterable) -> bool:
        """Return True if this set is a subset of other with fewer elements."""
        other = self._coerce(other)
        return size_less_than(self._elements, other._elements) and \
            all(x in other._elements for x in self._elements)

    def is_disjoint(self, other: Iterable) -> bool:
        other = self._coerce(other)
        return not any(x in other._elements for x in self._elements)

    isdisjoint = is_disjoint

    def eq(self, other: Iterable) -> bool:
        """Return True if both sets have the same size and the same members."""
        other = self._coerce(other)
        if not size_eq(self._elements, other._elements):
            return False
        return all(x in other._elements for x in self._elements) and \
            all(y in self._elements for y in other._elements)

    def __eq__(self, other):
        if not isinstance(other, EqSet):
            return False
        return self.eq(other)

    __hash__ = None

    def __le__(self, other):
        if not isinstance(other, EqSet):
            return NotImplemented
        return self.is_subset_of(other)

    def __lt__(self, other):
        if not isinstance(other, EqSet):
            return NotImplemented
        return self.is_proper_subset_of(other)

    def __ge__(self, other):
        if not isinstance(other, EqSet):
            return NotImplemented
        return other.is_subset_of(self)

    def __gt__(self, other):
        if not isinstance(other, EqSet):
            return NotImplemented
        return other.is_proper_subset_of(self)

    def _operand(self, other) -> "EqSet":
        if not isinstance(other, EqSet):
            raise TypeError("unsupported operand type: {}".format(type(other).__name__))
        return other

    def __or__(self, other: "EqSet") -> "EqSet":
        return self.union(self._operand(other))

    def __ror__(self, other: "EqSet") -> "EqSet":
        return self._operand(other).union(self)

    def __and__(self, other: "EqSet") -> "EqSet":
        return self.intersection(self._operand(other))

    def __rand__(self, other: "EqSet") -> "EqSet":
        return self._operand(other).intersection(self)

    def __sub__(self, other: "EqSet") -> "EqSet":
        return self.difference(self._operand(other))

    def __rsub__(self, other: "EqSet") -> "EqSet":
        return self._operand(other).difference(self)

    def __xor__(self, other: "EqSet") -> "EqSet":
        return self.symmetric_difference(self._operand(other))

    def __rxor__(self, other: "EqSet") -> "EqSet":
        return self._operand(other).symmetric_difference(self)

    def filter(self, pred: Callable[[T], bool]) -> "EqSet[T]":
        return self._wrap(filter_list(pred, self._elements))

    def partition(self, pred: Callable[[T], bool]) -> Tuple["EqSet[T]", "EqSet[T]"]:
        """Split this set into the elements satisfying pred and the rest."""
        matching, rest = partition(pred, self._elements)
        return self._wrap(matching), self._wrap(rest)

    def filter_map(self, f: Callable[[T], Optional[U]]) -> "EqSet[U]":
        """Apply f to every element and keep the results that are not None.

        Results equal to each other collapse into one of them; which one
        survives is not specified.
        """
        elements = []
        for x in self._elements:
            y = f(x)
            if y is not None and y not in elements:
                elements.append(y)
        return self._wrap(elements)

    def map(self, f: Callable[[T], U]) -> "EqSet[U]":
        """Apply f to every element, collapsing equal results."""
        elements = []
        for x in self._elements:
            y = f(x)
            if y not in elements:
                elements.append(y)
        return self._wrap(elements)

    def flatten(self) -> "EqSet":
        """Return the union of the sets contained in this set."""
        return reduce(EqSet.union, self._elements, self.empty())

    def subsets(self) -> "EqSet[EqSet[T]]":
        """Return the set of all subsets of this set, the empty set included."""
        family = self.singleton(self.empty())
        for x in self._elements:
            family = family.union(self._wrap(s.insert(x) for s in family))
        return family

    def to_ordered_set(self, f: Optional[Callable[[T], SupportsLessThan]] = None) -> OrderedSet:
        """Collect the elements, mapped through f, into an :class:`OrderedSet`.

        The images must be totally ordered. Unlike this set, the result
        iterates in ascending order.
        """
        return OrderedSet(self._elements if f is None else map(f, self._elements))

    def to_list(self) -> list:
        return list(self._elements)

    def count(self, pred: Callable[[T], bool]) -> int:
        return sum(1 for x in self._elements if pred(x))

    def exists(self, pred: Callable[[T], bool]) -> bool:
        return any(pred(x) for x in self._elements)

    def for_all(self, pred: Callable[[T], bool]) -> bool:
        return all(pred(x) for x in self._elements)

    def find(self, pred: Callable[[T], bool]) -> Optional[T]:
        """Return some element satisfying pred, or None."""
        return next((x for x in self._elements if pred(x)), None)

    def sum_with(self, f: Callable[[T], Any]):
        return sum(f(x) for x in self._elements)

    def maximum_by(self, key: Callable[[T], SupportsLessThan]) -> Optional[T]:
        """Return an element with the largest key, or None for the empty set."""
        return max(self._elements, key=key, default=None)

    def minimum_by(self, key: Callable[[T], SupportsLessThan]) -> Optional[T]:
        """Return an element with the smallest key, or None for the empty set."""
        return min(self._elements, key=key, default=None)

    def fold(self, f: Callable[[U, T], U], initial: U) -> U:
        return reduce(f, self._elements, initial)

    def reduce(self, f: Callable[[T, T], T]) -> Optional[T]:
        if not self._elements:
            return None
        return reduce(f, self._elements)

    def for_each(self, f: Callable[[T], Any]) -> None:
        for x in self._elements:
            f(x)

    def join(self, sep: str, f: Callable[[T], str] = str) -> str:
        return sep.join(f(x) for x in self._elements)

    def to_string(self) -> str:
        """Render as ``Set(e1, e2, ...)``. The element order is unspecified."""
        return "Set({})".format(self.join(", "))

    __str__ = to_string

    def __repr__(self) -> str:
        return "Set({})".format(self.join(", ", repr))
