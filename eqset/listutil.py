"""Helpers over the plain sequences backing an :class:`EqSet`.

None of these functions care about duplicates; keeping the backing
sequence duplicate free is the job of the caller.
"""
from itertools import zip_longest
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

_exhausted = object()


def append(l1: Iterable[T], l2: Iterable[T]) -> List[T]:
    """Return a list with the elements of both inputs, in no particular order."""
    ret = list(l1)
    ret.extend(l2)
    return ret


def remove_opt(x, seq: Sequence[T]) -> Optional[List[T]]:
    """Remove one element equal to x from seq.

    Returns:
        list or None: ``seq`` without the first element equal to ``x``, or None
        if no element of ``seq`` equals ``x``.

    """
    for i, y in enumerate(seq):
        if y is x or y == x:
            return list(seq[:i]) + list(seq[i + 1:])
    return None


def partition(pred: Callable[[T], bool], seq: Iterable[T]) -> Tuple[List[T], List[T]]:
    """Split seq into the elements satisfying pred and the rest."""
    matching, rest = [], []
    for x in seq:
        if pred(x):
            matching.append(x)
        else:
            rest.append(x)
    return matching, rest


def filter_list(pred: Callable[[T], bool], seq: Iterable[T]) -> List[T]:
    return [x for x in seq if pred(x)]


def _compare_sizes(l1, l2):
    # -1, 0 or 1 as l1 is shorter, as long as, or longer than l2.
    for a, b in zip_longest(l1, l2, fillvalue=_exhausted):
        if a is _exhausted:
            return -1
        if b is _exhausted:
            return 1
    return 0


def size_less_than(l1: Iterable, l2: Iterable) -> bool:
    """Return True if l1 has fewer elements than l2.

    Both iterables are consumed in lockstep and the comparison stops as soon
    as either one runs out, so neither length is ever computed in full.
    """
    return _compare_sizes(l1, l2) < 0


def size_eq(l1: Iterable, l2: Iterable) -> bool:
    """Return True if l1 and l2 have the same number of elements."""
    return _compare_sizes(l1, l2) == 0
