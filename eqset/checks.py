import logging
from contextlib import ContextDecorator

_invariant_checks_enabled = False


class InvariantError(ValueError):
    """A set was about to be built on a backing sequence with duplicates."""
    pass


def invariant_checks_enabled():
    """Return True if every new set validates its backing sequence."""
    return _invariant_checks_enabled


def pause_invariant_checks():
    """Switch off invariant checking."""
    global _invariant_checks_enabled
    _invariant_checks_enabled = False


def continue_invariant_checks():
    """Switch on invariant checking."""
    global _invariant_checks_enabled
    _invariant_checks_enabled = True
    return _invariant_checks_enabled


class stop_invariant_checks(ContextDecorator):
    """A context manager and function decorator within which invariant
    checking is switched off.

    Checking every construction is quadratic in the size of the set, so
    code building large sets from trusted sources may want to skip it.
    """

    def __init__(self):
        # May be nested, keep a stack of the original states.
        self._orig_enabled = []

    def __enter__(self):
        global _invariant_checks_enabled
        if _invariant_checks_enabled and not self._orig_enabled:
            logging.info("Invariant checks paused")
        self._orig_enabled.append(_invariant_checks_enabled)
        _invariant_checks_enabled = False

    def __exit__(self, *args):
        global _invariant_checks_enabled
        _invariant_checks_enabled = self._orig_enabled.pop()


no_invariant_checks = stop_invariant_checks()
"""Decorator to turn off invariant checking for the decorated function."""


def check_invariant(elements):
    """Raise :class:`InvariantError` if two elements of the sequence are equal.

    Args:
        elements (Sequence): The backing sequence of a set.

    """
    for i, x in enumerate(elements):
        for y in elements[i + 1:]:
            if x == y:
                raise InvariantError(
                    "Duplicate elements {!r} and {!r} in the backing sequence".format(x, y))
