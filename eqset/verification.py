import logging
from contextlib import ContextDecorator

import numpy

from .eq_set import EqSet

_default_seed = 21
_default_count = 20


def get_property_defaults():
    """Return the default seed and number of cases of :func:`check_property`."""
    return _default_seed, _default_count


def set_property_defaults(seed=None, count=None):
    """Change the default seed and/or number of cases of :func:`check_property`.

    Arguments left as None keep their current value.
    """
    global _default_seed, _default_count
    if count is not None and count < 1:
        raise ValueError("At least one case must be generated, got count=%d" % count)
    if seed is not None:
        _default_seed = seed
    if count is not None:
        _default_count = count


class property_settings(ContextDecorator):
    """A context manager and function decorator within which
    :func:`check_property` uses a different default seed and/or number of cases.

    Example usage:

        .. highlight:: python
        .. code-block:: python

            with property_settings(seed=3, count=50):
                check_property(lambda s: s.eq(s))

            @property_settings(count=5)
            def test_expensive_property():
                ...

    """

    def __init__(self, seed=None, count=None):
        if count is not None and count < 1:
            raise ValueError("At least one case must be generated, got count=%d" % count)
        self.seed = seed
        self.count = count
        # May be nested, keep a stack of the original settings.
        self._orig_settings = []

    def __enter__(self):
        self._orig_settings.append(get_property_defaults())
        set_property_defaults(self.seed, self.count)
        return self

    def __exit__(self, *args):
        global _default_seed, _default_count
        _default_seed, _default_count = self._orig_settings.pop()


def _sizes(rng, count):
    # 0, 1 and 2, then strictly increasing by random steps.
    size = 0
    for i in range(count):
        yield size
        size += 1 if i < 2 else int(rng.integers(1, 4))


def random_lists(count=None, seed=None):
    """Generate plain lists of integers of increasing length.

    The values of a list of length n are drawn from ``[0, n]``, so most
    lists hold duplicates.

    Args:
        count (int): The number of lists. Defaults to the configured count.
        seed (int or numpy.random.SeedSequence): Defaults to the configured seed.

    """
    count = _default_count if count is None else count
    rng = numpy.random.default_rng(_default_seed if seed is None else seed)
    for n in _sizes(rng, count):
        yield rng.integers(0, n + 1, size=n).tolist()


def random_sets(count=None, seed=None):
    """Generate sets of integers of strictly increasing size.

    The first three sets have zero, one and two elements. A set of size n
    holds values from ``[0, 2n]``, so sets of similar size tend to overlap.

    Args:
        count (int): The number of sets. Defaults to the configured count.
        seed (int or numpy.random.SeedSequence): Defaults to the configured seed.

    """
    count = _default_count if count is None else count
    rng = numpy.random.default_rng(_default_seed if seed is None else seed)
    for n in _sizes(rng, count):
        s = EqSet.from_iterable(rng.integers(0, 2 * n + 1, size=n).tolist())
        while s.size() < n:
            s = s.insert(int(rng.integers(0, 2 * n + 1)))
        yield s


def check_property(prop, arity=1, count=None, seed=None, name=None, generator=None,
                   stop_on_failure=True):
    """Check that prop holds for randomly generated inputs.

    Given a predicate over ``arity`` arguments, draws ``arity`` independent
    streams of inputs from ``generator`` and calls the predicate on each
    tuple of inputs. The run is reproducible: the same seed yields the same
    inputs.

    Args:
        prop (function): The property. Returns a truthy value when it holds.
        arity (int): The number of arguments of ``prop``.
        count (int): The number of cases. Defaults to the configured count.
        seed (int): The seed of the random inputs. Defaults to the configured seed.
        name (str): The name used when reporting. Defaults to the name of ``prop``.
        generator (function): Called as ``generator(count=..., seed=...)`` to
            produce one stream of inputs. Defaults to :func:`random_sets`.
        stop_on_failure (bool): Stop at the first counterexample. If False,
            every failing case is reported.

    Returns:
        bool: True if the property held for every case.

    """
    if arity < 1:
        raise ValueError("A property takes at least one argument, got arity=%d" % arity)
    count = _default_count if count is None else count
    seed = _default_seed if seed is None else seed
    generator = random_sets if generator is None else generator
    name = name or getattr(prop, "__name__", repr(prop))

    if arity == 1:
        seeds = [seed]
    else:
        seeds = numpy.random.SeedSequence(seed).spawn(arity)
    streams = [generator(count=count, seed=s) for s in seeds]

    print("Running property test {}".format(name))
    failures = 0
    for i, case in enumerate(zip(*streams)):
        if prop(*case):
            continue
        failures += 1
        logging.warning("Property {} failed on case {} (seed {}): {}".format(
            name, i, seed, ", ".join(map(repr, case))))
        if stop_on_failure:
            break

    if failures:
        return False
    print("Property {} held for {} cases".format(name, count))
    return True
