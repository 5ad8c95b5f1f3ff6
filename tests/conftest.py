import numpy.random
from eqset import continue_invariant_checks, set_property_defaults


def pytest_runtest_setup(item):
    """ Hook function which is called before every test """
    continue_invariant_checks()
    set_property_defaults(seed=21, count=20)

    # Fix the seed so permutations are the same on every run
    numpy.random.seed(21)
