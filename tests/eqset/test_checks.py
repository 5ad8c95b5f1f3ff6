import pytest
from eqset import *  # noqa: F403
from eqset.checks import check_invariant


def test_invariant_checks_configuration():
    # conftest switches checks on before every test
    assert invariant_checks_enabled()

    pause_invariant_checks()
    assert not invariant_checks_enabled()
    continue_invariant_checks()
    assert invariant_checks_enabled()

    with stop_invariant_checks():
        assert not invariant_checks_enabled()
        with stop_invariant_checks():
            assert not invariant_checks_enabled()
        assert not invariant_checks_enabled()
    assert invariant_checks_enabled()

    @no_invariant_checks
    def test():
        assert not invariant_checks_enabled()

    test()
    assert invariant_checks_enabled()

    pause_invariant_checks()
    test()
    assert not invariant_checks_enabled()


def test_check_invariant():
    check_invariant(())
    check_invariant((1, 2, 3))
    check_invariant(([1], [2]))
    with pytest.raises(InvariantError):
        check_invariant((1, 2, 1))
    with pytest.raises(ValueError):
        check_invariant(([1], [1]))


def test_invalid_backing_sequence_is_rejected():
    with pytest.raises(InvariantError):
        EqSet._wrap([1, 1])

    with stop_invariant_checks():
        s = EqSet._wrap([1, 1])
    assert len(s) == 2


def test_operations_pass_checks():
    s = EqSet([[1], [2], [3]])
    assert s.insert([1]).eq(s)
    assert s.union(EqSet([[3], [4]])).size() == 4
    assert s.map(len).eq(EqSet.singleton(1))
    assert s.subsets().size() == 8
