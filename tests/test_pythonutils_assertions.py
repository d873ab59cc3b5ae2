"""
Tests for the deepeq_utils.pythonutils.assertions file.
"""

import logging
import pytest
from collections import deque
from deepeq_utils.demo import demo_cases, run_demo
from deepeq_utils.pythonutils.assertions import assert_equals, run_test, run_tests
from deepeq_utils.pythonutils.equality import DiscrepancyKind, EqualityCheckingError, EqualityError


_DEMO_FAILURES = [
    'Test 02:  Expected "abcdef" but found "abc"',
    'Test 03:  Expected type Array but found type Object',
    'Test 04:  Expected Array length 2 but found 3',
    'Test 07:  Expected propB.propA[1].propB "b" but found "c"',
    'Test 08:  Expected propB.propC but was not found',
    'Test 09:  Expected type null but found type Object',
    'Test 10:  Expected propB.propC to be missing but was found',
]


def test_assert_equals():
    assert assert_equals('Test 01: ', 'abc', 'abc') is None
    assert assert_equals('nested', {'a': [1, {'b': None}]}, {'a': [1, {'b': None}]}) is None

    with pytest.raises(EqualityError) as exc_info:
        assert_equals('ctx', {'a': [1, 2]}, {'a': [1, 3]})

    assert str(exc_info.value) == 'ctx Expected a[1] "2" but found "3"'
    assert exc_info.value.label == 'ctx'
    assert exc_info.value.discrepancy.kind is DiscrepancyKind.VALUE_MISMATCH


def test_assert_equals_is_a_test_failure():
    """Failures are AssertionError's so test runners report them as failures rather than errors"""
    with pytest.raises(AssertionError, match='^Test 02:  Expected "abcdef" but found "abc"$'):
        assert_equals('Test 02: ', 'abcdef', 'abc')


def test_run_test():
    failures = ['from before']

    assert run_test('Test 05: ', failures, ['a', 'b', 'c'], ['a', 'b', 'c']) is True
    assert failures == ['from before']

    assert run_test('Test 04: ', failures, ['a', 'b'], ['a', 'b', 'c']) is False
    assert failures == ['from before', 'Test 04:  Expected Array length 2 but found 3']


def test_run_test_any_sink():
    sink = deque()
    run_test('x', sink, None, {})
    assert list(sink) == ['x Expected type null but found type Object']


def test_run_test_tuple_keys():
    failures = []
    assert run_test('x', failures, {}, {(1, 2): 1}) is False
    assert run_test('y', failures, {('a', 'b'): 1}, {}) is False
    assert failures == ['x Expected (1, 2) to be missing but was found', "y Expected ('a', 'b') but was not found"]


def test_run_test_checking_errors_propagate():
    """Only discrepancies get collected, unsupported values are still an error"""
    failures = []
    with pytest.raises(EqualityCheckingError):
        run_test('bad', failures, {1, 2}, {1, 2})
    assert failures == []


def test_run_test_logs_failures(caplog):
    caplog.set_level(logging.DEBUG, logger='deepeq_utils.pythonutils.assertions')
    run_test('Test 02: ', [], 'abcdef', 'abc')
    assert 'Recorded assertion failure: Test 02:  Expected "abcdef" but found "abc"' in caplog.messages


def test_run_tests():
    assert run_tests([]) == []
    assert run_tests(demo_cases()) == _DEMO_FAILURES

    failures = ['already here']
    assert run_tests([('a', 1, 2), ('b', 1, 1)], failures) is failures
    assert failures == ['already here', 'a Expected "1" but found "2"']


def test_run_demo():
    """All the demo failures are reported in order, and the passing ones don't show up"""
    assert run_demo() == _DEMO_FAILURES
    assert len(demo_cases()) == 10
