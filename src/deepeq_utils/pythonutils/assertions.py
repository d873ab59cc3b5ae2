"""
Test assertions built on :func:`~deepeq_utils.pythonutils.equality.compare`

``assert_equals`` raises on the first discrepancy, while ``run_test``/``run_tests`` record failure messages and keep
going so a whole batch of assertions can be reported together.
"""

import logging
from .equality import EqualityError, compare
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Iterable, List, Optional, Tuple


_LOGGER = logging.getLogger(__name__)


def assert_equals(label: 'str', expected: 'Any', actual: 'Any') -> 'None':
    """Asserts `expected` and `actual` are structurally equal

    Args:
        label (str): context for the failure message, eg: 'Test 01:'
        expected (Any): the expected value
        actual (Any): the actual value

    Raises:
        EqualityError: if the values differ. Its message is '<label> Expected <discrepancy message>'
    """
    discrepancy = compare(expected, actual)
    if discrepancy is not None:
        raise EqualityError(discrepancy, label=label)


def run_test(label: 'str', failures: 'List[str]', expected: 'Any', actual: 'Any') -> 'bool':
    """Runs :func:`assert_equals`, appending the failure message to `failures` instead of raising

    Args:
        label (str): context for the failure message
        failures (List[str]): where failure messages get appended. Anything with an .append() works
        expected (Any): the expected value
        actual (Any): the actual value

    Returns:
        bool: True if the values were equal, False if a failure was recorded
    """
    try:
        assert_equals(label, expected, actual)
    except EqualityError as e:
        _LOGGER.debug("Recorded assertion failure: %s", e)
        failures.append(str(e))
        return False
    return True


def run_tests(cases: 'Iterable[Tuple[str, Any, Any]]', failures: 'Optional[List[str]]' = None) -> 'List[str]':
    """Runs every (label, expected, actual) case through :func:`run_test` in order, returning the failure messages"""
    failures = [] if failures is None else failures
    for label, expected, actual in cases:
        run_test(label, failures, expected, actual)
    return failures
