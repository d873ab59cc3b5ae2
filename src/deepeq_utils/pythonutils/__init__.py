from .equality import Discrepancy, DiscrepancyKind, EqualityCheckingError, EqualityError, compare, equal
from .assertions import assert_equals, run_test, run_tests

__all__ = ['Discrepancy', 'DiscrepancyKind', 'EqualityCheckingError', 'EqualityError', 'compare', 'equal',
    'assert_equals', 'run_test', 'run_tests']
