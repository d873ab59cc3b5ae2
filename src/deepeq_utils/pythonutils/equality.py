"""
Utils for determining structural equality of test values, reporting where they differ

Handled types (see :mod:`~deepeq_utils.pythonutils.pytypes`):
    - None
    - bool
    - int, float, np.number
    - str
    - list, tuple, numpy ndarray (ordered, order sensitive)
    - dict and other Mappings (key order does not matter for equality, but decides which discrepancy is reported)

Comparison stops at the first discrepancy found in a depth-first traversal (array indices in order, then record keys in
iteration order) and describes it with a breadcrumb path, eg:

    >>> compare({'a': [1, {'b': 'x'}]}, {'a': [1, {'b': 'y'}]}).message
    'a[1].b "x" but found "y"'
"""

import math
import numpy as np
from dataclasses import dataclass, replace
from enum import Enum
from .pytypes import Shape, classify, as_sequence, limit_str
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Optional, Tuple


# Past this magnitude floats are rendered with an exponent rather than as integers
_MAX_PLAIN_FLOAT = 1e21


class DiscrepancyKind(Enum):
    TYPE_MISMATCH = 'type_mismatch'
    VALUE_MISMATCH = 'value_mismatch'
    LENGTH_MISMATCH = 'length_mismatch'
    MISSING_KEY = 'missing_key'
    EXTRA_KEY = 'extra_key'


@dataclass(frozen=True)
class PathSegment:
    """One step into a container: an array index or a record key

    `child_shape` is the shape of the expected value found at this step, and decides the divider rendered after the
    segment: nothing before an Array (so indices glue on, eg 'propA[1]'), a space before a primitive, '.' otherwise.
    """
    key: 'Any'
    child_shape: 'Shape'
    index: 'bool' = False

    @property
    def divider(self) -> 'str':
        if self.child_shape is Shape.ARRAY:
            return ''
        return ' ' if self.child_shape.is_primitive else '.'

    def render(self) -> 'str':
        return ('[%d]' % self.key if self.index else str(self.key)) + self.divider


@dataclass(frozen=True)
class Discrepancy:
    """The first difference found between an expected and actual value

    Args:
        kind (DiscrepancyKind): what sort of difference this is
        expected (Any): the expected sub-value where things differ. For MISSING_KEY, this is the missing key
        actual (Any): the actual sub-value where things differ. For EXTRA_KEY, this is the unexpected key
        path (Tuple[PathSegment, ...]): segments leading from the outermost value down to the difference
    """
    kind: 'DiscrepancyKind'
    expected: 'Any'
    actual: 'Any'
    path: 'Tuple[PathSegment, ...]' = ()

    def prefixed(self, segment: 'PathSegment') -> 'Discrepancy':
        """Returns a copy of this discrepancy one container further out"""
        return replace(self, path=(segment,) + self.path)

    @property
    def location(self) -> 'str':
        return ''.join(segment.render() for segment in self.path)

    @property
    def detail(self) -> 'str':
        """The message for this discrepancy without its path"""
        if self.kind is DiscrepancyKind.TYPE_MISMATCH:
            return 'type %s but found type %s' % (classify(self.expected).value, classify(self.actual).value)
        elif self.kind is DiscrepancyKind.VALUE_MISMATCH:
            return '"%s" but found "%s"' % (render_primitive(self.expected), render_primitive(self.actual))
        elif self.kind is DiscrepancyKind.LENGTH_MISMATCH:
            return 'Array length %d but found %d' % (len(self.expected), len(self.actual))
        elif self.kind is DiscrepancyKind.MISSING_KEY:
            return '%s but was not found' % (self.expected,)
        return '%s to be missing but was found' % (self.actual,)

    @property
    def message(self) -> 'str':
        return self.location + self.detail

    def __str__(self) -> 'str':
        return self.message


def compare(expected: 'Any', actual: 'Any') -> 'Optional[Discrepancy]':
    """
    Compares `expected` to `actual`, returning None if they are structurally equal, or the first Discrepancy found.

    Checks are done in order, and the first one that applies wins:

        1. `expected is actual`: equal
        2. values have different shapes (null, Array, Object, string, number, boolean): TYPE_MISMATCH
        3. primitives that are not ==: VALUE_MISMATCH
        4. Arrays of different length: LENGTH_MISMATCH, otherwise each index is compared in order
        5. Objects: each expected key in order must be in `actual` (MISSING_KEY) with an equal value, then any key of
           `actual` not in `expected` is an EXTRA_KEY

    NOTE: inputs are never modified, and there is no shared state, so this is safe to call from multiple threads. Cyclic
    values are not supported.

    Args:
        expected (Any): the expected value
        actual (Any): the actual value

    Raises:
        EqualityCheckingError: if either value (or any sub-value) is of an unsupported type

    Returns:
        Optional[Discrepancy]: None if the values are equal, otherwise the first discrepancy found
    """
    try:
        return _compare(expected, actual)
    except EqualityCheckingError:
        raise
    except Exception as err:
        raise EqualityCheckingError("Could not determine equality between objects\nexpected: %s\nactual: %s" %
            (limit_str(expected), limit_str(actual))) from err


def _compare(expected, actual):
    # Do a quick first check for 'is' as they should always be equal, no matter what
    if expected is actual:
        return None

    expected_shape, actual_shape = _get_shape(expected), _get_shape(actual)
    if expected_shape is not actual_shape:
        return Discrepancy(DiscrepancyKind.TYPE_MISMATCH, expected, actual)

    if expected_shape.is_primitive:
        if expected != actual:
            return Discrepancy(DiscrepancyKind.VALUE_MISMATCH, expected, actual)

    elif expected_shape is Shape.ARRAY:
        if len(expected) != len(actual):
            return Discrepancy(DiscrepancyKind.LENGTH_MISMATCH, expected, actual)

        for i, (sub_expected, sub_actual) in enumerate(zip(as_sequence(expected), as_sequence(actual))):
            discrepancy = _compare(sub_expected, sub_actual)
            if discrepancy is not None:
                return discrepancy.prefixed(PathSegment(i, _get_shape(sub_expected), index=True))

    elif expected_shape is Shape.RECORD:
        for k in expected:
            if k not in actual:
                return Discrepancy(DiscrepancyKind.MISSING_KEY, k, None)

            discrepancy = _compare(expected[k], actual[k])
            if discrepancy is not None:
                return discrepancy.prefixed(PathSegment(k, _get_shape(expected[k])))

        # All expected keys matched, look for any extras
        for k in actual:
            if k not in expected:
                return Discrepancy(DiscrepancyKind.EXTRA_KEY, None, k)

    return None


def _get_shape(value):
    shape = classify(value)
    if shape is None:
        raise EqualityCheckingError("Cannot compare value of unsupported type %s: %s"
            % (repr(type(value).__name__), limit_str(value)))
    return shape


def equal(expected: 'Any', actual: 'Any', raise_err: 'bool' = False) -> 'bool':
    """Determines whether `expected` and `actual` are structurally equal. See :func:`compare` for the rules used

    Args:
        expected (Any): the expected value
        actual (Any): the actual value
        raise_err (bool): if True, then an ``EqualityError`` describing the first discrepancy will be raised whenever the
            values are unequal. Defaults to False.
    """
    return _eq_check(compare(expected, actual), raise_err)


def _eq_check(discrepancy, raise_err):
    """bool equal check, determine whether or not we need to raise an error with info, or just return true/false"""
    if discrepancy is not None:
        if raise_err:
            raise EqualityError(discrepancy)
        return False
    return True


def render_primitive(value: 'Any') -> 'str':
    """Renders a primitive value the way it is quoted in discrepancy messages

    Booleans are 'true'/'false', integral floats drop their '.0', nan/inf are 'NaN'/'Infinity'/'-Infinity', and exponents
    have no leading zeros ('1e-7', '1e+21')
    """
    if isinstance(value, (bool, np.bool_)):
        return 'true' if value else 'false'
    elif isinstance(value, str):
        return str(value)

    if isinstance(value, np.number):
        value = value.item()

    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        elif math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        elif value.is_integer() and abs(value) < _MAX_PLAIN_FLOAT:
            return str(int(value))
        return _exponent_form(repr(value))
    elif isinstance(value, int):
        if abs(value) >= _MAX_PLAIN_FLOAT:
            return _exponent_form(repr(float(value)))
        return repr(int(value))
    return repr(value)


def _exponent_form(num_str):
    """'1e-07' -> '1e-7', '1e+21' stays. Strings without an exponent are returned as-is"""
    if 'e' not in num_str:
        return num_str
    mantissa, exponent = num_str.split('e')
    exponent = int(exponent)
    return '%se%s%d' % (mantissa, '+' if exponent > 0 else '-', abs(exponent))


class EqualityError(AssertionError):
    """Error raised whenever two values are found to differ and a failure was asked for

    The message is 'Expected <discrepancy message>', prefixed by '<label> ' when a label is given.
    """

    def __init__(self, discrepancy: 'Discrepancy', label: 'Optional[str]' = None):
        self.discrepancy = discrepancy
        self.label = label
        message = 'Expected ' + discrepancy.message
        super().__init__(message if label is None else '%s %s' % (label, message))


class EqualityCheckingError(Exception):
    """Error raised whenever there is an unexpected problem attempting to check equality between two objects"""
