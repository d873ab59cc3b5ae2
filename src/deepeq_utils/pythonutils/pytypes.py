"""
Shape classification for values that can be structurally compared.

Handled types:
    - None                                  (null)
    - list, tuple, numpy ndarray (1+ dims)  (Array)
    - dict and any other Mapping            (Object)
    - str, np.str_                          (string)
    - int, float, np.number                 (number)
    - bool, np.bool_                        (boolean)

Anything else is unsupported: classify() returns None for it and the comparator refuses it.
"""

import numpy as np
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, List, Optional


_MAX_STR_LEN = 1000


class Shape(Enum):
    """The closed set of value shapes, with the type name used in discrepancy messages"""
    NULL = 'null'
    ARRAY = 'Array'
    RECORD = 'Object'
    STRING = 'string'
    NUMBER = 'number'
    BOOLEAN = 'boolean'

    @property
    def is_primitive(self) -> 'bool':
        return self in _PRIMITIVE_SHAPES


_PRIMITIVE_SHAPES = frozenset((Shape.STRING, Shape.NUMBER, Shape.BOOLEAN))


def classify(value: 'Any') -> 'Optional[Shape]':
    """Returns the Shape of the given value

    Args:
        value (Any): the value to classify

    Returns:
        Optional[Shape]: the shape of `value`, or None if `value` is not one of the supported types
    """
    if value is None:
        return Shape.NULL

    # Check for bool first that way int's and bool's are never the same shape
    elif isinstance(value, (bool, np.bool_)):
        return Shape.BOOLEAN

    elif isinstance(value, (int, float, np.number)):
        return Shape.NUMBER

    elif isinstance(value, str):
        return Shape.STRING

    elif isinstance(value, (list, tuple)):
        return Shape.ARRAY

    # 0-d arrays have no length to compare
    elif isinstance(value, np.ndarray):
        return Shape.ARRAY if value.ndim > 0 else None

    elif isinstance(value, Mapping):
        return Shape.RECORD

    return None


def as_sequence(value: 'Any') -> 'List[Any]':
    """Returns something indexable for an Array value. Numpy arrays are converted with .tolist() so elements are python scalars"""
    if isinstance(value, np.ndarray):
        return value.tolist()
    return value


def limit_str(a: 'Any', limit: 'int' = _MAX_STR_LEN) -> 'str':
    a_str = repr(a)
    return a_str if len(a_str) < limit else (a_str[:limit] + '...')
