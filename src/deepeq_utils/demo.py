"""
A bundled batch of example assertions, seven of which fail on purpose to show off the failure messages
"""

from .pythonutils.assertions import run_tests
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, List, Tuple


def _complex_object(nested_prop_b: 'str' = 'b', with_prop_c: 'bool' = True) -> 'dict':
    nested = {
        'propA': [1, {'propA': 'a', 'propB': nested_prop_b}, 3],
        'propB': 1,
    }
    if with_prop_c:
        nested['propC'] = 2
    return {'propA': 1, 'propB': nested}


def demo_cases() -> 'List[Tuple[str, Any, Any]]':
    """Returns fresh (label, expected, actual) cases. Cases 01, 05 and 06 pass, the rest fail"""
    obj1 = _complex_object()
    obj1_copy = _complex_object()

    # Same values, different key order
    obj2 = {'propA': 1, 'propB': {'propB': 1, 'propA': [1, {'propA': 'a', 'propB': 'c'}, 3], 'propC': 2}}
    obj3 = _complex_object(with_prop_c=False)

    return [
        ('Test 01: ', 'abc', 'abc'),
        ('Test 02: ', 'abcdef', 'abc'),
        ('Test 03: ', ['a'], {0: 'a'}),
        ('Test 04: ', ['a', 'b'], ['a', 'b', 'c']),
        ('Test 05: ', ['a', 'b', 'c'], ['a', 'b', 'c']),
        ('Test 06: ', obj1, obj1_copy),
        ('Test 07: ', obj1, obj2),
        ('Test 08: ', obj1, obj3),
        ('Test 09: ', None, {}),
        ('Test 10: ', obj3, obj1),
    ]


def run_demo() -> 'List[str]':
    """Runs every demo case, returning the failure messages"""
    return run_tests(demo_cases())
