"""
Command line entry point

    deepeq EXPECTED.json ACTUAL.json [--label LABEL]
    deepeq --demo

Exits 0 when the documents are equal, 1 with the failure message when they are not, and 2 on usage or input errors.
"""

import argparse
import json
import logging
import sys
from .demo import run_demo
from .pythonutils.assertions import assert_equals
from .pythonutils.equality import EqualityError, equal
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, List, Optional


_LOGGER = logging.getLogger(__name__)


def _build_parser() -> 'argparse.ArgumentParser':
    parser = argparse.ArgumentParser(prog='deepeq', description='Structurally compare an expected and actual JSON document')
    parser.add_argument('expected', nargs='?', help='path to the expected JSON document')
    parser.add_argument('actual', nargs='?', help='path to the actual JSON document')
    parser.add_argument('--label', default=None, help='text to prefix the failure message with')
    parser.add_argument('--demo', action='store_true', help='run the bundled example assertions and list their failures')
    parser.add_argument('-v', '--verbose', action='store_true', help='enable debug logging')
    return parser


def _load_json(parser: 'argparse.ArgumentParser', path: 'str') -> 'Any':
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except OSError as e:
        parser.error("could not read %s: %s" % (repr(path), e.strerror or e))
    except json.JSONDecodeError as e:
        parser.error("invalid JSON in %s: %s" % (repr(path), e))


def main(argv: 'Optional[List[str]]' = None) -> 'int':
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    if args.demo:
        if args.expected is not None or args.actual is not None:
            parser.error("--demo does not take EXPECTED/ACTUAL arguments")
        for message in run_demo():
            print('- %s' % message)
        return 0

    if args.expected is None or args.actual is None:
        parser.error("both EXPECTED and ACTUAL paths are required")

    expected = _load_json(parser, args.expected)
    actual = _load_json(parser, args.actual)
    _LOGGER.debug("Comparing %s against %s", args.expected, args.actual)

    try:
        if args.label is None:
            equal(expected, actual, raise_err=True)
        else:
            assert_equals(args.label, expected, actual)
    except EqualityError as e:
        print(str(e))
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
