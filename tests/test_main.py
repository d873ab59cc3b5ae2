"""
Tests for the command line entry point
"""

import json
import pytest
from deepeq_utils.__main__ import main


def _write_json(tmp_path, name, value):
    path = tmp_path / name
    path.write_text(json.dumps(value), encoding='utf-8')
    return str(path)


def test_equal_documents(tmp_path, capsys):
    expected = _write_json(tmp_path, 'expected.json', {'a': [1, 2], 'b': None})
    actual = _write_json(tmp_path, 'actual.json', {'b': None, 'a': [1, 2.0]})

    assert main([expected, actual]) == 0
    assert capsys.readouterr().out == ''


def test_different_documents(tmp_path, capsys):
    expected = _write_json(tmp_path, 'expected.json', {'a': [1, 2]})
    actual = _write_json(tmp_path, 'actual.json', {'a': [1, 3]})

    assert main([expected, actual]) == 1
    assert capsys.readouterr().out == 'Expected a[1] "2" but found "3"\n'

    assert main([expected, actual, '--label', 'snapshot:']) == 1
    assert capsys.readouterr().out == 'snapshot: Expected a[1] "2" but found "3"\n'


def test_demo(capsys):
    assert main(['--demo']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 7
    assert lines[0] == '- Test 02:  Expected "abcdef" but found "abc"'
    assert lines[-1] == '- Test 10:  Expected propB.propC to be missing but was found'


def test_bad_input(tmp_path, capsys):
    good = _write_json(tmp_path, 'good.json', [])
    bad = tmp_path / 'bad.json'
    bad.write_text('{not json', encoding='utf-8')

    arg_lists = [
        [good, str(tmp_path / 'missing.json')],
        [good, str(bad)],
        [good],
        ['--demo', good],
    ]
    for args in arg_lists:
        with pytest.raises(SystemExit) as exc_info:
            main(args)
        assert exc_info.value.code == 2

    assert 'invalid JSON' in capsys.readouterr().err
