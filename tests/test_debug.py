"""Tests for the debug log."""

import io

from calcium import SymbolTable, calc_eval
from calcium import config
from calcium.utils.debug import log, trace, disabled


def test_log_is_silent_without_debug(monkeypatch):
    file = io.StringIO()
    monkeypatch.setattr(config, 'debug', False)
    log('hidden', file=file)
    log('shown', debug=False, file=file)
    assert file.getvalue() == 'shown\n'


def test_evaluation_is_traced(monkeypatch):
    file = io.StringIO()
    monkeypatch.setattr(config, 'debug', True)
    monkeypatch.setattr(log, 'file', file)
    calc_eval('1 + 2', SymbolTable())
    text = file.getvalue()
    assert 'parse_expression' in text
    assert 'eval_tree' in text
    assert '==> 3' in text
    assert log.indent == 0


def test_trace_logs_exceptions(monkeypatch):
    file = io.StringIO()
    monkeypatch.setattr(config, 'debug', True)
    monkeypatch.setattr(log, 'file', file)

    @trace
    def fail(x):
        raise ValueError('bad %s' % x)

    try:
        fail(1)
    except ValueError:
        pass
    assert 'exited due to bad 1' in file.getvalue()
    assert log.indent == 0


def test_disabled_returns_the_function():
    f = lambda: 1
    assert disabled(f) is f
