import io
import json
import logging

import pytest

from editfilter import RegexEditFilter
from editfilter.logging.helpers import JsonLogFormatter, get_logger, trace_eval


def test_get_logger_namespacing():
    assert get_logger().name == "editfilter"
    assert get_logger("editfilter").name == "editfilter"
    assert get_logger("cli").name == "editfilter.cli"
    assert get_logger("editfilter.filters.regex").name == "editfilter.filters.regex"


def test_json_formatter_payload():
    record = logging.LogRecord("editfilter.t", logging.INFO, __file__, 1, "hello %s", ("x",), None)
    record.context = {"span": [0, 1]}
    payload = json.loads(JsonLogFormatter().format(record))
    assert payload["msg"] == "hello x"
    assert payload["level"] == "INFO"
    assert payload["module"] == "editfilter.t"
    assert payload["ctx"] == {"span": [0, 1]}
    assert payload["ts"].endswith("Z")
    assert payload["version"] != "unknown"


@pytest.fixture
def capture():
    """Yield a builder of isolated DEBUG loggers writing to a StringIO; undo everything on teardown."""
    touched = []

    def _build(name):
        stream = io.StringIO()
        lg = logging.getLogger(name)
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter("%(message)s"))
        touched.append((lg, handler, lg.level, lg.propagate))
        lg.propagate = False
        lg.setLevel(logging.DEBUG)
        lg.addHandler(handler)
        return lg, stream

    yield _build
    for lg, handler, level, propagate in reversed(touched):
        lg.removeHandler(handler)
        lg.setLevel(level)
        lg.propagate = propagate


def test_trace_eval_is_gated(monkeypatch, capture):
    lg, stream = capture("editfilter.tests.trace")
    monkeypatch.delenv("EDITFILTER_TRACE", raising=False)
    trace_eval(lg, "quiet", a=1)
    assert stream.getvalue() == ""
    monkeypatch.setenv("EDITFILTER_TRACE", "1")
    trace_eval(lg, "loud", a=1)
    assert "loud" in stream.getvalue()


def test_filter_traces_verdict(monkeypatch, capture):
    lg, stream = capture("editfilter.tests.filter")
    monkeypatch.setenv("EDITFILTER_TRACE", "1")
    RegexEditFilter(r"[0-9]*", logger=lg).evaluate("1", 1, 1, "a", 0, 1)
    assert "accept_empty" in stream.getvalue()


def test_compile_failure_is_logged(capture):
    lg, stream = capture("editfilter.tests.compile")
    with pytest.raises(ValueError):
        RegexEditFilter("(", logger=lg)
    assert "invalid pattern" in stream.getvalue()


def test_trace_eval_skips_when_debug_disabled(monkeypatch, capture):
    lg, stream = capture("editfilter.tests.quiet_level")
    lg.setLevel(logging.INFO)
    monkeypatch.setenv("EDITFILTER_TRACE", "1")
    trace_eval(lg, "hidden", a=1)
    assert stream.getvalue() == ""


class _ListLogger:
    """A logger-like object that is not a logging.Logger."""

    def __init__(self):
        self.records = []

    def debug(self, msg, *args, **kwargs):
        self.records.append(("debug", msg % args))

    def warning(self, msg, *args, **kwargs):
        self.records.append(("warning", msg % args))

    def error(self, msg, *args, **kwargs):
        self.records.append(("error", msg % args))

    def isEnabledFor(self, level):
        return True


def test_filter_accepts_any_logger_like(monkeypatch):
    from editfilter.core.interfaces import LoggerLikeProtocol

    sink = _ListLogger()
    assert isinstance(sink, LoggerLikeProtocol)
    monkeypatch.setenv("EDITFILTER_TRACE", "1")
    RegexEditFilter(r"[0-9]*", logger=sink).evaluate("1", 0, 1, "x", 0, 1)
    assert sink.records and sink.records[-1][0] == "debug"
    assert "reject" in sink.records[-1][1]
    with pytest.raises(ValueError):
        RegexEditFilter("[", logger=sink)
    assert sink.records[-1][0] == "warning"


@pytest.mark.parametrize(
    "env, verbose, expected_level, expected_json",
    [
        ({}, False, logging.INFO, False),
        ({}, True, logging.DEBUG, False),
        ({"EDITFILTER_TRACE": "1"}, False, logging.DEBUG, False),
        ({"EDITFILTER_JSON_LOGS": "1"}, False, logging.INFO, True),
    ],
)
def test_logger_factory_from_env(monkeypatch, env, verbose, expected_level, expected_json):
    from editfilter.logging.factory import DefaultLoggerFactory

    monkeypatch.delenv("EDITFILTER_TRACE", raising=False)
    monkeypatch.delenv("EDITFILTER_JSON_LOGS", raising=False)
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    factory = DefaultLoggerFactory.from_env(verbose=verbose)
    assert factory.level == expected_level
    assert factory.json_logs is expected_json
