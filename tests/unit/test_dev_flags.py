import pytest

from tagged_result._dev_flags import log_tracebacks_enabled

pytestmark = pytest.mark.unit


def test_disabled_by_default():
    assert log_tracebacks_enabled() is False


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("0", False), ("true", False)])
def test_env_value_must_be_exactly_one(monkeypatch, raw, expected):
    monkeypatch.setenv("TAGGED_RESULT_LOG_TRACEBACKS", raw)
    assert log_tracebacks_enabled() is expected


def test_override_takes_precedence(monkeypatch):
    monkeypatch.setenv("TAGGED_RESULT_LOG_TRACEBACKS", "1")
    assert log_tracebacks_enabled(override=False) is False
    monkeypatch.delenv("TAGGED_RESULT_LOG_TRACEBACKS")
    assert log_tracebacks_enabled(override=True) is True
