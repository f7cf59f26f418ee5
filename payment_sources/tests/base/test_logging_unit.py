"""Unit coverage for structured logging utilities."""

from __future__ import annotations

import io
import json
import logging

from payment_sources.base.logging import (
    LogContext,
    configure_logger,
    get_logger,
    log_event,
)
from payment_sources.base.log_support import JsonFormatter


def test_get_logger_env_overrides_level(monkeypatch, capsys):
    monkeypatch.setenv("PAYMENT_SOURCES_LOG_LEVEL", "ERROR")
    logger = get_logger(name="payment_sources.test", json_mode=True, level=logging.DEBUG)
    logger.info("hello")
    assert capsys.readouterr().err == ""  # nosec B101 - asserts are appropriate in unit tests
    logger.error("fail")
    data = json.loads(capsys.readouterr().err.strip())
    assert data["level"] == "ERROR"  # nosec B101 - asserts are appropriate in unit tests
    assert data["logger"] == "payment_sources.test"


def test_child_names_are_prefixed():
    logger = get_logger("adhoc")
    assert logger.name == "payment_sources.adhoc"
    assert logger.propagate is True


def test_log_event_emits_single_json_line(capsys):
    logger = get_logger("payment_sources.test_event", json_mode=True)
    log_event(
        logger,
        "sources.request.built",
        LogContext(source_type="ideal", request_id="r1"),
        keys=["type", "amount"],
        dropped=None,
    )
    lines = [ln for ln in capsys.readouterr().err.splitlines() if ln.strip()]
    assert len(lines) == 1
    payload = json.loads(lines[0])
    assert payload["event"] == "sources.request.built"
    assert payload["source_type"] == "ideal"
    assert payload["keys"] == ["type", "amount"]
    assert "dropped" not in payload
    assert "msg" not in payload


def test_log_context_prunes_none_and_merges_extra():
    ctx = LogContext(source_type="card", extra={"attempt": 1, "skip": None})
    assert ctx.to_dict() == {"source_type": "card", "attempt": 1}


def test_json_formatter_keeps_plain_messages():
    record = logging.LogRecord(
        name="payment_sources.fmt",
        level=logging.WARNING,
        pathname=__file__,
        lineno=0,
        msg="built %s source params",
        args=("card",),
        exc_info=None,
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "built card source params"
    assert payload["level"] == "WARNING"


def test_configure_logger_manages_file_handler(tmp_path):
    log_file = tmp_path / "logs" / "sources.log"
    logger = configure_logger(level="DEBUG", file_path=str(log_file))
    try:
        assert logger.level == logging.DEBUG
        managed = [h for h in logger.handlers if getattr(h, "_payment_sources_file_handler", False)]
        assert len(managed) == 1
        # same path reuses the handler
        configure_logger(file_path=str(log_file))
        managed = [h for h in logger.handlers if getattr(h, "_payment_sources_file_handler", False)]
        assert len(managed) == 1
        get_logger("file_test").warning("to file")
        for h in managed:
            h.flush()
        assert "to file" in log_file.read_text(encoding="utf-8")
    finally:
        configure_logger(level="INFO", file_path=None)
    assert not [h for h in logger.handlers if getattr(h, "_payment_sources_file_handler", False)]


def _console_handlers(logger: logging.Logger) -> list:
    return [h for h in logger.handlers if getattr(h, "_payment_sources_console_handler", False)]


def test_closed_console_stream_is_replaced(capsys):
    base = get_logger()
    dead = io.StringIO()
    _console_handlers(base)[0].setStream(dead)
    dead.close()

    get_logger("after_close").warning("still logging")
    err = capsys.readouterr().err
    assert "still logging" in err  # nosec B101 - asserts are appropriate in unit tests
    assert "Logging error" not in err
    handlers = _console_handlers(base)
    assert len(handlers) == 1
    assert not handlers[0].stream.closed


def test_configured_level_survives_later_calls(tmp_path):
    logger = configure_logger(level="DEBUG")
    try:
        configure_logger(file_path=str(tmp_path / "pinned.log"))
        assert logger.level == logging.DEBUG
        get_logger("later_module")
        assert logger.level == logging.DEBUG
    finally:
        configure_logger(file_path=None)


def test_level_read_from_config_file(monkeypatch, tmp_path):
    cfg_file = tmp_path / "sources.json"
    cfg_file.write_text(json.dumps({"log_level": "DEBUG"}), encoding="utf-8")
    monkeypatch.setenv("PAYMENT_SOURCES_CONFIG_FILE", str(cfg_file))
    assert get_logger().level == logging.DEBUG

    monkeypatch.setenv("PAYMENT_SOURCES_LOG_LEVEL", "WARNING")
    assert get_logger().level == logging.WARNING
