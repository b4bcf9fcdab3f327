"""Testes para config.logging.

Cobre: configure_logging, CorrelationIdFilter, create_json_formatter e a
integração com o correlation_id de app.observability.
"""

from __future__ import annotations

import io
import json
import logging

import pytest

from app.observability import correlation_scope, get_correlation_id
from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "message") -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture
def captured_stream() -> io.StringIO:
    """Redireciona o handler JSON do root logger para um buffer."""
    configure_logging(
        level="DEBUG",
        service_name="relay_test",
        correlation_id_getter=get_correlation_id,
    )
    stream = io.StringIO()
    logging.getLogger().handlers[0].setStream(stream)
    return stream


class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("INFO", logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_sets_root_level(self, level: str, expected: int) -> None:
        configure_logging(level=level)

        assert logging.getLogger().level == expected

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]

        configure_logging()

        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "hook_relay"

    def test_get_logger_returns_named_logger(self) -> None:
        assert get_logger("relay.module") is logging.getLogger("relay.module")


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_adds_correlation_id_from_getter(self) -> None:
        record = _record()

        assert CorrelationIdFilter("svc", lambda: "corr-123").filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "svc"

    def test_preserves_explicit_correlation_id(self) -> None:
        record = _record()
        record.correlation_id = "explicit-id"

        CorrelationIdFilter("svc", lambda: "from-getter").filter(record)

        assert record.correlation_id == "explicit-id"

    def test_empty_string_without_getter(self) -> None:
        record = _record()

        CorrelationIdFilter("svc").filter(record)

        assert record.correlation_id == ""


class TestJsonOutput:
    """Formato JSON dos logs."""

    def test_required_fields_and_renames(self) -> None:
        assert REQUIRED_LOG_FIELDS == (
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        )
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_formatter_renders_renamed_fields(self) -> None:
        record = _record("notification_sent")
        record.correlation_id = "abc-123"
        record.service = "relay_test"

        output = json.loads(create_json_formatter().format(record))

        assert output["message"] == "notification_sent"
        assert output["level"] == "INFO"
        assert output["logger"] == "test"
        assert output["correlation_id"] == "abc-123"

    def test_log_line_carries_scope_correlation_id(self, captured_stream: io.StringIO) -> None:
        with correlation_scope("req-42"):
            get_logger("relay.test").info("notification_sent", extra={"event_type": "push"})

        line = json.loads(captured_stream.getvalue().strip().splitlines()[-1])
        assert line["correlation_id"] == "req-42"
        assert line["service"] == "relay_test"
        assert line["event_type"] == "push"

    def test_scope_restores_previous_value(self) -> None:
        with correlation_scope("outer"):
            with correlation_scope(None) as inner:
                assert inner != "outer"
                assert inner
            assert get_correlation_id() == "outer"
