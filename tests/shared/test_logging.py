"""Tests for stdout logging configuration and context binding."""

from __future__ import annotations

import json
import logging
from typing import Iterator

import pytest

from packages.generics_shared.config import LoggingSettings
from packages.generics_shared.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_context,
    get_logger,
    log_context,
)


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Restore root handlers, level, and bound context after a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    clear_context()


def test_json_output_includes_core_context_and_record_fields(
    capsys: pytest.CaptureFixture[str], restore_root_logging: None
) -> None:
    """JSON logs should carry core fields, seeded context, and record fields."""
    configure_logging(
        LoggingSettings(level="DEBUG", json_output=True, service="generics", environment="test")
    )

    get_logger("tests.logging").info("hello", extra={"fields": {"payload_type": "int"}})

    line = capsys.readouterr().out.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "tests.logging"
    assert payload["service"] == "generics"
    assert payload["environment"] == "test"
    assert payload["payload_type"] == "int"
    assert "timestamp" in payload


def test_plain_output_appends_sorted_context(
    capsys: pytest.CaptureFixture[str], restore_root_logging: None
) -> None:
    """Plain logs should append context as sorted key=value pairs."""
    configure_logging(LoggingSettings(json_output=False, service="generics", environment="test"))

    get_logger("tests.logging").warning("careful")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    assert "WARNING tests.logging careful" in line
    assert line.endswith("environment=test service=generics")


def test_configure_logging_replaces_existing_handlers(restore_root_logging: None) -> None:
    """Repeated configuration should leave exactly one root handler."""
    configure_logging()
    configure_logging(LoggingSettings(level="WARNING"))

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING


def test_configure_logging_applies_level_and_service(
    capsys: pytest.CaptureFixture[str], restore_root_logging: None
) -> None:
    """Settings-driven configuration should apply level and service fields."""
    configure_logging(
        LoggingSettings(level="ERROR", json_output=True, service="svc", environment="ci")
    )
    logger = get_logger("tests.logging")

    logger.warning("suppressed")
    logger.error("kept")

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["service"] == "svc"


def test_bind_context_ignores_none_and_stringifies(restore_root_logging: None) -> None:
    """bind_context should skip None values and stringify the rest."""
    bind_context(payload_type=None, observer_count=2)

    assert get_context() == {"observer_count": "2"}

    clear_context("observer_count")
    assert get_context() == {}


def test_log_context_is_scoped_to_block(restore_root_logging: None) -> None:
    """log_context should bind values only inside the with block."""
    bind_context(service="generics")

    with log_context({"source": "items"}, observer_count=1):
        assert get_context() == {
            "service": "generics",
            "source": "items",
            "observer_count": "1",
        }

    assert get_context() == {"service": "generics"}


def test_default_configuration_binds_service_fields(restore_root_logging: None) -> None:
    """configure_logging without settings should use LoggingSettings defaults."""
    configure_logging()

    assert get_context() == {"service": "generics", "environment": "dev"}
    assert logging.getLogger().level == logging.INFO
