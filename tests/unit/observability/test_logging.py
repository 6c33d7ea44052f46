"""Unit tests for structured logging helpers."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from mongo_event_store.observability.logging import configure_logging, get_logger


@pytest.fixture()
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("tests", aggregate_root_id="inv-1").info("event_store.load.completed")
        assert logs == [
            {
                "aggregate_root_id": "inv-1",
                "event": "event_store.load.completed",
                "log_level": "info",
            }
        ]

    def test_without_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("tests").warning("something")
        assert logs[0]["log_level"] == "warning"


class TestConfigureLogging:
    def test_renders_json_on_root_handler(
        self, restore_logging: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(logging.DEBUG)
        get_logger("tests.json").info("event_store.save.completed", stored=3)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "event_store.save.completed"
        assert payload["stored"] == 3
        assert payload["level"] == "info"
        assert payload["logger"] == "tests.json"
        assert "timestamp" in payload

    def test_sets_root_level(self, restore_logging: None) -> None:
        configure_logging(logging.WARNING, json=False)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
