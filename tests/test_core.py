"""Unit tests for settings and logging helpers."""
import io
import json
import logging

import pytest

from hospital_factory.core.config import Settings
from hospital_factory.core.logging import (
    ContextLogger,
    JSONFormatter,
    LogTimer,
    get_logger,
    setup_logging,
)


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for var in ("ENVIRONMENT", "DEBUG", "LOG_LEVEL", "LOG_JSON", "API_PREFIX"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.api_prefix == "/api/v1"

    def test_reads_environment_aliases(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_JSON", "true")
        monkeypatch.setenv("API_PREFIX", "/hospital")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.log_json is True
        assert settings.api_prefix == "/hospital"

    def test_validate_accepts_defaults(self):
        Settings(_env_file=None, LOG_LEVEL="info", API_PREFIX="/api/v1").validate_required_settings()

    def test_validate_rejects_unknown_log_level(self):
        settings = Settings(_env_file=None, LOG_LEVEL="LOUD")
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            settings.validate_required_settings()

    def test_validate_rejects_relative_prefix(self):
        settings = Settings(_env_file=None, LOG_LEVEL="INFO", API_PREFIX="api")
        with pytest.raises(ValueError, match="API_PREFIX"):
            settings.validate_required_settings()


class TestLogging:
    """Test logging setup and helpers."""

    def test_setup_logging_installs_single_handler(self):
        stream = io.StringIO()

        root = setup_logging(level="DEBUG", json_format=False, stream=stream)
        setup_logging(level="DEBUG", json_format=False, stream=stream)

        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_setup_logging_unknown_level_falls_back_to_info(self):
        stream = io.StringIO()
        settings = Settings(_env_file=None, LOG_LEVEL="loud")

        root = setup_logging(level=settings.log_level, json_format=False, stream=stream)

        assert root.level == logging.INFO
        assert root.handlers[0].level == logging.INFO
        assert "Unknown log level 'loud', falling back to INFO" in stream.getvalue()

    def test_setup_logging_accepts_lowercase_level(self):
        root = setup_logging(level="warning", stream=io.StringIO())
        assert root.level == logging.WARNING

    def test_json_formatter_includes_context(self):
        record = logging.LogRecord(
            name="hospital", level=logging.INFO, pathname=__file__, lineno=1,
            msg="Будівля готова", args=(), exc_info=None,
        )
        record.family = "field"

        payload = json.loads(JSONFormatter().format(record))

        assert payload["message"] == "Будівля готова"
        assert payload["level"] == "INFO"
        assert payload["family"] == "field"
        assert payload["timestamp"].endswith("Z")

    def test_context_logger_merges_extra(self):
        stream = io.StringIO()
        setup_logging(level="INFO", json_format=True, stream=stream)

        logger = get_logger("hospital.test", {"family": "capital"})
        logger.info("assembled", extra={"operation": "build"})

        payload = json.loads(stream.getvalue().strip())
        assert isinstance(logger, ContextLogger)
        assert payload["family"] == "capital"
        assert payload["operation"] == "build"

    def test_get_logger_without_context(self):
        assert isinstance(get_logger("hospital.plain"), logging.Logger)

    def test_log_timer_success(self, caplog):
        logger = logging.getLogger("hospital.timer")
        with caplog.at_level(logging.INFO, logger="hospital.timer"):
            with LogTimer(logger, "scenario"):
                pass

        assert "scenario completed in" in caplog.text

    def test_log_timer_failure_reraises(self, caplog):
        logger = logging.getLogger("hospital.timer")
        with caplog.at_level(logging.ERROR, logger="hospital.timer"):
            with pytest.raises(RuntimeError):
                with LogTimer(logger, "scenario"):
                    raise RuntimeError("boom")

        assert "scenario failed after" in caplog.text
