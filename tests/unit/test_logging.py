"""Unit tests for structured logging setup."""

import json

import pytest
import structlog
from pydantic import ValidationError

from riskengine.core.config import Settings
from riskengine.core.logging import setup_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestSetupLogging:

    def test_json_output(self, capsys):
        setup_logging(level="info", log_format="json")
        structlog.get_logger("test").info("kyc_assessed", subject_id="cust-1")

        lines = [line for line in capsys.readouterr().out.splitlines() if line]
        record = json.loads(lines[-1])

        assert record["event"] == "kyc_assessed"
        assert record["subject_id"] == "cust-1"
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_configuration_is_logged(self, capsys):
        setup_logging(level="debug", log_format="json")

        record = json.loads(capsys.readouterr().out.splitlines()[0])
        assert record["event"] == "logging_configured"
        assert record["level"] == "info"

    def test_level_filters(self, capsys):
        setup_logging(level="warning", log_format="json")
        structlog.get_logger("test").info("schedule_built")

        assert "schedule_built" not in capsys.readouterr().out


class TestLoggingSettings:

    def test_level_normalised(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("RISKENGINE_LOG_FORMAT", "console")
        assert Settings().log_format == "console"
