import json
import logging

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from tradetypes.config.settings import Environment, LoggingSettings, Settings, get_settings
from tradetypes.logging import bind_broker_context, configure_logging, get_logger


def test_settings_defaults(test_settings):
    assert test_settings.environment is Environment.TESTING
    assert test_settings.logging.level == "INFO"
    assert test_settings.errors.default_status_code == 500
    assert test_settings.validation.strict is False
    assert test_settings.validation.max_strike is None


def test_settings_from_nested_env(monkeypatch):
    monkeypatch.setenv("TRADETYPES_ENVIRONMENT", "production")
    monkeypatch.setenv("TRADETYPES_LOGGING__LEVEL", "debug")
    monkeypatch.setenv("TRADETYPES_VALIDATION__STRICT", "true")

    settings = Settings(_env_file=None)
    assert settings.environment is Environment.PRODUCTION
    assert settings.logging.level == "DEBUG"
    assert settings.validation.strict is True


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_invalid_settings_rejected():
    with pytest.raises(ValidationError):
        LoggingSettings(level="LOUD")
    with pytest.raises(ValidationError):
        Settings(_env_file=None, errors={"default_status_code": 42})


@pytest.mark.parametrize("json_format", [True, False])
def test_configure_logging_renders(json_format, capsys):
    settings = Settings(_env_file=None, logging=LoggingSettings(json_format=json_format))
    configure_logging(settings, force=True)
    try:
        get_logger("tests.logging", component="tests").info("configured", answer=42)
        out = capsys.readouterr().out
    finally:
        # Root handler points at the capsys stream
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)
    assert "configured" in out
    assert "answer" in out


def test_configure_logging_stamps_environment(capsys):
    settings = Settings(_env_file=None, environment="production")
    configure_logging(settings, force=True)
    try:
        get_logger("tests.logging").info("started")
        out = capsys.readouterr().out
    finally:
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)
    event = json.loads(out.strip().splitlines()[-1])
    assert event["env"] == "production"
    assert event["event"] == "started"


def test_logger_context_binding():
    with capture_logs() as logs:
        logger = bind_broker_context(get_logger("tests.logging"), "ibkr", account="U1")
        logger.info("bound")
    assert logs == [{"event": "bound", "log_level": "info", "broker": "ibkr", "account": "U1"}]
