from __future__ import annotations

import pytest
from pydantic import ValidationError
import structlog
from structlog.testing import capture_logs

from passport_mrz.exceptions import MRZParseError
from passport_mrz.logging import configure_logging, mask_sensitive
from passport_mrz.settings import MRZSettings, get_settings
from passport_mrz.validator import MRZValidator, validate


LINE1 = "P<UTOERIKSSON<<ANNA<MARIA".ljust(44, "<")
LINE2 = "L898902C36UTO7408122F1204159ZE184226B<<<<<18"


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


def test_mask_sensitive() -> None:
    assert mask_sensitive(None) is None
    assert mask_sensitive("ANNA") == "****"
    assert mask_sensitive("ANNA MARIA ERIKSSON") == "AN***ON"


def test_validated_event_masks_name() -> None:
    validator = MRZValidator(logger=structlog.get_logger("test_mrz"), mask_names=True)

    with capture_logs() as logs:
        validator.validate(LINE1 + LINE2)

    event = next(entry for entry in logs if entry["event"] == "mrz_validated")
    assert event["valid"] is True
    assert event["name"] == "AN***ON"
    assert event["log_level"] == "info"


def test_validated_event_unmasked_when_disabled() -> None:
    validator = MRZValidator(logger=structlog.get_logger("test_mrz"), mask_names=False)

    with capture_logs() as logs:
        validator.validate(LINE1 + LINE2)

    assert logs[-1]["name"] == "ANNA MARIA ERIKSSON"


def test_parse_failure_is_logged_and_reraised() -> None:
    validator = MRZValidator(logger=structlog.get_logger("test_mrz"))

    with capture_logs() as logs:
        with pytest.raises(MRZParseError):
            validator.validate("P<UTO")

    assert logs[-1]["event"] == "mrz_parse_failed"
    assert logs[-1]["code"] == "insufficient_tokens"
    assert logs[-1]["log_level"] == "warning"


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MRZ_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("MRZ_LOG_JSON", "false")
    monkeypatch.setenv("MRZ_MASK_NAMES", "0")

    config = MRZSettings()

    assert config.log_level == "DEBUG"
    assert config.log_json is False
    assert config.mask_names is False


def test_settings_reject_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MRZ_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        MRZSettings()


def test_configure_logging_filters_below_level(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(MRZSettings(log_level="WARNING", log_json=True))
    logger = structlog.get_logger("test_mrz")

    logger.info("hidden_event")
    logger.warning("shown_event", code="x")

    out = capsys.readouterr().out
    assert "hidden_event" not in out
    assert '"event": "shown_event"' in out


def test_default_validator_logs_once_configured(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(MRZSettings(log_level="INFO", log_json=True))

    validate(LINE1 + LINE2)

    out = capsys.readouterr().out
    assert '"event": "mrz_validated"' in out
    assert "AN***ON" in out


def test_bad_environment_does_not_break_validation(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MRZ_LOG_LEVEL", "LOUD")
    get_settings.cache_clear()
    try:
        assert validate(LINE1 + LINE2) == (True, "ANNA MARIA ERIKSSON")
        with pytest.raises(ValidationError):
            get_settings()
    finally:
        get_settings.cache_clear()


def test_from_settings_honours_mask_names() -> None:
    assert MRZValidator.from_settings(MRZSettings(mask_names=False)).mask_names is False
    assert MRZValidator.from_settings(MRZSettings()).mask_names is True
