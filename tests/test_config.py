import pytest
from pydantic import ValidationError

from pynotes import config, messages
from pynotes.config import Settings, get_settings
from pynotes.errors import ConfigError

def test_defaults(monkeypatch):
    monkeypatch.delenv("TIMEZONE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    s = Settings(_env_file=None)
    assert s.TIMEZONE == "Asia/Novosibirsk"
    assert s.TIME_FORMAT == "%d.%m.%Y %H:%M"
    assert s.LOG_LEVEL == "WARNING"

def test_unknown_zone_rejected():
    with pytest.raises(ValidationError):
        Settings(TIMEZONE="Nowhere/Land", _env_file=None)

def test_log_level_normalized():
    assert Settings(LOG_LEVEL="debug", _env_file=None).LOG_LEVEL == "DEBUG"

def test_get_settings_wraps_validation_error(monkeypatch):
    monkeypatch.setenv("TIMEZONE", "Nowhere/Land")
    monkeypatch.setattr(config, "_settings", None)
    with pytest.raises(ConfigError) as exc:
        get_settings()
    assert exc.value.message.startswith(messages.CONFIG_INVALID)
    assert "TIMEZONE" in exc.value.message
    monkeypatch.setattr(config, "_settings", None)
