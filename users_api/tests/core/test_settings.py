# tests/core/test_settings.py
import pytest
from pydantic import ValidationError


def test_settings_loads_from_env(monkeypatch):
    """Test settings loads environment variables"""
    monkeypatch.setenv("AUTH_TOKEN", "another-token")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("PORT", "8080")

    from users_api.config.settings import Settings
    test_settings = Settings(_env_file=None)

    assert test_settings.auth_token.get_secret_value() == "another-token"
    assert test_settings.log_level == "DEBUG"
    assert test_settings.port == 8080


def test_settings_defaults(monkeypatch):
    """Test defaults apply when nothing is set"""
    for name in ("AUTH_TOKEN", "LOG_LEVEL", "LOG_DIR", "LOG_FILE", "PORT", "HOST"):
        monkeypatch.delenv(name, raising=False)

    from users_api.config.settings import Settings
    test_settings = Settings(_env_file=None)

    assert test_settings.auth_token.get_secret_value() == "valid_token"
    assert test_settings.log_level == "INFO"
    assert test_settings.log_file == "app.log"
    assert test_settings.port == 5000


def test_settings_hides_token_in_repr():
    from users_api.config.settings import Settings
    test_settings = Settings(_env_file=None, auth_token="s3cret")

    assert "s3cret" not in repr(test_settings)


def test_settings_rejects_unknown_log_level(monkeypatch):
    """Test settings validation fails for a bogus log level"""
    monkeypatch.setenv("LOG_LEVEL", "LOUD")

    with pytest.raises(ValidationError):
        from users_api.config.settings import Settings
        Settings(_env_file=None)
