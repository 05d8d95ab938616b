import pytest
from pydantic import ValidationError as SettingsError

from app.config import Settings
from app.services.auth_service import AuthConfig, AuthService


def test_settings_require_jwt_secret(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(SettingsError):
        Settings(_env_file=None)


def test_production_mode_makes_session_cookie_secure(notifier):
    config = AuthConfig.from_settings(Settings(ENVIRONMENT="production", JWT_SECRET="s", _env_file=None))
    assert config.secure_cookies is True
    assert AuthService(None, notifier, config).cookies.secure is True


@pytest.mark.parametrize("environment", ["development", "test"])
def test_other_modes_keep_session_cookie_plain(notifier, environment):
    config = AuthConfig.from_settings(Settings(ENVIRONMENT=environment, JWT_SECRET="s", _env_file=None))
    assert config.secure_cookies is False
    assert AuthService(None, notifier, config).cookies.secure is False


def test_config_carries_flow_lifetimes():
    config = AuthConfig.from_settings(Settings(JWT_SECRET="s", CLIENT_URL="https://app.example.com", _env_file=None))
    assert config.session_ttl.days == 7
    assert config.verification_ttl.total_seconds() == 24 * 3600
    assert config.reset_ttl.total_seconds() == 3600
    assert config.client_url == "https://app.example.com"
