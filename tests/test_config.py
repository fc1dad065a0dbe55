# tests/test_config.py
import pytest

from app.config import ConfigurationError, Settings, get_settings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # keep any developer .env out of the picture
    monkeypatch.chdir(tmp_path)
    for key in ("PORT", "HOST", "API_TOKEN", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    s = get_settings()
    assert s == Settings()
    assert s.port == 3000
    assert s.expected_authorization == "Bearer mysecrettoken"


def test_environment_overrides(clean_env):
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("API_TOKEN", "s3cret")
    clean_env.setenv("LOG_LEVEL", "debug")
    s = get_settings()
    assert s.port == 8080
    assert s.expected_authorization == "Bearer s3cret"
    assert s.log_level == "DEBUG"


def test_bad_port(clean_env):
    clean_env.setenv("PORT", "eighty")
    with pytest.raises(ConfigurationError):
        get_settings()
