from pathlib import Path

import pytest

from backend.src.services import config as config_module


@pytest.fixture(autouse=True)
def restore_config_cache():
    """
    Ensure configuration cache is cleared between tests.
    """
    config_module.reload_config()
    yield
    config_module.reload_config()


@pytest.fixture
def clean_env(monkeypatch):
    for key in (
        "PORT",
        "DATABASE_PATH",
        "GEMINI_API_KEY",
        "GOOGLE_API_KEY",
        "CHAT_MODEL",
        "CHAT_TIMEOUT_SECONDS",
        "CORS_ORIGINS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults_without_environment(clean_env) -> None:
    cfg = config_module.reload_config()

    assert cfg.port == 3000
    assert cfg.gemini_api_key is None
    assert cfg.chat_model == "gemini-3-flash-preview"
    assert cfg.chat_timeout_seconds is None
    assert cfg.database_path.name == "basewise.db"
    assert "http://localhost:5173" in cfg.cors_origins


def test_environment_overrides(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("PORT", "8123")
    clean_env.setenv("DATABASE_PATH", str(tmp_path / "notes.db"))
    clean_env.setenv("GEMINI_API_KEY", "  secret  ")
    clean_env.setenv("CHAT_TIMEOUT_SECONDS", "12.5")
    clean_env.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    clean_env.setenv("LOG_LEVEL", "debug")

    cfg = config_module.reload_config()

    assert cfg.port == 8123
    assert cfg.database_path == (tmp_path / "notes.db").resolve()
    assert cfg.gemini_api_key == "secret"
    assert cfg.chat_timeout_seconds == 12.5
    assert cfg.cors_origins == ("http://a.test", "http://b.test")
    assert cfg.log_level == "DEBUG"


def test_google_api_key_is_accepted_as_fallback(clean_env) -> None:
    clean_env.setenv("GOOGLE_API_KEY", "google-key")

    assert config_module.reload_config().gemini_api_key == "google-key"


def test_blank_api_key_is_treated_as_unset(clean_env) -> None:
    clean_env.setenv("GEMINI_API_KEY", "   ")

    assert config_module.reload_config().gemini_api_key is None


def test_rejects_non_positive_timeout(clean_env) -> None:
    clean_env.setenv("CHAT_TIMEOUT_SECONDS", "0")

    with pytest.raises(ValueError):
        config_module.reload_config()


def test_rejects_unknown_log_level(clean_env) -> None:
    clean_env.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValueError):
        config_module.reload_config()
