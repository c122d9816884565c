import logging

import pytest
from pydantic import ValidationError

from app.core.config import Settings
from app.core.logging_config import setup_logging


def test_settings_defaults(monkeypatch):
    for name in ("DATABASE_URL", "PORT", "HOST", "APP_ENV", "CORS_ALLOW_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    s = Settings(_env_file=None)

    assert s.port == 3000
    assert s.host == "0.0.0.0"
    assert s.database_url == "sqlite:///./tasks.db"
    assert s.app_env == "dev"
    assert s.cors_origins == ["*"]


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("APP_ENV", " PROD ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test,")

    s = Settings(_env_file=None)

    assert s.port == 8080
    assert s.app_env == "prod"
    assert s.log_level == "DEBUG"
    assert s.cors_origins == ["http://a.test", "http://b.test"]


def test_settings_reject_unknown_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "staging")

    with pytest.raises(ValidationError, match="APP_ENV must be one of"):
        Settings(_env_file=None)


def test_setup_logging_is_idempotent(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging(logging.DEBUG)
    setup_logging(logging.WARNING)

    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG
