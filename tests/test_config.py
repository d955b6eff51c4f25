from __future__ import annotations

import importlib

import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "app_env, expected",
    [
        ("production", "config.production"),
        ("prod", "config.production"),
        ("testing", "config.testing"),
        ("TEST", "config.testing"),
        ("local", "config.development"),
        ("staging", "config.development"),
    ],
)
def test_settings_module_from_app_env(monkeypatch, app_env, expected):
    monkeypatch.setenv("APP_ENV", app_env)

    assert get_settings_module() == expected


def test_default_app_env_is_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "config.development"


def test_base_settings_read_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "local")
    monkeypatch.setenv("APP_DEBUG", "false")
    monkeypatch.setenv("APP_NAME", "Waduk")
    monkeypatch.setenv("DB_CONNECTION", "mysql")
    monkeypatch.setenv("DB_HOST", "db")
    monkeypatch.setenv("DB_PORT", "3306")
    monkeypatch.setenv("DB_DATABASE", "waduk")
    monkeypatch.setenv("DB_USERNAME", "app")
    monkeypatch.setenv("DB_PASSWORD", "rahasia")
    monkeypatch.setenv("SECRET", "jwt-secret")
    monkeypatch.setenv("docker", "1")
    monkeypatch.delenv("SESSION_SECRET", raising=False)
    monkeypatch.delenv("APP_TIMEZONE", raising=False)

    import config.config as base

    settings = importlib.reload(base)
    try:
        assert settings.DEBUG is False
        assert settings.DISPLAY_ERROR_DETAILS is True
        assert settings.TIMEZONE == "Asia/Jakarta"
        assert settings.LOGGER["name"] == "Waduk"
        assert settings.LOGGER["path"] == "stdout"
        assert settings.DB_CONFIG == {
            "connection": "mysql",
            "host": "db",
            "port": "3306",
            "database": "waduk",
            "username": "app",
            "password": "rahasia",
        }
        assert settings.JWT["secret"] == "jwt-secret"
        assert settings.SECRET_KEY == "jwt-secret"
        assert settings.TEMPLATE_CACHE_PATH == ""
    finally:
        monkeypatch.undo()
        importlib.reload(base)


def test_production_hides_error_details_and_caches_templates(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")

    import config.config as base
    import config.production as production

    importlib.reload(base)
    settings = importlib.reload(production)
    try:
        assert settings.DISPLAY_ERROR_DETAILS is False
        assert settings.TEMPLATE_CACHE_PATH.endswith("cache")
    finally:
        monkeypatch.undo()
        importlib.reload(base)
        importlib.reload(production)


@pytest.mark.parametrize("docker, to_stdout", [("0", False), ("", False), ("1", True), ("true", True)])
def test_docker_flag_selects_log_target(monkeypatch, docker, to_stdout):
    monkeypatch.setenv("docker", docker)

    import config.config as base

    settings = importlib.reload(base)
    try:
        if to_stdout:
            assert settings.LOGGER["path"] == "stdout"
        else:
            assert settings.LOGGER["path"].endswith("app.log")
    finally:
        monkeypatch.undo()
        importlib.reload(base)
