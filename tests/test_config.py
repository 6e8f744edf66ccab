"""Tests for environment-driven settings."""

from pizza_demo.shared.config import Settings


def test_defaults(monkeypatch):
    for name in (
        "APP_ENV",
        "REST_PORT",
        "HATEOAS_PORT",
        "LOG_LEVEL",
        "PREPARING_DELAY_SECONDS",
        "BAKING_DELAY_SECONDS",
        "READY_DELAY_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.app_env == "development"
    assert not settings.is_production
    assert (settings.rest_port, settings.hateoas_port) == (3000, 3001)
    assert (settings.preparing_delay, settings.baking_delay, settings.ready_delay) == (10, 20, 30)


def test_from_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "Production")
    monkeypatch.setenv("HATEOAS_PORT", "8001")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("READY_DELAY_SECONDS", "2.5")

    settings = Settings.from_env()

    assert settings.is_production
    assert settings.hateoas_port == 8001
    assert settings.log_level == "DEBUG"
    assert settings.ready_delay == 2.5
