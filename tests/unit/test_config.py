"""Unit tests for settings loading and YAML merging."""

import logging

import pytest
import yaml

from paddock import observability
from paddock.config import Settings, get_settings
from paddock.roster import Location


def test_defaults(data_dir):
    settings = get_settings()

    assert settings.data_dir == data_dir.resolve()
    assert settings.state_path == data_dir.resolve() / "session.yaml"
    assert settings.race.location is Location.BELGIUM
    assert settings.rewards.for_kind("fastest_lap") == 2500
    assert settings.journal.enabled


def test_nested_environment_override(data_dir, monkeypatch):
    monkeypatch.setenv("RACE__SEASON", "2021")
    monkeypatch.setenv("REWARDS__SAFETY_CAR", "750")

    settings = Settings()

    assert settings.race.season == 2021
    assert settings.rewards.safety_car == 750


def test_yaml_config_is_merged(data_dir):
    data_dir.mkdir()
    (data_dir / "config.yaml").write_text(
        "race:\n  location: Monaco\n  season: 2023\nrewards:\n  fastest_lap: 3000\n",
        encoding="utf-8",
    )

    settings = get_settings()

    assert settings.race.location is Location.MONACO
    assert settings.race.season == 2023
    assert settings.rewards.fastest_lap == 3000
    # Untouched keys keep their defaults
    assert settings.rewards.safety_car == 500


def test_invalid_yaml_config_raises(data_dir):
    data_dir.mkdir()
    (data_dir / "config.yaml").write_text("race: [unclosed\n", encoding="utf-8")

    with pytest.raises(yaml.YAMLError):
        get_settings()


def test_settings_are_cached(data_dir):
    assert get_settings() is get_settings()


def test_logfire_skipped_without_token(data_dir):
    assert observability.initialize_logfire(get_settings()) is False


def test_logfire_configured_with_token(data_dir, monkeypatch):
    monkeypatch.setenv("LOGFIRE_TOKEN", "test-token")
    calls = {}

    monkeypatch.setattr(observability.logfire, "configure", lambda **kwargs: calls.update(kwargs))
    monkeypatch.setattr(observability.logfire, "instrument_pydantic", lambda: None)
    monkeypatch.setattr(observability.logfire, "LogfireLoggingHandler", logging.NullHandler)

    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    try:
        assert observability.initialize_logfire(Settings()) is True
    finally:
        root_logger.handlers = handlers

    assert calls["token"] == "test-token"
    assert calls["service_name"] == "paddock"
    assert calls["environment"] == "2022 Belgium Grand Prix"
