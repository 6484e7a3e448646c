"""Unit tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from delivery_planner.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DELIVERY_PLANNER_NORMALIZE_UNITS", raising=False)
        s = Settings(_env_file=None)
        assert s.default_travel_speed_kmh == 20.0
        assert s.default_preparation_time1_min == 15.0
        assert s.default_preparation_time2_min == 20.0
        assert s.normalize_units is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DELIVERY_PLANNER_DEFAULT_TRAVEL_SPEED_KMH", "35.5")
        monkeypatch.setenv("DELIVERY_PLANNER_NORMALIZE_UNITS", "true")
        s = Settings(_env_file=None)
        assert s.default_travel_speed_kmh == 35.5
        assert s.normalize_units is True

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_TRAVEL_SPEED_KMH", "99")
        monkeypatch.delenv("DELIVERY_PLANNER_DEFAULT_TRAVEL_SPEED_KMH", raising=False)
        assert Settings(_env_file=None).default_travel_speed_kmh == 20.0

    def test_log_level_normalised_to_upper_case(self, monkeypatch):
        monkeypatch.setenv("DELIVERY_PLANNER_LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("DELIVERY_PLANNER_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
