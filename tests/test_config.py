"""
Smoke tests for config / settings loading.
Run: python -m pytest tests/ -v
"""
import dataclasses
import logging
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from thinking_styles.config import LoggingConfig, get_settings


class TestSettingsDefaults:
    def test_get_settings_returns_object(self, clean_env):
        s = get_settings()
        assert hasattr(s, "scoring")
        assert hasattr(s, "logging")
        assert hasattr(s, "report")

    def test_lenient_by_default(self, clean_env):
        assert not get_settings().scoring.strict_ids

    def test_info_logging_by_default(self, clean_env):
        s = get_settings()
        assert s.logging.level == "INFO"
        assert s.logging.level_number == logging.INFO

    def test_country_defaults_to_ghana(self, clean_env):
        assert get_settings().report.country == "Ghana"

    def test_settings_are_frozen(self, clean_env):
        with pytest.raises(dataclasses.FrozenInstanceError):
            get_settings().report.country = "Nigeria"


class TestSettingsFromEnvironment:
    @pytest.mark.parametrize("value, expected", [
        ("true", True), ("1", True), ("YES", True),
        ("false", False), ("0", False), ("", False),
    ])
    def test_strict_ids_flag(self, clean_env, value, expected):
        clean_env.setenv("THINKING_STYLES_STRICT_IDS", value)
        assert get_settings().scoring.strict_ids is expected

    def test_log_level(self, clean_env):
        clean_env.setenv("THINKING_STYLES_LOG_LEVEL", "debug")
        assert get_settings().logging.level_number == logging.DEBUG

    def test_blank_values_fall_back(self, clean_env):
        clean_env.setenv("THINKING_STYLES_COUNTRY", "   ")
        clean_env.setenv("THINKING_STYLES_LOG_LEVEL", "")
        s = get_settings()
        assert s.report.country == "Ghana"
        assert s.logging.level == "INFO"


class TestLoggingConfig:
    def test_unknown_level_name_falls_back_to_info(self):
        assert LoggingConfig(level="chatty").level_number == logging.INFO


class TestStatusSummary:
    def test_keys(self, clean_env):
        summary = get_settings().status_summary()
        assert set(summary) == {"Question ids", "Log level", "Country"}
        assert "Lenient" in summary["Question ids"]

    def test_strict_badge(self, clean_env):
        clean_env.setenv("THINKING_STYLES_STRICT_IDS", "true")
        assert "Strict" in get_settings().status_summary()["Question ids"]
