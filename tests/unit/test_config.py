"""Unit tests for environment configuration."""

import logging

import pytest

from propgen.config import Config


class TestLogLevel:

    @pytest.mark.parametrize("name,level", [("DEBUG", logging.DEBUG), ("WARNING", logging.WARNING)])
    def test_known_levels(self, monkeypatch, name, level):
        monkeypatch.setattr(Config, "LOG_LEVEL", name)
        assert Config.get_log_level() == level

    def test_unknown_level(self, monkeypatch):
        monkeypatch.setattr(Config, "LOG_LEVEL", "VERBOSE")
        with pytest.raises(ValueError, match="PROPGEN_LOG_LEVEL must be one of"):
            Config.get_log_level()

    def test_display(self):
        assert set(Config.display()) == {"Random Seed", "Iterations", "Log Level"}
