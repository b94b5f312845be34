"""
Tests for loading settings and building the store from them.
"""

import logging

import pytest
from pydantic import ValidationError

from mood_service.config import Settings, build_store
from mood_service.logging_config import setup_logging
from mood_service.models import MoodPolicy
from mood_service.store import MoodNotSet

ENV_VARS = (
    "MOOD_POLICY",
    "DEFAULT_MOOD",
    "MOOD_NOT_FOUND_MESSAGE",
    "LOG_LEVEL",
    "MOOD_HOST",
    "MOOD_PORT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings.from_env()

        assert settings.policy is MoodPolicy.DEFAULT
        assert settings.default_mood == "no mood"
        assert settings.not_found_message == "mood not set for user"
        assert settings.port == 8000

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("MOOD_POLICY", "strict")
        monkeypatch.setenv("MOOD_NOT_FOUND_MESSAGE", "who?")
        monkeypatch.setenv("MOOD_PORT", "9001")

        settings = Settings.from_env()

        assert settings.policy is MoodPolicy.STRICT
        assert settings.not_found_message == "who?"
        assert settings.port == 9001

    def test_log_level_is_normalised(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert Settings.from_env().log_level == "DEBUG"

    @pytest.mark.parametrize("level", ["warn", "verbose", ""])
    def test_invalid_log_level_is_rejected(self, monkeypatch, level):
        monkeypatch.setenv("LOG_LEVEL", level)

        with pytest.raises(ValidationError):
            Settings.from_env()

    def test_invalid_policy_is_rejected(self, monkeypatch):
        monkeypatch.setenv("MOOD_POLICY", "lenient")

        with pytest.raises(ValidationError):
            Settings.from_env()


class TestBuildStore:
    def test_default_store(self):
        store = build_store(Settings(default_mood="meh"))

        assert store.policy is MoodPolicy.DEFAULT
        assert store.get_mood("anyone") == "meh"

    def test_strict_store(self):
        store = build_store(Settings(policy="strict", not_found_message="nope"))

        with pytest.raises(MoodNotSet, match="nope"):
            store.get_mood("anyone")


def test_setup_logging_keeps_existing_handlers():
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    saved = root.handlers[:]
    root.handlers = [sentinel]
    try:
        setup_logging("DEBUG")
        assert root.handlers == [sentinel]
    finally:
        root.handlers = saved
