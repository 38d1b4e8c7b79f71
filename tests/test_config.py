"""
Tests for src/core/config.py

Covers environment loading, defaults and validation.
"""

from datetime import timedelta

import pytest

from src.core import config as config_module
from src.core.config import (
    ConfigValidationError,
    DEFAULT_EMBED_COLOR,
    DEFAULT_FOOTER_TEXT,
    get_config,
    load_config,
)
from src.tracking.matcher import KeywordMatcher


ENV_VARS = [
    "DISCORD_TOKEN",
    "TRACKED_KEYWORD",
    "REPORT_INTERVAL",
    "LEADERBOARD_SIZE",
    "REPORT_CHANNEL_NAME",
    "EMBED_COLOR",
    "FOOTER_TEXT",
    "ERROR_WEBHOOK_URL",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear config variables and reset the cached singleton."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "_config", None)
    return monkeypatch


class TestLoadConfigDefaults:
    """Defaults applied when only the token is set."""

    def test_missing_token_raises(self, clean_env):
        with pytest.raises(ConfigValidationError) as exc:
            load_config()
        assert "DISCORD_TOKEN" in str(exc.value)

    def test_defaults(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "token")
        config = load_config()
        assert config.discord_token == "token"
        assert config.keyword == "rust"
        assert config.report_interval == timedelta(days=5)
        assert config.leaderboard_size == 10
        assert config.report_channel_name == "random"
        assert config.embed_color == DEFAULT_EMBED_COLOR
        assert config.footer_text == DEFAULT_FOOTER_TEXT
        assert config.error_webhook_url is None


class TestLoadConfigOverrides:
    """Environment overrides and their validation."""

    def test_keyword_lowercased(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "token")
        clean_env.setenv("TRACKED_KEYWORD", " Python ")
        assert load_config().keyword == "python"

    def test_symbol_keyword_is_matchable(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "token")
        clean_env.setenv("TRACKED_KEYWORD", "C++")
        keyword = load_config().keyword
        assert keyword == "c++"
        assert KeywordMatcher(keyword).matches("I love c++ a lot") is True

    def test_multi_word_keyword_rejected(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "token")
        clean_env.setenv("TRACKED_KEYWORD", "rust lang")
        with pytest.raises(ConfigValidationError):
            load_config()

    def test_report_interval(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "token")
        clean_env.setenv("REPORT_INTERVAL", "12h")
        assert load_config().report_interval == timedelta(hours=12)

    def test_invalid_report_interval(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "token")
        clean_env.setenv("REPORT_INTERVAL", "sometimes")
        with pytest.raises(ConfigValidationError):
            load_config()

    def test_zero_report_interval(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "token")
        clean_env.setenv("REPORT_INTERVAL", "0")
        with pytest.raises(ConfigValidationError):
            load_config()

    def test_leaderboard_size_clamped(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "token")
        clean_env.setenv("LEADERBOARD_SIZE", "100")
        assert load_config().leaderboard_size == 25
        clean_env.setenv("LEADERBOARD_SIZE", "0")
        assert load_config().leaderboard_size == 1

    def test_leaderboard_size_invalid_uses_default(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "token")
        clean_env.setenv("LEADERBOARD_SIZE", "lots")
        assert load_config().leaderboard_size == 10

    def test_hex_embed_color(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "token")
        clean_env.setenv("EMBED_COLOR", "0x00FF00")
        assert load_config().embed_color == 0x00FF00

    def test_invalid_webhook_ignored(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "token")
        clean_env.setenv("ERROR_WEBHOOK_URL", "not-a-url")
        assert load_config().error_webhook_url is None


class TestGetConfig:
    """Singleton behaviour of get_config()."""

    def test_returns_same_instance(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "token")
        assert get_config() is get_config()
