"""Tests for configuration module."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from rssfeed.config import Settings, get_settings
from rssfeed.elements import CHANNEL_ELEMENTS, ITEM_ELEMENTS


def test_settings_defaults():
    """Test that settings use sensible defaults."""
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings()

        assert settings.env == "dev"
        assert settings.log_level == "INFO"
        assert settings.default_timezone == "UTC"
        assert settings.channel_elements == list(CHANNEL_ELEMENTS)
        assert settings.item_elements == list(ITEM_ELEMENTS)
        assert settings.pretty_xml is True
        assert settings.xml_encoding == "utf-8"


def test_settings_env_override():
    """Test that environment variables override defaults."""
    with patch.dict(
        os.environ,
        {
            "RSS_ENV": "prod",
            "RSS_DEFAULT_TIMEZONE": "Europe/Prague",
            "RSS_ITEM_ELEMENTS": '["title", "link", "guid", "link"]',
            "RSS_PRETTY_XML": "false",
        },
        clear=True,
    ):
        settings = Settings()

        assert settings.env == "prod"
        assert settings.default_timezone == "Europe/Prague"
        assert settings.item_elements == ["title", "link", "guid"]
        assert settings.pretty_xml is False


@pytest.mark.parametrize(
    "env",
    [
        {"RSS_ENV": "staging"},
        {"RSS_DEFAULT_TIMEZONE": "Mars/Olympus_Mons"},
        {"RSS_CHANNEL_ELEMENTS": "[]"},
        {"RSS_XML_ENCODING": "no-such-codec"},
    ],
)
def test_settings_validation_error(env):
    """Test that invalid values raise validation error."""
    with patch.dict(os.environ, env, clear=True):
        with pytest.raises(ValidationError):
            Settings()


def test_get_settings_singleton():
    """Test that get_settings returns the same instance."""
    with patch.dict(os.environ, {}, clear=True):
        # Clear the singleton
        import rssfeed.config

        rssfeed.config._settings = None

        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2
