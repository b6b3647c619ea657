"""Shared fixtures for rssfeed tests."""

import os

import pytest

import rssfeed.config


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test against default settings, ignoring RSS_* variables."""
    for key in list(os.environ):
        if key.startswith("RSS_"):
            monkeypatch.delenv(key)
    monkeypatch.setattr(rssfeed.config, "_settings", None)
    yield
