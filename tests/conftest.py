"""Pytest configuration for tunelink tests."""

import pytest

from tunelink.config.loader import clear_config_cache
from tunelink.parsers import MusicUrlParserRegistry, SoundCloudParser


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Keep tests away from the real ~/.tunelink and any TUNELINK_* env vars."""
    for var in ("TUNELINK_PROVIDERS", "TUNELINK_STRICT_HOST"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("TUNELINK_ROOT", str(tmp_path / "tunelink-root"))
    monkeypatch.chdir(tmp_path)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def soundcloud():
    return SoundCloudParser()


@pytest.fixture
def registry(soundcloud):
    reg = MusicUrlParserRegistry()
    reg.register(soundcloud)
    yield reg
    reg.clear()
