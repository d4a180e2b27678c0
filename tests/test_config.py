from __future__ import annotations

import pytest

from backend.utils.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    monkeypatch.delenv("ROOM_CAPACITY", raising=False)
    monkeypatch.delenv("API_PORT", raising=False)

    settings = get_settings()

    assert settings.room_capacity == 4
    assert settings.api_port == 8000


def test_room_capacity_from_environment(monkeypatch):
    monkeypatch.setenv("ROOM_CAPACITY", "6")

    assert get_settings().room_capacity == 6


def test_blank_value_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("ROOM_CAPACITY", "  ")

    assert get_settings().room_capacity == 4


def test_malformed_integer_raises(monkeypatch):
    monkeypatch.setenv("ROOM_CAPACITY", "four")

    with pytest.raises(ValueError, match="ROOM_CAPACITY"):
        get_settings()


def test_settings_are_cached():
    assert get_settings() is get_settings()
