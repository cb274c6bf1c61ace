from __future__ import annotations

import pytest

from core.config import Settings, load_settings
from core.models import RatingMode

ENV_VARS = [
    "HIRING_API_BASE_URL",
    "HIRING_API_TIMEOUT",
    "HIRING_RATING_MODE",
    "HIRING_ORDINAL_MIN",
    "HIRING_INVALID_INPUT",
    "HIRING_FAILED_ENTRIES",
    "HIRING_BULK_ENDPOINT",
    "HIRING_PAGE_SIZE",
    "HIRING_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_match_observed_behaviour():
    assert load_settings() == Settings()


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("HIRING_API_BASE_URL", "https://hiring.example.com/")
    monkeypatch.setenv("HIRING_RATING_MODE", "ordinal")
    monkeypatch.setenv("HIRING_ORDINAL_MIN", "0")
    monkeypatch.setenv("HIRING_FAILED_ENTRIES", "retain")
    monkeypatch.setenv("HIRING_BULK_ENDPOINT", "yes")
    monkeypatch.setenv("HIRING_PAGE_SIZE", "10")
    settings = load_settings()
    assert settings.api_base_url == "https://hiring.example.com"
    assert settings.rating_mode == RatingMode.ORDINAL
    assert settings.ordinal_min == 0
    assert settings.failed_entries == "retain"
    assert settings.use_bulk_endpoint is True
    assert settings.page_size == 10


@pytest.mark.parametrize(
    "name,value",
    [
        ("HIRING_RATING_MODE", "stars"),
        ("HIRING_ORDINAL_MIN", "2"),
        ("HIRING_PAGE_SIZE", "zero"),
        ("HIRING_BULK_ENDPOINT", "maybe"),
        ("HIRING_INVALID_INPUT", "shout"),
    ],
)
def test_invalid_values_name_the_variable(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError, match=name):
        load_settings()
