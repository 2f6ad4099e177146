"""Settings - environment overrides and page size guard."""

import pytest
from pydantic import ValidationError

from peaks.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.default_page_size == 10
    assert settings.log_level == "INFO"


def test_env_override(monkeypatch):
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "25")
    monkeypatch.setenv("LOG_FORMAT", "json")
    settings = Settings(_env_file=None)
    assert settings.default_page_size == 25
    assert settings.log_format == "json"


def test_rejects_non_positive_page_size(monkeypatch):
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
