"""Pytest configuration and fixtures."""

import logging

import pytest
import structlog

from template_resolver.config.settings import get_settings


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any logging configuration done by a test."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture
def settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Isolate settings from the developer's environment and .env file."""
    for name in ("DEFAULT_TEMPLATE", "TEMPLATE_INFO_FILE", "ENVIRONMENT", "LOG_LEVEL", "DEBUG"):
        monkeypatch.delenv(f"TEMPLATE_RESOLVER_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def template_info_yaml() -> str:
    """A template-info.yaml document as published in a template repository."""
    return """\
simple:
  author: Jane Doe
  description: A minimal project
web:
  description: A web application
bare: {}
"""
