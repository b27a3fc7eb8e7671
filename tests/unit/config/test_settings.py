"""Tests for settings and logging configuration."""

import importlib
import logging
from pathlib import Path

import pytest
import structlog
from pydantic import ValidationError

import template_resolver
from template_resolver.config.logging import configure_logging
from template_resolver.config.settings import Settings, get_settings
from template_resolver.defaults import DEFAULT_TEMPLATE_NAME
from template_resolver.parsing.name import parse_template_name


@pytest.mark.unit
class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, settings_env: pytest.MonkeyPatch) -> None:
        settings = Settings()
        assert settings.default_template is None
        assert settings.default_template_name == DEFAULT_TEMPLATE_NAME
        assert settings.log_level == "INFO"

    def test_default_template_from_env(self, settings_env: pytest.MonkeyPatch) -> None:
        settings_env.setenv("TEMPLATE_RESOLVER_DEFAULT_TEMPLATE", "gitlab:alice/web")
        settings = Settings()
        assert settings.default_template_name == parse_template_name("gitlab:alice/web")

    def test_default_template_from_env_file(self, settings_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("TEMPLATE_RESOLVER_DEFAULT_TEMPLATE=github:web\n")
        settings = Settings()
        assert settings.default_template == "github:web"

    def test_invalid_default_template(self, settings_env: pytest.MonkeyPatch) -> None:
        with pytest.raises(ValidationError, match="Expected a template like"):
            Settings(default_template="bitbucket:web")

    def test_template_info_file_expanded(self, settings_env: pytest.MonkeyPatch) -> None:
        settings = Settings(template_info_file="~/templates/template-info.yaml")
        assert settings.template_info_file == str(
            Path("~/templates/template-info.yaml").expanduser()
        )

    def test_production(self, settings_env: pytest.MonkeyPatch) -> None:
        settings_env.setenv("TEMPLATE_RESOLVER_ENVIRONMENT", "Production")
        assert Settings().is_production

    def test_get_settings_cached(self, settings_env: pytest.MonkeyPatch) -> None:
        assert get_settings() is get_settings()


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_root_level(self) -> None:
        configure_logging(log_level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging(log_level="chatty", json_logs=True)
        assert logging.getLogger().level == logging.INFO


@pytest.mark.unit
class TestDefaultLogging:
    """Logging behaviour before the application configures it."""

    def test_parse_is_quiet(self, capsys: pytest.CaptureFixture[str]) -> None:
        structlog.reset_defaults()
        importlib.reload(template_resolver)
        parse_template_name("foo")
        parse_template_name("github:foo")
        assert capsys.readouterr().out == ""

    def test_keeps_existing_configuration(self) -> None:
        wrapper = structlog.make_filtering_bound_logger(logging.ERROR)
        structlog.configure(wrapper_class=wrapper)
        importlib.reload(template_resolver)
        assert structlog.get_config()["wrapper_class"] is wrapper
