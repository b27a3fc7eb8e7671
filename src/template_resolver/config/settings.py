"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from template_resolver.core.models.template import TemplateName
from template_resolver.defaults import DEFAULT_TEMPLATE_NAME
from template_resolver.parsing.name import parse_template_name


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TEMPLATE_RESOLVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # General
    environment: str = "development"
    debug: bool = False  # log at DEBUG regardless of log_level
    log_level: str = "INFO"

    # Templates
    default_template: str | None = None  # e.g. "github:user/foo"
    template_info_file: str | None = None  # e.g. "~/templates/template-info.yaml"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        if self.template_info_file is not None:
            self.template_info_file = str(Path(self.template_info_file).expanduser())

    @field_validator("default_template")
    @classmethod
    def _check_default_template(cls, value: str | None) -> str | None:
        if value is not None:
            parse_template_name(value)
        return value

    @property
    def default_template_name(self) -> TemplateName:
        """The configured default template, or the built-in one."""
        if self.default_template is None:
            return DEFAULT_TEMPLATE_NAME
        return parse_template_name(self.default_template)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
