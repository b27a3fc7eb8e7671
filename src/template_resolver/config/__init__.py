"""Configuration for template-resolver."""

from template_resolver.config.logging import configure_logging
from template_resolver.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
