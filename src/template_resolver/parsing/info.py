"""Loaders for template metadata and the templates configuration section."""

from collections.abc import Mapping
from typing import Any

import structlog
import yaml
from pydantic import ValidationError

from template_resolver.core.exceptions import (
    TemplateConfigError,
    TemplateInfoError,
)
from template_resolver.core.models.config import TemplatesConfig
from template_resolver.core.models.info import TemplateInfo

logger = structlog.get_logger(__name__)


class _TextScalarLoader(yaml.SafeLoader):
    """Safe loader that leaves dates and timestamps as text."""


_TextScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _load_yaml(text: str) -> Any:
    return yaml.load(text, Loader=_TextScalarLoader)


def _kind(value: Any) -> str:
    """Name the YAML/JSON kind of a decoded value."""
    if value is None:
        return "Null"
    if isinstance(value, bool):
        return "Boolean"
    if isinstance(value, (int, float)):
        return "Number"
    if isinstance(value, str):
        return "String"
    if isinstance(value, (list, tuple)):
        return "Array"
    if isinstance(value, Mapping):
        return "Object"
    return type(value).__name__


def parse_template_info(value: Any) -> TemplateInfo:
    """Build a TemplateInfo from a decoded ``{author, description}`` record.

    Raises:
        TemplateInfoError: If ``value`` is not a mapping, or a field is not text.
    """
    if not isinstance(value, Mapping):
        raise TemplateInfoError(f"expected Template Info, encountered {_kind(value)}")
    try:
        return TemplateInfo.model_validate(dict(value))
    except ValidationError as e:
        raise TemplateInfoError(f"invalid Template Info: {e.errors()[0]['msg']}") from e


def load_template_infos(text: str) -> dict[str, TemplateInfo]:
    """Load a ``template-info.yaml`` document.

    The document maps template names to their metadata. An empty document
    yields no entries.
    """
    try:
        data = _load_yaml(text)
    except yaml.YAMLError as e:
        raise TemplateInfoError(f"invalid YAML: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TemplateInfoError(f"expected an Object of templates, encountered {_kind(data)}")
    infos = {str(name): parse_template_info(value) for name, value in data.items()}
    logger.debug("Template info loaded", count=len(infos))
    return infos


def load_templates_config(text: str) -> TemplatesConfig:
    """Load the ``templates:`` section of a YAML project configuration.

    A missing section gives the default (empty) configuration.

    Raises:
        TemplateConfigError: If the section or one of its fields is invalid.
    """
    try:
        data = _load_yaml(text)
    except yaml.YAMLError as e:
        raise TemplateConfigError(f"invalid YAML: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise TemplateConfigError(f"expected an Object, encountered {_kind(data)}")
    section = data.get("templates")
    if section is None:
        section = {}
    if not isinstance(section, Mapping):
        raise TemplateConfigError(
            f"expected templates to be an Object, encountered {_kind(section)}"
        )
    try:
        return TemplatesConfig.model_validate(dict(section))
    except ValidationError as e:
        error = e.errors()[0]
        location = ".".join(str(part) for part in error["loc"])
        message = error.get("ctx", {}).get("error") or error["msg"]
        raise TemplateConfigError(f"templates.{location}: {message}") from e
