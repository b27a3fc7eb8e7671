"""Parsers for template names, parameters and metadata."""

from template_resolver.parsing.info import (
    load_template_infos,
    load_templates_config,
    parse_template_info,
)
from template_resolver.parsing.name import (
    EXPECTED_TEMPLATE_MESSAGE,
    mk_template_name,
    parse_template_name,
)
from template_resolver.parsing.params import parse_pair
from template_resolver.parsing.repo_path import default_repo_user_for_service, parse_repo_path

__all__ = [
    "EXPECTED_TEMPLATE_MESSAGE",
    "default_repo_user_for_service",
    "load_template_infos",
    "load_templates_config",
    "mk_template_name",
    "parse_pair",
    "parse_repo_path",
    "parse_template_info",
    "parse_template_name",
]
