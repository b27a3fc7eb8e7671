"""Domain models for template-resolver."""

from template_resolver.core.models.config import TemplatesConfig
from template_resolver.core.models.info import TemplateInfo
from template_resolver.core.models.template import (
    TEMPLATE_SUFFIX,
    AbsPath,
    RelPath,
    RepoPath,
    RepoService,
    RepoTemplatePath,
    TemplateName,
    TemplatePath,
    UrlPath,
)

__all__ = [
    "TEMPLATE_SUFFIX",
    "AbsPath",
    "RelPath",
    "RepoPath",
    "RepoService",
    "RepoTemplatePath",
    "TemplateInfo",
    "TemplateName",
    "TemplatePath",
    "TemplatesConfig",
    "UrlPath",
]
