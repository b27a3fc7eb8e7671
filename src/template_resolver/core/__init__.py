"""Core domain models and exceptions for template-resolver."""

from template_resolver.core.exceptions import (
    InvalidTemplateLiteralError,
    TemplateConfigError,
    TemplateInfoError,
    TemplateNameError,
    TemplateParamError,
    TemplateResolverError,
)
from template_resolver.core.models import (
    AbsPath,
    RelPath,
    RepoPath,
    RepoService,
    RepoTemplatePath,
    TemplateInfo,
    TemplateName,
    TemplatesConfig,
    UrlPath,
)

__all__ = [
    # Models
    "TemplateName",
    "AbsPath",
    "RelPath",
    "UrlPath",
    "RepoPath",
    "RepoTemplatePath",
    "RepoService",
    "TemplateInfo",
    "TemplatesConfig",
    # Exceptions
    "TemplateResolverError",
    "TemplateNameError",
    "InvalidTemplateLiteralError",
    "TemplateParamError",
    "TemplateInfoError",
    "TemplateConfigError",
]
