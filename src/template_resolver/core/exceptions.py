"""Exceptions raised by template-resolver."""


class TemplateResolverError(Exception):
    """Base exception for template-resolver."""


class TemplateNameError(TemplateResolverError, ValueError):
    """A template name matched none of the supported forms."""


class InvalidTemplateLiteralError(TemplateNameError):
    """A template name literal baked into the code is invalid."""


class TemplateParamError(TemplateResolverError, ValueError):
    """A template parameter argument is not in key:value form."""


class TemplateInfoError(TemplateResolverError, ValueError):
    """Template metadata does not have the expected shape."""


class TemplateConfigError(TemplateResolverError, ValueError):
    """The templates configuration section is invalid."""
