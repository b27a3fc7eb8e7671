"""Parser for ``key:value`` template parameter arguments."""

from template_resolver.core.exceptions import TemplateParamError


def parse_pair(value: str) -> tuple[str, str]:
    """Split ``key:value`` on the first colon.

    Raises:
        TemplateParamError: If there is no colon or the value is empty.
    """
    key, sep, param = value.partition(":")
    if not sep or not param:
        raise TemplateParamError(f"Expected key:value format for argument: {value}")
    return key, param
