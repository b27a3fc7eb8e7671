"""Parser for template URLs."""

import re

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

# scheme://authority, the authority being non-empty
_ABSOLUTE_URL = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://[^/?#]+")

_HTTP_URL = TypeAdapter(AnyHttpUrl)


def parse_url(value: str) -> str | None:
    """Return ``value`` unchanged if it is an absolute URL that can be requested.

    Only http and https URLs with a host qualify. Nothing is fetched.
    """
    if not _ABSOLUTE_URL.match(value) or any(ch.isspace() for ch in value):
        return None
    try:
        _HTTP_URL.validate_python(value)
    except ValidationError:
        return None
    return value
