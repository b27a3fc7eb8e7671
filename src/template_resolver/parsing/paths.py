"""Parsers for template files on the local filesystem.

Both parsers use the host's ``PurePath`` flavour and never touch the disk.
A valid file path is non-empty, contains no NUL byte, does not end in a
separator, has no ``..`` component and names a file other than ``.``,
``..`` or the bare template suffix.
"""

import os
import re
from pathlib import PurePath

from template_resolver.core.models.template import TEMPLATE_SUFFIX

# Two or more characters so Windows drive letters ("C:") do not match.
_SCHEME_LIKE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+:")

_SEPARATORS = tuple({os.sep, os.altsep or os.sep, "/"})


def _parse_file(value: str) -> PurePath | None:
    if not value or "\x00" in value or value.endswith(_SEPARATORS):
        return None
    path = PurePath(value)
    if ".." in path.parts:
        return None
    if path.name in ("", ".", "..", TEMPLATE_SUFFIX):
        return None
    return path


def parse_abs_file(value: str) -> PurePath | None:
    """Parse an absolute file path."""
    path = _parse_file(value)
    if path is None or not path.is_absolute():
        return None
    return path


def parse_rel_file(value: str) -> PurePath | None:
    """Parse a relative file path.

    Rejects anything anchored (root or drive) and anything whose first
    component starts like ``word:``, which is an unrecognised shorthand
    rather than a file.
    """
    path = _parse_file(value)
    if path is None or path.anchor:
        return None
    if _SCHEME_LIKE.match(value):
        return None
    return path
