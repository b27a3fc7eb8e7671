"""Template name parsing.

A template name is tried against each supported form in a fixed order and
the first form that parses wins:

1. repository shorthand (``github:user/foo``)
2. absolute URL (``https://example.com/foo.hsfiles``)
3. absolute file path
4. relative file path

The shorthand comes first because ``service:user/name`` would otherwise be
taken for a relative path, and URLs come before file paths because a URL is
also a syntactically valid path.
"""

from collections.abc import Callable

import structlog

from template_resolver.core.exceptions import InvalidTemplateLiteralError, TemplateNameError
from template_resolver.core.models.template import (
    TEMPLATE_SUFFIX,
    AbsPath,
    RelPath,
    RepoPath,
    TemplateName,
    UrlPath,
)
from template_resolver.parsing.paths import parse_abs_file, parse_rel_file
from template_resolver.parsing.repo_path import parse_repo_path
from template_resolver.parsing.url import parse_url

logger = structlog.get_logger(__name__)

EXPECTED_TEMPLATE_MESSAGE = (
    "Expected a template like: foo or foo.hsfiles or"
    " https://example.com/foo.hsfiles or github:user/foo"
)

# (prefix, candidate file, original input) -> TemplateName or None
CandidateParser = Callable[[str, str, str], TemplateName | None]


def _from_repo(prefix: str, candidate: str, raw: str) -> TemplateName | None:
    repo = parse_repo_path(candidate)
    if repo is None:
        return None
    return TemplateName(prefix=prefix, path=RepoPath(repo=repo))


def _from_url(prefix: str, candidate: str, raw: str) -> TemplateName | None:
    url = parse_url(raw)
    if url is None:
        return None
    return TemplateName(prefix=raw, path=UrlPath(url=url))


def _from_abs_file(prefix: str, candidate: str, raw: str) -> TemplateName | None:
    path = parse_abs_file(candidate)
    if path is None:
        return None
    return TemplateName(prefix=prefix, path=AbsPath(path=path))


def _from_rel_file(prefix: str, candidate: str, raw: str) -> TemplateName | None:
    path = parse_rel_file(candidate)
    if path is None:
        return None
    return TemplateName(prefix=prefix, path=RelPath(path=path))


# Order matters.
CANDIDATE_PARSERS: tuple[CandidateParser, ...] = (
    _from_repo,
    _from_url,
    _from_abs_file,
    _from_rel_file,
)


def split_template_suffix(raw: str) -> tuple[str, str]:
    """Return ``(prefix, candidate_file)`` for a raw template name.

    ``foo`` gives ``("foo", "foo.hsfiles")`` and ``foo.hsfiles`` gives
    ``("foo", "foo.hsfiles")``.
    """
    if raw.endswith(TEMPLATE_SUFFIX):
        return raw[: -len(TEMPLATE_SUFFIX)], raw
    return raw, raw + TEMPLATE_SUFFIX


def parse_template_name(raw: str) -> TemplateName:
    """Parse a template name from a string.

    Raises:
        TemplateNameError: If the string matches none of the supported forms.
    """
    prefix, candidate = split_template_suffix(raw)
    for parser in CANDIDATE_PARSERS:
        name = parser(prefix, candidate, raw)
        if name is not None:
            logger.debug(
                "Template name resolved",
                raw=raw,
                prefix=name.prefix,
                kind=name.path.kind,
            )
            return name
    logger.debug("Template name rejected", raw=raw)
    raise TemplateNameError(EXPECTED_TEMPLATE_MESSAGE)


def mk_template_name(literal: str) -> TemplateName:
    """Build a template name from a literal written in the source code.

    Intended for module-level constants, so that an invalid literal fails
    at import time. The result is the same value ``parse_template_name``
    returns for the literal.
    """
    try:
        return parse_template_name(literal)
    except TemplateNameError as e:
        raise InvalidTemplateLiteralError(f"Invalid template name: {literal!r}") from e
