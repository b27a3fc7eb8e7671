"""Parser for repository shorthands such as ``github:user/template``."""

from template_resolver.core.models.template import RepoService, RepoTemplatePath

_SERVICES: dict[str, RepoService] = {
    "github": RepoService.GITHUB,
    "gitlab": RepoService.GITLAB,
    "bitbucket": RepoService.BITBUCKET,
}

_DEFAULT_REPO_USERS: dict[RepoService, str] = {
    RepoService.GITHUB: "commercialhaskell",
}


def default_repo_user_for_service(service: RepoService) -> str | None:
    """Return the user assumed when a shorthand names only the template."""
    return _DEFAULT_REPO_USERS.get(service)


def parse_repo_path(value: str) -> RepoTemplatePath | None:
    """Parse ``service:user/template`` or ``service:template``.

    Returns None when the value is not a repository shorthand, so that
    callers can fall through to other forms.
    """
    parts = value.split(":")
    if len(parts) != 2:
        return None
    service = _SERVICES.get(parts[0])
    if service is None:
        return None
    return _parse_with_service(service, parts[1])


def _parse_with_service(service: RepoService, path: str) -> RepoTemplatePath | None:
    parts = path.split("/")
    if len(parts) == 2:
        user, name = parts
        return RepoTemplatePath(service=service, user=user, template=name)
    if len(parts) == 1:
        user = default_repo_user_for_service(service)
        if user is None:
            return None
        return RepoTemplatePath(service=service, user=user, template=parts[0])
    return None
