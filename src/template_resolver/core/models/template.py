"""Template name and template path models."""

from enum import Enum
from pathlib import PurePath
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

TEMPLATE_SUFFIX = ".hsfiles"


class RepoService(str, Enum):
    """Code-hosting services templates can be fetched from."""

    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"


class RepoTemplatePath(BaseModel):
    """Details for how to access a template from a remote repository."""

    model_config = ConfigDict(frozen=True)

    service: RepoService
    user: str
    template: str

    @property
    def shorthand(self) -> str:
        """Render as ``service:user/template``."""
        return f"{self.service.value}:{self.user}/{self.template}"


class AbsPath(BaseModel):
    """An absolute path on the filesystem."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["abs"] = "abs"
    path: PurePath


class RelPath(BaseModel):
    """A relative path on the filesystem, or relative to the template repository."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["rel"] = "rel"
    path: PurePath


class UrlPath(BaseModel):
    """A full URL, kept exactly as given."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["url"] = "url"
    url: str


class RepoPath(BaseModel):
    """A template living in a code-hosting repository."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["repo"] = "repo"
    repo: RepoTemplatePath


TemplatePath = Annotated[
    Union[AbsPath, RelPath, UrlPath, RepoPath],
    Field(discriminator="kind"),
]


class TemplateName(BaseModel):
    """A parsed template name.

    ``prefix`` is the name shown to users: the raw input without the
    ``.hsfiles`` suffix, or the whole raw input when it is a URL.
    A plain string validates into a ``TemplateName`` by going through
    :func:`template_resolver.parsing.name.parse_template_name`.
    """

    model_config = ConfigDict(frozen=True)

    prefix: str
    path: TemplatePath

    @model_validator(mode="before")
    @classmethod
    def _parse_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            from template_resolver.parsing.name import parse_template_name

            parsed = parse_template_name(data)
            return {"prefix": parsed.prefix, "path": parsed.path}
        return data

    def __str__(self) -> str:
        return self.prefix
