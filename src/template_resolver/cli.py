"""CLI for template-resolver."""

from pathlib import Path
from typing import Any

import click
import structlog
from pydantic import ValidationError

from template_resolver.config.logging import configure_logging
from template_resolver.config.settings import Settings, get_settings
from template_resolver.core.exceptions import TemplateInfoError, TemplateResolverError
from template_resolver.core.models.template import (
    AbsPath,
    RelPath,
    RepoPath,
    TemplateName,
    UrlPath,
)
from template_resolver.parsing.info import load_template_infos
from template_resolver.parsing.name import parse_template_name
from template_resolver.parsing.params import parse_pair

logger = structlog.get_logger(__name__)


class TemplateNameType(click.ParamType):
    """Accepts ``foo``, ``foo.hsfiles``, a URL or a repository shorthand."""

    name = "template"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> TemplateName:
        if isinstance(value, TemplateName):
            return value
        try:
            return parse_template_name(value)
        except TemplateResolverError as e:
            self.fail(str(e), param, ctx)


class TemplateParamType(click.ParamType):
    """Accepts a ``key:value`` template parameter."""

    name = "key:value"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> tuple[str, str]:
        if isinstance(value, tuple):
            return value
        try:
            return parse_pair(value)
        except TemplateResolverError as e:
            self.fail(str(e), param, ctx)


TEMPLATE_NAME = TemplateNameType()
TEMPLATE_PARAM = TemplateParamType()


def describe_location(name: TemplateName) -> str:
    """Describe where a template would be fetched from."""
    path = name.path
    if isinstance(path, RepoPath):
        return f"{path.repo.service.value} repository {path.repo.user}, file {path.repo.template}"
    if isinstance(path, UrlPath):
        return path.url
    if isinstance(path, (AbsPath, RelPath)):
        return str(path.path)
    raise TypeError(f"Unknown template path: {path!r}")


def load_settings() -> Settings:
    """Load settings, reporting invalid values as a usage error."""
    try:
        return get_settings()
    except ValidationError as e:
        error = e.errors()[0]
        setting = "TEMPLATE_RESOLVER_" + ".".join(str(part) for part in error["loc"]).upper()
        message = error.get("ctx", {}).get("error") or error["msg"]
        raise click.UsageError(f"Invalid {setting}: {message}") from e


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """template-resolver: resolve project template names."""
    settings = load_settings()
    log_level = "DEBUG" if verbose or settings.debug else settings.log_level
    configure_logging(log_level=log_level, json_logs=settings.is_production)


@cli.command()
@click.argument("name", type=TEMPLATE_NAME, required=False)
@click.option("--param", "-p", "params", type=TEMPLATE_PARAM, multiple=True, help="Template parameter as key:value")
def resolve(name: TemplateName | None, params: tuple[tuple[str, str], ...]) -> None:
    """Resolve a template name.

    NAME may be foo, foo.hsfiles, a URL or a shorthand like github:user/foo.
    Without NAME the configured default template is used.
    """
    if name is None:
        name = load_settings().default_template_name

    logger.debug("Resolving template", template=name.prefix, kind=name.path.kind)
    click.echo(f"Template:  {name.prefix}")
    click.echo(f"Kind:      {name.path.kind}")
    click.echo(f"Location:  {describe_location(name)}")
    for key, value in params:
        click.echo(f"Param:     {key}={value}")


@cli.command()
@click.argument("info_file", required=False, type=click.Path(dir_okay=False))
def info(info_file: str | None) -> None:
    """List templates described in a template-info.yaml file.

    Without INFO_FILE the configured template info file is used.
    """
    if info_file is None:
        info_file = load_settings().template_info_file
        if info_file is None:
            raise click.UsageError("No template info file given or configured")

    path = Path(info_file)
    if not path.is_file():
        raise click.BadParameter(f"File does not exist: {path}", param_hint="INFO_FILE")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"{path}: cannot read file: {e}") from e

    try:
        infos = load_template_infos(text)
    except TemplateInfoError as e:
        raise click.ClickException(f"{path}: {e}") from e

    if not infos:
        click.echo("No templates found.")
        return

    for template, details in sorted(infos.items()):
        click.echo(template)
        if details.author:
            click.echo(f"  Author:      {details.author}")
        if details.description:
            click.echo(f"  Description: {details.description}")


if __name__ == "__main__":
    cli()
