"""Project-level templates configuration."""

from pydantic import BaseModel, ConfigDict, Field

from template_resolver.core.models.template import TemplateName


class TemplatesConfig(BaseModel):
    """The ``templates:`` section of a project configuration file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    default_template: TemplateName | None = Field(default=None, alias="default-template")
    params: dict[str, str] = Field(default_factory=dict)

    def __hash__(self) -> int:
        return hash((self.default_template, tuple(sorted(self.params.items()))))
