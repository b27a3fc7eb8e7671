"""Template metadata models."""

from pydantic import BaseModel, ConfigDict


class TemplateInfo(BaseModel):
    """Optional metadata published alongside a template."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    author: str | None = None
    description: str | None = None
