"""Style profile resolved once per template."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

HexColor = Annotated[str, Field(pattern=r"^[0-9A-Fa-f]{6}$")]


class StyleProfile(BaseModel):
    """Concrete visual parameters for one template (points and hex colors)."""

    model_config = ConfigDict(frozen=True)

    name_size: float = Field(gt=0)
    name_space_after: float = Field(ge=0)
    subtitle_size: float = Field(gt=0)
    subtitle_color: HexColor
    subtitle_space_after: float = Field(ge=0)
    heading_size: float = Field(gt=0)
    heading_color: HexColor
    heading_space_before: float = Field(ge=0)
    heading_space_after: float = Field(ge=0)
    body_size: float = Field(gt=0)
    body_space_after: float = Field(ge=0)
    letter_space_after: float = Field(ge=0)


class TemplateMeta(BaseModel):
    """Display information shown when listing templates."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    tag: str
    description: str
