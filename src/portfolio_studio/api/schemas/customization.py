"""Versioned schema for the portfolio customization blob.

The customization payload used to be an open JSON map read with ad hoc
shape assumptions. It is now validated on write: unknown keys are rejected
and ``schemaVersion`` identifies the layout of the payload.
"""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from portfolio_studio.api.schemas.common import CamelModel

CUSTOMIZATION_SCHEMA_VERSION = 1

ColorValue = str | None


class _StrictCamelModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class ColorPalette(_StrictCamelModel):
    """Site colors. Values are not required to be valid hex."""

    primary: ColorValue = Field(None, max_length=32)
    secondary: ColorValue = Field(None, max_length=32)
    accent: ColorValue = Field(None, max_length=32)
    background: ColorValue = Field(None, max_length=32)
    text: ColorValue = Field(None, max_length=32)


class FontSettings(_StrictCamelModel):
    heading: str | None = Field(None, max_length=100)
    body: str | None = Field(None, max_length=100)


class Customization(_StrictCamelModel):
    """Validated customization payload stored on a portfolio."""

    schema_version: Literal[1] = CUSTOMIZATION_SCHEMA_VERSION
    colors: ColorPalette | None = None
    fonts: FontSettings | None = None
    layout: list[str] | None = Field(None, description="Ordered section identifiers")
    animations: dict[str, str] | None = Field(
        None, description="Animation preset name keyed by section identifier"
    )
    scripts: list[str] = Field(default_factory=list, description="Custom script blocks")
    custom_css: str | None = None
