"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, datectl.toml only contains overrides.
An empty datectl.toml (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from datectl.domain.formats import FormatId
from datectl.domain.timezones import DEFAULT_TIMEZONE, resolve_timezone

# --- datectl.toml sections ---


class DatesConfig(BaseModel):
    """[dates] section."""

    model_config = {"frozen": True}

    default_timezone: str = DEFAULT_TIMEZONE
    display_formats: list[FormatId] = Field(
        default_factory=lambda: [FormatId.ISO, FormatId.US, FormatId.EU, FormatId.NATURAL]
    )

    @field_validator("default_timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        if resolve_timezone(value) is None:
            msg = f"Unknown timezone {value!r}"
            raise ValueError(msg)
        return value


class PagesConfig(BaseModel):
    """[pages] section."""

    model_config = {"frozen": True}

    directory: str = "pages"


class DatectlConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    dates: DatesConfig = Field(default_factory=DatesConfig)
    pages: PagesConfig = Field(default_factory=PagesConfig)
