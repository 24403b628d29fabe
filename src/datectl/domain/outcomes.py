"""Tagged outcome types returned by every core operation.

INVARIANT: Core operations never raise for bad input. Each failure is a
``Rejected`` (or ``Invalid``) value carrying an ErrorCode and a
human-readable reason that callers may echo verbatim.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Annotated, Literal

from pydantic import AwareDatetime, BaseModel, Field, field_validator

from datectl.domain.formats import FormatId


class ErrorCode(StrEnum):
    """Failure taxonomy shared by the parser, formatter, and range validator."""

    EMPTY_INPUT = "EMPTY_INPUT"
    NO_FORMAT_MATCHED = "NO_FORMAT_MATCHED"
    INVALID_TIMEZONE = "INVALID_TIMEZONE"
    INVALID_CALENDAR_DATE = "INVALID_CALENDAR_DATE"
    INVALID_MONTH_COMPONENT = "INVALID_MONTH_COMPONENT"
    START_AFTER_END = "START_AFTER_END"
    INVALID_INSTANT = "INVALID_INSTANT"


class Parsed(BaseModel):
    """Successful parse: a UTC instant plus the format that matched."""

    model_config = {"frozen": True}

    kind: Literal["parsed"] = "parsed"
    instant: AwareDatetime
    matched_format: FormatId

    @field_validator("instant")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        return value.astimezone(UTC)

    @property
    def ok(self) -> bool:
        return True


class Rejected(BaseModel):
    """Failed parse or render. Never carries an instant."""

    model_config = {"frozen": True}

    kind: Literal["rejected"] = "rejected"
    code: ErrorCode
    reason: str

    @property
    def ok(self) -> bool:
        return False


class Formatted(BaseModel):
    """Successful render."""

    model_config = {"frozen": True}

    kind: Literal["formatted"] = "formatted"
    text: str

    @property
    def ok(self) -> bool:
        return True


class Valid(BaseModel):
    """A well-ordered range and its duration."""

    model_config = {"frozen": True}

    kind: Literal["valid"] = "valid"
    start: AwareDatetime
    end: AwareDatetime
    total_days: int
    total_hours: int
    human_readable: str

    @property
    def ok(self) -> bool:
        return True


class Invalid(BaseModel):
    """A range that could not be validated.

    ``field`` names the side (``"start"`` or ``"end"``) whose parse
    failed; it is None when both sides parsed but are out of order.
    """

    model_config = {"frozen": True}

    kind: Literal["invalid"] = "invalid"
    code: ErrorCode
    reason: str
    field: Literal["start", "end"] | None = None

    @property
    def ok(self) -> bool:
        return False


ParseOutcome = Annotated[Parsed | Rejected, Field(discriminator="kind")]
FormatOutcome = Annotated[Formatted | Rejected, Field(discriminator="kind")]
RangeResult = Annotated[Valid | Invalid, Field(discriminator="kind")]
