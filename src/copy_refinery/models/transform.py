"""Pydantic models for transformation requests and their result envelopes."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from copy_refinery.models.actions import Action, PromptKind


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2025-01-01T12:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class _WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class StyleGuide(_WireModel):
    """A generated style guide pair, or a single legacy guide string."""

    comprehensive_guide: str = ""
    concise_guide: str = ""
    style_guide: str = ""  # legacy single-guide form

    def for_kind(self, kind: PromptKind) -> str | None:
        """Comprehensive guide for articulation, concise guide otherwise."""
        if self.comprehensive_guide:
            if kind is PromptKind.ARTICULATE:
                return self.comprehensive_guide
            return self.concise_guide or self.comprehensive_guide
        return self.style_guide or None


class TransformOptions(_WireModel):
    instruction: str | None = None
    context: str | None = None
    tone: str | None = None
    target_length: str | None = None
    style_guide: StyleGuide | str | None = None
    temperature: float | None = None
    max_tokens: int | None = None
    mode: str = "text"  # "json" switches on JSON template mode
    target_reduction: str | None = None
    expansion_type: str | None = None
    target_audience: str | None = None

    @field_validator("mode", mode="before")
    @classmethod
    def _null_mode_is_text(cls, value):
        return "text" if value is None else value

    def selected_style_guide(self, kind: PromptKind) -> str | None:
        if self.style_guide is None:
            return None
        if isinstance(self.style_guide, str):
            return self.style_guide or None
        return self.style_guide.for_kind(kind)


class TransformRequest(_WireModel):
    text: str
    action: Action
    options: TransformOptions = Field(default_factory=TransformOptions)


class Usage(_WireModel):
    model_config = ConfigDict(frozen=True)

    input_tokens: int
    output_tokens: int
    estimated_cost_usd: float = 0.0


class TransformResult(_WireModel):
    """Outcome of one transformation; ``transformed_text`` xor ``error`` is set."""

    model_config = ConfigDict(frozen=True)

    success: bool
    original_text: str
    transformed_text: str | None = None
    error: str | None = None
    instruction: str | None = None
    model: str | None = None
    usage: Usage | None = None
    timestamp: str = Field(default_factory=utc_timestamp)


class StyleGuideResult(_WireModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    example_text: str
    comprehensive_guide: str | None = None
    concise_guide: str | None = None
    full_response: str | None = None
    additional_instructions: str | None = None
    model: str | None = None
    error: str | None = None
    timestamp: str = Field(default_factory=utc_timestamp)

    def to_dict(self) -> dict:
        data = super().to_dict()
        if self.success:
            # older pages read the comprehensive guide from ``styleGuide``
            data["styleGuide"] = self.comprehensive_guide
        return data


class ConnectionStatus(_WireModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    message: str | None = None
    error: str | None = None
    model: str | None = None
