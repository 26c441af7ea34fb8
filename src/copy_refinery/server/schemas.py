"""Request bodies accepted by the relay.

Fields are optional at the schema level so that a missing field is
reported as a 400 with the relay's own message instead of a 422.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class TransformBody(BaseModel):
    text: str | None = None
    action: str | None = None
    options: dict[str, Any] = Field(default_factory=dict)


class StyleGuideBody(BaseModel):
    exampleText: str | None = None
    additionalInstructions: str | None = None


class SetModelBody(BaseModel):
    modelId: str | None = None
