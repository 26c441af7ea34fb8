"""Static registry of the Claude models the relay can route to."""

from __future__ import annotations

from pydantic import BaseModel

DEFAULT_MODEL_ID = "claude-sonnet-4-5-20250929"


class ModelInfo(BaseModel):
    """Display metadata and per-MTok pricing for one model."""

    name: str
    description: str
    pricing: str  # human-readable, e.g. "$3/$15 per MTok"
    input_price: float  # USD per 1M input tokens
    output_price: float  # USD per 1M output tokens
    recommended: bool = False
    premium: bool = False
    fast: bool = False

    model_config = {"frozen": True}

    def to_public(self) -> dict:
        """Wire form: flags only when set, prices folded into ``pricing``."""
        data = {
            "name": self.name,
            "description": self.description,
            "pricing": self.pricing,
        }
        for flag in ("recommended", "premium", "fast"):
            if getattr(self, flag):
                data[flag] = True
        return data


MODEL_REGISTRY: dict[str, ModelInfo] = {
    "claude-sonnet-4-5-20250929": ModelInfo(
        name="Claude Sonnet 4.5",
        description="Latest & most intelligent - exceptional agent & coding capabilities",
        pricing="$3/$15 per MTok",
        input_price=3.00,
        output_price=15.00,
        recommended=True,
    ),
    "claude-opus-4-1-20250805": ModelInfo(
        name="Claude Opus 4.1",
        description="Premium model for complex tasks requiring advanced reasoning",
        pricing="$15/$75 per MTok",
        input_price=15.00,
        output_price=75.00,
        premium=True,
    ),
    "claude-sonnet-4-20250514": ModelInfo(
        name="Claude Sonnet 4",
        description="Balanced performance - previous default",
        pricing="$3/$15 per MTok",
        input_price=3.00,
        output_price=15.00,
    ),
    "claude-3-5-haiku-20241022": ModelInfo(
        name="Claude Haiku 3.5",
        description="Fast & cost-effective for quick responses",
        pricing="$0.80/$4 per MTok",
        input_price=0.80,
        output_price=4.00,
        fast=True,
    ),
}


def available_models() -> dict[str, dict]:
    """Return the registry in its JSON wire form, keyed by model id."""
    return {model_id: info.to_public() for model_id, info in MODEL_REGISTRY.items()}


def describe_model(model_id: str) -> dict:
    """Return ``{"id": ..., **metadata}`` for a registered model."""
    return {"id": model_id, **MODEL_REGISTRY[model_id].to_public()}


def calculate_cost(model_id: str, input_tokens: int, output_tokens: int) -> float:
    """Estimated cost in USD for one call; 0.0 for models without pricing."""
    info = MODEL_REGISTRY.get(model_id)
    if info is None:
        return 0.0
    return (
        (input_tokens / 1_000_000) * info.input_price
        + (output_tokens / 1_000_000) * info.output_price
    )


class ModelSelection:
    """The model new requests should use.

    Handlers read :attr:`model_id` once per request and pass it down
    explicitly, so a change never affects a request already in flight.
    """

    def __init__(self, model_id: str = DEFAULT_MODEL_ID):
        if model_id not in MODEL_REGISTRY:
            raise ValueError(f"Invalid model ID: {model_id}")
        self._model_id = model_id

    @property
    def model_id(self) -> str:
        return self._model_id

    def select(self, model_id: str) -> bool:
        """Switch to ``model_id``; unknown ids leave the selection unchanged."""
        if model_id not in MODEL_REGISTRY:
            return False
        self._model_id = model_id
        return True

    def current(self) -> dict:
        return describe_model(self._model_id)
