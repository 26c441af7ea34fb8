"""Module-level convenience API around a single shared TextTransformer.

Call :func:`initialize_api` once; every other function raises
:class:`NotInitializedError` before that. The transform functions check
initialization eagerly and return an awaitable::

    initialize_api()
    result = await refine_text("Draft notes about Q3 sales")
"""

from __future__ import annotations

from typing import Awaitable

from copy_refinery.clients.llm_client import LLMClient
from copy_refinery.config import LLMConfig
from copy_refinery.errors import NotInitializedError
from copy_refinery.models.registry import ModelSelection, available_models
from copy_refinery.models.transform import StyleGuideResult, TransformOptions, TransformResult
from copy_refinery.services.transformer import TextTransformer

_transformer: TextTransformer | None = None
_selection: ModelSelection | None = None


def initialize_api(
    api_key: str | None = None,
    config: LLMConfig | None = None,
) -> TextTransformer:
    """Create the shared transformer; ``api_key`` falls back to ANTHROPIC_API_KEY."""
    global _transformer, _selection
    config = config or LLMConfig()
    _transformer = TextTransformer(LLMClient(api_key=api_key, timeout=config.timeout), config)
    _selection = ModelSelection(config.default_model)
    return _transformer


def _require() -> tuple[TextTransformer, ModelSelection]:
    if _transformer is None or _selection is None:
        raise NotInitializedError()
    return _transformer, _selection


def articulate_text(
    text: str, options: TransformOptions | None = None
) -> Awaitable[TransformResult]:
    transformer, selection = _require()
    return transformer.articulate(text, options, model=selection.model_id)


def refine_text(text: str, options: TransformOptions | None = None) -> Awaitable[TransformResult]:
    transformer, selection = _require()
    return transformer.refine(text, options, model=selection.model_id)


def edit_text(
    text: str, instruction: str, options: TransformOptions | None = None
) -> Awaitable[TransformResult]:
    transformer, selection = _require()
    return transformer.edit(text, instruction, options, model=selection.model_id)


def custom_transform(
    text: str, instruction: str, options: TransformOptions | None = None
) -> Awaitable[TransformResult]:
    transformer, selection = _require()
    return transformer.custom(text, instruction, options, model=selection.model_id)


def shorten_text(text: str, options: TransformOptions | None = None) -> Awaitable[TransformResult]:
    transformer, selection = _require()
    return transformer.shorten(text, options, model=selection.model_id)


def elongate_text(text: str, options: TransformOptions | None = None) -> Awaitable[TransformResult]:
    transformer, selection = _require()
    return transformer.elongate(text, options, model=selection.model_id)


def simplify_text(text: str, options: TransformOptions | None = None) -> Awaitable[TransformResult]:
    transformer, selection = _require()
    return transformer.simplify(text, options, model=selection.model_id)


def generate_style_guide(
    example_text: str, additional_instructions: str = ""
) -> Awaitable[StyleGuideResult]:
    transformer, selection = _require()
    return transformer.generate_style_guide(
        example_text, additional_instructions, model=selection.model_id
    )


def set_model(model_id: str) -> bool:
    _, selection = _require()
    return selection.select(model_id)


def get_available_models() -> dict[str, dict]:
    _require()
    return available_models()


def get_current_model() -> dict:
    _, selection = _require()
    return selection.current()


def reset_api() -> None:
    """Drop the shared transformer (used by tests)."""
    global _transformer, _selection
    _transformer = None
    _selection = None
