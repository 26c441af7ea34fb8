"""Text transformation service: prompt building, one LLM call, result envelope."""

from __future__ import annotations

import logging
from typing import assert_never

import anthropic

from copy_refinery.clients.llm_client import LLMClient
from copy_refinery.config import LLMConfig
from copy_refinery.errors import MalformedResponseError, MissingInstructionError
from copy_refinery.models.actions import Action, PromptKind
from copy_refinery.models.registry import calculate_cost
from copy_refinery.models.transform import (
    ConnectionStatus,
    StyleGuideResult,
    TransformOptions,
    TransformRequest,
    TransformResult,
    Usage,
)
from copy_refinery.prompts import instructions
from copy_refinery.prompts.builder import build_prompts
from copy_refinery.prompts.style_guide import build_style_guide_prompts, parse_style_guide

logger = logging.getLogger(__name__)

# Failures reported as ``success=False`` instead of raised
UPSTREAM_ERRORS = (anthropic.APIError, MalformedResponseError)


def _error_message(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


class TextTransformer:
    """Runs transformations against Claude.

    Every method takes the model explicitly; ``None`` means the configured
    default. Upstream failures never raise out of :meth:`transform`,
    :meth:`generate_style_guide` or :meth:`validate_connection`.
    """

    def __init__(self, llm: LLMClient, config: LLMConfig | None = None):
        self.llm = llm
        self.config = config or LLMConfig()

    def _model(self, model: str | None) -> str:
        return model or self.config.default_model

    async def transform(
        self,
        text: str,
        instruction: str,
        options: TransformOptions | None = None,
        *,
        kind: PromptKind = PromptKind.GENERIC,
        model: str | None = None,
    ) -> TransformResult:
        options = options or TransformOptions()
        model = self._model(model)
        prompts = build_prompts(kind, text, instruction, options)
        temperature = (
            options.temperature if options.temperature is not None else self.config.temperature
        )

        try:
            response = await self.llm.generate(
                prompt=prompts.user,
                system=prompts.system,
                model=model,
                temperature=temperature,
                max_tokens=options.max_tokens or self.config.max_tokens,
            )
            transformed = response.text.strip()
            if not transformed:
                raise MalformedResponseError("Provider returned an empty text block")
        except UPSTREAM_ERRORS as exc:
            logger.error("Claude API error during %s transform", kind.value, exc_info=True)
            return TransformResult(
                success=False,
                original_text=text,
                error=_error_message(exc),
                instruction=instruction,
            )

        logger.info(
            "Transformed with %s (%s): %d -> %d chars",
            model,
            kind.value,
            len(text),
            len(transformed),
        )
        return TransformResult(
            success=True,
            original_text=text,
            transformed_text=transformed,
            instruction=instruction,
            model=model,
            usage=Usage(
                input_tokens=response.input_tokens,
                output_tokens=response.output_tokens,
                estimated_cost_usd=calculate_cost(
                    model, response.input_tokens, response.output_tokens
                ),
            ),
        )

    async def articulate(
        self, text: str, options: TransformOptions | None = None, *, model: str | None = None
    ) -> TransformResult:
        """Turn rough notes and fragments into fully written prose."""
        return await self.transform(
            text,
            instructions.ARTICULATE_INSTRUCTION,
            options,
            kind=PromptKind.ARTICULATE,
            model=model,
        )

    async def refine(
        self, text: str, options: TransformOptions | None = None, *, model: str | None = None
    ) -> TransformResult:
        """Polish wording and grammar while keeping intent and voice."""
        return await self.transform(
            text, instructions.REFINE_INSTRUCTION, options, kind=PromptKind.REFINE, model=model
        )

    async def edit(
        self,
        text: str,
        instruction: str | None,
        options: TransformOptions | None = None,
        *,
        model: str | None = None,
    ) -> TransformResult:
        """Apply a caller-supplied editing instruction."""
        if not instruction or not instruction.strip():
            raise MissingInstructionError("EDIT function requires a specific instruction")
        return await self.transform(
            text, instruction.strip(), options, kind=PromptKind.EDIT, model=model
        )

    async def custom(
        self,
        text: str,
        instruction: str | None,
        options: TransformOptions | None = None,
        *,
        model: str | None = None,
    ) -> TransformResult:
        if not instruction or not instruction.strip():
            raise MissingInstructionError("CUSTOM function requires a specific instruction")
        return await self.transform(text, instruction.strip(), options, model=model)

    async def shorten(
        self, text: str, options: TransformOptions | None = None, *, model: str | None = None
    ) -> TransformResult:
        options = options or TransformOptions()
        if not options.target_length:
            options = options.model_copy(update={"target_length": "significantly shorter"})
        return await self.transform(
            text, instructions.shorten_instruction(options), options, model=model
        )

    async def elongate(
        self, text: str, options: TransformOptions | None = None, *, model: str | None = None
    ) -> TransformResult:
        options = options or TransformOptions()
        if not options.target_length:
            options = options.model_copy(update={"target_length": "significantly longer"})
        return await self.transform(
            text, instructions.elongate_instruction(options), options, model=model
        )

    async def simplify(
        self, text: str, options: TransformOptions | None = None, *, model: str | None = None
    ) -> TransformResult:
        options = options or TransformOptions()
        if not options.tone:
            options = options.model_copy(update={"tone": "clear and accessible"})
        return await self.transform(
            text, instructions.simplify_instruction(options), options, model=model
        )

    async def run(self, request: TransformRequest, *, model: str | None = None) -> TransformResult:
        """Dispatch a request to exactly one action method."""
        text, options = request.text, request.options
        match request.action:
            case Action.ARTICULATE:
                return await self.articulate(text, options, model=model)
            case Action.REFINE:
                return await self.refine(text, options, model=model)
            case Action.EDIT:
                return await self.edit(text, options.instruction, options, model=model)
            case Action.CUSTOM:
                return await self.custom(text, options.instruction, options, model=model)
            case Action.SHORTEN:
                return await self.shorten(text, options, model=model)
            case Action.ELONGATE:
                return await self.elongate(text, options, model=model)
            case Action.SIMPLIFY:
                return await self.simplify(text, options, model=model)
            case _:
                assert_never(request.action)

    async def generate_style_guide(
        self,
        example_text: str,
        additional_instructions: str = "",
        *,
        model: str | None = None,
    ) -> StyleGuideResult:
        """Analyse example text and derive a comprehensive and a concise style guide."""
        model = self._model(model)
        prompts = build_style_guide_prompts(example_text, additional_instructions)
        try:
            response = await self.llm.generate(
                prompt=prompts.user,
                system=prompts.system,
                model=model,
                temperature=self.config.temperature,
                max_tokens=self.config.style_guide_max_tokens,
            )
        except UPSTREAM_ERRORS as exc:
            logger.error("Style guide generation failed", exc_info=True)
            return StyleGuideResult(
                success=False,
                example_text=example_text,
                error=_error_message(exc),
            )

        full_response = response.text.strip()
        comprehensive, concise = parse_style_guide(full_response)
        if not concise:
            logger.warning("Style guide response had no concise section")
        return StyleGuideResult(
            success=True,
            example_text=example_text,
            comprehensive_guide=comprehensive,
            concise_guide=concise,
            full_response=full_response,
            additional_instructions=additional_instructions,
            model=model,
        )

    async def validate_connection(self, *, model: str | None = None) -> ConnectionStatus:
        """Send a minimal probe request and report whether Claude is reachable."""
        model = self._model(model)
        try:
            await self.llm.probe(model)
        except anthropic.APIError as exc:
            logger.warning("Claude connection check failed: %s", exc)
            return ConnectionStatus(success=False, error=_error_message(exc))
        return ConnectionStatus(success=True, message="API connection successful", model=model)
