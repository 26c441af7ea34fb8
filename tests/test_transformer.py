"""Tests for TextTransformer with a mocked LLM client."""

from __future__ import annotations

import pytest

from copy_refinery.clients.llm_client import LLMResponse
from copy_refinery.config import LLMConfig
from copy_refinery.errors import MalformedResponseError, MissingInstructionError
from copy_refinery.models.actions import Action
from copy_refinery.models.registry import DEFAULT_MODEL_ID
from copy_refinery.models.transform import TransformOptions, TransformRequest
from copy_refinery.prompts import instructions, templates
from copy_refinery.services.transformer import TextTransformer

from conftest import SAMPLE_STYLE_GUIDE_RESPONSE, make_connection_error, make_status_error


class TestTransform:
    async def test_refine_example(self, transformer, mock_llm_client, sample_text):
        result = await transformer.refine(sample_text, model="claude-sonnet-4-20250514")

        assert result.success is True
        assert result.transformed_text
        assert result.transformed_text != sample_text
        assert result.model == "claude-sonnet-4-20250514"
        assert result.original_text == sample_text
        assert result.instruction == instructions.REFINE_INSTRUCTION
        assert mock_llm_client.generate.await_count == 1

    async def test_response_is_stripped(self, transformer, mock_llm_client):
        mock_llm_client.generate.return_value = LLMResponse("  spaced out \n", 1, 1)
        result = await transformer.refine("x")
        assert result.transformed_text == "spaced out"

    async def test_default_model_from_config(self, mock_llm_client):
        transformer = TextTransformer(mock_llm_client, LLMConfig(default_model="claude-3-5-haiku-20241022"))
        result = await transformer.refine("x")
        assert result.model == "claude-3-5-haiku-20241022"
        assert mock_llm_client.generate.await_args.kwargs["model"] == "claude-3-5-haiku-20241022"

    async def test_config_defaults_for_sampling(self, transformer, mock_llm_client):
        await transformer.refine("x")
        kwargs = mock_llm_client.generate.await_args.kwargs
        assert kwargs["temperature"] == 0.3
        assert kwargs["max_tokens"] == 8000

    async def test_options_override_sampling(self, transformer, mock_llm_client):
        await transformer.refine("x", TransformOptions(temperature=0.0, max_tokens=500))
        kwargs = mock_llm_client.generate.await_args.kwargs
        assert kwargs["temperature"] == 0.0
        assert kwargs["max_tokens"] == 500

    async def test_usage_and_cost(self, transformer, mock_llm_client):
        mock_llm_client.generate.return_value = LLMResponse("out", 1_000_000, 0)
        result = await transformer.refine("x", model=DEFAULT_MODEL_ID)
        assert result.usage.input_tokens == 1_000_000
        assert result.usage.estimated_cost_usd == pytest.approx(3.0)

    async def test_articulate_uses_articulate_template(self, transformer, mock_llm_client):
        await transformer.articulate("- Punkt eins\n- Punkt zwei")
        kwargs = mock_llm_client.generate.await_args.kwargs
        assert kwargs["system"].startswith(templates.ARTICULATE.role)
        assert '"- Punkt eins\n- Punkt zwei"' in kwargs["prompt"]


class TestUpstreamFailures:
    @pytest.mark.parametrize(
        "error",
        [make_status_error(500), make_status_error(401, "invalid x-api-key"), make_connection_error()],
    )
    async def test_upstream_error_reported_not_raised(self, transformer, mock_llm_client, error):
        mock_llm_client.generate.side_effect = error
        result = await transformer.refine("some text")

        assert result.success is False
        assert result.error
        assert result.transformed_text is None
        assert result.original_text == "some text"

    async def test_malformed_response_reported(self, transformer, mock_llm_client):
        mock_llm_client.generate.side_effect = MalformedResponseError("no text content")
        result = await transformer.articulate("x")
        assert result.success is False
        assert result.error == "no text content"

    async def test_empty_text_is_failure(self, transformer, mock_llm_client):
        mock_llm_client.generate.return_value = LLMResponse("   ", 5, 0)
        result = await transformer.refine("x")
        assert result.success is False
        assert "empty" in result.error

    async def test_programming_errors_propagate(self, transformer, mock_llm_client):
        mock_llm_client.generate.side_effect = KeyError("bug")
        with pytest.raises(KeyError):
            await transformer.refine("x")


class TestInstructionActions:
    async def test_edit_requires_instruction(self, transformer, mock_llm_client):
        for instruction in (None, "", "   "):
            with pytest.raises(MissingInstructionError):
                await transformer.edit("x", instruction)
        mock_llm_client.generate.assert_not_awaited()

    async def test_custom_requires_instruction(self, transformer):
        with pytest.raises(MissingInstructionError):
            await transformer.custom("x", "")

    async def test_edit_strips_instruction(self, transformer, mock_llm_client):
        result = await transformer.edit("x", "  formeller  ")
        assert result.instruction == "formeller"
        assert "ANWEISUNGEN:\nformeller" in mock_llm_client.generate.await_args.kwargs["prompt"]

    async def test_custom_uses_generic_template(self, transformer, mock_llm_client):
        await transformer.custom("x", "Reime es")
        assert mock_llm_client.generate.await_args.kwargs["system"] == templates.GENERIC_SYSTEM


class TestPresetActions:
    async def test_shorten_default_hints(self, transformer, mock_llm_client):
        result = await transformer.shorten("x")
        assert "Aim to reduce length by 30-50%." in result.instruction
        assert "Ziellänge: significantly shorter" in mock_llm_client.generate.await_args.kwargs["prompt"]

    async def test_shorten_target_reduction(self, transformer):
        result = await transformer.shorten("x", TransformOptions(target_reduction="20%"))
        assert "approximately 20%." in result.instruction

    async def test_elongate(self, transformer, mock_llm_client):
        result = await transformer.elongate("x", TransformOptions(expansion_type="Add examples"))
        assert "Add examples while maintaining" in result.instruction
        assert "Ziellänge: significantly longer" in mock_llm_client.generate.await_args.kwargs["prompt"]

    async def test_simplify_keeps_caller_tone(self, transformer, mock_llm_client):
        result = await transformer.simplify(
            "x", TransformOptions(tone="playful", target_audience="children")
        )
        assert "Write for children." in result.instruction
        prompt = mock_llm_client.generate.await_args.kwargs["prompt"]
        assert "Gewünschter Ton: playful" in prompt


class TestRun:
    @pytest.mark.parametrize("action", list(Action))
    async def test_every_action_dispatches_exactly_once(self, transformer, mock_llm_client, action):
        options = TransformOptions(instruction="Mach es kürzer")
        result = await transformer.run(
            TransformRequest(text="Text", action=action, options=options),
            model="claude-opus-4-1-20250805",
        )

        assert result.success is True
        assert result.model == "claude-opus-4-1-20250805"
        assert mock_llm_client.generate.await_count == 1
        system = mock_llm_client.generate.await_args.kwargs["system"]
        if action.prompt_kind.value in ("articulate", "refine", "edit"):
            assert system.startswith(templates.DEDICATED[action.prompt_kind].role)
        else:
            assert system == templates.GENERIC_SYSTEM

    async def test_run_edit_without_instruction(self, transformer):
        with pytest.raises(MissingInstructionError):
            await transformer.run(TransformRequest(text="Text", action=Action.EDIT))


class TestStyleGuide:
    async def test_generate_style_guide(self, transformer, mock_llm_client):
        mock_llm_client.generate.return_value = LLMResponse(SAMPLE_STYLE_GUIDE_RESPONSE, 10, 10)
        result = await transformer.generate_style_guide("Beispieltext", "Fokus Ton")

        assert result.success is True
        assert result.comprehensive_guide
        assert result.concise_guide
        assert result.full_response == SAMPLE_STYLE_GUIDE_RESPONSE
        assert result.example_text == "Beispieltext"
        assert result.additional_instructions == "Fokus Ton"
        assert result.model == DEFAULT_MODEL_ID
        kwargs = mock_llm_client.generate.await_args.kwargs
        assert kwargs["max_tokens"] == 6000
        assert kwargs["temperature"] == 0.3

    async def test_style_guide_without_markers(self, transformer, mock_llm_client):
        mock_llm_client.generate.return_value = LLMResponse("Einfach nur Text.", 1, 1)
        result = await transformer.generate_style_guide("Beispiel")
        assert result.comprehensive_guide == "Einfach nur Text."
        assert result.concise_guide == ""

    async def test_style_guide_failure(self, transformer, mock_llm_client):
        mock_llm_client.generate.side_effect = make_status_error(503, "Service unavailable")
        result = await transformer.generate_style_guide("Beispiel")
        assert result.success is False
        assert result.error
        assert result.example_text == "Beispiel"


class TestValidateConnection:
    async def test_success(self, transformer, mock_llm_client):
        status = await transformer.validate_connection(model="claude-3-5-haiku-20241022")
        assert status.success is True
        assert status.model == "claude-3-5-haiku-20241022"
        mock_llm_client.probe.assert_awaited_once_with("claude-3-5-haiku-20241022")

    async def test_failure(self, transformer, mock_llm_client):
        mock_llm_client.probe.side_effect = make_connection_error()
        status = await transformer.validate_connection()
        assert status.success is False
        assert status.error == "Connection error."
