"""Claude API wrapper with async support."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import anthropic

from copy_refinery.errors import MalformedResponseError
from copy_refinery.models.registry import DEFAULT_MODEL_ID

logger = logging.getLogger(__name__)


@dataclass
class LLMResponse:
    """Response from the LLM including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int


class LLMClient:
    """Async Claude API client; one request per call, no retries."""

    def __init__(self, api_key: str | None = None, timeout: float | None = None):
        # The SDK retries 5xx/429/connection errors twice by default
        kwargs: dict = {"max_retries": 0}
        if api_key is not None:
            kwargs["api_key"] = api_key
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**kwargs)

    async def generate(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL_ID,
        temperature: float = 0.3,
        max_tokens: int = 8000,
    ) -> LLMResponse:
        """Send a prompt to Claude and return the text response with usage.

        Raises:
            anthropic.APIError: on non-2xx status or transport failure.
            MalformedResponseError: when the answer carries no text block.
        """
        logger.debug("LLM call: model=%s max_tokens=%d", model, max_tokens)
        kwargs: dict = {
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system
        message = await self.client.messages.create(**kwargs)

        text = _first_text_block(message)
        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        return LLMResponse(text=text, input_tokens=input_tokens, output_tokens=output_tokens)

    async def probe(self, model: str = DEFAULT_MODEL_ID) -> None:
        """Send a minimal request; raises if the API is unreachable or rejects the key."""
        await self.client.messages.create(
            model=model,
            max_tokens=10,
            messages=[{"role": "user", "content": "Hello"}],
        )


def _first_text_block(message) -> str:
    for block in message.content or []:
        text = getattr(block, "text", None)
        if isinstance(text, str):
            return text
    raise MalformedResponseError(
        f"Provider response contained no text content (stop_reason={getattr(message, 'stop_reason', None)})"
    )
