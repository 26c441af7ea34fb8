"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import anthropic
import httpx
import pytest

from copy_refinery.clients.llm_client import LLMClient, LLMResponse
from copy_refinery.config import LLMConfig
from copy_refinery.services.transformer import TextTransformer

SAMPLE_STYLE_GUIDE_RESPONSE = """\
=== UMFASSENDER STYLE GUIDE (für Grund-Textentwicklung) ===

● TON: Direkt, warm, leicht provokant
● SCHREIBREGELN: Kurze Sätze, aktive Verben

=== PRÄZISER STYLE GUIDE (für Textverfeinerung) ===

● TON: Direkt und warm
● SATZSTRUKTUR: Kurz, rhythmisch"""


def make_api_message(text: str, input_tokens: int = 100, output_tokens: int = 50) -> MagicMock:
    """Build a mock anthropic Message-like object."""
    message = MagicMock()
    message.usage.input_tokens = input_tokens
    message.usage.output_tokens = output_tokens
    message.content = [MagicMock(text=text)]
    return message


def make_status_error(status: int = 500, message: str = "Internal server error") -> anthropic.APIStatusError:
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    response = httpx.Response(status, request=request)
    return anthropic.APIStatusError(message, response=response, body=None)


def make_connection_error() -> anthropic.APIConnectionError:
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    return anthropic.APIConnectionError(request=request)


@pytest.fixture
def sample_text() -> str:
    return "Draft notes about Q3 sales"


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(
            text="Im dritten Quartal sind die Umsätze deutlich gestiegen.",
            input_tokens=100,
            output_tokens=50,
        )
    )
    client.probe = AsyncMock(return_value=None)
    return client


@pytest.fixture
def transformer(mock_llm_client) -> TextTransformer:
    return TextTransformer(mock_llm_client, LLMConfig())
