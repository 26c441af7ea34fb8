"""Async HTTP client for the relay, mirroring its endpoints.

Used by the Streamlit page. Methods never raise: server-side errors,
non-2xx statuses and transport failures come back as
``{"success": False, "error": ...}`` dicts.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from copy_refinery.models.transform import utc_timestamp

logger = logging.getLogger(__name__)


class RelayClient:
    def __init__(
        self,
        base_url: str = "http://127.0.0.1:3000",
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._transport = transport
        self._timeout = timeout

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url, transport=self._transport, timeout=self._timeout
        )

    async def _request(self, method: str, path: str, payload: dict | None = None) -> dict:
        async with self._client() as client:
            response = await client.request(method, path, json=payload)
        result = response.json()
        if response.is_error:
            message = result.get("error") if isinstance(result, dict) else None
            raise RuntimeError(message or f"Server error: {response.status_code}")
        return result

    async def call_api(self, text: str, action: str, options: dict[str, Any] | None = None) -> dict:
        try:
            return await self._request(
                "POST", "/api/transform", {"text": text, "action": action, "options": options or {}}
            )
        except (httpx.HTTPError, ValueError, RuntimeError) as exc:
            logger.error("Relay transform call failed: %s", exc)
            return {
                "success": False,
                "error": str(exc) or exc.__class__.__name__,
                "originalText": text,
                "timestamp": utc_timestamp(),
            }

    async def articulate(self, text: str, options: dict | None = None) -> dict:
        return await self.call_api(text, "ARTICULATE", options)

    async def refine(self, text: str, options: dict | None = None) -> dict:
        return await self.call_api(text, "REFINE", options)

    async def edit(self, text: str, instruction: str, options: dict | None = None) -> dict:
        return await self.call_api(text, "EDIT", {**(options or {}), "instruction": instruction})

    async def custom(self, text: str, instruction: str, options: dict | None = None) -> dict:
        return await self.call_api(text, "CUSTOM", {**(options or {}), "instruction": instruction})

    async def shorten(self, text: str, options: dict | None = None) -> dict:
        return await self.call_api(text, "SHORTEN", options)

    async def elongate(self, text: str, options: dict | None = None) -> dict:
        return await self.call_api(text, "ELONGATE", options)

    async def simplify(self, text: str, options: dict | None = None) -> dict:
        return await self.call_api(text, "SIMPLIFY", options)

    async def generate_style_guide(self, example_text: str, additional_instructions: str = "") -> dict:
        try:
            return await self._request(
                "POST",
                "/api/generate-style-guide",
                {"exampleText": example_text, "additionalInstructions": additional_instructions},
            )
        except (httpx.HTTPError, ValueError, RuntimeError) as exc:
            logger.error("Relay style guide call failed: %s", exc)
            return {"success": False, "error": str(exc), "timestamp": utc_timestamp()}

    async def get_models(self) -> dict:
        try:
            return await self._request("GET", "/api/models")
        except (httpx.HTTPError, ValueError, RuntimeError) as exc:
            logger.error("Relay get models call failed: %s", exc)
            return {"success": False, "error": str(exc)}

    async def set_model(self, model_id: str) -> dict:
        try:
            return await self._request("POST", "/api/models/set", {"modelId": model_id})
        except (httpx.HTTPError, ValueError, RuntimeError) as exc:
            logger.error("Relay set model call failed: %s", exc)
            return {"success": False, "error": str(exc)}

    async def check_health(self) -> dict:
        try:
            async with self._client() as client:
                response = await client.get("/api/health")
            return response.json()
        except (httpx.HTTPError, ValueError) as exc:
            return {"status": "error", "error": str(exc)}
