"""Helpers for the relay's JSON error envelope: {"success": false, "error": ...}."""

from __future__ import annotations

from fastapi.responses import JSONResponse


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
    )


def bad_request(message: str) -> JSONResponse:
    return error_response(message, status_code=400)


def server_error(exc: Exception) -> JSONResponse:
    return error_response(str(exc) or exc.__class__.__name__, status_code=500)
