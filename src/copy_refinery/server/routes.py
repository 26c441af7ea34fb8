"""Relay endpoints under /api.

Each handler validates its body, reads the current model once, calls the
transformer and serializes the result. Upstream failures come back as
``success: false`` with status 200; anything raised maps to 500.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from copy_refinery.errors import UnknownActionError
from copy_refinery.models.actions import Action
from copy_refinery.models.registry import ModelSelection, available_models
from copy_refinery.models.transform import TransformOptions, TransformRequest, utc_timestamp
from copy_refinery.server.responses import bad_request, server_error
from copy_refinery.server.schemas import SetModelBody, StyleGuideBody, TransformBody
from copy_refinery.services.transformer import TextTransformer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def get_transformer(request: Request) -> TextTransformer:
    return request.app.state.transformer


def get_model_selection(request: Request) -> ModelSelection:
    return request.app.state.model_selection


def _parse_action(name: str) -> Action:
    try:
        return Action(name)
    except ValueError:
        raise UnknownActionError(name, Action.names()) from None


@router.post("/transform", tags=["Transform"])
async def transform(
    body: TransformBody,
    transformer: TextTransformer = Depends(get_transformer),
    selection: ModelSelection = Depends(get_model_selection),
):
    if not body.text or not body.action:
        return bad_request("Missing required fields: text and action")
    try:
        action = _parse_action(body.action)
        options = TransformOptions.model_validate(body.options)
    except UnknownActionError as exc:
        return bad_request(str(exc))
    except ValidationError as exc:
        return bad_request(f"Invalid options: {exc.errors()[0]['msg']}")

    if action.requires_instruction and not (options.instruction or "").strip():
        return bad_request(f"{action.value} action requires instruction in options")

    model = selection.model_id
    logger.info("Transform request: action=%s model=%s len=%d", action.value, model, len(body.text))
    try:
        result = await transformer.run(
            TransformRequest(text=body.text, action=action, options=options), model=model
        )
    except Exception as exc:
        logger.exception("Transform request failed")
        return server_error(exc)
    return result.to_dict()


@router.post("/generate-style-guide", tags=["Transform"])
async def generate_style_guide(
    body: StyleGuideBody,
    transformer: TextTransformer = Depends(get_transformer),
    selection: ModelSelection = Depends(get_model_selection),
):
    if not body.exampleText or not body.exampleText.strip():
        return bad_request("Missing required field: exampleText")
    try:
        result = await transformer.generate_style_guide(
            body.exampleText.strip(),
            body.additionalInstructions or "",
            model=selection.model_id,
        )
    except Exception as exc:
        logger.exception("Style guide generation failed")
        return server_error(exc)
    return result.to_dict()


@router.get("/models", tags=["Models"])
async def list_models(selection: ModelSelection = Depends(get_model_selection)):
    return {
        "success": True,
        "models": available_models(),
        "currentModel": selection.current(),
    }


@router.post("/models", tags=["Models"])
@router.post("/models/set", tags=["Models"])
async def set_model(
    body: SetModelBody,
    selection: ModelSelection = Depends(get_model_selection),
):
    if not body.modelId:
        return bad_request("Missing required field: modelId")
    if not selection.select(body.modelId):
        logger.warning("Rejected unknown model id: %s", body.modelId)
        return bad_request(f"Invalid model ID: {body.modelId}")
    logger.info("Current model set to %s", body.modelId)
    return {"success": True, "currentModel": selection.current()}


@router.get("/health", tags=["Health"])
async def health(
    transformer: TextTransformer = Depends(get_transformer),
    selection: ModelSelection = Depends(get_model_selection),
):
    try:
        status = await transformer.validate_connection(model=selection.model_id)
    except Exception as exc:
        logger.exception("Health check failed")
        return JSONResponse(
            status_code=500,
            content={"status": "error", "error": str(exc), "timestamp": utc_timestamp()},
        )
    return {"status": "ok", "timestamp": utc_timestamp(), "claude": status.to_dict()}
