"""FastAPI application factory for the copy refinery relay."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from copy_refinery.clients.llm_client import LLMClient
from copy_refinery.config import AppConfig, load_config
from copy_refinery.models.registry import ModelSelection
from copy_refinery.server.responses import bad_request
from copy_refinery.server.routes import router
from copy_refinery.services.transformer import TextTransformer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    config: AppConfig = app.state.config
    logger.info(
        "Copy Refinery relay starting: http://%s:%d (model=%s)",
        config.server.host,
        config.server.port,
        app.state.model_selection.model_id,
    )
    logger.info("API health check: http://%s:%d/api/health", config.server.host, config.server.port)
    yield
    logger.info("Copy Refinery relay stopped")


def create_app(
    config: AppConfig | None = None,
    transformer: TextTransformer | None = None,
) -> FastAPI:
    """Build the relay app.

    Args:
        config: Loaded configuration; ``load_config()`` when omitted.
        transformer: Pre-built transformer (tests inject one backed by a
            mock LLM). By default one is created from ANTHROPIC_API_KEY.
    """
    config = config or load_config()
    if transformer is None:
        transformer = TextTransformer(LLMClient(timeout=config.llm.timeout), config.llm)

    app = FastAPI(
        title="Copy Refinery",
        description="Relay for Claude-powered copy transformations.",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.transformer = transformer
    app.state.model_selection = ModelSelection(config.llm.default_model)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        detail = errors[0]["msg"] if errors else "invalid request"
        logger.warning("Rejected malformed request to %s: %s", request.url.path, detail)
        return bad_request(f"Invalid request body: {detail}")

    app.include_router(router)

    @app.get("/", include_in_schema=False)
    async def index():
        return RedirectResponse(config.server.index_page)

    if config.server.static_dir:
        app.mount("/", StaticFiles(directory=config.server.static_dir, html=True), name="static")

    return app
