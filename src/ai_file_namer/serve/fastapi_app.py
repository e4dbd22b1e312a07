"""FastAPI app for filename suggestions.

Endpoints:
- GET /health
- POST /api/generate  { "description": "..." }
"""
from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from ai_file_namer.common.config import Settings, load_settings
from ai_file_namer.common.errors import UnknownFailure
from ai_file_namer.common.logging_setup import setup_logging
from ai_file_namer.provider.gemini_client import GeminiClient
from ai_file_namer.serve.handler import ProviderFactory, SuggestionHandler

LOGGER = logging.getLogger("ai_file_namer.serve.app")


def create_app(settings: Settings | None = None, provider_factory: ProviderFactory = GeminiClient) -> FastAPI:
    """
    Build the FastAPI app around one settings object.

    Args:
        settings: Runtime settings; loaded from the environment when omitted.
        provider_factory: Provider constructor, swapped for fakes in tests.
    """
    settings = settings or load_settings()
    handler = SuggestionHandler(settings, provider_factory)
    app = FastAPI(title="AI File Namer")
    app.state.settings = settings
    app.state.handler = handler

    @app.on_event("startup")
    def _warn_on_missing_key() -> None:
        if not settings.has_api_key:
            LOGGER.warning("GEMINI_API_KEY is not set; /api/generate will return 500")

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "model": settings.model_id}

    @app.post("/api/generate")
    async def generate(request: Request) -> JSONResponse:
        try:
            payload = await request.json()
        except Exception as e:
            LOGGER.error("Could not read request body: %s", e)
            status, body = handler.error_envelope(UnknownFailure(str(e)))
            return JSONResponse(body, status_code=status)

        status, body = await run_in_threadpool(handler.handle, payload)
        return JSONResponse(body, status_code=status)

    return app


setup_logging()
app = create_app()
