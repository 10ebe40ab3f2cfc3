# app/api.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from image_to_sabre.config import Settings, load_settings
from image_to_sabre.converter import ConversionError, ConversionResponse, ConversionService, InferenceClient
from image_to_sabre.converter.errors import MethodNotAllowed
from image_to_sabre.converter.types import ErrorResponse
from image_to_sabre.libs.llm_openai import OpenAIVisionClient

log = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid or missing imageDataUrl"},
    405: {"model": ErrorResponse, "description": "Method not allowed"},
    413: {"model": ErrorResponse, "description": "Image too large"},
    500: {"model": ErrorResponse, "description": "Model call failed (or the upstream status)"},
}


def create_app(settings: Optional[Settings] = None, client: Optional[InferenceClient] = None) -> FastAPI:
    """
    Build the image-to-Sabre API.

    Args:
        settings: runtime settings; read from the environment when omitted
        client: inference client; defaults to the OpenAI Responses API client

    Returns:
        FastAPI app exposing `POST /`, `OPTIONS /` and `GET /health`
    """
    settings = settings or load_settings()
    service = ConversionService(settings, client or OpenAIVisionClient(settings))
    cors_headers = dict(CORS_HEADERS) if settings.cors_enabled else {}

    app = FastAPI(title="Image to Sabre API", version="1.0.0")
    app.state.settings = settings
    app.state.service = service

    @app.exception_handler(ConversionError)
    async def conversion_error(request: Request, exc: ConversionError):
        return JSONResponse({"error": exc.message}, status_code=exc.status_code, headers=cors_headers)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        headers = dict(exc.headers or {})
        if exc.status_code == MethodNotAllowed.status_code:
            log.warning("Rejected request: method %s not allowed on %s", request.method, request.url.path)
            headers.update(cors_headers)
            return JSONResponse({"error": MethodNotAllowed.message}, status_code=405, headers=headers)
        return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code, headers=headers)

    @app.post("/", response_model=ConversionResponse, responses=ERROR_RESPONSES)
    async def image_to_sabre(request: Request):
        try:
            payload = await request.json()
        except ValueError:
            # empty or non-JSON body is treated as a missing imageDataUrl
            payload = None

        result = await run_in_threadpool(service.convert, payload)
        return JSONResponse(result.model_dump(by_alias=True), headers=cors_headers)

    if settings.cors_enabled:
        @app.options("/")
        async def preflight():
            return Response(status_code=200, headers=cors_headers)

    @app.get("/health")
    def health():
        return {"status": "ok", "model": settings.model}

    return app
