"""
Search request handling: DI accessors, the search call and the JSON error bodies.

QueryValidationError becomes a 400 {error}; every failure past validation is
reported as ProviderError and becomes a 500 {error, message, details}.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from advogamos.core.errors import PROCESSING_FAILED_MESSAGE, ProviderError, QueryValidationError
from advogamos.schemas.search import (
    ProviderErrorResponse,
    SearchRequest,
    SearchResponse,
    ValidationErrorResponse,
)
from advogamos.services.completion_service import CompletionProvider
from advogamos.services.search_service import run_search

logger = logging.getLogger(__name__)


# --- Dependencies (objects built once in create_app and kept on app.state) ---

def get_provider(request: Request) -> CompletionProvider:
    return request.app.state.provider


# --- Search ---

async def handle_search(body: SearchRequest | None, provider: CompletionProvider) -> SearchResponse:
    """
    Run the search pipeline for one request.
    Any failure past validation is reported as ProviderError so the caller gets the 500 body.
    """
    query = body.query if body is not None else None
    try:
        return await run_search(query, provider)
    except (QueryValidationError, ProviderError):
        raise
    except Exception as e:
        raise ProviderError(str(e)) from e


# --- Exception handlers (registered in create_app) ---

async def query_validation_error_handler(request: Request, exc: QueryValidationError) -> JSONResponse:
    logger.info("[api:search] rejected: %s", exc.message)
    return JSONResponse(
        status_code=400,
        content=ValidationErrorResponse(error=exc.message).model_dump(),
    )


async def provider_error_handler(request: Request, exc: ProviderError) -> JSONResponse:
    origin = exc.origin
    logger.error("[api:search] %s", PROCESSING_FAILED_MESSAGE, exc_info=origin)
    body = ProviderErrorResponse(
        error=PROCESSING_FAILED_MESSAGE,
        message=str(origin),
        details=f"{type(origin).__name__}: {origin}",
    )
    return JSONResponse(status_code=500, content=body.model_dump())
