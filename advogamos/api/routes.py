"""
HTTP routes of the relay: service info, health check and legal search.
"""

import logging

from fastapi import APIRouter, Depends

from advogamos.api.handlers import get_provider, handle_search
from advogamos.core.config import APP_NAME, MODEL_LABEL
from advogamos.schemas.search import (
    HealthResponse,
    ProviderErrorResponse,
    RootResponse,
    SearchRequest,
    SearchResponse,
    ValidationErrorResponse,
)
from advogamos.services.completion_service import CompletionProvider
from advogamos.services.search_service import utc_timestamp

logger = logging.getLogger(__name__)
router = APIRouter()


# --- System ---

@router.get("/", response_model=RootResponse, tags=["system"])
def root() -> RootResponse:
    return RootResponse(
        message=APP_NAME,
        status="online",
        endpoints={"search": "POST /api/search", "health": "GET /health"},
    )


@router.get("/health", response_model=HealthResponse, tags=["system"])
def health() -> HealthResponse:
    return HealthResponse(status="ok", timestamp=utc_timestamp(), model=MODEL_LABEL)


# --- Search ---

@router.post(
    "/api/search",
    response_model=SearchResponse,
    responses={
        400: {"model": ValidationErrorResponse, "description": "Query missing or empty"},
        500: {"model": ProviderErrorResponse, "description": "Completion provider failed"},
    },
    tags=["search"],
    summary="Answer a legal query",
    description="Send a query; receive the model's answer wrapped with fixed legal metadata. 400 when query is missing, 500 on provider failure.",
)
async def post_search(
    body: SearchRequest | None = None,
    provider: CompletionProvider = Depends(get_provider),
) -> SearchResponse:
    logger.info("[api:post_search] IN  query=%r", body.query if body is not None else None)
    response = await handle_search(body, provider)
    logger.info("[api:post_search] OUT title=%r content_len=%d", response.title, len(response.content))
    return response
