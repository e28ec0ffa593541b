"""
Search service: query -> prompt -> completion -> envelope.

Responsibility: The linear search pipeline. Stateless; the provider is passed in
by the caller. Called by the API; no HTTP here.
"""

from datetime import datetime, timezone

from advogamos.core.config import (
    CASELAW_NOTE,
    CATEGORY,
    JURISDICTION,
    MODEL_LABEL,
    STATIC_SOURCES,
    TITLE_ELLIPSIS,
    TITLE_MAX_LENGTH,
)
from advogamos.core.errors import QueryValidationError
from advogamos.schemas.search import SearchResponse
from advogamos.services.completion_service import CompletionProvider
from advogamos.services.prompts import build_prompt



def utc_timestamp() -> str:
    """Current instant as ISO-8601 UTC with millisecond precision, e.g. 2025-01-31T12:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def make_title(query: str) -> str:
    if len(query) > TITLE_MAX_LENGTH:
        return query[: TITLE_MAX_LENGTH - len(TITLE_ELLIPSIS)] + TITLE_ELLIPSIS
    return query


def build_search_response(query: str, content: str) -> SearchResponse:
    return SearchResponse(
        title=make_title(query),
        content=content,
        sources=list(STATIC_SOURCES),
        category=CATEGORY,
        jurisdiction=JURISDICTION,
        caselaw=CASELAW_NOTE,
        model=MODEL_LABEL,
        timestamp=utc_timestamp(),
        query=query,
    )


async def run_search(query: str | None, provider: CompletionProvider) -> SearchResponse:
    """
    Validate the query, ask the provider once, and wrap the answer in the envelope.
    Raises QueryValidationError before any provider call when the query is missing or empty;
    ProviderError from the provider propagates unchanged.
    """
    if not query:
        raise QueryValidationError()
    content = await provider.complete(build_prompt(query))
    return build_search_response(query, content)
