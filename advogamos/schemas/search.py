"""Schemas for the search, health and root endpoints."""

from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    """Request body for POST /api/search. Presence is checked by the handler so a missing query is a 400, not a 422."""

    query: str | None = Field(None, description="Free-text legal question.")

    model_config = {
        "json_schema_extra": {
            "examples": [{"query": "Quais são os requisitos do divórcio por mútuo consentimento?"}]
        }
    }


class SearchResponse(BaseModel):
    """Envelope returned by POST /api/search."""

    title: str = Field(..., description="Query, truncated to 100 characters with '...' when longer.")
    content: str = Field(..., description="Completion text, verbatim.")
    sources: list[str] = Field(..., description="Fixed list of legal references.")
    category: str
    jurisdiction: str
    caselaw: str
    model: str = Field(..., description="Public model label.")
    timestamp: str = Field(..., description="ISO-8601 instant the envelope was built.")
    query: str = Field(..., description="Original query, echoed back.")


class HealthResponse(BaseModel):
    """Response for GET /health."""

    status: str = "ok"
    timestamp: str
    model: str


class RootResponse(BaseModel):
    """Response for GET /: service description and endpoint map."""

    message: str
    status: str
    endpoints: dict[str, str]


class ValidationErrorResponse(BaseModel):
    """400 body for a missing or empty query."""

    error: str


class ProviderErrorResponse(BaseModel):
    """500 body when the completion provider fails."""

    error: str
    message: str
    details: str
