# Run from project root: advogamos
# or: uvicorn advogamos.main:create_app --factory --port 3000

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from advogamos.api.handlers import provider_error_handler, query_validation_error_handler
from advogamos.api.routes import router
from advogamos.core.config import (
    APP_NAME,
    CORS_ALLOW_HEADERS,
    CORS_ALLOW_METHODS,
    CORS_ALLOW_ORIGINS,
    MODEL_LABEL,
    Settings,
    load_settings,
)
from advogamos.core.errors import ConfigurationError, ProviderError, QueryValidationError
from advogamos.services.completion_service import AnthropicCompletionProvider, CompletionProvider

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def log_startup_banner(settings: Settings) -> None:
    rule = "=" * 44
    logger.info(rule)
    logger.info(" %s - started", APP_NAME)
    logger.info(rule)
    logger.info(" Port: %d", settings.port)
    logger.info(" URL: http://localhost:%d", settings.port)
    logger.info(" Environment: %s", settings.environment)
    logger.info(" Claude API: %s", "configured" if settings.has_api_key else "injected provider")
    logger.info(" CORS: enabled (%s)", ", ".join(CORS_ALLOW_ORIGINS))
    logger.info(" Model: %s", MODEL_LABEL)
    logger.info(rule)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_startup_banner(app.state.settings)
    yield
    aclose = getattr(app.state.provider, "aclose", None)
    if aclose is not None:
        await aclose()
    logger.info("Shutting down %s", APP_NAME)


def create_app(
    settings: Settings | None = None,
    provider: CompletionProvider | None = None,
) -> FastAPI:
    """
    Build the API. Settings default to the environment; the provider defaults to the
    Anthropic client built from those settings.
    Raises ConfigurationError when no provider is given and ANTHROPIC_API_KEY is not set.
    """
    if settings is None:
        settings = load_settings()
    if provider is None:
        if not settings.has_api_key:
            raise ConfigurationError("ANTHROPIC_API_KEY não encontrada no ambiente/.env")
        provider = AnthropicCompletionProvider.from_settings(settings)

    app = FastAPI(title=APP_NAME, version="3.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.provider = provider

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )

    @app.middleware("http")
    async def default_allow_origin(request: Request, call_next):
        # CORSMiddleware only answers requests that carry Origin; the rest still get "*"
        response = await call_next(request)
        response.headers.setdefault("Access-Control-Allow-Origin", "*")
        return response

    app.add_exception_handler(QueryValidationError, query_validation_error_handler)
    app.add_exception_handler(ProviderError, provider_error_handler)
    app.include_router(router)
    return app


def main() -> None:
    """Console entry point: load settings, fail fast on bad config, serve forever."""
    try:
        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level)
        app = create_app(settings)
    except ConfigurationError as e:
        logger.error("ERRO: %s", e.message)
        sys.exit(1)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
