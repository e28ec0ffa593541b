"""
Settings and constants for the legal query relay.

Provider credential, port and log level come from the environment (.env is
loaded at import). Model id, token budget, CORS policy and the metadata
attached to every search response are fixed here.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from advogamos.core.errors import ConfigurationError

load_dotenv()

APP_NAME: str = "Advogamos AI 3.0 API"

# Anthropic (completion provider)
DEFAULT_ANTHROPIC_MODEL: str = "claude-sonnet-4-20250514"
MAX_OUTPUT_TOKENS: int = 2048

# Public model label returned in responses (not the provider model id)
MODEL_LABEL: str = "claude-sonnet-4"

# Server defaults
DEFAULT_PORT: int = 3000
DEFAULT_HOST: str = "0.0.0.0"

# CORS: any origin may call the API (browser clients, file:// pages)
CORS_ALLOW_ORIGINS: list[str] = ["*"]
CORS_ALLOW_METHODS: list[str] = ["GET", "POST", "OPTIONS"]
CORS_ALLOW_HEADERS: list[str] = ["Content-Type", "Authorization"]

# Envelope metadata, identical on every search response
STATIC_SOURCES: tuple[str, ...] = (
    "Código Civil português",
    "Lei n.º 61/2008 (Regime jurídico do divórcio)",
    "Código do Registo Civil",
    "Jurisprudência dos Tribunais Superiores",
)
CATEGORY: str = "Direito da Família"
JURISDICTION: str = "Portugal"
CASELAW_NOTE: str = (
    "Consulte jurisprudência específica conforme o caso concreto nos tribunais superiores."
)

# Title truncation
TITLE_MAX_LENGTH: int = 100
TITLE_ELLIPSIS: str = "..."


@dataclass(frozen=True)
class Settings:
    """Process settings, read once at startup and passed to the app factory."""

    anthropic_api_key: str = ""
    anthropic_model: str = DEFAULT_ANTHROPIC_MODEL
    max_output_tokens: int = MAX_OUTPUT_TOKENS
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    environment: str = "production"
    log_level: str = "INFO"

    @property
    def has_api_key(self) -> bool:
        return bool(self.anthropic_api_key)


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"PORT must be an integer, got {raw!r}") from e
    if not 0 < port < 65536:
        raise ConfigurationError(f"PORT out of range: {port}")
    return port


LOG_LEVELS: frozenset[str] = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper() or "INFO"
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {raw!r}")
    return level


def load_settings() -> Settings:
    """Build Settings from the process environment (and .env, loaded at import)."""
    port_raw = os.getenv("PORT", "").strip()
    return Settings(
        anthropic_api_key=os.getenv("ANTHROPIC_API_KEY", "").strip(),
        anthropic_model=(
            os.getenv("ANTHROPIC_MODEL", DEFAULT_ANTHROPIC_MODEL).strip() or DEFAULT_ANTHROPIC_MODEL
        ),
        host=os.getenv("HOST", DEFAULT_HOST).strip() or DEFAULT_HOST,
        port=_parse_port(port_raw) if port_raw else DEFAULT_PORT,
        environment=os.getenv("APP_ENV", "production").strip() or "production",
        log_level=_parse_log_level(os.getenv("LOG_LEVEL", "INFO")),
    )
