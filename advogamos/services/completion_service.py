"""
Completion provider: one awaited call to the Anthropic Messages API per prompt.

Responsibility: Own the SDK client, send a single user-role message and return
the text of the first content block. Any failure surfaces as ProviderError so
the API layer has one error type to map. No HTTP/FastAPI types here.
"""

import logging
from typing import Any, Protocol

import anthropic

from advogamos.core.config import Settings
from advogamos.core.errors import ProviderError

logger = logging.getLogger(__name__)


class CompletionProvider(Protocol):
    """Anything that turns a prompt into completion text."""

    async def complete(self, prompt: str) -> str: ...


def extract_text(message: Any) -> str:
    """
    Return the text of the first content block of a Messages API response.
    Raises ProviderError when the content list is empty or the first block carries no text.
    """
    content = getattr(message, "content", None) or []
    if not content:
        raise ProviderError("Resposta do modelo sem conteúdo")
    text = getattr(content[0], "text", None)
    if not isinstance(text, str):
        block_type = getattr(content[0], "type", type(content[0]).__name__)
        raise ProviderError(f"Primeiro bloco da resposta não contém texto (tipo: {block_type})")
    return text


class AnthropicCompletionProvider:
    """CompletionProvider backed by anthropic.AsyncAnthropic. Built once per process."""

    def __init__(
        self,
        api_key: str,
        model: str,
        max_tokens: int,
        client: anthropic.AsyncAnthropic | None = None,
    ) -> None:
        self.model = model
        self.max_tokens = max_tokens
        self._client = client or anthropic.AsyncAnthropic(api_key=api_key)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AnthropicCompletionProvider":
        return cls(
            api_key=settings.anthropic_api_key,
            model=settings.anthropic_model,
            max_tokens=settings.max_output_tokens,
        )

    async def complete(self, prompt: str) -> str:
        logger.info("[completion:anthropic] IN  model=%s prompt_len=%d", self.model, len(prompt))
        try:
            message = await self._client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as e:
            raise ProviderError(str(e)) from e
        text = extract_text(message)
        logger.info("[completion:anthropic] OUT response_len=%d", len(text))
        return text

    async def aclose(self) -> None:
        await self._client.close()
