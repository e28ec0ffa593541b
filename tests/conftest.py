"""
Shared fixtures: an in-memory completion provider and a TestClient wired to it.

No test talks to the Anthropic API.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from advogamos.core.config import Settings
from advogamos.main import create_app


class FakeProvider:
    """CompletionProvider double: echoes the prompt back, or raises `error` when set."""

    def __init__(self, error: Exception | None = None, delay: float = 0.0) -> None:
        self.error = error
        self.delay = delay
        self.prompts: list[str] = []

    @property
    def call_count(self) -> int:
        return len(self.prompts)

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return f"ANSWER<<{prompt}>>"


@pytest.fixture
def settings() -> Settings:
    return Settings(anthropic_api_key="test-key")


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def client(settings: Settings, fake_provider: FakeProvider) -> TestClient:
    return TestClient(create_app(settings=settings, provider=fake_provider))
