"""
Unit tests for the search pipeline: title truncation, prompt building, envelope assembly.
"""

import asyncio
from datetime import datetime

import pytest

from conftest import FakeProvider

from advogamos.core.errors import QueryValidationError
from advogamos.services.prompts import LEGAL_QUERY_TEMPLATE, build_prompt
from advogamos.services.search_service import (
    build_search_response,
    make_title,
    run_search,
    utc_timestamp,
)


class TestMakeTitle:
    """Tests for make_title()."""

    def test_short_query_unchanged(self) -> None:
        assert make_title("Divórcio") == "Divórcio"
        assert make_title("") == ""

    def test_boundary_at_100(self) -> None:
        assert make_title("a" * 100) == "a" * 100
        assert make_title("a" * 101) == "a" * 97 + "..."

    def test_keeps_first_97_characters(self) -> None:
        query = "".join(str(i % 10) for i in range(250))
        assert make_title(query) == query[:97] + "..."


class TestBuildPrompt:
    """Tests for build_prompt()."""

    def test_query_in_template_slot(self) -> None:
        prompt = build_prompt("Qual o prazo de recurso?")
        assert prompt == LEGAL_QUERY_TEMPLATE.replace("{query}", "Qual o prazo de recurso?")
        assert "{query}" not in prompt

    def test_braces_in_query_are_kept(self) -> None:
        prompt = build_prompt("art. {1} e {query}")
        assert "art. {1} e {query}" in prompt

    def test_mandated_sections_present(self) -> None:
        prompt = build_prompt("q")
        for section in (
            "1. Explicação técnica e completa",
            "2. Base legal (leis, códigos, regulamentos relevantes)",
            "3. Jurisprudência relevante quando aplicável",
            "4. Considerações práticas importantes",
        ):
            assert section in prompt


class TestBuildSearchResponse:
    """Tests for build_search_response() and utc_timestamp()."""

    def test_content_and_query_verbatim(self) -> None:
        response = build_search_response("q  ", "  texto\n")
        assert response.content == "  texto\n"
        assert response.query == "q  "

    def test_sources_are_fresh_lists(self) -> None:
        first = build_search_response("a", "x")
        first.sources.append("extra")
        assert len(build_search_response("b", "y").sources) == 4

    def test_timestamp_is_iso_utc(self) -> None:
        stamp = utc_timestamp()
        assert stamp.endswith("Z")
        parsed = datetime.fromisoformat(stamp.replace("Z", "+00:00"))
        assert parsed.utcoffset().total_seconds() == 0


class TestRunSearch:
    """Tests for run_search()."""

    @pytest.mark.parametrize("query", [None, ""])
    def test_empty_query_rejected_before_provider(self, query) -> None:
        provider = FakeProvider()
        with pytest.raises(QueryValidationError):
            asyncio.run(run_search(query, provider))
        assert provider.call_count == 0

    def test_provider_called_once_with_prompt(self) -> None:
        provider = FakeProvider()
        response = asyncio.run(run_search("pensão de alimentos", provider))
        assert provider.prompts == [build_prompt("pensão de alimentos")]
        assert response.title == "pensão de alimentos"

    def test_provider_error_propagates(self) -> None:
        provider = FakeProvider(error=RuntimeError("boom"))
        with pytest.raises(RuntimeError, match="boom"):
            asyncio.run(run_search("q", provider))
