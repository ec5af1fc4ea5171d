"""Integration tests for persona catalog and health endpoints."""

import pytest_check as check
from httpx import AsyncClient

from persona_chat.models.schemas import PersonaDetail, PersonaSummary


class TestPersonaEndpoints:
    """Integration tests for GET /personas and GET /personas/{key}."""

    async def test_lists_personas(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/personas")

        assert response.status_code == 200
        personas = [PersonaSummary.model_validate(p) for p in response.json()]
        check.equal([p.key for p in personas], ["innovator", "observer"])
        check.equal(personas[0].name, "The Innovator")

    async def test_summary_omits_prompt(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/personas")

        assert all("prompt" not in p for p in response.json())

    async def test_detail_includes_stats(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/personas/innovator")

        assert response.status_code == 200
        detail = PersonaDetail.model_validate(response.json())
        check.equal(detail.stats.capabilities, ["Breakthrough Design", "Pattern Recognition"])
        check.equal(detail.stats.performance[3].name, "Scalability")
        check.equal(detail.placeholder, "Share your innovative ideas...")

    async def test_unknown_persona_returns_404(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/personas/critic")

        assert response.status_code == 404


class TestHealth:
    async def test_health(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/health")

        assert response.json() == {"status": "healthy", "service": "persona-chat"}
