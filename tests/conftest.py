"""Pytest fixtures and shared test configuration.

Fixtures:
    - innovator / observer: Catalog personas
    - fake_agent_service: Stand-in for AgentService recording calls
    - app: FastAPI app with the fake service injected
    - async_client: HTTPX client for API testing against that app
"""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from persona_chat.agent.chat_agent import get_agent_service
from persona_chat.api import create_app
from persona_chat.models.schemas import ChatMessage
from persona_chat.personas.catalog import Persona, get_persona


class FakeAgentService:
    """Records completion calls and returns a canned reply or raises."""

    def __init__(self, reply: str = "Hello from the persona.") -> None:
        self.reply = reply
        self.error: Exception | None = None
        self.calls: list[tuple[Persona, list[ChatMessage]]] = []

    async def complete(self, persona: Persona, history: list[ChatMessage]) -> str:
        self.calls.append((persona, list(history)))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def innovator() -> Persona:
    return get_persona("innovator")


@pytest.fixture
def observer() -> Persona:
    return get_persona("observer")


@pytest.fixture
def fake_agent_service() -> FakeAgentService:
    return FakeAgentService()


@pytest.fixture
def app(fake_agent_service: FakeAgentService) -> FastAPI:
    """FastAPI app with the fake agent service injected."""
    application = create_app()
    application.dependency_overrides[get_agent_service] = lambda: fake_agent_service
    return application


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for the app with the fake agent service.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
