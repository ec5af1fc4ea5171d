"""Pydantic models for API requests and responses.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - ChatMessage: Individual role-tagged message in a conversation
    - ChatRequest: New user message plus prior transcript
    - ChatReply: Assistant reply for a persona
    - PersonaSummary: Catalog listing entry
    - PersonaDetail: Persona texts and dashboard statistics
"""

from persona_chat.models.schemas import (
    ChatMessage,
    ChatReply,
    ChatRequest,
    PersonaDetail,
    PersonaSummary,
    Role,
)

__all__ = [
    "ChatMessage",
    "ChatReply",
    "ChatRequest",
    "PersonaDetail",
    "PersonaSummary",
    "Role",
]
