"""Persona chat endpoint.

Stateless: the client sends its transcript with every message and the
server prepends the persona preamble before calling the model.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from persona_chat.agent.chat_agent import AgentService, get_agent_service
from persona_chat.models.schemas import ChatMessage, ChatReply, ChatRequest, Role
from persona_chat.personas.catalog import Persona, UnknownPersonaError, get_persona

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


def resolve_persona(key: str) -> Persona:
    """Look up a persona from a path parameter.

    Raises:
        HTTPException: 404 if the persona does not exist.
    """
    try:
        return get_persona(key)
    except UnknownPersonaError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e


@router.post("/{key}", response_model=ChatReply)
async def chat(
    key: str,
    request: ChatRequest,
    agent_service: AgentService = Depends(get_agent_service),
) -> ChatReply:
    """Reply to a message as the given persona.

    Args:
        key: Persona key.
        request: New user message and prior transcript.

    Returns:
        ChatReply with the assistant message.

    Raises:
        404: Unknown persona.
        422: Empty message or invalid history.
        502: The completion API failed or no API key is configured.
    """
    persona = resolve_persona(key)

    try:
        reply = await agent_service.complete(persona, request.conversation())
    except Exception as e:
        logger.error(f"Chat completion failed for {persona.key}: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Chat completion failed",
        ) from e

    return ChatReply(
        persona=persona.key,
        message=ChatMessage(role=Role.ASSISTANT, content=reply),
    )
