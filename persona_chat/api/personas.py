"""Persona catalog endpoints."""

from fastapi import APIRouter

from persona_chat.api.chat import resolve_persona
from persona_chat.models.schemas import PersonaDetail, PersonaSummary
from persona_chat.personas.catalog import list_personas

router = APIRouter(prefix="/personas", tags=["personas"])


@router.get("", response_model=list[PersonaSummary])
async def get_personas() -> list[PersonaSummary]:
    """List available personas in catalog order."""
    return [PersonaSummary.from_persona(p) for p in list_personas()]


@router.get("/{key}", response_model=PersonaDetail)
async def get_persona_detail(key: str) -> PersonaDetail:
    """Return a persona with its dashboard statistics.

    Raises:
        404: Unknown persona.
    """
    return PersonaDetail.from_persona(resolve_persona(key))
