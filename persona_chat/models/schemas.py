from enum import Enum

from pydantic import BaseModel, Field, field_validator

from persona_chat.personas.catalog import Persona, PersonaStats


class Role(str, Enum):
    """Speaker of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ChatMessage(BaseModel):
    """A single chat message in the conversation.

    Attributes:
        role: The speaker (user, assistant, or system).
        content: The message text.
    """

    role: Role
    content: str


class ChatRequest(BaseModel):
    """Request payload for the persona chat endpoint.

    Attributes:
        message: The new user message.
        history: Prior transcript, oldest first. The persona preamble is
            added server-side, so system messages are not accepted here.
    """

    message: str = Field(..., min_length=1)
    history: list[ChatMessage] = Field(default_factory=list)

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("history")
    @classmethod
    def reject_system_messages(cls, v: list[ChatMessage]) -> list[ChatMessage]:
        """Only user and assistant turns may be sent by clients."""
        if any(m.role == Role.SYSTEM for m in v):
            raise ValueError("history must not contain system messages")
        return v

    def conversation(self) -> list[ChatMessage]:
        """Full transcript including the new user message."""
        return [*self.history, ChatMessage(role=Role.USER, content=self.message)]


class ChatReply(BaseModel):
    """Assistant reply for a persona chat request.

    Attributes:
        persona: Key of the persona that replied.
        message: The assistant message to append to the transcript.
    """

    persona: str
    message: ChatMessage


class PersonaSummary(BaseModel):
    """Catalog entry as listed by the API."""

    key: str
    name: str
    description: str
    icon: str

    @classmethod
    def from_persona(cls, persona: Persona) -> "PersonaSummary":
        return cls(
            key=persona.key,
            name=persona.name,
            description=persona.description,
            icon=persona.icon,
        )


class PersonaDetail(PersonaSummary):
    """Persona with its chat texts and dashboard statistics."""

    welcome: str
    placeholder: str
    stats: PersonaStats

    @classmethod
    def from_persona(cls, persona: Persona) -> "PersonaDetail":
        return cls(
            key=persona.key,
            name=persona.name,
            description=persona.description,
            icon=persona.icon,
            welcome=persona.welcome,
            placeholder=persona.placeholder,
            stats=persona.stats,
        )
