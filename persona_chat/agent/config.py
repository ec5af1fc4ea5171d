"""Completion settings shared by every persona.

All personas talk to the same model with the same sampling settings;
only the preamble differs. Values come from the environment (and .env),
falling back to the parameters the chat widgets were built around.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TEMPERATURE = 0.7
# Replies are chat bubbles, not documents.
DEFAULT_MAX_TOKENS = 500


class AgentConfig(BaseModel):
    """Model and sampling settings for persona replies.

    Any OpenAI-compatible server can stand in for OpenAI via LLM_BASE_URL.

    Attributes:
        api_key: Key for the completion API (LLM_API_KEY, then OPENAI_API_KEY).
        base_url: Alternative API root (LLM_BASE_URL), None for OpenAI.
        model_name: Model id (LLM_MODEL).
        temperature: Sampling temperature (LLM_TEMPERATURE), 0.0 to 2.0.
        max_tokens: Reply length bound (LLM_MAX_TOKENS).
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("LLM_API_KEY", os.getenv("OPENAI_API_KEY", "")),
        description="Key for the chat-completion API",
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or None,
        description="OpenAI-compatible API root, None for OpenAI",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", DEFAULT_MODEL),
        description="Model answering for every persona",
    )
    temperature: float = Field(
        default_factory=lambda: float(os.getenv("LLM_TEMPERATURE", DEFAULT_TEMPERATURE)),
        ge=0.0,
        le=2.0,
        description="Sampling temperature for persona replies",
    )
    max_tokens: int = Field(
        default_factory=lambda: int(os.getenv("LLM_MAX_TOKENS", DEFAULT_MAX_TOKENS)),
        ge=1,
        le=128000,
        description="Upper bound on tokens per reply",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Reject a missing or blank key and strip surrounding whitespace."""
        if not v or not v.strip():
            raise ValueError(
                "API key required. Set LLM_API_KEY or OPENAI_API_KEY in .env"
            )
        return v.strip()


def get_agent_config() -> AgentConfig:
    """Read completion settings from the environment.

    Raises:
        ValidationError: If no API key is set or a value is out of range.
    """
    return AgentConfig()
