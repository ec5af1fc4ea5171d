"""Agno agent logic for persona chat completions.

Responsibilities:
    - Agent initialization with OpenAI models
    - Persona preamble as system message
    - Forwarding the full transcript to the completion API

Keeps the HTTP and UI layers free of model client details.
"""

from persona_chat.agent.chat_agent import AgentService, CompletionError, get_agent_service
from persona_chat.agent.config import AgentConfig, get_agent_config

__all__ = [
    "AgentConfig",
    "AgentService",
    "CompletionError",
    "get_agent_config",
    "get_agent_service",
]
