"""Agno agent service for persona chat completions.

One agent per persona, each carrying that persona's preamble as its
system message. Agents are stateless: the caller owns the transcript and
sends it whole on every request, so nothing is stored server-side.
"""

import logging

from agno.agent import Agent
from agno.models.message import Message
from agno.models.openai import OpenAIChat

from persona_chat.agent.config import AgentConfig, get_agent_config
from persona_chat.models.schemas import ChatMessage, Role
from persona_chat.personas.catalog import Persona

logger = logging.getLogger(__name__)

# Agno maps "system" to "developer" by default; OpenAI-compatible servers
# behind LLM_BASE_URL only accept the classic chat roles.
ROLE_MAP = {
    "system": "system",
    "user": "user",
    "assistant": "assistant",
    "tool": "tool",
    "model": "assistant",
}


class CompletionError(Exception):
    """Raised when the completion API returns no usable text."""

    pass


class AgentService:
    """Service for persona chat completions.

    Wraps one Agno Agent per persona with:
    - The persona preamble as system message
    - Model, temperature and max-token bound from AgentConfig
    - Lazy creation and caching per persona key
    """

    def __init__(self, config: AgentConfig | None = None) -> None:
        """Initialize the agent service.

        Args:
            config: Optional agent configuration.
                    Loaded from the environment on first use if not provided,
                    so a missing API key surfaces as a completion failure.
        """
        self._config = config
        self._agents: dict[str, Agent] = {}

    @property
    def config(self) -> AgentConfig:
        """Agent configuration, loaded lazily from the environment.

        Raises:
            ValidationError: If no API key is set.
        """
        if self._config is None:
            self._config = get_agent_config()
        return self._config

    def _create_model(self) -> OpenAIChat:
        config = self.config
        return OpenAIChat(
            id=config.model_name,
            api_key=config.api_key,
            base_url=config.base_url,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            role_map=ROLE_MAP,
        )

    def _create_agent(self, persona: Persona) -> Agent:
        """Create the Agno agent for a persona.

        Returns:
            Agent with the persona preamble as its system message and no
            storage, history or knowledge of its own.
        """
        return Agent(
            name=persona.name,
            model=self._create_model(),
            system_message=persona.prompt,
            markdown=False,
        )

    def get_agent(self, persona: Persona) -> Agent:
        """Return the cached agent for a persona, creating it on first use."""
        agent = self._agents.get(persona.key)
        if agent is None:
            agent = self._create_agent(persona)
            self._agents[persona.key] = agent
            logger.info(f"Created agent for persona: {persona.key}")
        return agent

    async def complete(self, persona: Persona, history: list[ChatMessage]) -> str:
        """Generate the persona's reply to a conversation.

        Sends the whole transcript in order. The persona preamble is
        prepended by the agent as the system message.

        Args:
            persona: Persona answering the conversation.
            history: Transcript so far, ending with the newest user message.

        Returns:
            The generated reply text.

        Raises:
            CompletionError: If the API returns an empty response.
            Exception: Transport and API errors propagate unchanged.
        """
        messages = [
            Message(role=m.role.value, content=m.content)
            for m in history
            if m.role != Role.SYSTEM
        ]

        response = await self.get_agent(persona).arun(input=messages)

        content = getattr(response, "content", None)
        if not isinstance(content, str) or not content.strip():
            raise CompletionError(f"Empty completion for persona {persona.key}")
        return content


# Module-level singleton instance
_agent_service: AgentService | None = None


def get_agent_service() -> AgentService:
    """Get or create the global agent service.

    Uses singleton pattern for resource efficiency.

    Returns:
        The AgentService instance.
    """
    global _agent_service
    if _agent_service is None:
        _agent_service = AgentService()
    return _agent_service
