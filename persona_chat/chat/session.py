"""Per-view chat session and submit handling."""

import logging
from collections.abc import Awaitable, Callable

from persona_chat.models.schemas import ChatMessage, Role
from persona_chat.personas.catalog import Persona

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "I apologize, but I encountered an error. Please try again."

Completer = Callable[[Persona, list[ChatMessage]], Awaitable[str]]


class RequestPendingError(Exception):
    """Raised when a message is submitted while a reply is still pending."""

    pass


class ChatSession:
    """Conversation with one persona, scoped to a single page view.

    Messages are append-only and never persisted; a new view starts a
    new session.
    """

    def __init__(
        self,
        persona: Persona,
        complete: Completer,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        """Initialize an empty session.

        Args:
            persona: Persona the user is talking to.
            complete: Async callable returning the reply for a transcript.
            on_change: Called after every transcript or loading-state change.
        """
        self.persona = persona
        self.messages: list[ChatMessage] = []
        self.is_loading: bool = False
        self._complete = complete
        self._on_change = on_change

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()

    async def submit(self, text: str) -> ChatMessage | None:
        """Send a user message and append the persona's reply.

        Args:
            text: Raw input text.

        Returns:
            The appended assistant message (reply or fallback), or None
            when the input was empty.

        Raises:
            RequestPendingError: If a previous submit has not finished.
        """
        if not text or not text.strip():
            return None
        if self.is_loading:
            raise RequestPendingError("A reply is already pending")

        self.messages.append(ChatMessage(role=Role.USER, content=text))
        self.is_loading = True
        self._changed()
        try:
            reply = await self._complete(self.persona, list(self.messages))
            message = ChatMessage(role=Role.ASSISTANT, content=reply)
        except Exception:
            logger.exception(f"Chat completion failed for persona {self.persona.key}")
            message = ChatMessage(role=Role.ASSISTANT, content=FALLBACK_REPLY)
        finally:
            self.is_loading = False

        self.messages.append(message)
        self._changed()
        return message

    def reset(self) -> None:
        """Start a fresh conversation, as when the page is reopened."""
        self.messages.clear()
        self.is_loading = False
        self._changed()
