"""Chat session state for persona conversations.

Holds the transcript for one page view and runs the submit flow:
validate input, append the user message, request a reply, append the
reply or a fixed fallback on failure.
"""

from persona_chat.chat.session import (
    FALLBACK_REPLY,
    ChatSession,
    Completer,
    RequestPendingError,
)

__all__ = ["FALLBACK_REPLY", "ChatSession", "Completer", "RequestPendingError"]
