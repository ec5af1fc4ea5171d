"""FastAPI endpoints for persona chat.

Endpoints:
    - GET /health: Service health status
    - GET /personas: Persona catalog
    - GET /personas/{key}: Persona texts and dashboard statistics
    - POST /chat/{key}: Persona reply to a transcript
"""

from persona_chat.api.app import app, create_app

__all__ = ["app", "create_app"]
