"""Persona Chat - chat widgets for AI personas with statistics dashboards.

Combines FastAPI for the HTTP API, Agno for model calls, NiceGUI for
the two-pane chat interface, and Pydantic for data validation.

Components:
    - api: HTTP endpoints for personas and chat
    - agent: LLM completion with persona preambles
    - chat: Per-view session state and submit handling
    - personas: Persona prompts and dashboard data
    - ui: Web interface for chat and statistics
    - models: Request/response schemas
"""

__version__ = "0.1.0"
