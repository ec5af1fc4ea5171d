"""Integration tests for the HTTP API.

Coverage:
    - Persona catalog endpoints
    - Chat endpoint validation, forwarding and error mapping
    - Live LLM replies (when OPENAI_API_KEY is configured)

The agent service is injected with FastAPI dependency overrides so the
API can be exercised without network access.
"""
