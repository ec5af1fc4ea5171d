"""Test package for Persona Chat.

Structure:
    - unit/: Catalog, schema, config, agent and session tests
    - integration/: API tests through the real FastAPI app

Leverages pytest with pytest-check for soft assertions.
"""
