"""Unit tests for individual components in isolation.

Coverage:
    - personas/: Catalog lookup and static data
    - models/: Pydantic validation
    - agent/: Configuration, agent construction and completion calls
    - chat/: Submit flow, pending guard and fallback reply

Agno classes are patched with unittest.mock.
"""
