"""Persona catalog - the characters users can chat with.

Each persona bundles the preamble sent to the model with the static
dashboard data shown beside the chat.

Personas:
    - innovator: creative problem-solving and breakthrough thinking
    - observer: data analysis and pattern recognition
"""

from persona_chat.personas.catalog import (
    Metric,
    Persona,
    PersonaStats,
    SystemMetric,
    UnknownPersonaError,
    get_persona,
    list_personas,
)

__all__ = [
    "Metric",
    "Persona",
    "PersonaStats",
    "SystemMetric",
    "UnknownPersonaError",
    "get_persona",
    "list_personas",
]
