"""Persona catalog with prompts and dashboard data.

Each persona is pure data: the chat widget, dashboard and API read from
here rather than carrying per-persona copies of the same page.
"""

from pydantic import BaseModel, ConfigDict, Field


class UnknownPersonaError(Exception):
    """Raised when a persona key is not in the catalog."""

    pass


class Metric(BaseModel):
    """A percentage metric rendered as a progress bar."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: int = Field(ge=0, le=100)


class SystemMetric(BaseModel):
    """A preformatted metric tile (e.g. "99.99%", "0.15s")."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str


class PersonaStats(BaseModel):
    """Static statistics shown on the persona dashboard.

    Attributes:
        specialization: Specialization labels.
        capabilities: Capability labels.
        core_metrics: Core percentage metrics.
        performance: Performance percentage metrics.
        system_metrics: System metric tiles.
    """

    model_config = ConfigDict(frozen=True)

    specialization: list[str]
    capabilities: list[str]
    core_metrics: list[Metric]
    performance: list[Metric]
    system_metrics: list[SystemMetric]


class Persona(BaseModel):
    """A chat persona and its presentation data.

    Attributes:
        key: URL slug for the persona.
        name: Display name.
        prompt: Preamble sent as the system message of every conversation.
        welcome: Banner shown above the transcript.
        description: Dashboard blurb.
        placeholder: Chat input hint.
        icon: Material icon name for the chat header.
        accent: Tailwind color class for the header icon.
        stats: Dashboard statistics.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    prompt: str
    welcome: str
    description: str
    placeholder: str
    icon: str
    accent: str
    stats: PersonaStats


INNOVATOR = Persona(
    key="innovator",
    name="The Innovator",
    prompt=(
        "You are The Innovator, an AI focused on creative problem-solving and "
        "breakthrough thinking. Your personality traits:\n"
        "  - Visionary and forward-thinking\n"
        "  - Enthusiastic about new ideas\n"
        "  - Encourages creative solutions\n"
        "  - Optimistic but practical\n"
        "  - Always connects ideas to potential future applications\n"
        "  \n"
        "  Respond in a way that reflects these traits while maintaining professionalism."
    ),
    welcome=(
        "Welcome to the frontier of innovation. Here, we transform bold ideas into "
        "groundbreaking solutions. Share your vision, and let's shape the future together."
    ),
    description=(
        "Focused on breakthrough thinking and creative problem-solving. Transforms "
        "visionary ideas into innovative solutions."
    ),
    placeholder="Share your innovative ideas...",
    icon="auto_awesome",
    accent="text-blue-500",
    stats=PersonaStats(
        specialization=["Creative Synthesis", "Future Forecasting"],
        capabilities=["Breakthrough Design", "Pattern Recognition"],
        core_metrics=[
            Metric(name="Creativity", value=95),
            Metric(name="Vision", value=88),
            Metric(name="Adaptability", value=85),
            Metric(name="Innovation", value=92),
        ],
        performance=[
            Metric(name="Accuracy", value=88),
            Metric(name="Reliability", value=85),
            Metric(name="Efficiency", value=90),
            Metric(name="Scalability", value=88),
        ],
        system_metrics=[
            SystemMetric(name="Uptime", value="99.99%"),
            SystemMetric(name="Response Time", value="0.15s"),
            SystemMetric(name="Neural Pathways", value="85M"),
            SystemMetric(name="Load Factor", value="0.75"),
        ],
    ),
)

OBSERVER = Persona(
    key="observer",
    name="The Observer",
    prompt=(
        "You are The Observer, an AI specialized in data analysis and pattern "
        "recognition. Your personality traits:\n"
        "  - Analytical and detail-oriented\n"
        "  - Focuses on patterns and connections\n"
        "  - Evidence-based in approach\n"
        "  - Curious about underlying causes\n"
        "  - Always looks for hidden insights\n"
        "  \n"
        "  Respond in a way that reflects these traits while maintaining professionalism. "
        "Focus on providing data-driven insights and pattern recognition."
    ),
    welcome=(
        "Welcome to the analytical center. Here, we transform data into insight, "
        "uncovering patterns that shape understanding. Let's discover hidden truths together."
    ),
    description=(
        "Expert in data analysis and pattern recognition. Transforms complex data into "
        "actionable insights through advanced analytical processes."
    ),
    placeholder="Share your data or pattern to analyze...",
    icon="visibility",
    accent="text-gray-600",
    stats=PersonaStats(
        specialization=["Pattern Recognition", "Data Analysis"],
        capabilities=["Predictive Modeling", "Insight Extraction"],
        core_metrics=[
            Metric(name="Analysis", value=95),
            Metric(name="Perception", value=92),
            Metric(name="Processing", value=90),
            Metric(name="Accuracy", value=93),
        ],
        performance=[
            Metric(name="Pattern Match", value=96),
            Metric(name="Error Rate", value=92),
            Metric(name="Efficiency", value=88),
            Metric(name="Reliability", value=90),
        ],
        system_metrics=[
            SystemMetric(name="Uptime", value="99.97%"),
            SystemMetric(name="Scan Rate", value="0.08s"),
            SystemMetric(name="Data Points", value="250M"),
            SystemMetric(name="Load Factor", value="0.71"),
        ],
    ),
)

_CATALOG: dict[str, Persona] = {p.key: p for p in (INNOVATOR, OBSERVER)}


def list_personas() -> list[Persona]:
    """Return all personas in catalog order."""
    return list(_CATALOG.values())


def get_persona(key: str) -> Persona:
    """Look up a persona by key (case-insensitive).

    Args:
        key: Persona slug, e.g. "innovator".

    Returns:
        The matching Persona.

    Raises:
        UnknownPersonaError: If no persona has this key.
    """
    persona = _CATALOG.get(key.strip().lower())
    if persona is None:
        raise UnknownPersonaError(f"Unknown persona: {key}")
    return persona
