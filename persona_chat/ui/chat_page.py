"""NiceGUI persona pages: chat panel beside a statistics dashboard."""

import os

import httpx
from nicegui import ui

from persona_chat.chat.session import ChatSession, RequestPendingError
from persona_chat.models.schemas import ChatMessage, ChatReply
from persona_chat.personas.catalog import (
    Metric,
    Persona,
    UnknownPersonaError,
    get_persona,
    list_personas,
)

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: white; }

    .message-user { background: black; color: white; border-radius: 8px; }
    .message-assistant { background: #f3f4f6; color: #1f2937; border-radius: 8px; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #9ca3af;
        border-radius: 50%;
        animation: pulse 1s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes pulse {
        0%, 100% { transform: scale(1); }
        50% { transform: scale(1.2); }
    }

    .metric-track { height: 6px; background: #f3f4f6; border-radius: 9999px; overflow: hidden; }
    .metric-fill { height: 100%; background: black; border-radius: 9999px; transition: width 0.5s; }
</style>
"""


async def request_reply(persona: Persona, history: list[ChatMessage]) -> str:
    """Ask the API for the persona's reply to a transcript.

    The last history entry is the new user message; everything before it
    is sent as prior context.

    Raises:
        httpx.HTTPError: On connection failure or non-2xx status.
    """
    *previous, latest = history
    async with httpx.AsyncClient(timeout=120.0) as client:
        response = await client.post(
            f"{API_BASE_URL}/chat/{persona.key}",
            json={
                "message": latest.content,
                "history": [m.model_dump(mode="json") for m in previous],
            },
        )
        response.raise_for_status()
    return ChatReply.model_validate(response.json()).message.content


def render_labels(title: str, items: list[str]) -> None:
    ui.label(title).classes("text-sm font-semibold text-gray-500")
    with ui.column().classes("w-full gap-2"):
        for item in items:
            ui.label(item).classes("w-full px-3 py-2 bg-gray-50 rounded-lg text-sm")


def render_metric_bars(title: str, metrics: list[Metric]) -> None:
    ui.label(title).classes("text-sm font-semibold text-gray-500")
    with ui.column().classes("w-full gap-3"):
        for metric in metrics:
            with ui.column().classes("w-full gap-1"):
                with ui.row().classes("w-full justify-between text-sm"):
                    ui.label(metric.name)
                    ui.label(f"{metric.value}%")
                with ui.element("div").classes("w-full metric-track"):
                    ui.element("div").classes("metric-fill").style(f"width: {metric.value}%")


def render_dashboard(persona: Persona) -> None:
    """Static statistics pane for a persona."""
    stats = persona.stats
    with ui.column().classes("flex-1 h-full p-6 gap-6"):
        with ui.column().classes("gap-2"):
            ui.label(persona.name).classes("text-xl font-bold")
            ui.label(persona.description).classes("text-sm text-gray-600")

        with ui.row().classes("w-full gap-8 no-wrap items-start"):
            with ui.column().classes("flex-1 gap-6"):
                render_labels("SPECIALIZATION", stats.specialization)
                render_metric_bars("CORE METRICS", stats.core_metrics)
            with ui.column().classes("flex-1 gap-6"):
                render_labels("CAPABILITIES", stats.capabilities)
                render_metric_bars("PERFORMANCE", stats.performance)

        with ui.column().classes("w-full mt-auto pt-6 border-t gap-3"):
            ui.label("SYSTEM METRICS").classes("text-sm font-semibold text-gray-500")
            with ui.grid(columns=4).classes("w-full gap-4"):
                for metric in stats.system_metrics:
                    with ui.column().classes("bg-gray-50 p-3 rounded-lg gap-1"):
                        ui.label(metric.name).classes("text-xs text-gray-500")
                        ui.label(metric.value).classes("font-bold")


@ui.page("/")
def index_page() -> None:
    """Persona picker."""
    ui.add_head_html(CUSTOM_CSS)
    with ui.column().classes("w-full max-w-3xl mx-auto p-8 gap-6"):
        ui.label("Choose a persona").classes("text-2xl font-bold")
        with ui.row().classes("w-full gap-4"):
            for persona in list_personas():
                with (
                    ui.card()
                    .classes("flex-1 cursor-pointer")
                    .on("click", lambda p=persona: ui.navigate.to(f"/persona/{p.key}"))
                ):
                    with ui.row().classes("items-center gap-2"):
                        ui.icon(persona.icon).classes(f"text-2xl {persona.accent}")
                        ui.label(persona.name).classes("text-lg font-semibold")
                    ui.label(persona.description).classes("text-sm text-gray-600")


@ui.page("/persona/{key}")
def persona_page(key: str) -> None:
    """Two-pane persona page: chat on the left, statistics on the right."""
    try:
        persona = get_persona(key)
    except UnknownPersonaError:
        ui.navigate.to("/")
        return

    ui.add_head_html(CUSTOM_CSS)
    session = ChatSession(persona, request_reply, on_change=lambda: refresh_messages())

    messages_container: ui.column
    input_field: ui.input
    send_btn: ui.button

    def render_message(msg: ChatMessage) -> None:
        is_user = msg.role == "user"
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"
        with ui.row().classes(f"w-full {align}"):
            ui.label(msg.content).classes(f"max-w-[80%] p-3 text-sm {bubble}").style(
                "white-space: pre-wrap"
            )

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            for msg in session.messages:
                render_message(msg)
            if session.is_loading:
                with ui.row().classes("gap-2 p-3 bg-gray-100 rounded-lg"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")

    def set_busy(busy: bool) -> None:
        if busy:
            input_field.disable()
            send_btn.disable()
        else:
            input_field.enable()
            send_btn.enable()

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or session.is_loading:
            return

        input_field.value = ""
        set_busy(True)
        try:
            await session.submit(text)
        except RequestPendingError:
            ui.notify("Please wait for the current reply", type="warning")
        finally:
            set_busy(session.is_loading)

    with ui.row().classes("w-full h-screen no-wrap gap-0 bg-white"):
        with ui.column().classes("w-[45%] h-full border-r gap-0"):
            with ui.row().classes("w-full p-4 border-b items-center justify-between"):
                with ui.row().classes("items-center gap-3"):
                    ui.button(icon="arrow_back", on_click=lambda: ui.navigate.to("/")).props(
                        "flat round dense"
                    )
                    with ui.column().classes("gap-0"):
                        ui.label(persona.name).classes("font-semibold")
                        with ui.row().classes("items-center gap-2 text-sm"):
                            ui.element("div").classes("w-1.5 h-1.5 rounded-full bg-green-500")
                            ui.label("Online").classes("text-gray-500")
                ui.icon(persona.icon).classes(f"text-xl {persona.accent}")

            ui.label(persona.welcome).classes("w-full p-4 bg-gray-50 text-sm text-gray-600")

            with (
                ui.scroll_area().classes("flex-grow w-full"),
                ui.column().classes("w-full p-4"),
            ):
                messages_container = ui.column().classes("w-full gap-4")
                refresh_messages()

            with ui.row().classes("w-full p-4 border-t gap-2 items-center no-wrap"):
                input_field = (
                    ui.input(placeholder=persona.placeholder)
                    .props("outlined dense")
                    .classes("flex-grow")
                    .on("keydown.enter", send_message)
                )
                send_btn = ui.button(icon="send", on_click=send_message).props(
                    "unelevated color=black"
                )

        render_dashboard(persona)


def main() -> None:
    ui.run(title="Persona Chat", port=8080, reload=False)


if __name__ in {"__main__", "__mp_main__"}:
    main()
