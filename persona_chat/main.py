"""Persona Chat entry point.

Serves the API and the NiceGUI persona pages from one uvicorn process on
port 8000, or as two processes (API on 8000, UI on 8080) when
RUN_MODE=separate. Environment variables are loaded from .env.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))


def run_integrated() -> None:
    """Mount the NiceGUI pages onto the FastAPI app and serve both."""
    import uvicorn
    from nicegui import ui

    from persona_chat.api.app import create_app
    from persona_chat.ui.chat_page import index_page  # noqa: F401 - Registers the pages

    app = create_app()
    ui.run_with(
        app,
        title="Persona Chat",
        favicon="💬",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "persona-chat-secret"),
    )

    logger.info(f"Persona pages at http://localhost:{PORT}/, API docs at /docs")
    uvicorn.run(
        app,
        host=HOST,
        port=PORT,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_separate() -> None:
    """Run the API and the UI as two child processes until either exits."""
    import subprocess
    import time

    logger.info(f"Starting API on http://localhost:{PORT}")
    logger.info("Starting UI on http://localhost:8080")

    api_proc = subprocess.Popen(
        [
            sys.executable,
            "-m",
            "uvicorn",
            "persona_chat.api.app:app",
            "--host",
            HOST,
            "--port",
            str(PORT),
        ]
    )
    ui_proc = subprocess.Popen(
        [sys.executable, "-c", "from persona_chat.ui.chat_page import main; main()"]
    )

    try:
        while api_proc.poll() is None and ui_proc.poll() is None:
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info("Shutting down servers...")
    finally:
        for proc in (api_proc, ui_proc):
            proc.terminate()
            proc.wait()


def main() -> None:
    """Start the service in the mode selected by RUN_MODE."""
    mode = os.getenv("RUN_MODE", "integrated").lower()
    logger.info(f"Starting Persona Chat in {mode} mode")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
