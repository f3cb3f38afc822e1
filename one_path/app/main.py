"""
One Path - Main Application Entry Point

This module serves as the primary entry point for the One Path application.
It configures logging, initializes the Gradio UI and launches the web interface.
"""
import logging

from one_path.config import settings as config
from one_path.ui.gradio_app import create_gradio_ui


def configure_logging(level: str = None):
    """Apply LOG_LEVEL to the root logger."""
    logging.basicConfig(
        level=getattr(logging, (level or config.LOG_LEVEL), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """
    Main entry point for the One Path application.

    Initializes the Gradio interface and launches the web server.
    """
    configure_logging()
    demo = create_gradio_ui()
    print("\n🚀 Launching One Path...")

    server_name = config.GRADIO_SERVER_NAME
    server_port = config.GRADIO_SERVER_PORT

    print(f"📍 Server will be available at http://{server_name}:{server_port}")

    # Pass theme and css to launch() for Gradio 6.0+
    demo.launch(
        server_name=server_name,
        server_port=server_port,
        theme=demo.theme,
        css=demo.css
    )


if __name__ == "__main__":
    main()
