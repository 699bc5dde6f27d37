from nicegui import ui

from lifetracker.app import App
from lifetracker.config import settings
from lifetracker.logging_setup import configure_logging


def main():
    configure_logging()

    # Register the pages
    App()

    ui.run(
        title=settings.window_title,
        native=settings.native,
        port=settings.port,
        window_size=(1400, 900) if settings.native else None,
    )

if __name__ in {"__main__", "__mp_main__"}:
    main()
