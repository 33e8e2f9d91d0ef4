"""Shared Flask extensions for the application."""
from __future__ import annotations

from flask import Flask, current_app

from .studio import StudioApp


class Studio:
    """Binds one in-memory ``StudioApp`` to each Flask application."""

    extension_name = "studio"

    def __init__(self, app: Flask | None = None) -> None:
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        app.extensions[self.extension_name] = StudioApp.from_config(app.config)

    @property
    def state(self) -> StudioApp:
        return current_app.extensions[self.extension_name]


# Studio state shared across the app; it lives for the process only.
studio = Studio()
