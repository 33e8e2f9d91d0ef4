"""Default configuration for the studio backend."""
from __future__ import annotations

import os


class Config:
    STUDIO_NAME = os.environ.get("STUDIO_NAME", "InkMaster Studio")
    DEFAULT_HOURLY_RATE = float(os.environ.get("DEFAULT_HOURLY_RATE", 150))
    # Load the demo appointments, clients and portfolio on startup.
    SEED_DEMO_DATA = True
    NOTIFICATION_HISTORY = 50
    CORS_ORIGINS = "*"  # Later you can restrict to the dashboard's domain


class TestingConfig(Config):
    TESTING = True
