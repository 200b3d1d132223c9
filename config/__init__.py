"""Settings modules for the attendance report service.

Each module defines SECRET_KEY, DEBUG, LOG_LEVEL, SOURCE_CONFIG and
LATE_CUTOFF; ``create_app`` imports the one named here.
"""

import os

SETTINGS_BY_ENV = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    # APP_ENV selects the module; anything unknown runs with development settings
    env = os.getenv("APP_ENV", "development").strip().lower()
    return SETTINGS_BY_ENV.get(env, "config.development")
