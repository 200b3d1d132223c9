import os

from config.config import source_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SOURCE_CONFIG = source_config_from_env(default_dir="data")

# HH:MM; punches after this are late
LATE_CUTOFF = os.getenv("LATE_CUTOFF", "08:00")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
