import os

from config.config import source_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

SOURCE_CONFIG = source_config_from_env(default_dir="/srv/attendance/data")

LATE_CUTOFF = os.getenv("LATE_CUTOFF", "08:00")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
