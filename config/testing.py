import os

SECRET_KEY = "test-secret"

SOURCE_CONFIG = {
    "backend": "file",
    "directory": os.getenv("SOURCE_DIR", "tests/data"),
}

LATE_CUTOFF = "08:00"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
