import os


def source_config_from_env(*, default_dir: str = "data") -> dict:
    """Source settings shared by every environment."""
    return {
        "backend": os.getenv("SOURCE_BACKEND", "file"),
        "directory": os.getenv("SOURCE_DIR", default_dir),
        "base_url": os.getenv("SOURCE_BASE_URL", ""),
        "roster_file": os.getenv("ROSTER_FILE", "usuarios.csv"),
        "logs_file": os.getenv("LOGS_FILE", "registros.csv"),
        "holidays_file": os.getenv("HOLIDAYS_FILE", "feriados.csv"),
        "timeout": float(os.getenv("HTTP_TIMEOUT_SECONDS", "10")),
    }
