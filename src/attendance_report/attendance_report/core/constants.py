"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LATE_CUTOFF = "08:00"
DEFAULT_AREA = "GENERAL"
ALL_AREAS = "ALL"
NO_PUNCH = "-"
HOLIDAY_SUFFIX = " (HOLIDAY)"

DEFAULT_ROSTER_FILE = "usuarios.csv"
DEFAULT_LOGS_FILE = "registros.csv"
DEFAULT_HOLIDAYS_FILE = "feriados.csv"
DEFAULT_HTTP_TIMEOUT_SECONDS = 10
