"""Configuration values sourced from environment variables."""

import os
from typing import Final

LOG_LEVEL: Final[str] = os.getenv(key="LOG_LEVEL", default="INFO")
LOGGER_NAME: Final[str] = os.getenv(key="LOGGER_NAME", default="statement-engine")
LOG_COLOUR_ENABLED: Final[bool] = bool(
    os.getenv(key="LOG_COLOUR_ENABLED", default="True").upper() == "TRUE"
)
DEFAULT_CATALOG: Final[str] = os.getenv(key="DEFAULT_CATALOG", default="internal")
INTERNAL_DATABASE_NAME: Final[str] = os.getenv(
    key="INTERNAL_DATABASE_NAME", default="__internal_schema"
)
