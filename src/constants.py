"""Shared constant values used across the statement engine."""

from typing import Final

from src import settings

INTERNAL_CATALOG_NAME: Final[str] = settings.DEFAULT_CATALOG
INTERNAL_DATABASE_NAME: Final[str] = settings.INTERNAL_DATABASE_NAME
ROOT_USER_NAME: Final[str] = "root"
ADMIN_USER_NAME: Final[str] = "admin"
WILDCARD: Final[str] = "*"
