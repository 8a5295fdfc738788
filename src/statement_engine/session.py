"""
Session context passed explicitly into statement validation.

The session is read-only input: validation never changes it.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.constants import ADMIN_USER_NAME, INTERNAL_CATALOG_NAME, ROOT_USER_NAME


@dataclass(frozen=True)
class UserIdentity:
    """The authenticated user of a session."""

    name: str
    host: str = "%"

    @property
    def is_root(self) -> bool:
        return self.name == ROOT_USER_NAME

    @property
    def is_admin(self) -> bool:
        return self.name == ADMIN_USER_NAME


@dataclass(frozen=True)
class SessionContext:
    """Ambient state of the connection issuing the statement."""

    user: UserIdentity | None
    default_catalog: str = INTERNAL_CATALOG_NAME
    default_database: str | None = None
    is_active: bool = True
