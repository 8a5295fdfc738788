"""
In-memory access manager.

Grants are keyed by (user, catalog, database, table); any key part may be the
wildcard "*". Root and admin users hold every privilege, and a grant of ALL
implies every privilege.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from src.constants import WILDCARD
from src.enums import Privilege
from src.statement_engine.session import SessionContext


@dataclass(frozen=True)
class TableGrant:
    """A set of privileges granted to a user on a (catalog, database, table) pattern."""

    user: str
    privileges: frozenset[Privilege]
    catalog: str = WILDCARD
    database: str = WILDCARD
    table: str = WILDCARD

    def covers(self, user: str, catalog: str, database: str, table: str) -> bool:
        return (
            _matches(self.user, user)
            and _matches(self.catalog, catalog)
            and _matches(self.database, database)
            and _matches(self.table, table)
        )

    def allows(self, privilege: Privilege) -> bool:
        return Privilege.ALL in self.privileges or privilege in self.privileges


def _matches(pattern: str, value: str) -> bool:
    return pattern == WILDCARD or pattern.lower() == (value or "").lower()


class InMemoryAccessManager:
    """Answer table-privilege checks from a fixed collection of grants."""

    def __init__(self, grants: Iterable[TableGrant] = ()) -> None:
        self._grants = tuple(grants)

    @property
    def grants(self) -> tuple[TableGrant, ...]:
        return self._grants

    def check_table_privilege(
        self,
        session: SessionContext,
        catalog: str,
        database: str,
        table: str,
        privilege: Privilege,
    ) -> bool:
        user = session.user if session is not None else None
        if user is None:
            return False
        if user.is_root or user.is_admin:
            return True
        return any(
            grant.covers(user.name, catalog, database, table) and grant.allows(privilege)
            for grant in self._grants
        )
