"""
Collaborator ports consumed during statement validation.

- IdentifierResolver: qualify a table name from session defaults
- DatabaseGuard: reject reserved/internal database targets
- AccessManager: answer table-privilege checks
- PartitionResolver: validate named partitions and report whether they are temporary

Implementations live in `src.statement_engine.resolution`; tests use small fakes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from src.enums import Privilege
from src.statement_engine.identifiers import TableName
from src.statement_engine.models import PartitionNameList
from src.statement_engine.session import SessionContext


@dataclass(frozen=True)
class ResolvedPartitions:
    """Partition names after resolution."""

    names: tuple[str, ...]
    is_temporary: bool = False


class IdentifierResolver(Protocol):
    """Fill in missing catalog/database parts. Raises ResolutionError on malformed names."""

    def resolve(self, table_name: TableName, session: SessionContext) -> TableName: ...


class DatabaseGuard(Protocol):
    """Raise if the database may not be targeted by this session."""

    def check_database(self, database: str, session: SessionContext) -> None: ...


class AccessManager(Protocol):
    """Return True when the session holds `privilege` on the table."""

    def check_table_privilege(
        self,
        session: SessionContext,
        catalog: str,
        database: str,
        table: str,
        privilege: Privilege,
    ) -> bool: ...


class PartitionResolver(Protocol):
    """Validate partition names for a table. Raises ResolutionError on invalid names."""

    def resolve(
        self, table_name: TableName, partition_names: PartitionNameList
    ) -> ResolvedPartitions: ...
