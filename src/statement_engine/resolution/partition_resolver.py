"""
Partition name resolution.

Shape checks shared by every resolver:
- the list must not be empty
- names must not be blank
- names must be unique (case-insensitive)
"""

from __future__ import annotations

from src.statement_engine.errors import ResolutionError
from src.statement_engine.identifiers import TableName
from src.statement_engine.models import PartitionNameList
from src.statement_engine.ports import ResolvedPartitions


def check_partition_names(partition_names: PartitionNameList) -> tuple[str, ...]:
    """Return the stripped names, raising ResolutionError on an invalid list."""
    if not partition_names.names:
        raise ResolutionError("No partition specified in partition lists")

    seen: set[str] = set()
    names: list[str] = []
    for raw_name in partition_names.names:
        name = (raw_name or "").strip()
        if name == "":
            raise ResolutionError("There are empty partition name")
        if name.lower() in seen:
            raise ResolutionError(f"Duplicate partition name: {name}")
        seen.add(name.lower())
        names.append(name)
    return tuple(names)


class DefaultPartitionResolver:
    """Shape checks only; the catalog is not consulted."""

    def resolve(
        self, table_name: TableName, partition_names: PartitionNameList
    ) -> ResolvedPartitions:
        names = check_partition_names(partition_names)
        return ResolvedPartitions(names=names, is_temporary=partition_names.is_temporary)
