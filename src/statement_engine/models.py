"""
Statement models: immutable command representations produced upstream by the parser.

Conventions
-----------
- Every model is a frozen dataclass; nothing in the engine mutates them.
- A TableReference owns its optional PartitionNameList.
- A TruncateCommand always carries a TableReference.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.statement_engine.identifiers import TableName


@dataclass(frozen=True)
class PartitionNameList:
    """Ordered partition names, optionally marked as temporary partitions."""

    names: tuple[str, ...]
    is_temporary: bool = False


@dataclass(frozen=True)
class TableReference:
    """A table as referenced in a statement: name, optional alias, optional partitions."""

    table_name: TableName
    alias: str | None = None
    partition_names: PartitionNameList | None = None

    @property
    def has_explicit_alias(self) -> bool:
        return bool(self.alias)


@dataclass(frozen=True)
class TruncateCommand:
    """TRUNCATE TABLE tbl [PARTITIONS (p1, p2, ...)] [FORCE]"""

    table_reference: TableReference
    force_drop: bool = False

    def __post_init__(self) -> None:
        if self.table_reference is None:
            raise ValueError("TruncateCommand requires a table reference.")
