"""
SQL string builders for statements.

Design guarantees
- Deterministic, side-effect free string generation.
- Table names render unquoted via `format_table_name`.
- No business rules: statements decide policy.
"""

from __future__ import annotations

from src.statement_engine.identifiers import TableName, format_table_name
from src.statement_engine.models import PartitionNameList

_FORCE_SUFFIX = " FORCE"


def sql_partition_clause(partition_names: PartitionNameList | None) -> str:
    """
    ' PARTITIONS (p1, p2)' or ' TEMPORARY PARTITIONS (p1, p2)'.

    Empty only when no partition list was given; an empty list renders as
    ' PARTITIONS ()' so the text matches the command.
    """
    if partition_names is None:
        return ""
    keyword = "TEMPORARY PARTITIONS" if partition_names.is_temporary else "PARTITIONS"
    return f" {keyword} ({', '.join(partition_names.names)})"


def sql_truncate_table_suffix(
    partition_names: PartitionNameList | None, force_drop: bool
) -> str:
    """Everything after the table name: [partition clause][ FORCE]."""
    force_sql = _FORCE_SUFFIX if force_drop else ""
    return f"{sql_partition_clause(partition_names)}{force_sql}"


def sql_truncate_table(
    table_name: TableName,
    partition_names: PartitionNameList | None = None,
    force_drop: bool = False,
) -> str:
    """TRUNCATE TABLE db.tbl [PARTITIONS (...)] [FORCE]"""
    suffix = sql_truncate_table_suffix(partition_names, force_drop)
    return f"TRUNCATE TABLE {format_table_name(table_name)}{suffix}"
