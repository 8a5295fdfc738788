"""
Adapter: Spark partition resolver

Validates requested partition names against the partitions the table actually has,
as reported by `SHOW PARTITIONS`.

- Hive-style tables return a single `partition` column ("dt=2024-01-01/region=eu").
- Delta tables return one column per partition column; those are joined into the
  same "col=value/col=value" form.
- Spark has no temporary partitions, so the temporary marker is carried through
  from the request and rejected by the statement.

Failures reading partitions are not caught here; they surface to the statement,
which reports them unchanged.
"""

from __future__ import annotations

from pyspark.sql import Row, SparkSession

from src.statement_engine.errors import ResolutionError
from src.statement_engine.identifiers import TableName, quote_identifier
from src.statement_engine.models import PartitionNameList
from src.statement_engine.ports import ResolvedPartitions
from src.statement_engine.resolution.partition_resolver import check_partition_names


def sql_show_partitions(table_name: TableName) -> str:
    """SHOW PARTITIONS `catalog`.`database`.`table`"""
    parts = [table_name.catalog, table_name.database, table_name.table]
    quoted = ".".join(quote_identifier(p) for p in parts if p)
    return f"SHOW PARTITIONS {quoted}"


def partition_name_from_row(row: Row) -> str:
    """Render a SHOW PARTITIONS row as 'col=value[/col=value...]'."""
    fields = row.asDict()
    if list(fields) == ["partition"]:
        return str(fields["partition"])
    return "/".join(f"{column}={value}" for column, value in fields.items())


class SparkPartitionResolver:
    """Check partition names exist on the table using the active SparkSession."""

    def __init__(self, spark: SparkSession) -> None:
        self.spark = spark

    def _existing_partitions(self, table_name: TableName) -> set[str]:
        rows = self.spark.sql(sql_show_partitions(table_name)).collect()
        return {partition_name_from_row(row).lower() for row in rows}

    def resolve(
        self, table_name: TableName, partition_names: PartitionNameList
    ) -> ResolvedPartitions:
        names = check_partition_names(partition_names)
        if partition_names.is_temporary:
            return ResolvedPartitions(names=names, is_temporary=True)

        existing = self._existing_partitions(table_name)
        for name in names:
            if name.lower() not in existing:
                raise ResolutionError(f"Partition does not exist: {name}")
        return ResolvedPartitions(names=names, is_temporary=False)
