import pytest
from pyspark.sql import Row

from src.statement_engine.errors import ResolutionError
from src.statement_engine.identifiers import TableName
from src.statement_engine.models import PartitionNameList
from src.statement_engine.resolution.spark_partition_resolver import (
    SparkPartitionResolver,
    partition_name_from_row,
    sql_show_partitions,
)

SALES = TableName("sales", "db", "spark_catalog")


# ---------- helpers ----------


class FakeDataFrame:
    def __init__(self, rows):
        self.rows = rows

    def collect(self):
        return self.rows


class FakeSpark:
    """Minimal SparkSession stand-in that records SQL and returns canned rows."""

    def __init__(self, rows):
        self.rows = rows
        self.queries = []

    def sql(self, query):
        self.queries.append(query)
        return FakeDataFrame(self.rows)


# ---------- pure helpers ----------


def test_show_partitions_quotes_every_part():
    assert sql_show_partitions(SALES) == "SHOW PARTITIONS `spark_catalog`.`db`.`sales`"


def test_partition_name_from_hive_row():
    assert partition_name_from_row(Row(partition="dt=2024-01-01")) == "dt=2024-01-01"


def test_partition_name_from_delta_row():
    row = Row(dt="2024-01-01", region="eu")
    assert partition_name_from_row(row) == "dt=2024-01-01/region=eu"


# ---------- resolver ----------


def test_existing_partitions_resolve():
    spark = FakeSpark([Row(partition="dt=1"), Row(partition="dt=2")])
    resolved = SparkPartitionResolver(spark).resolve(SALES, PartitionNameList(names=("DT=2",)))
    assert resolved.names == ("DT=2",)
    assert resolved.is_temporary is False
    assert spark.queries == ["SHOW PARTITIONS `spark_catalog`.`db`.`sales`"]


def test_unknown_partition_rejected():
    spark = FakeSpark([Row(partition="dt=1")])
    with pytest.raises(ResolutionError, match="Partition does not exist: dt=9"):
        SparkPartitionResolver(spark).resolve(SALES, PartitionNameList(names=("dt=9",)))


def test_temporary_partitions_skip_catalog_lookup():
    spark = FakeSpark([])
    resolved = SparkPartitionResolver(spark).resolve(
        SALES, PartitionNameList(names=("tp1",), is_temporary=True)
    )
    assert resolved.is_temporary is True
    assert spark.queries == []


def test_shape_checks_run_before_catalog_lookup():
    spark = FakeSpark([])
    with pytest.raises(ResolutionError, match="No partition specified"):
        SparkPartitionResolver(spark).resolve(SALES, PartitionNameList(names=()))
    assert spark.queries == []


# ---------- against a real SparkSession ----------


def test_resolves_against_partitioned_table(spark_fixture, tmp_path):
    spark_fixture.sql("DROP TABLE IF EXISTS default.truncate_probe")
    spark_fixture.sql(
        "CREATE TABLE default.truncate_probe (id INT, dt STRING) USING parquet "
        f"PARTITIONED BY (dt) LOCATION '{tmp_path.as_posix()}'"
    )
    try:
        spark_fixture.sql("INSERT INTO default.truncate_probe VALUES (1, 'a'), (2, 'b')")
        resolver = SparkPartitionResolver(spark_fixture)
        table_name = TableName("truncate_probe", "default", "spark_catalog")

        resolved = resolver.resolve(table_name, PartitionNameList(names=("dt=a", "dt=b")))
        assert resolved.names == ("dt=a", "dt=b")

        with pytest.raises(ResolutionError):
            resolver.resolve(table_name, PartitionNameList(names=("dt=c",)))
    finally:
        spark_fixture.sql("DROP TABLE IF EXISTS default.truncate_probe")
