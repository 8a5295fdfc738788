"""
Identifier utilities for the statement engine.

This module defines:
- Canonical table-name dataclass: TableName (catalog and database are optional
  until identifier resolution fills them in).
- Helpers to quote, format, and parse qualified names.

Conventions:
- Verbs: quote_*, format_*, parse_*.
- Use `table_name` for variables/parameters of type TableName.
- `format_*` output is unquoted and is what statements render in their SQL text.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.constants import INTERNAL_CATALOG_NAME


@dataclass(frozen=True)
class TableName:
    """Table name as written: [catalog.][database.]table."""

    table: str
    database: str | None = None
    catalog: str | None = None

    @property
    def is_fully_qualified(self) -> bool:
        return bool(self.catalog) and bool(self.database) and bool(self.table)


def quote_identifier(identifier: str) -> str:
    """Quote a single SQL identifier using backticks, doubling any embedded backticks."""
    text = str(identifier)
    return f"`{text.replace('`', '``')}`"


def quote_table_name(table_name: TableName) -> str:
    """Backticked name; the catalog is omitted when it is the internal catalog."""
    parts = [table_name.database, table_name.table]
    if table_name.catalog and table_name.catalog != INTERNAL_CATALOG_NAME:
        parts.insert(0, table_name.catalog)
    return ".".join(quote_identifier(p) for p in parts if p)


def format_table_name(table_name: TableName) -> str:
    """
    Unquoted name used in rendered statements.

    Examples:
        TableName("t1", "db")                  -> "db.t1"
        TableName("t1", "db", "internal")      -> "db.t1"
        TableName("t1", "db", "hive")          -> "hive.db.t1"
    """
    parts = [table_name.database, table_name.table]
    if table_name.catalog and table_name.catalog != INTERNAL_CATALOG_NAME:
        parts.insert(0, table_name.catalog)
    return ".".join(p for p in parts if p)


def format_table_key(table_name: TableName) -> str:
    """Unquoted 'catalog.database.table' key with empty slots for missing parts."""
    return f"{table_name.catalog or ''}.{table_name.database or ''}.{table_name.table}"


def parse_table_name(table_name_string: str) -> TableName:
    """
    Parse '[catalog.][database.]table' (with or without backticks on parts).

    This is a simple parser: it strips backticks and whitespace and splits on '.'.
    """
    cleaned = table_name_string.replace("`", "").strip()
    parts = [p.strip() for p in cleaned.split(".")]
    if not 1 <= len(parts) <= 3 or any(p == "" for p in parts):
        raise ValueError(
            f"Expected '[catalog.][database.]table', got: {table_name_string!r}"
        )
    if len(parts) == 3:
        return TableName(table=parts[2], database=parts[1], catalog=parts[0])
    if len(parts) == 2:
        return TableName(table=parts[1], database=parts[0])
    return TableName(table=parts[0])
