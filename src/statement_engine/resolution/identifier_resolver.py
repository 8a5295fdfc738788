"""Qualify table names from the session's default catalog and database."""

from __future__ import annotations

from dataclasses import replace

from src.statement_engine.errors import ResolutionError
from src.statement_engine.identifiers import TableName
from src.statement_engine.session import SessionContext


class DefaultIdentifierResolver:
    """
    Resolve [catalog.][database.]table against the session.

    - Missing catalog -> session.default_catalog
    - Missing database -> session.default_database, else "No database selected"
    - Empty table -> "Table name is null"
    """

    def resolve(self, table_name: TableName, session: SessionContext) -> TableName:
        if not table_name.table or not table_name.table.strip():
            raise ResolutionError("Table name is null")

        catalog = table_name.catalog or session.default_catalog
        if not catalog:
            raise ResolutionError("No catalog selected")

        database = table_name.database or session.default_database
        if not database:
            raise ResolutionError("No database selected")

        return replace(table_name, catalog=catalog, database=database)
