"""Guard against statements that target the engine's internal database."""

from __future__ import annotations

from src.constants import INTERNAL_DATABASE_NAME
from src.statement_engine.errors import SemanticError
from src.statement_engine.session import SessionContext


class InternalDatabaseGuard:
    """Only root and admin users may operate on the internal database."""

    def __init__(self, internal_database_name: str = INTERNAL_DATABASE_NAME) -> None:
        self.internal_database_name = internal_database_name

    def check_database(self, database: str, session: SessionContext) -> None:
        if database is None:
            raise ValueError("Database name is required.")
        if database != self.internal_database_name:
            return
        user = session.user if session is not None else None
        if user is None or not (user.is_root or user.is_admin):
            raise SemanticError(f"Not allowed to operate database: {database}")
