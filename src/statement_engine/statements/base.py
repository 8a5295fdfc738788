"""
The Statement capability shared by every statement variant, plus DDL preconditions.

Statements are not a class hierarchy: each variant implements the `Statement`
protocol and the runner dispatches on it. Checks shared by DDL variants are
plain functions.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from src.enums import StatementKind
from src.statement_engine.errors import SemanticError, ValidationResult
from src.statement_engine.session import SessionContext


@runtime_checkable
class Statement(Protocol):
    """
    A statement variant.

    Contract
    --------
    - `validate` never raises for an invalid command; it returns a ValidationResult.
    - `to_sql` renders the command back to SQL text.
    - `to_sql_without_table` renders only what follows the table name, for
      printers that emit the name themselves (e.g. batched statements).
    - `statement_kind` is stable and used for dispatch and logging.
    """

    def validate(self, command: Any, session: SessionContext) -> ValidationResult[Any]: ...

    def to_sql(self, command: Any) -> str: ...

    def to_sql_without_table(self, command: Any) -> str: ...

    def statement_kind(self) -> StatementKind: ...


def check_ddl_preconditions(session: SessionContext | None) -> None:
    """DDL statements need an active session to run against."""
    if session is None or not session.is_active:
        raise SemanticError("No active session context")
