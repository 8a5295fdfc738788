"""
TRUNCATE TABLE statement: validation gate and SQL rendering.

Validation runs these checks in order and stops at the first failure:
  1) DDL preconditions (active session)
  2) no explicit alias on the table reference
  3) table name resolves, and its database is not an internal database
  4) LOAD privilege on the table (truncating is treated as a data load)
  5) partitions, if given, resolve and are not temporary partitions

A passing command is returned unchanged; validation adds no state.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from src.enums import Privilege, StatementKind
from src.logger import LOGGER
from src.statement_engine.errors import (
    AuthorizationError,
    PassthroughError,
    SemanticError,
    StatementError,
    ValidationResult,
)
from src.statement_engine.identifiers import format_table_key
from src.statement_engine.models import TruncateCommand
from src.statement_engine.ports import (
    AccessManager,
    DatabaseGuard,
    IdentifierResolver,
    PartitionResolver,
)
from src.statement_engine.resolution.database_guard import InternalDatabaseGuard
from src.statement_engine.resolution.identifier_resolver import DefaultIdentifierResolver
from src.statement_engine.resolution.partition_resolver import DefaultPartitionResolver
from src.statement_engine.session import SessionContext
from src.statement_engine.sql import sql_truncate_table, sql_truncate_table_suffix
from src.statement_engine.statements.base import check_ddl_preconditions

T = TypeVar("T")


class TruncateTableStatement:
    """
    Validates and renders TruncateCommand objects.

    Collaborators are injected; the statement holds no per-command state, so one
    instance can validate many commands concurrently.
    """

    def __init__(
        self,
        access_manager: AccessManager,
        database_guard: DatabaseGuard | None = None,
        partition_resolver: PartitionResolver | None = None,
        identifier_resolver: IdentifierResolver | None = None,
    ) -> None:
        self.access_manager = access_manager
        self.database_guard: DatabaseGuard = database_guard or InternalDatabaseGuard()
        self.partition_resolver: PartitionResolver = (
            partition_resolver or DefaultPartitionResolver()
        )
        self.identifier_resolver: IdentifierResolver = (
            identifier_resolver or DefaultIdentifierResolver()
        )

    # ---------- public API ----------

    def statement_kind(self) -> StatementKind:
        return StatementKind.TRUNCATE

    def validate(
        self, command: TruncateCommand, session: SessionContext
    ) -> ValidationResult[TruncateCommand]:
        """Run every check and return the outcome; never raises for an invalid command."""
        try:
            self._analyze(command, session)
        except StatementError as error:
            LOGGER.info(
                "%s rejected for %s: %s",
                self.statement_kind(),
                format_table_key(command.table_reference.table_name),
                error,
            )
            return ValidationResult(command=command, error=error)
        return ValidationResult(command=command)

    def analyze(self, command: TruncateCommand, session: SessionContext) -> TruncateCommand:
        """Like `validate`, but raises the StatementError instead of returning it."""
        return self.validate(command, session).raise_for_error()

    def to_sql(self, command: TruncateCommand) -> str:
        reference = command.table_reference
        return sql_truncate_table(
            reference.table_name, reference.partition_names, command.force_drop
        )

    def to_sql_without_table(self, command: TruncateCommand) -> str:
        """Partition clause and FORCE only, for callers that render the table name themselves."""
        return sql_truncate_table_suffix(
            command.table_reference.partition_names, command.force_drop
        )

    # ---------- checks ----------

    def _analyze(self, command: TruncateCommand, session: SessionContext) -> None:
        check_ddl_preconditions(session)
        reference = command.table_reference
        if reference.has_explicit_alias:
            raise SemanticError("Not support truncate table with alias")

        table_name = _call_collaborator(
            self.identifier_resolver.resolve, reference.table_name, session
        )
        _call_collaborator(self.database_guard.check_database, table_name.database, session)

        if not _call_collaborator(
            self.access_manager.check_table_privilege,
            session,
            table_name.catalog,
            table_name.database,
            table_name.table,
            Privilege.LOAD,
        ):
            raise AuthorizationError(Privilege.LOAD)

        partition_names = reference.partition_names
        if partition_names is not None:
            resolved = _call_collaborator(
                self.partition_resolver.resolve, table_name, partition_names
            )
            if resolved.is_temporary:
                raise SemanticError("Not support truncate temp partitions")


def _call_collaborator(method: Callable[..., T], *args: Any) -> T:
    """Call a collaborator; StatementErrors pass as they are, anything else is wrapped."""
    try:
        return method(*args)
    except StatementError:
        raise
    except Exception as error:
        raise PassthroughError(error) from error
