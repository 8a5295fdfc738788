"""
Execution ports and result types.

- StatementExecutor: protocol for anything that carries out a validated command
- ExecutionPolicy: toggles for dry-run and error handling
- StatementResult / RunReport: structured outcomes to log or surface upstream
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Protocol

from src.enums import StatementKind
from src.statement_engine.errors import StatementError
from src.statement_engine.session import SessionContext
from src.statement_engine.statements.base import Statement


class RunStatus(StrEnum):
    OK = "ok"
    REJECTED = "rejected"  # failed validation
    FAILED = "failed"  # validated, but the executor raised
    SKIPPED = "skipped"  # dry-run or short-circuited after a failure


@dataclass(frozen=True)
class ExecutionPolicy:
    """Controls how the runner behaves."""

    dry_run: bool = False
    stop_on_first_error: bool = True


@dataclass(frozen=True)
class StatementResult:
    """Outcome for a single command."""

    kind: StatementKind
    command: Any
    status: RunStatus
    message: str  # one line; rendered SQL for ok/dry-run, the error otherwise
    error: StatementError | None = None


@dataclass(frozen=True)
class RunReport:
    """Outcome for a batch of commands."""

    results: tuple[StatementResult, ...]

    @property
    def ok(self) -> bool:
        return all(result.status == RunStatus.OK for result in self.results)


@dataclass(frozen=True)
class StatementRequest:
    """A command paired with the statement variant that validates and renders it."""

    statement: Statement
    command: Any


class StatementExecutor(Protocol):
    """Carries out a command that already passed validation."""

    def execute(
        self, kind: StatementKind, command: Any, sql_text: str, session: SessionContext
    ) -> None: ...
