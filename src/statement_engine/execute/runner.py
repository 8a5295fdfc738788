"""
Statement Runner

Purpose
-------
Dispatch a batch of statement requests, in order, through one pipeline:
  1) validate the command with its statement variant
  2) hand validated commands to the injected StatementExecutor

Design
------
- The runner knows nothing about individual variants; it only uses the
  Statement capability (validate, to_sql, statement_kind).
- Respects ExecutionPolicy:
  - dry_run=True: validated commands are not executed and are reported SKIPPED
    with their rendered SQL.
  - stop_on_first_error=True: after the first REJECTED or FAILED result, the
    remaining requests are marked SKIPPED.
- Returns a RunReport aggregating all per-command results.
"""

from __future__ import annotations

from collections.abc import Sequence

from src.logger import LOGGER
from src.statement_engine.errors import PassthroughError
from src.statement_engine.execute.ports import (
    ExecutionPolicy,
    RunReport,
    RunStatus,
    StatementExecutor,
    StatementRequest,
    StatementResult,
)
from src.statement_engine.session import SessionContext


class StatementRunner:
    """Validate, then execute, each request in order."""

    def __init__(self, executor: StatementExecutor) -> None:
        self._executor = executor

    def run(
        self,
        requests: Sequence[StatementRequest],
        session: SessionContext,
        *,
        policy: ExecutionPolicy = ExecutionPolicy(),
    ) -> RunReport:
        """Run all requests and return an aggregated RunReport."""
        LOGGER.info("Running %d statement(s) (dry_run=%s).", len(requests), policy.dry_run)
        results: list[StatementResult] = []

        for index, request in enumerate(requests):
            result = self._run_one(request, session, policy)
            results.append(result)
            if policy.stop_on_first_error and result.status in (
                RunStatus.REJECTED,
                RunStatus.FAILED,
            ):
                results.extend(self._skip_remaining(requests[index + 1 :]))
                break

        return RunReport(results=tuple(results))

    # ---------- helpers ----------

    def _run_one(
        self, request: StatementRequest, session: SessionContext, policy: ExecutionPolicy
    ) -> StatementResult:
        statement, command = request.statement, request.command
        kind = statement.statement_kind()

        validation = statement.validate(command, session)
        if not validation.ok:
            return StatementResult(
                kind=kind,
                command=command,
                status=RunStatus.REJECTED,
                message=str(validation.error),
                error=validation.error,
            )

        sql_text = statement.to_sql(command)
        if policy.dry_run:
            LOGGER.info("Dry-run %s: %s", kind, sql_text)
            return StatementResult(
                kind=kind, command=command, status=RunStatus.SKIPPED, message=sql_text
            )

        try:
            self._executor.execute(kind, command, sql_text, session)
        except Exception as error:
            LOGGER.error("%s failed: %s", kind, sql_text, exc_info=True)
            return StatementResult(
                kind=kind,
                command=command,
                status=RunStatus.FAILED,
                message=f"Failed to run {sql_text}: {type(error).__name__}: {error}",
                error=PassthroughError(error),
            )

        LOGGER.info("%s completed: %s", kind, sql_text)
        return StatementResult(kind=kind, command=command, status=RunStatus.OK, message=sql_text)

    @staticmethod
    def _skip_remaining(requests: Sequence[StatementRequest]) -> list[StatementResult]:
        """Create SKIPPED stubs for remaining requests after a failure when short-circuiting."""
        skipped: list[StatementResult] = []
        for request in requests:
            skipped.append(
                StatementResult(
                    kind=request.statement.statement_kind(),
                    command=request.command,
                    status=RunStatus.SKIPPED,
                    message="Skipped due to previous failure (stop_on_first_error)",
                )
            )
        return skipped
