"""
Error taxonomy and the explicit validation result.

- StatementError: base class; every error carries an ErrorKind
- SemanticError: a statement rule was violated (alias, internal database, temp partitions)
- AuthorizationError: a privilege is missing; names the privilege
- PassthroughError: a collaborator failed; keeps the original exception and message
- ResolutionError: raised by identifier/partition collaborators
- ValidationResult: what `validate` returns instead of raising
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from src.enums import ErrorKind, Privilege

CommandT = TypeVar("CommandT")


class StatementError(Exception):
    """Statement failed validation."""

    kind: ErrorKind = ErrorKind.SEMANTIC


class SemanticError(StatementError):
    """Statement violates a semantic rule."""

    kind = ErrorKind.SEMANTIC


class AuthorizationError(StatementError):
    """Session lacks a privilege required by the statement."""

    kind = ErrorKind.AUTHORIZATION

    def __init__(self, privilege: Privilege | str) -> None:
        self.privilege = Privilege(privilege)
        super().__init__(
            "Access denied; you need (at least one of) the "
            f"({self.privilege.value}) privilege(s) for this operation"
        )


class PassthroughError(StatementError):
    """A collaborator failed; its message and exception are preserved."""

    kind = ErrorKind.PASSTHROUGH

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(str(cause))


class ResolutionError(Exception):
    """Identifier or partition resolution failed."""


@dataclass(frozen=True)
class ValidationResult(Generic[CommandT]):
    """Outcome of validating one command. `command` is always the input, unchanged."""

    command: CommandT
    error: StatementError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> CommandT:
        """Return the command, or raise the recorded error."""
        if self.error is not None:
            raise self.error
        return self.command
