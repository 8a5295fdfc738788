"""Enumerations used throughout the statement engine."""

from enum import StrEnum


class StatementKind(StrEnum):
    """Statement kind used for dispatch and logging."""

    TRUNCATE = "TRUNCATE"


class Privilege(StrEnum):
    """Table-level privileges understood by the access manager."""

    SELECT = "SELECT"
    LOAD = "LOAD"
    ALTER = "ALTER"
    CREATE = "CREATE"
    DROP = "DROP"
    ALL = "ALL"


class ErrorKind(StrEnum):
    """Classification of a validation failure."""

    SEMANTIC = "semantic"
    AUTHORIZATION = "authorization"
    PASSTHROUGH = "passthrough"
