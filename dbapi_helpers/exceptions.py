"""
dbapi-helpers Exceptions

All helpers raise subclasses of HelperError so callers can catch a single
type. The driver exception that caused the failure (if any) is chained and
kept on ``original_error``; the statement is stored already redacted.
"""

from typing import Optional


class HelperError(Exception):
    """Base exception for dbapi-helpers."""

    def __init__(
        self,
        message: str,
        statement: Optional[str] = None,
        original_error: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.statement = statement
        self.original_error = original_error

    def __str__(self):
        if self.statement:
            return f"{self.message} | Statement: {self.statement}"
        return self.message


class ConnectionError(HelperError):
    """Failed to open a database connection."""
    pass


class StatementError(HelperError):
    """Statement execution (or its commit) failed."""
    pass


class EmptyResultError(HelperError):
    """A single-value query returned no rows."""
    pass


class SchemaError(HelperError):
    """The result set is missing, or lacks a requested column."""
    pass
