"""
Base class shared by all dbapi-helpers components.

DESIGN PRINCIPLES:
-----------------
1. Each helper runs its statement once, in its constructor, and keeps the
   outcome on an attribute (result, results, rows_affected, ...)
2. Connections are owned by the caller and never closed here
3. Cursors never outlive the helper method that opened them
4. Statements are redacted before they reach a log
5. Failures propagate; nothing is retried or swallowed
"""

import logging
import time
from typing import Any, List, Optional

from dbapi_helpers.exceptions import SchemaError, StatementError
from dbapi_helpers.log import default_logger
from dbapi_helpers.redaction import cleanse_message, cleanse_statement, credential_values
from dbapi_helpers.types import column_names


class BaseHelper:
    """
    Common plumbing for the query and statement helpers.

    Subclasses open a cursor with ``contextlib.closing(connection.cursor())``
    and hand it to ``_execute`` so logging, timing and error wrapping behave
    the same everywhere.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger if logger is not None else default_logger()

    def cleanse_statement(self, statement: Any) -> str:
        """Redact credentials from a statement so it can be logged."""
        return cleanse_statement(statement)

    def cleanse_error(self, error: Any, statement: Any) -> str:
        """Redact a driver error message, including secrets it echoes from ``statement``."""
        return cleanse_message(error, credential_values(statement))

    def _execute(self, cursor: Any, statement: str, label: str = "query") -> float:
        """
        Execute ``statement`` on ``cursor``, logging it and its duration.

        Returns:
            Execution time in seconds

        Raises:
            StatementError: If the driver rejects or fails the statement
        """
        cleansed = self.cleanse_statement(statement)
        self.logger.info(f"executing {label}: {cleansed}")

        start = time.perf_counter()
        try:
            cursor.execute(statement)
        except Exception as e:
            raise StatementError(
                f"{label.capitalize()} execution failed: {self.cleanse_error(e, statement)}",
                statement=cleansed,
                original_error=e,
            ) from e

        elapsed = time.perf_counter() - start
        self.logger.info(f"query executed {elapsed:.6f} seconds")
        return elapsed

    def _columns(self, cursor: Any, statement: str) -> List[str]:
        """Read projected column names, failing if there is no result set."""
        columns = column_names(cursor.description)
        if not columns:
            raise SchemaError(
                "Statement did not produce a result set",
                statement=self.cleanse_statement(statement),
            )
        return columns
