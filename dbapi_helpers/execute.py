"""
Data-modification statements (INSERT/UPDATE/DELETE/DDL).
"""

import logging
from contextlib import closing
from typing import Any, Optional

from dbapi_helpers.base import BaseHelper
from dbapi_helpers.exceptions import StatementError


class StatementExecutor(BaseHelper):
    """
    Executes a single statement and records ``rows_affected``.

    rows_affected is the driver's cursor.rowcount, passed through as-is.
    Not all drivers report it meaningfully; many return -1 for DDL.
    """

    def __init__(
        self,
        db_connect: Any,
        statement: str,
        logger: Optional[logging.Logger] = None,
        commit: bool = True,
    ):
        super().__init__(logger)

        with closing(db_connect.cursor()) as cursor:
            self._execute(cursor, statement, label="statement")
            self.rows_affected = cursor.rowcount

        if commit:
            try:
                db_connect.commit()
            except Exception as e:
                raise StatementError(
                    f"Commit failed: {self.cleanse_error(e, statement)}",
                    statement=self.cleanse_statement(statement),
                    original_error=e,
                ) from e


def execute(db_connect: Any, statement: str, **kwargs) -> int:
    """Execute a statement and return the affected row count."""
    return StatementExecutor(db_connect, statement, **kwargs).rows_affected
