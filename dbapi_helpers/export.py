"""
Streams query results to a file-like sink, one formatted line per row.

Rows are fetched one at a time and written (and flushed) before the next
row is read, so arbitrarily large result sets never sit in memory. Writes
are synchronous: a slow sink slows the export down.
"""

import logging
from contextlib import closing
from typing import IO, Any, Optional

from dbapi_helpers.base import BaseHelper
from dbapi_helpers.formatters import FormatterLike, as_formatter
from dbapi_helpers.types import row_to_record


class StreamingFormatter(BaseHelper):
    """
    Runs a query and writes each row to ``sink`` through ``formatter``.

    Example (default JSON lines):
        with open("out.json", "w") as f:
            StreamingFormatter(conn, "select a, b from t", f)

    Example (pipe delimited):
        StreamingFormatter(conn, sql, f, DelimitedFormatter("|"))
    """

    def __init__(
        self,
        db_connect: Any,
        statement: str,
        sink: IO[str],
        formatter: Optional[FormatterLike] = None,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(logger)
        self.formatter = as_formatter(formatter)
        self.rows_written = 0

        with closing(db_connect.cursor()) as cursor:
            self._execute(cursor, statement)
            self.rows_to_sink(cursor, statement, sink)

    def rows_to_sink(self, cursor: Any, statement: str, sink: IO[str]) -> int:
        columns = self._columns(cursor, statement)
        flush = getattr(sink, "flush", None)

        while True:
            row = cursor.fetchone()
            if row is None:
                break

            self.formatter.write(sink, row_to_record(columns, row))
            if flush is not None:
                flush()
            self.rows_written += 1

        self.logger.debug(f"wrote {self.rows_written} rows")
        return self.rows_written


def export_records(
    db_connect: Any,
    statement: str,
    sink: IO[str],
    formatter: Optional[FormatterLike] = None,
    **kwargs,
) -> int:
    """Stream query results to ``sink`` and return the number of rows written."""
    return StreamingFormatter(db_connect, statement, sink, formatter, **kwargs).rows_written
