"""
SELECT helpers that marshal result sets into Python structures.

- ScalarQuery:            first column of the first row
- RowSetCollector:        list of records, one dict per row
- GroupedRowSetCollector: dict of key -> list of records (or one record)

Temporal column values (timestamps, dates) are converted to strings while
records are built; everything else is returned exactly as the driver
produced it.
"""

import logging
from contextlib import closing
from typing import Any, Dict, List, Optional, Union

from dbapi_helpers.base import BaseHelper
from dbapi_helpers.exceptions import EmptyResultError, SchemaError
from dbapi_helpers.types import Record, normalize_value, row_to_record

GroupedResult = Dict[Optional[str], Union[Record, List[Record]]]


class ScalarQuery(BaseHelper):
    """Executes a select query and keeps the first field of the first row."""

    def __init__(
        self,
        db_connect: Any,
        statement: str,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Raises:
            StatementError: If the query fails
            SchemaError: If the statement produces no result set
            EmptyResultError: If the query returns no rows
        """
        super().__init__(logger)

        with closing(db_connect.cursor()) as cursor:
            self._execute(cursor, statement)
            self._columns(cursor, statement)
            row = cursor.fetchone()

        if row is None:
            raise EmptyResultError(
                "Query returned no rows",
                statement=self.cleanse_statement(statement),
            )

        # Value of the first field; its type varies with the column
        self.result = normalize_value(row[0])


class RowSetCollector(BaseHelper):
    """Executes a select query and keeps every row as a dict in ``results``."""

    def __init__(
        self,
        db_connect: Any,
        statement: str,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(logger)

        with closing(db_connect.cursor()) as cursor:
            self._execute(cursor, statement)
            self.results = self.rows_to_records(cursor, statement)

    def rows_to_records(self, cursor: Any, statement: str) -> List[Record]:
        """
        Convert an executed cursor into a list of records.

        Column metadata is read once; the whole result set is materialized
        before returning.
        """
        columns = self._columns(cursor, statement)
        records = [row_to_record(columns, row) for row in cursor.fetchall()]
        self.logger.debug(f"collected {len(records)} rows")
        return records


class GroupedRowSetCollector(BaseHelper):
    """
    Executes a select query and groups rows on ``key_field``.

    With multi_val=True (default) each key maps to a list of records in
    result order. With multi_val=False each key maps to a single record,
    and later rows replace earlier ones.

    Keys come from the raw value of the key column converted to a string
    (NULL stays None, booleans are "true"/"false"), independent of record
    normalization.
    """

    def __init__(
        self,
        db_connect: Any,
        statement: str,
        key_field: str,
        logger: Optional[logging.Logger] = None,
        multi_val: bool = True,
    ):
        super().__init__(logger)
        self.key_field = key_field
        self.multi_val = multi_val

        with closing(db_connect.cursor()) as cursor:
            self._execute(cursor, statement)
            self.results = self.rows_to_groups(cursor, statement)

    def rows_to_groups(self, cursor: Any, statement: str) -> GroupedResult:
        columns = self._columns(cursor, statement)
        key_index = self._key_index(columns, statement)

        groups: GroupedResult = {}
        for row in cursor.fetchall():
            key = self._key_string(row[key_index])
            record = row_to_record(columns, row)

            if self.multi_val:
                groups.setdefault(key, []).append(record)
            else:
                groups[key] = record

        self.logger.debug(f"grouped rows into {len(groups)} keys on {self.key_field}")
        return groups

    def _key_index(self, columns: List[str], statement: str) -> int:
        """Locate the key column: exact match first, then case-insensitive."""
        if self.key_field in columns:
            return columns.index(self.key_field)

        lowered = [c.lower() for c in columns]
        if self.key_field.lower() in lowered:
            return lowered.index(self.key_field.lower())

        raise SchemaError(
            f"Key field '{self.key_field}' not in result columns {columns}",
            statement=self.cleanse_statement(statement),
        )

    @staticmethod
    def _key_string(value: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, bytes):
            return value.decode("utf-8", errors="replace")
        return str(value)


def fetch_value(db_connect: Any, statement: str, **kwargs) -> Any:
    """Return the first field of the first row."""
    return ScalarQuery(db_connect, statement, **kwargs).result


def fetch_records(db_connect: Any, statement: str, **kwargs) -> List[Record]:
    """Return every row as a dict."""
    return RowSetCollector(db_connect, statement, **kwargs).results


def fetch_grouped(db_connect: Any, statement: str, key_field: str, **kwargs) -> GroupedResult:
    """Return rows grouped on ``key_field``."""
    return GroupedRowSetCollector(db_connect, statement, key_field, **kwargs).results
