"""
dbapi-helpers

Small helpers over DB-API 2.0 connections: open a connection, run a
statement, and marshal the results into everyday Python shapes.

Usage:
    from dbapi_helpers import ConnectionOpener, RowSetCollector

    conn = ConnectionOpener("sqlite:///data.db").connection
    try:
        rows = RowSetCollector(conn, "select * from orders").results
    finally:
        conn.close()

Logged statements are always passed through cleanse_statement, which strips
AWS credentials from Redshift COPY/UNLOAD commands.
"""

from dbapi_helpers.base import BaseHelper
from dbapi_helpers.config import HelperSettings, get_settings
from dbapi_helpers.connection import ConnectionOpener, open_connection
from dbapi_helpers.exceptions import (
    ConnectionError,
    EmptyResultError,
    HelperError,
    SchemaError,
    StatementError,
)
from dbapi_helpers.execute import StatementExecutor, execute
from dbapi_helpers.export import StreamingFormatter, export_records
from dbapi_helpers.formatters import (
    CallableFormatter,
    DelimitedFormatter,
    JSONLinesFormatter,
    RecordFormatter,
    as_formatter,
)
from dbapi_helpers.log import default_logger
from dbapi_helpers.query import (
    GroupedRowSetCollector,
    RowSetCollector,
    ScalarQuery,
    fetch_grouped,
    fetch_records,
    fetch_value,
)
from dbapi_helpers.redaction import cleanse_message, cleanse_statement
from dbapi_helpers.types import TemporalKind, normalize_value, temporal_kind

__version__ = "1.0.0"
__all__ = [
    "BaseHelper",
    "HelperSettings",
    "get_settings",
    "ConnectionOpener",
    "open_connection",
    "HelperError",
    "ConnectionError",
    "StatementError",
    "EmptyResultError",
    "SchemaError",
    "StatementExecutor",
    "execute",
    "ScalarQuery",
    "RowSetCollector",
    "GroupedRowSetCollector",
    "fetch_value",
    "fetch_records",
    "fetch_grouped",
    "StreamingFormatter",
    "export_records",
    "RecordFormatter",
    "JSONLinesFormatter",
    "DelimitedFormatter",
    "CallableFormatter",
    "as_formatter",
    "cleanse_statement",
    "cleanse_message",
    "default_logger",
    "TemporalKind",
    "temporal_kind",
    "normalize_value",
]
