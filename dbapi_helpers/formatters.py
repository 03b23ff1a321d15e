"""
Record formatters for StreamingFormatter.

A formatter receives the output sink and one record, and writes that record
as one line. Any format works (NDJSON, pipe-delimited, CSV-ish...) as long
as the formatter handles a single record per call.
"""

import json
from abc import ABC, abstractmethod
from typing import IO, Any, Callable, Optional, Union

from dbapi_helpers.config import get_settings
from dbapi_helpers.types import Record


class RecordFormatter(ABC):
    """Strategy interface: write one record to a sink."""

    @abstractmethod
    def write(self, sink: IO[str], record: Record) -> None:
        pass

    def __call__(self, sink: IO[str], record: Record) -> None:
        self.write(sink, record)


class JSONLinesFormatter(RecordFormatter):
    """
    One compact JSON object per line, keys in column order.

    Values JSON cannot encode natively (Decimal, time, UUID...) go through str().
    """

    def __init__(self, ensure_ascii: Optional[bool] = None):
        if ensure_ascii is None:
            ensure_ascii = get_settings().json_ensure_ascii
        self.ensure_ascii = ensure_ascii

    def write(self, sink: IO[str], record: Record) -> None:
        line = json.dumps(
            record,
            separators=(",", ":"),
            ensure_ascii=self.ensure_ascii,
            default=str,
        )
        sink.write(line + "\n")


class DelimitedFormatter(RecordFormatter):
    """Record values in column order, joined by a delimiter (default ``|``)."""

    def __init__(self, delimiter: str = "|", null: str = ""):
        self.delimiter = delimiter
        self.null = null

    def write(self, sink: IO[str], record: Record) -> None:
        values = [self.null if v is None else str(v) for v in record.values()]
        sink.write(self.delimiter.join(values) + "\n")


class CallableFormatter(RecordFormatter):
    """Adapts a plain ``func(sink, record)`` to the formatter interface."""

    def __init__(self, func: Callable[[IO[str], Record], Any]):
        self.func = func

    def write(self, sink: IO[str], record: Record) -> None:
        self.func(sink, record)


FormatterLike = Union[RecordFormatter, Callable[[IO[str], Record], Any]]


def as_formatter(formatter: Optional[FormatterLike] = None) -> RecordFormatter:
    """Resolve None to the JSON-lines default and wrap bare callables."""
    if formatter is None:
        return JSONLinesFormatter()
    if isinstance(formatter, RecordFormatter):
        return formatter
    if callable(formatter):
        return CallableFormatter(formatter)
    raise TypeError(f"Formatter must be a RecordFormatter or callable, got {formatter!r}")
