"""
Value normalization for result rows.

Drivers hand back native Python objects for each column. Most pass through
untouched, but temporal values are converted to their canonical string form
at extraction time so records compare and serialize predictably.
"""

import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

Record = Dict[str, Any]


class TemporalKind(str, Enum):
    """Temporal column values that are rendered as strings."""
    TIMESTAMP = "timestamp"
    DATE = "date"


def temporal_kind(value: Any) -> Optional[TemporalKind]:
    """
    Classify a column value as one of the known temporal kinds.

    ``datetime.datetime`` is a subclass of ``datetime.date``, so it is
    checked first. Driver subclasses (pendulum, arrow, ...) match too.
    """
    if isinstance(value, datetime.datetime):
        return TemporalKind.TIMESTAMP
    if isinstance(value, datetime.date):
        return TemporalKind.DATE
    return None


def normalize_value(value: Any) -> Any:
    """Return ``str(value)`` for temporal values, the value itself otherwise."""
    if temporal_kind(value) is not None:
        return str(value)
    return value


def column_names(description: Optional[Sequence[Sequence[Any]]]) -> List[str]:
    """Extract projected column names from a DB-API ``cursor.description``."""
    if not description:
        return []
    return [str(col[0]) for col in description]


def row_to_record(columns: Sequence[str], row: Sequence[Any]) -> Record:
    """Build a Record from a raw row tuple, normalizing each field."""
    return {name: normalize_value(value) for name, value in zip(columns, row)}
