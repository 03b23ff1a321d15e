"""
Pytest configuration and shared fixtures for dbapi-helpers tests.
"""

import pytest

from dbapi_helpers import ConnectionOpener, StatementExecutor, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached; make every test read the environment afresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def db_url(tmp_path):
    """URL of a file-backed SQLite database in a temp directory."""
    return f"sqlite:///{tmp_path / 'test.db'}"


@pytest.fixture
def conn(db_url):
    """SQLite connection with a two-row ``test`` table."""
    connection = ConnectionOpener(db_url, "", "").connection
    StatementExecutor(
        connection,
        "create table test(a integer, b varchar(15), c timestamp, d date);"
    )
    StatementExecutor(
        connection,
        "insert into test values(12345,'chicken','2016-07-01T23:23:23.000','2016-07-01');"
    )
    StatementExecutor(
        connection,
        "insert into test values(12346,'turkey','2016-07-01T23:23:23.000','2016-07-01');"
    )
    yield connection
    connection.close()


class FakeCursor:
    """Minimal DB-API cursor serving canned rows."""

    def __init__(self, connection):
        self.connection = connection
        self.description = None
        self.rowcount = -1
        self.closed = False
        self.executed = []
        self.fetchall_called = False
        self._rows = []

    def execute(self, operation, parameters=None):
        self.executed.append(operation)
        if self.connection.error is not None:
            raise self.connection.error
        self.description = self.connection.description
        self.rowcount = self.connection.rowcount
        self._rows = list(self.connection.rows)

    def fetchone(self):
        if not self._rows:
            return None
        return self._rows.pop(0)

    def fetchall(self):
        self.fetchall_called = True
        rows, self._rows = self._rows, []
        return rows

    def close(self):
        self.closed = True


class FakeConnection:
    """Minimal DB-API connection; every cursor sees the same canned result."""

    def __init__(self, columns=None, rows=None, rowcount=-1, error=None, commit_error=None):
        self.description = (
            [(name, None, None, None, None, None, True) for name in columns]
            if columns is not None else None
        )
        self.rows = rows or []
        self.rowcount = rowcount
        self.error = error
        self.commit_error = commit_error
        self.cursors = []
        self.commits = 0
        self.closed = False

    def cursor(self):
        cursor = FakeCursor(self)
        self.cursors.append(cursor)
        return cursor

    def commit(self):
        if self.commit_error is not None:
            raise self.commit_error
        self.commits += 1

    def close(self):
        self.closed = True


@pytest.fixture
def fake_connection():
    """Factory for FakeConnection instances."""
    return FakeConnection
