"""
Connection opening for dbapi-helpers.

URLs use SQLAlchemy syntax, so any dialect SQLAlchemy knows about can be
reached:

    sqlite:///path/to/file.db
    postgresql+psycopg2://host:5432/dbname
    redshift+redshift_connector://cluster:5439/dev

The handle returned is the raw DB-API 2.0 connection (proxied by SQLAlchemy
with NullPool, so close() really closes it). Closing it is the caller's job.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.pool import NullPool

from dbapi_helpers.base import BaseHelper
from dbapi_helpers.exceptions import ConnectionError
from dbapi_helpers.redaction import cleanse_message


class ConnectionOpener(BaseHelper):
    """
    Opens a discrete connection and exposes it as ``connection``.

    Example:
        conn = ConnectionOpener("sqlite:///data.db", "", "").connection
        try:
            ...
        finally:
            conn.close()
    """

    def __init__(
        self,
        uri: str,
        username: str = "",
        password: str = "",
        logger: Optional[logging.Logger] = None,
        engine_options: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            uri: SQLAlchemy database URL
            username: Overrides the URL's user when non-empty
            password: Overrides the URL's password when non-empty
            logger: Logger to use (default: stdout package logger)
            engine_options: Extra keyword arguments for create_engine

        Raises:
            ConnectionError: If the URL is invalid or the connect fails
        """
        super().__init__(logger)

        try:
            url = make_url(uri)
        except Exception as e:
            raise ConnectionError(
                "Could not parse database URL",
                original_error=e,
            ) from e

        overrides = {}
        if username:
            overrides["username"] = username
        if password:
            overrides["password"] = password
        if overrides:
            url = url.set(**overrides)

        self.url = url
        safe_url = url.render_as_string(hide_password=True)
        self.logger.info(f"connecting to {safe_url} as user {url.username or ''}...")

        try:
            self.engine = create_engine(url, poolclass=NullPool, **(engine_options or {}))
            self.connection = self.engine.raw_connection()
        except Exception as e:
            raise ConnectionError(
                f"Failed to connect to {safe_url}: {cleanse_message(e, [password, url.password])}",
                original_error=e,
            ) from e

        self.logger.info("connection successful!")


def open_connection(uri: str, username: str = "", password: str = "", **kwargs) -> Any:
    """Open a connection and return the DB-API handle."""
    return ConnectionOpener(uri, username, password, **kwargs).connection
