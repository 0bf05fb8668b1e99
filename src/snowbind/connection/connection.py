"""Snowflake connection management with profile support."""

from snowflake.connector import SnowflakeConnection
from snowflake.connector.cursor import SnowflakeCursor
import snowflake.connector
from typing import Optional, Tuple, Any, Literal

from .base import BaseConnector


class SnowflakeConnector(BaseConnector):
    """
    Snowflake connection manager with TOML profile support and context manager protocol.

    Args:
        profile: Name of the profile to load from connections.toml
        **kwargs: Additional connection parameters to override profile settings

    Example:
        >>> with SnowflakeConnector(profile="dev") as (conn, cur):
        ...     cur.execute("SELECT CURRENT_VERSION()")
        ...     print(cur.fetchone())

        >>> # Server-side '?' binding for this connection only
        >>> with SnowflakeConnector(profile="dev", paramstyle="qmark") as (conn, cur):
        ...     cur.execute("SELECT * FROM users WHERE id = ?", [42])
    """

    def __init__(self, profile: str, **kwargs: Any) -> None:
        super().__init__(profile, **kwargs)

        self._connection: Optional[SnowflakeConnection] = None
        self._cursor: Optional[SnowflakeCursor] = None

    def connect(self) -> Tuple[SnowflakeConnection, SnowflakeCursor]:
        """
        Establish connection to Snowflake if not already connected.

        Returns:
            Tuple of (connection, cursor) objects
        """
        if self._connection is None:
            self._connection = snowflake.connector.connect(**self.connect_kwargs())  # type: ignore[misc]
            self._cursor = self._connection.cursor()

        assert self._connection is not None
        assert self._cursor is not None
        return self._connection, self._cursor

    def close(self) -> None:
        """Close the cursor and connection, releasing resources."""
        if self._cursor:
            self._cursor.close()
            self._cursor = None
        if self._connection:
            self._connection.close()
            self._connection = None

    def __enter__(self) -> Tuple[SnowflakeConnection, SnowflakeCursor]:
        return self.connect()

    def __exit__(
        self,
        exc_type: Any,
        exc_val: Any,
        exc_tb: Any
    ) -> Literal[False]:
        """Close connection and propagate any exceptions"""
        self.close()
        return False

    def __repr__(self) -> str:
        status = "connected" if self._connection else "not connected"
        return f"SnowflakeConnector(profile='{self._profile}', {status})"
