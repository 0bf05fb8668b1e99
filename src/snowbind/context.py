"""Snowflake connection context management"""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from snowbind.connection import SnowflakeConnector
    from snowbind.statement import Quoter, Statement


class SnowflakeContext:
    """Manages Snowflake connection, cursor and quoter lifecycle with lazy initialization

    Example:
        >>> with SnowflakeContext(profile="dev") as ctx:
        ...     stmt = ctx.prepare("SELECT * FROM users WHERE id = ?")
        ...     stmt.bind_value(0, 42, ParamType.INT)
        ...     stmt.execute()
        ...     print(stmt.full_query)
        SELECT * FROM users WHERE id = 42
    """

    def __init__(
        self,
        profile: Optional[str] = None,
        connection: Optional[Any] = None,
        cursor: Optional[Any] = None,
        quoter: Optional["Quoter"] = None,
        **overrides: Any,
    ):
        """Initialize Snowflake context with profile or connection"""
        if profile is None and connection is None:
            raise ValueError(
                "SnowflakeContext requires either 'profile' or 'connection'"
            )
        if profile is not None and connection is not None:
            raise ValueError(
                "SnowflakeContext: provide either 'profile' or 'connection', not both"
            )

        self._profile = profile
        self._connection = connection
        self._cursor = cursor
        self._quoter = quoter
        self._overrides = overrides
        self._connector: Optional["SnowflakeConnector"] = None
        self._owns_connector = False
        self._owns_quoter = False

    @property
    def connection(self) -> Any:
        """Get Snowflake connection, creating if needed"""
        if self._connection is None:
            from snowbind.connection import SnowflakeConnector

            assert self._profile is not None
            self._connector = SnowflakeConnector(
                profile=self._profile, **self._overrides
            )
            conn, cur = self._connector.connect()
            self._connection = conn
            self._cursor = cur
            self._owns_connector = True

        return self._connection

    @property
    def cursor(self) -> Any:
        """Get Snowflake cursor, creating if needed"""
        if self._cursor is None:
            self._cursor = self.connection.cursor()

        return self._cursor

    @property
    def quoter(self) -> "Quoter":
        """Quoter for full-query interpolation, backed by the connection's converter unless injected"""
        if self._quoter is None:
            from snowbind.statement import ConverterQuoter

            self._quoter = ConverterQuoter.from_connection(self.connection)
            self._owns_quoter = True

        return self._quoter

    def prepare(self, sql: str) -> "Statement":
        """Create a Statement bound to this context's cursor and quoter"""
        from snowbind.statement import Statement

        return Statement(sql, cursor=self.cursor, quoter=self.quoter)

    def close(self) -> None:
        """Close connection if owned by this context"""
        if self._owns_connector and self._connector is not None:
            self._connector.close()
            self._connector = None
            self._connection = None
            self._cursor = None
            if self._owns_quoter:
                self._quoter = None
                self._owns_quoter = False

    def __enter__(self) -> "SnowflakeContext":
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit"""
        self.close()

    def __repr__(self) -> str:
        """String representation"""
        if self._connection is not None:
            return "SnowflakeContext(connection=<active>)"
        else:
            return f"SnowflakeContext(profile='{self._profile}')"
