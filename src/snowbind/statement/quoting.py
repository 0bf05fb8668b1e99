"""Snowflake-backed quoting for full-query interpolation"""

from typing import Any, Optional

from snowflake.connector.converter import SnowflakeConverter


class ConverterQuoter:
    """Quote values the way the Snowflake connector renders client-side bindings

    Uses the connector's converter pipeline (to_snowflake, escape, quote), so
    dates, decimals, booleans and binary values come out as Snowflake literals.
    No connection is needed unless one is passed in.

    Example:
        >>> quoter = ConverterQuoter()
        >>> quoter.quote("O'Brien")
        "'O\\\\'Brien'"
        >>> quoter.quote(True)
        'TRUE'
    """

    def __init__(self, converter: Optional[Any] = None):
        """Initialize with an existing converter or a fresh SnowflakeConverter"""
        self._converter = converter if converter is not None else SnowflakeConverter()

    @classmethod
    def from_connection(cls, connection: Any) -> "ConverterQuoter":
        """Reuse the converter of a live Snowflake connection"""
        return cls(getattr(connection, "converter", None))

    @property
    def converter(self) -> Any:
        return self._converter

    def quote(self, value: Any) -> str:
        """Return the value as a fully quoted Snowflake literal"""
        converter = self._converter
        return str(converter.quote(converter.escape(converter.to_snowflake(value))))

    def __repr__(self) -> str:
        return f"ConverterQuoter(converter={type(self._converter).__name__})"
