"""Prepared statement wrapper that records bindings and exposes the full query"""

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from snowbind.primitives.result import QueryResult

from .formatter import Quoter
from .interpolate import interpolate
from .params import BoundParam, Key, ParameterStore, ParamType

logger = logging.getLogger(__name__)

InputParams = Union[Mapping[Key, Any], Sequence[Any]]


class Statement:
    """A SQL template plus its bound parameters, executed through a Snowflake cursor

    Every execute first interpolates the bound values into the template and
    stores the result in ``full_query``. The cursor always receives the original
    template and parameters, so interpolation never changes what runs.

    Args:
        sql: Query template with '?' or ':name' markers
        cursor: Snowflake (or any DB-API) cursor used by execute
        quoter: Optional quoting capability. Without one, values are
            single-quoted with backslash escaping.

    Example:
        >>> stmt = Statement("SELECT * FROM users WHERE id = ? AND name = ?", cursor, quoter)
        >>> stmt.bind_value(0, 5, ParamType.INT)
        >>> stmt.bind_value(1, "Ann")
        >>> result = stmt.execute()
        >>> stmt.full_query
        "SELECT * FROM users WHERE id = 5 AND name = 'Ann'"
    """

    def __init__(
        self,
        sql: str,
        cursor: Optional[Any] = None,
        quoter: Optional[Quoter] = None,
    ):
        self._query_string = sql
        self._cursor = cursor
        self._quoter = quoter
        self._params = ParameterStore()
        self.full_query: Optional[str] = None

    @property
    def query_string(self) -> str:
        """The query template as prepared"""
        return self._query_string

    @property
    def quoter(self) -> Optional[Quoter]:
        return self._quoter

    @property
    def params(self) -> dict[Key, BoundParam]:
        """Snapshot of the bound parameters ordered by key"""
        return self._params.snapshot()

    def bind_param(
        self,
        key: Key,
        var: Any,
        datatype: Optional[ParamType] = None,
        length: Optional[int] = None,
        driver_options: Optional[Any] = None,
    ) -> bool:
        """Bind a ParamVar by reference; its current value is used at execute time

        ``length`` and ``driver_options`` are accepted for interface parity and
        ignored, the Snowflake connector has no per-parameter options.
        """
        self._params.bind_ref(key, var, datatype)
        return True

    def bind_value(self, key: Key, value: Any, datatype: Optional[ParamType] = None) -> bool:
        """Bind a value now"""
        self._params.bind(key, value, datatype)
        return True

    def interpolate_query(self, input_params: Optional[InputParams] = None) -> str:
        """Build the full query from bound parameters, or input_params when nothing is bound

        The template is not modified. The result is also stored in ``full_query``.
        """
        params = self._params if self._params else input_params
        self.full_query = interpolate(self._query_string, params, self._quoter)
        return self.full_query

    def execute(self, input_params: Optional[InputParams] = None) -> QueryResult:
        """Interpolate for inspection, then execute the original template through the cursor

        Args:
            input_params: Parameters for this execution, used only when nothing
                has been bound. Passed to the cursor exactly as given.

        Returns:
            QueryResult wrapping the cursor, with ``full_query`` set

        Raises:
            RuntimeError: If the statement has no cursor
            ValueError: If bound names are not ':1'-style numeric markers.
                ``full_query`` is still set and the cursor is not called.
            snowflake.connector.errors.*: Any error raised by the driver
        """
        if self._cursor is None:
            raise RuntimeError(
                "Statement has no cursor. Prepare it through SnowflakeContext.prepare() "
                "or pass a cursor to Statement()."
            )

        full_query = self.interpolate_query(input_params)
        logger.debug("Executing statement: %s", full_query)

        driver_params = self._driver_params(input_params)
        if driver_params is None:
            cursor = self._cursor.execute(self._query_string)
        else:
            cursor = self._cursor.execute(self._query_string, driver_params)

        # Some cursors return None from execute
        if cursor is None:
            cursor = self._cursor
        return QueryResult(_cursor=cursor, full_query=full_query)

    def _driver_params(self, input_params: Optional[InputParams]) -> Optional[InputParams]:
        """Parameters handed to the cursor: bound values if any, else input_params unchanged

        The Snowflake connector binds a list, for both '?' and ':1' markers.
        Positional keys give a list in key order, and ':1'-style numeric names
        give a list ordered by their number.

        Raises:
            ValueError: If bound names are not numeric (':id'), or positional
                and numeric names are mixed
        """
        if not self._params:
            return input_params

        snapshot = self._params.snapshot()
        if all(isinstance(key, int) for key in snapshot):
            return [param.value for param in snapshot.values()]

        if all(isinstance(key, str) and key.isdigit() for key in snapshot):
            ordered = sorted(snapshot.items(), key=lambda item: int(item[0]))
            return [param.value for _, param in ordered]

        raise ValueError(
            f"Cannot execute named parameters {list(snapshot)} through the Snowflake connector, "
            "which binds only '?' or ':1'-style markers. Use positional or numeric markers, "
            "or interpolate_query() for the literal query."
        )

    def __repr__(self) -> str:
        return f"Statement({self._query_string!r}, params={len(self._params)})"
