"""Primitive operations to wrap direct Snowflake connector calls"""

from snowbind.primitives.result import QueryResult

from snowbind.primitives.execute import (
    Executor,
    execute_sql,
    query,
    interpolate_sql,
)

__all__ = [
    "QueryResult",
    "Executor",
    "execute_sql",
    "query",
    "interpolate_sql",
]
