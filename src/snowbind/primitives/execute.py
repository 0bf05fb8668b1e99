"""Execute SQL queries with parameter binding and full-query capture"""

from typing import Any, Optional, Union, Mapping, Sequence

import pandas as pd

from snowbind.context import SnowflakeContext
from snowbind.statement.formatter import Quoter
from snowbind.statement.interpolate import interpolate

from .result import QueryResult

Bindings = Union[Mapping[Any, Any], Sequence[Any]]


class Executor:
    """Execute SQL queries through prepared statements"""

    def __init__(self, context: Union[str, SnowflakeContext], **overrides: Any):
        """Initialize with a context profile name or SnowflakeContext instance"""
        if isinstance(context, str):
            self.context = SnowflakeContext(profile=context, **overrides)
        else:
            self.context = context

    def run(
        self,
        sql: str,
        bindings: Optional[Bindings] = None
    ) -> QueryResult:
        """Execute SQL and return a QueryResult carrying the interpolated query"""
        return self.context.prepare(sql).execute(bindings)


def execute_sql(
    sql: str,
    context: Union[str, SnowflakeContext],
    bindings: Optional[Bindings] = None,
    **overrides: Any
) -> QueryResult:
    """Execute SQL and return a QueryResult"""
    return Executor(context, **overrides).run(sql, bindings)


def query(
    sql: str,
    context: Union[str, SnowflakeContext],
    bindings: Optional[Bindings] = None,
    **overrides: Any
) -> pd.DataFrame:
    """Execute SQL and return results as a DataFrame"""
    return Executor(context, **overrides).run(sql, bindings).to_df()


def interpolate_sql(
    sql: str,
    bindings: Optional[Bindings] = None,
    quoter: Optional[Quoter] = None
) -> str:
    """Render SQL with its bindings substituted, without a connection

    Example:
        >>> interpolate_sql("SELECT * FROM t WHERE name = ?", ["Ann"])
        "SELECT * FROM t WHERE name = 'Ann'"
    """
    return interpolate(sql, bindings, quoter)
