"""A unified, simplified interface for Snowflake query results"""
from typing import Any, Optional
from dataclasses import dataclass
import pandas as pd

try:
    import pyarrow  # noqa: F401
    HAS_PYARROW = True
except ImportError:
    HAS_PYARROW = False


@dataclass
class QueryResult:
    """Query results plus the interpolated SQL that was logged for them"""
    _cursor: Any
    full_query: Optional[str] = None

    @property
    def query_id(self) -> str:
        """The Snowflake query ID (sfqid)"""
        return self._cursor.sfqid

    @property
    def rowcount(self) -> int:
        """The number of rows affected or returned"""
        return self._cursor.rowcount if self._cursor.rowcount is not None else -1

    @property
    def sql(self) -> str:
        """The SQL statement as the cursor reports it"""
        return self._cursor.query

    @property
    def description(self) -> Optional[list[tuple]]:
        """A description of the result columns"""
        return self._cursor.description

    def fetch_one(self) -> Optional[tuple[Any, ...]]:
        """Fetch the next row of a query result set"""
        return self._cursor.fetchone()

    def fetch_all(self) -> list[tuple[Any, ...]]:
        """Fetch all remaining rows of a query result set"""
        result = self._cursor.fetchall()
        return result if result else []

    def to_df(self, lowercase_columns: bool = True) -> pd.DataFrame:
        """Fetch all results as a single DataFrame with optional column casing"""
        if HAS_PYARROW:
            df = self._cursor.fetch_pandas_all()
        else:
            if self._cursor.description:
                columns = [desc[0] for desc in self._cursor.description]
                rows = self._cursor.fetchall()
                df = pd.DataFrame(rows, columns=columns)
            else:
                df = pd.DataFrame()

        if lowercase_columns and (not df.empty or len(df.columns) > 0):
            df.columns = df.columns.str.lower()

        return df

    def __repr__(self) -> str:
        """String representation"""
        return (
            f"QueryResult(query_id='{self.query_id}', "
            f"rowcount={self.rowcount})"
        )
