"""
snowbind - Snowflake prepared statements with full-query interpolation

Code is organized in layers
- config/ and connection/ as the interface for Snowflake packages
- statement/ tracks bound parameters and renders the literal query
- primitives/ runs statements through a SnowflakeContext
"""

# Layer 1: Core connectivity
from snowbind.config import load_profile, list_profiles
from snowbind.connection import SnowflakeConnector
from snowbind.context import SnowflakeContext

# Layer 2: Statements
from snowbind.statement import (
    Statement,
    ParamType,
    ParamVar,
    BoundParam,
    ParameterStore,
    ConverterQuoter,
    Quoter,
    format_value,
    interpolate,
)

# Layer 3: Primitives
from snowbind.primitives import (
    QueryResult,
    Executor,
    execute_sql,
    query,
    interpolate_sql,
)

__version__ = "0.1.0"
__all__ = [
    # Layer 1: Configuration & Connection
    "load_profile",
    "list_profiles",
    "SnowflakeConnector",
    "SnowflakeContext",
    # Layer 2: Statements
    "Statement",
    "ParamType",
    "ParamVar",
    "BoundParam",
    "ParameterStore",
    "ConverterQuoter",
    "Quoter",
    "format_value",
    "interpolate",
    # Layer 3: Primitives
    "QueryResult",
    "Executor",
    "execute_sql",
    "query",
    "interpolate_sql",
]
