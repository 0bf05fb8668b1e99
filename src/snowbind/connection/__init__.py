"""Connection module exports."""

from .connection import SnowflakeConnector

__all__ = [
    "SnowflakeConnector",
]
