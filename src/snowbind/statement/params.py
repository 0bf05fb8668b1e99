"""Bound parameter tracking for prepared statements"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterator, Optional, Union

Key = Union[int, str]


class ParamType(IntEnum):
    """Datatype hints for bound parameters (same values as the PDO constants)"""

    NULL = 0
    INT = 1
    STR = 2
    LOB = 3
    BOOL = 5


@dataclass(frozen=True)
class BoundParam:
    """A bound value together with its declared datatype hint"""

    value: Any
    datatype: Optional[ParamType] = None


class ParamVar:
    """Mutable holder for bind-by-reference parameters

    The value is read when the statement is interpolated or executed,
    not when it is bound.

    Example:
        >>> user_id = ParamVar(1)
        >>> stmt.bind_param(0, user_id, ParamType.INT)
        >>> user_id.value = 2
        >>> stmt.execute()  # runs with 2
    """

    __slots__ = ("value",)

    def __init__(self, value: Any = None):
        self.value = value

    def __repr__(self) -> str:
        return f"ParamVar({self.value!r})"


def normalize_key(key: Key) -> Key:
    """Normalize a parameter key: ints and digit strings are positional, names lose their leading colon

    The digit check runs before the colon is stripped, so ":1" stays the named
    key "1" (the numeric ':1' marker) while "1" becomes positional 1. The two
    are separate entries.
    """
    if isinstance(key, bool):
        raise TypeError(f"Parameter key must be int or str, got {key!r}")
    if isinstance(key, int):
        return key
    if not isinstance(key, str):
        raise TypeError(f"Parameter key must be int or str, got {type(key).__name__}")
    if key.isdigit():
        return int(key)
    return key[1:] if key.startswith(":") else key


def sort_key(key: Key) -> tuple[int, Any]:
    """Ordering for parameter keys: positional numerically, then named lexicographically"""
    if isinstance(key, int):
        return (0, key)
    return (1, key)


class ParameterStore:
    """Ordered-by-key record of the parameters bound to one statement

    Re-binding a key replaces the previous entry. Entries are never removed.
    """

    def __init__(self) -> None:
        self._entries: dict[Key, tuple[Any, Optional[ParamType], bool]] = {}

    def bind(self, key: Key, value: Any, datatype: Optional[ParamType] = None) -> None:
        """Bind a value now"""
        self._entries[normalize_key(key)] = (value, datatype, False)

    def bind_ref(self, key: Key, var: Any, datatype: Optional[ParamType] = None) -> None:
        """Bind a ParamVar-like holder whose .value is read at snapshot time"""
        if not hasattr(var, "value"):
            raise TypeError(
                f"bind_ref expects a holder with a 'value' attribute such as ParamVar, "
                f"got {type(var).__name__}"
            )
        self._entries[normalize_key(key)] = (var, datatype, True)

    def snapshot(self) -> dict[Key, BoundParam]:
        """Current bindings ordered by key, with references resolved"""
        result: dict[Key, BoundParam] = {}
        for key in sorted(self._entries, key=sort_key):
            value, datatype, is_ref = self._entries[key]
            result[key] = BoundParam(value.value if is_ref else value, datatype)
        return result

    def keys(self) -> list[Key]:
        return sorted(self._entries, key=sort_key)

    def __iter__(self) -> Iterator[Key]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        try:
            return normalize_key(key) in self._entries  # type: ignore[arg-type]
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"ParameterStore({self.snapshot()!r})"
