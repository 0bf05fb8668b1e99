"""Substitute bound values into a statement template for logging and inspection

The result is observational only. The template and the parameters sent to the
driver are never modified.
"""

import logging
import re
from typing import Any, Mapping, Optional, Sequence, Union

from .formatter import Quoter, format_value
from .params import BoundParam, Key, ParameterStore, ParamType, normalize_key, sort_key

logger = logging.getLogger(__name__)

Params = Union[ParameterStore, Mapping[Key, Any], Sequence[Any]]

# A marker is '?' or ':name', never followed by a word character
_MARKER = re.compile(r"\?(?!\w)|:(\w+)")


def _as_bound(params: Params) -> dict[Key, BoundParam]:
    """Normalize any accepted params shape to an ordered {key: BoundParam}"""
    if isinstance(params, ParameterStore):
        return params.snapshot()

    if isinstance(params, Mapping):
        items = list(params.items())
    elif isinstance(params, (str, bytes)):
        raise TypeError("params must be a mapping or a sequence of values, not a string")
    else:
        items = list(enumerate(params))

    bound: dict[Key, BoundParam] = {}
    for key, value in items:
        if not isinstance(value, BoundParam):
            value = BoundParam(value, ParamType.STR)
        bound[normalize_key(key)] = value

    return {key: bound[key] for key in sorted(bound, key=sort_key)}


def interpolate(
    template: str,
    params: Optional[Params] = None,
    quoter: Optional[Quoter] = None,
) -> str:
    """Produce the literal query by substituting formatted values for markers

    Positional parameters consume '?' markers left to right in ascending key
    order, one marker each. Named parameters replace every ':name' occurrence,
    but not ':name' as a prefix of a longer name. The template is scanned once,
    so text inserted for one marker is never matched by another.

    Args:
        template: Query with '?' or ':name' markers (one style per template)
        params: ParameterStore, mapping of key to value/BoundParam, or sequence
            of positional values. Plain values are formatted as strings.
        quoter: Optional driver quoting capability

    Returns:
        The interpolated query. Markers with no parameter are left as they are,
        and parameters with no marker are ignored.

    Example:
        >>> interpolate("SELECT * FROM t WHERE a = :a AND b = :a", {"a": BoundParam(3, ParamType.INT)})
        'SELECT * FROM t WHERE a = 3 AND b = 3'
        >>> interpolate("SELECT ?, ?", ["x"])
        "SELECT 'x', ?"
    """
    if not params:
        return template

    positional: list[str] = []
    named: dict[str, str] = {}
    for key, param in _as_bound(params).items():
        literal = format_value(param.value, param.datatype, quoter)
        if isinstance(key, int):
            positional.append(literal)
        else:
            named[key] = literal

    used: set[str] = set()
    position = 0

    def substitute(match: re.Match[str]) -> str:
        nonlocal position
        name = match.group(1)
        if name is None:
            if position >= len(positional):
                return match.group(0)
            position += 1
            return positional[position - 1]
        if name in named:
            used.add(name)
            return named[name]
        return match.group(0)

    query = _MARKER.sub(substitute, template)

    if position < len(positional):
        logger.debug("%d positional parameter(s) had no marker", len(positional) - position)
    for name in named.keys() - used:
        logger.debug("No marker found for parameter %r", name)

    return query
