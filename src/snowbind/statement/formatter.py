"""Render bound values as SQL literals"""

import logging
import math
import re
from decimal import Decimal
from typing import Any, Optional, Protocol, runtime_checkable

from .params import ParamType

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Backslash must come first
_FALLBACK_ESCAPES = (
    ("\\", "\\\\"),
    ("'", "\\'"),
    ('"', '\\"'),
    ("\x00", "\\0"),
)


@runtime_checkable
class Quoter(Protocol):
    """Anything that can turn a value into a fully quoted, driver-correct SQL literal"""

    def quote(self, value: Any) -> str:
        ...


def to_int(value: Any) -> int:
    """Coerce a value to int the way a native numeric cast would, never raising

    Example:
        >>> to_int("12abc")
        12
        >>> to_int("abc")
        0
        >>> to_int(3.9)
        3
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        if isinstance(value, float) and not math.isfinite(value):
            return 0
        if isinstance(value, Decimal) and not value.is_finite():
            return 0
        return int(value)
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
        try:
            return to_int(float(value))
        except ValueError:
            return 0
    return 0


def to_text(value: Any) -> str:
    """Textual form of a value for the fallback literal"""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def escape_fallback(text: str) -> str:
    """Backslash-escape quotes, backslashes and NUL bytes"""
    for raw, escaped in _FALLBACK_ESCAPES:
        text = text.replace(raw, escaped)
    return text


def _fallback_literal(value: Any) -> str:
    return "'" + escape_fallback(to_text(value)) + "'"


def format_value(
    value: Any,
    datatype: Optional[ParamType] = None,
    quoter: Optional[Quoter] = None,
) -> str:
    """Format one bound value as the literal that would appear in the executed query

    Rules, in order:
    - None becomes NULL
    - ParamType.INT becomes an unquoted integer literal
    - without a quoter the text is single-quoted with backslash escaping
      (not safe for every driver or encoding, supply a quoter for correctness)
    - otherwise the quoter renders the literal, falling back to the escaped
      text if the quoter raises

    Args:
        value: Bound value
        datatype: Optional datatype hint
        quoter: Optional driver quoting capability

    Returns:
        SQL literal text

    Example:
        >>> format_value(None)
        'NULL'
        >>> format_value("O'Brien", ParamType.STR)
        "'O\\\\'Brien'"
        >>> format_value("42", ParamType.INT)
        '42'
    """
    if value is None:
        return "NULL"

    if datatype == ParamType.INT:
        return str(to_int(value))

    if quoter is None:
        logger.debug("No quoter supplied, using fallback escaping for %r", value)
        return _fallback_literal(value)

    try:
        return str(quoter.quote(value))
    except Exception as e:
        logger.debug("Quoter could not render %r (%s), using fallback escaping", value, e)
        return _fallback_literal(value)
