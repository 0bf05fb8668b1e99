"""Prepared statements with bound-parameter tracking and full-query interpolation"""

from .params import ParamType, BoundParam, ParamVar, ParameterStore, normalize_key
from .formatter import Quoter, format_value, to_int
from .interpolate import interpolate
from .quoting import ConverterQuoter
from .statement import Statement

__all__ = [
    "ParamType",
    "BoundParam",
    "ParamVar",
    "ParameterStore",
    "normalize_key",
    "Quoter",
    "format_value",
    "to_int",
    "interpolate",
    "ConverterQuoter",
    "Statement",
]
