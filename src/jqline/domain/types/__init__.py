"""Shared domain types."""

from jqline.domain.types.values import (
    ErrorValue,
    EvalResult,
    NoValue,
    OtherValue,
    StringValue,
    classify,
)
from jqline.domain.types.query import QueryPath

__all__ = [
    "ErrorValue",
    "EvalResult",
    "NoValue",
    "OtherValue",
    "StringValue",
    "classify",
    "QueryPath",
]
