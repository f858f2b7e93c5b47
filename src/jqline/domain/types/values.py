"""Tagged results produced by evaluating a query.

A jq program yields dynamically typed values. Callers only care whether the
first output was a string, an error, something else, or nothing at all, so
outputs are wrapped in one of the variants below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

__all__ = ["StringValue", "ErrorValue", "OtherValue", "NoValue", "EvalResult", "classify"]


@dataclass(frozen=True, slots=True)
class StringValue:
    value: str


@dataclass(frozen=True, slots=True)
class ErrorValue:
    error: Exception


@dataclass(frozen=True, slots=True)
class OtherValue:
    value: Any


@dataclass(frozen=True, slots=True)
class NoValue:
    """The program finished without producing output."""


EvalResult = Union[StringValue, ErrorValue, OtherValue, NoValue]


def classify(value: Any) -> EvalResult:
    """Wrap a raw produced value in its variant."""
    if isinstance(value, str):
        return StringValue(value)
    if isinstance(value, Exception):
        return ErrorValue(value)
    return OtherValue(value)
