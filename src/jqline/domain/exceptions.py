"""Exceptions raised by jqline components."""

__all__ = [
    "JqLineError",
    "DocumentDecodeError",
    "QueryParseError",
    "QueryRuntimeError",
    "EvaluationTimeout",
]


class JqLineError(Exception):
    """Base class for jqline errors."""


class DocumentDecodeError(JqLineError):
    """The input bytes could not be decoded as a JSON document."""


class QueryParseError(JqLineError):
    """A jq program failed to compile."""

    def __init__(self, program: str, message: str) -> None:
        super().__init__(message)
        self.program = program


class QueryRuntimeError(JqLineError):
    """A jq program raised an error while running."""


class EvaluationTimeout(JqLineError):
    """Evaluation did not finish before its deadline."""

    def __init__(self, timeout: float) -> None:
        super().__init__(f"evaluation exceeded {timeout:.2f}s")
        self.timeout = timeout
