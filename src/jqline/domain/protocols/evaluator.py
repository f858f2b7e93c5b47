"""Query evaluator protocol."""

from typing import Any, Mapping, Protocol

from jqline.domain.types import EvalResult

__all__ = ["QueryEvaluator"]


class QueryEvaluator(Protocol):
    """Runs query programs against a document's JSON text."""

    def first(
        self,
        program: str,
        document_text: str,
        args: Mapping[str, Any] | None = None,
    ) -> EvalResult:
        """Evaluate ``program`` and return its first output as a tagged value.

        Raises:
            QueryParseError: If the program does not compile
        """
        ...
