"""
Inline path suggestions for a partially typed query.

The query language itself does the matching: the typed text is turned into a
jq program that lists the keys at the base path and keeps the first one
starting with the trailing segment.
"""

from __future__ import annotations

from jqline.domain.document import DocumentStore
from jqline.domain.exceptions import JqLineError, QueryParseError
from jqline.domain.protocols import QueryEvaluator
from jqline.domain.types import ErrorValue, NoValue, QueryPath, StringValue
from jqline.logger import get_logger

logger = get_logger("suggestions")

KEY_FILTER = "first(to_entries[] | select(.key | startswith($prefix)) | .key)"


def split_query(query: str) -> QueryPath:
    """Split a trimmed query into its root, base and prefix segments."""
    return QueryPath.parse(query.strip())


def build_key_query(path: QueryPath) -> str:
    """Build the jq program that yields the first key matching ``path.prefix``."""
    return f"{path.base_expression()} | {KEY_FILTER}"


class PathSuggestionEngine:
    """Computes at most one completion for the last path segment."""

    def __init__(self, document: DocumentStore, evaluator: QueryEvaluator) -> None:
        self._document = document
        self._evaluator = evaluator

    def suggest(self, query: str) -> str | None:
        """
        Return the characters still missing from the trailing segment, or None.

        Every failure (malformed query, runtime error, timeout, non-string
        output, no match, key already typed) yields None.
        """
        query = query.strip()
        if not query:
            return None

        path = split_query(query)
        program = build_key_query(path)

        try:
            result = self._evaluator.first(
                program,
                self._document.text,
                args={"prefix": path.prefix},
            )
        except QueryParseError as e:
            logger.debug(f"No suggestion, derived query did not parse: {program!r} ({e})")
            return None
        except JqLineError as e:
            logger.debug(f"No suggestion for {query!r}: {e}")
            return None

        if isinstance(result, NoValue):
            logger.debug(f"No key at {path.base_expression()!r} starts with {path.prefix!r}")
            return None
        if isinstance(result, ErrorValue):
            logger.debug(f"No suggestion for {query!r}: {result.error}")
            return None
        if not isinstance(result, StringValue):
            return None

        key = result.value
        if query.endswith(key):
            return None

        return key.removeprefix(path.prefix)
