"""Structured form of a partially typed path query."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["PATH_SEPARATOR", "QueryPath"]

PATH_SEPARATOR = "."


@dataclass(frozen=True, slots=True)
class QueryPath:
    """
    A query split on the path separator.

    ``segments[0]`` is whatever precedes the first separator and stands for the
    document root. The last segment is the prefix being typed; the segments in
    between form the base path.
    """

    segments: tuple[str, ...]

    @classmethod
    def parse(cls, query: str) -> "QueryPath":
        return cls(tuple(query.split(PATH_SEPARATOR)))

    @property
    def prefix(self) -> str:
        return self.segments[-1]

    @property
    def base(self) -> tuple[str, ...]:
        return self.segments[1:-1]

    @property
    def has_root(self) -> bool:
        """True when the query contains at least one separator."""
        return len(self.segments) > 1

    def base_expression(self) -> str:
        """
        Render the base path as a jq path expression.

        Returns an empty string when there is no separator at all, which is
        not a valid jq filter on its own.
        """
        if not self.has_root:
            return ""
        return PATH_SEPARATOR + PATH_SEPARATOR.join(self.base)

    def join(self) -> str:
        return PATH_SEPARATOR.join(self.segments)
