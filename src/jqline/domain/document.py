"""
Read-only JSON document the query editor evaluates against.
"""

from __future__ import annotations

import json
from typing import Any

from jqline.domain.exceptions import DocumentDecodeError
from jqline.logger import get_logger

logger = get_logger("document")


class DocumentStore:
    """
    Holds a decoded JSON value plus its canonical text.

    The text form is what the evaluator consumes, so the decoded value is
    never handed to query code and cannot be mutated by it.
    """

    __slots__ = ("_value", "_text")

    def __init__(self, value: Any) -> None:
        self._value = value
        self._text = json.dumps(value, ensure_ascii=False)

    @classmethod
    def from_bytes(cls, raw: bytes) -> "DocumentStore":
        """
        Decode a UTF-8 JSON document.

        Raises:
            DocumentDecodeError: If the bytes are not valid UTF-8 JSON
        """
        try:
            value = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error(f"Failed to decode input document: {e}")
            raise DocumentDecodeError(f"Input is not valid JSON: {e}") from e

        logger.info(f"Loaded document ({len(raw)} bytes, root type={type(value).__name__})")
        return cls(value)

    @property
    def value(self) -> Any:
        return self._value

    @property
    def text(self) -> str:
        return self._text
