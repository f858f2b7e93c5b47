"""Line editor protocol."""

from typing import Protocol

__all__ = ["LineEditor"]


class LineEditor(Protocol):
    """Owner of the query buffer and the edit cursor.

    Ordinary editing keys never go through this interface: the controller lets
    them fall through to the editor, then reads the resulting buffer back via
    ``value``.
    """

    @property
    def value(self) -> str:
        """Current buffer content."""
        ...

    def set_buffer(self, value: str) -> None:
        """Replace the whole buffer and move the cursor to its end.

        Args:
            value: New buffer content
        """
        ...
