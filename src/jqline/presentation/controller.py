"""
Event orchestration for the query input.

The controller owns the pending suggestion and the history ledger. It reads
and replaces the buffer through the LineEditor protocol; ordinary edits are
left to the editor, which reports back through ``buffer_changed``.
"""

from __future__ import annotations

from enum import Enum

from jqline.application.config import KeyMap
from jqline.application.history import HistoryLedger
from jqline.application.suggestions import PathSuggestionEngine
from jqline.domain.protocols import LineEditor
from jqline.logger import get_logger

logger = get_logger("controller")


class InputAction(Enum):
    ACCEPT_SUGGESTION = "accept_suggestion"
    RECALL_OLDER = "recall_older"
    RECALL_NEWER = "recall_newer"
    SUBMIT = "submit"
    DELETE = "delete"
    EDIT = "edit"

    @property
    def consumed(self) -> bool:
        """Whether the key stops here instead of reaching the line editor."""
        return self in (InputAction.ACCEPT_SUGGESTION, InputAction.RECALL_OLDER, InputAction.RECALL_NEWER)


class QueryInputController:
    """Maps key events to suggestion, history and buffer operations."""

    def __init__(
        self,
        editor: LineEditor,
        engine: PathSuggestionEngine,
        history: HistoryLedger,
        keymap: KeyMap | None = None,
    ) -> None:
        self._editor = editor
        self._engine = engine
        self.history = history
        self.keymap = keymap or KeyMap()
        self._suggestion: str | None = None

    @property
    def suggestion(self) -> str | None:
        return self._suggestion

    @property
    def value(self) -> str:
        return self._editor.value

    def classify(self, key: str) -> InputAction:
        keymap = self.keymap
        if key == keymap.accept_suggestion:
            return InputAction.ACCEPT_SUGGESTION
        if key == keymap.recall_older:
            return InputAction.RECALL_OLDER
        if key == keymap.recall_newer:
            return InputAction.RECALL_NEWER
        if key == keymap.submit:
            return InputAction.SUBMIT
        if key in keymap.delete:
            return InputAction.DELETE
        return InputAction.EDIT

    def handle_key(self, key: str) -> InputAction:
        """
        Process one key event.

        The suggestion is refreshed for the buffer as it stands before the
        event. Keys whose action is not ``consumed`` must then be passed on to
        the line editor, which calls ``buffer_changed`` once it has mutated.
        """
        self.refresh()
        action = self.classify(key)

        if action is InputAction.ACCEPT_SUGGESTION:
            self.accept_suggestion()
        elif action is InputAction.RECALL_OLDER:
            self.recall_older()
        elif action is InputAction.RECALL_NEWER:
            self.recall_newer()
        elif action is InputAction.SUBMIT:
            self.submit()
        elif action is InputAction.DELETE:
            self._suggestion = None

        return action

    def buffer_changed(self) -> None:
        """Adopt the editor's new buffer and recompute the suggestion."""
        self.refresh()

    def refresh(self) -> str | None:
        self._suggestion = self._engine.suggest(self._editor.value)
        return self._suggestion

    def accept_suggestion(self) -> bool:
        """Append the pending suggestion to the buffer. No-op without one."""
        if not self._suggestion:
            return False

        completed = f"{self._editor.value}{self._suggestion}"
        logger.debug(f"Accepting suggestion {self._suggestion!r} -> {completed!r}")
        self._suggestion = None
        self._editor.set_buffer(completed)
        self.refresh()
        return True

    def recall_older(self) -> bool:
        if not self.history.has_older():
            return False
        self._load(self.history.recall_older())
        return True

    def recall_newer(self) -> bool:
        if not self.history.has_newer():
            return False
        self._load(self.history.recall_newer())
        return True

    def submit(self) -> str:
        value = self._editor.value
        self.history.push(value)
        logger.info(f"Submitted query {value!r} (history size={len(self.history)})")
        return value

    def _load(self, entry: str | None) -> None:
        if entry is None:
            return
        self._editor.set_buffer(entry)
        self.refresh()
