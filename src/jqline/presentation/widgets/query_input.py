"""
QueryInput - single-line jq editor with an inline path suggestion hint.

Layout:
╭──────────────────────────────╮
│ jq > .items.na               │
╰──────────────────────────────╯
               me              <- hint, aligned after the typed text
"""

from __future__ import annotations

from typing import Callable

from rich.cells import cell_len
from rich.style import Style
from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Label, Static

from jqline.application.config import QueryInputConfig
from jqline.application.history import HistoryLedger
from jqline.application.suggestions import PathSuggestionEngine
from jqline.domain.document import DocumentStore
from jqline.domain.protocols import QueryEvaluator
from jqline.infrastructure.jq_evaluator import JqEvaluator
from jqline.logger import get_logger
from jqline.presentation.controller import InputAction, QueryInputController
from jqline.presentation.theme import Theme

logger = get_logger("query_input")

# Border column to the left of the prompt
_BORDER_WIDTH = 1


class QueryLineEditor(Input):
    """
    Textual Input acting as the line editor behind the controller.

    Every key is offered to ``key_handler`` first. Keys it consumes stop here;
    the rest fall through to Input's own handling.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(placeholder="Type a path, e.g. .items", **kwargs)
        self.key_handler: Callable[[str], InputAction] | None = None

    def set_buffer(self, value: str) -> None:
        self.value = value
        self.cursor_position = len(value)

    async def _on_key(self, event: events.Key) -> None:
        if self.key_handler is None:
            return

        action = self.key_handler(event.key)
        if action.consumed:
            event.stop()
            event.prevent_default()


class QueryInput(Widget):
    """Query editor composing the prompt, the line editor and the hint."""

    DEFAULT_CSS = """
    QueryInput {
        height: auto;
    }
    QueryInput #query-line {
        height: 3;
        border: round white;
    }
    QueryInput #query-prompt {
        width: auto;
        height: 1;
    }
    QueryInput QueryLineEditor, QueryInput QueryLineEditor:focus {
        border: none;
        height: 1;
        padding: 0;
        width: 1fr;
    }
    QueryInput #autocomplete-hint {
        height: 1;
    }
    """

    class Submitted(Message):
        """Posted when the user submits the current query."""

        def __init__(self, query: str) -> None:
            super().__init__()
            self.query = query

    def __init__(
        self,
        document: DocumentStore,
        theme: Theme,
        config: QueryInputConfig | None = None,
        evaluator: QueryEvaluator | None = None,
        **kwargs,
    ) -> None:
        """
        Initialize the query input.

        Args:
            document: Document the suggestions are computed against
            theme: Colours for the border, prompt and hint
            config: Prompt, history size, evaluation timeout and key bindings
            evaluator: Query evaluator; defaults to jq with the configured timeout
        """
        super().__init__(**kwargs)
        self.input_config = config or QueryInputConfig()
        self.color_theme = theme
        self._hint_style = Style(color=theme.secondary)

        self._owned_evaluator = None
        if evaluator is None:
            evaluator = self._owned_evaluator = JqEvaluator(timeout=self.input_config.eval_timeout)
        engine = PathSuggestionEngine(document, evaluator)
        self.editor = QueryLineEditor(id="query-editor")
        self.controller = QueryInputController(
            self.editor,
            engine,
            HistoryLedger(capacity=self.input_config.history_max_len),
            self.input_config.keymap,
        )
        self.editor.key_handler = self._handle_key

        logger.debug(f"QueryInput initialized (history={self.input_config.history_max_len}, timeout={self.input_config.eval_timeout}s)")

    def compose(self) -> ComposeResult:
        with Horizontal(id="query-line"):
            yield Label(
                Text(self.input_config.prompt, style=Style(bold=True, color=self.color_theme.secondary)),
                id="query-prompt",
            )
            yield self.editor
        yield Static("", id="autocomplete-hint")

    def on_mount(self) -> None:
        self.set_border_color(self.color_theme.primary)
        self.editor.focus()

    def on_unmount(self) -> None:
        if self._owned_evaluator is not None:
            self._owned_evaluator.close()

    @property
    def value(self) -> str:
        return self.editor.value

    @property
    def suggestion(self) -> str | None:
        return self.controller.suggestion

    @property
    def history(self) -> HistoryLedger:
        return self.controller.history

    def set_border_color(self, color: str) -> None:
        self.query_one("#query-line").styles.border = ("round", color)

    def _handle_key(self, key: str) -> InputAction:
        action = self.controller.handle_key(key)
        if action is InputAction.SUBMIT:
            self.post_message(self.Submitted(self.editor.value))
        self._update_hint()
        return action

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.controller.buffer_changed()
        self._update_hint()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        # Submission is handled on the key itself
        event.stop()

    def _update_hint(self) -> None:
        hint = self.query_one("#autocomplete-hint", Static)
        suggestion = self.controller.suggestion
        if not suggestion:
            hint.update("")
            return

        padding = _BORDER_WIDTH + cell_len(self.input_config.prompt) + cell_len(self.editor.value)
        hint.update(Text(" " * padding) + Text(suggestion, style=self._hint_style))
