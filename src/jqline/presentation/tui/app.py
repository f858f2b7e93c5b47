"""
JqLineApp - Textual application hosting the query editor.
"""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from jqline.application.config import QueryInputConfig
from jqline.domain.document import DocumentStore
from jqline.domain.exceptions import JqLineError
from jqline.infrastructure.jq_evaluator import JqEvaluator
from jqline.logger import get_logger
from jqline.presentation.theme import Theme
from jqline.presentation.widgets import QueryInput, ResultPanel

logger = get_logger("jqline_tui")


class JqLineApp(App):
    """
    Layout:
    ┌──────────────────────────────┐
    │            Header            │
    ├──────────────────────────────┤
    │  Query input (+ inline hint) │
    ├──────────────────────────────┤
    │     Result panel (scroll)    │
    ├──────────────────────────────┤
    │            Footer            │
    └──────────────────────────────┘
    """

    TITLE = "jqline"
    SUB_TITLE = "Interactive jq with path suggestions"

    CSS = """
    #results {
        height: 1fr;
        border: round $secondary;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+c", "quit", "Quit", priority=True, show=False),
    ]

    def __init__(
        self,
        document: DocumentStore,
        color_theme: Theme,
        config: QueryInputConfig | None = None,
    ):
        """
        Args:
            document: Decoded input document
            color_theme: Colours injected into the widgets
            config: Query input configuration
        """
        super().__init__()
        self.document = document
        self.color_theme = color_theme
        self.input_config = config or QueryInputConfig()
        self.evaluator = JqEvaluator(timeout=self.input_config.eval_timeout)

    def compose(self) -> ComposeResult:
        yield Header()
        yield QueryInput(
            self.document,
            self.color_theme,
            config=self.input_config,
            evaluator=self.evaluator,
            id="query",
        )
        yield ResultPanel(error_style=self.color_theme.error, id="results")
        yield Footer()

    def on_mount(self) -> None:
        logger.info(f"jqline mounted (theme={self.color_theme.name})")

    def on_unmount(self) -> None:
        self.evaluator.close()

    def on_query_input_submitted(self, event: QueryInput.Submitted) -> None:
        panel = self.query_one(ResultPanel)
        query = event.query.strip() or "."

        try:
            results = self.evaluator.all(query, self.document.text)
        except JqLineError as e:
            logger.info(f"Query {query!r} failed: {e}")
            panel.add_error(query, str(e))
            return

        logger.debug(f"Query {query!r} produced {len(results)} result(s)")
        panel.add_results(query, results)
