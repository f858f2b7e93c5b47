"""
ResultPanel - scrollable log of submitted queries and their output.
"""

import json
from typing import Any

from rich.json import JSON
from rich.text import Text
from textual.widgets import RichLog


class ResultPanel(RichLog):
    """Shows each submitted query followed by its results or error."""

    BORDER_TITLE = "Results"

    def __init__(self, error_style: str = "red", **kwargs):
        super().__init__(markup=False, highlight=False, auto_scroll=True, wrap=True, **kwargs)
        self.border_title = self.BORDER_TITLE
        self.error_style = error_style

    def add_results(self, query: str, results: list[Any]) -> None:
        self.write(Text(f"$ {query}", style="bold"))
        if not results:
            self.write(Text("(no output)", style="dim"))
        for value in results:
            self.write(JSON(json.dumps(value, ensure_ascii=False)))

    def add_error(self, query: str, message: str) -> None:
        self.write(Text(f"$ {query}", style="bold"))
        self.write(Text(message, style=self.error_style))
