"""Textual widgets for jqline."""

from jqline.presentation.widgets.query_input import QueryInput, QueryLineEditor
from jqline.presentation.widgets.result_panel import ResultPanel

__all__ = ["QueryInput", "QueryLineEditor", "ResultPanel"]
