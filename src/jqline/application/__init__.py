"""Application layer: suggestion engine, history and configuration."""

from jqline.application.config import KeyMap, QueryInputConfig, load_query_input_config
from jqline.application.history import HistoryLedger
from jqline.application.suggestions import PathSuggestionEngine, build_key_query, split_query

__all__ = [
    "KeyMap",
    "QueryInputConfig",
    "load_query_input_config",
    "HistoryLedger",
    "PathSuggestionEngine",
    "build_key_query",
    "split_query",
]
