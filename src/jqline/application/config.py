"""Configuration for the query input and its host app."""

import os
from dataclasses import dataclass, field

from jqline.application.history import DEFAULT_CAPACITY
from jqline.infrastructure.jq_evaluator import DEFAULT_TIMEOUT


@dataclass(frozen=True)
class KeyMap:
    """Key names (as reported by Textual) bound to controller actions."""

    accept_suggestion: str = "ctrl+l"
    recall_older: str = "up"
    recall_newer: str = "down"
    submit: str = "enter"
    delete: frozenset[str] = frozenset({"backspace", "ctrl+h", "delete"})


@dataclass(frozen=True)
class QueryInputConfig:
    """Configuration for the query input."""

    history_max_len: int = DEFAULT_CAPACITY
    eval_timeout: float = DEFAULT_TIMEOUT  # seconds, per suggestion/query evaluation
    prompt: str = "jq > "
    theme: str = "default"
    keymap: KeyMap = field(default_factory=KeyMap)


def _positive_env(name: str, convert, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = convert(raw)
    except ValueError:
        raise ValueError(f"{name} must be a positive number, got {raw!r}") from None
    if not value > 0:
        raise ValueError(f"{name} must be a positive number, got {raw!r}")
    return value


def load_query_input_config() -> QueryInputConfig:
    """
    Load query input configuration from environment variables.

    Raises:
        ValueError: If JQLINE_HISTORY_MAX_LEN or JQLINE_EVAL_TIMEOUT is not a positive number
    """
    history_max_len = _positive_env("JQLINE_HISTORY_MAX_LEN", int, DEFAULT_CAPACITY)
    eval_timeout = _positive_env("JQLINE_EVAL_TIMEOUT", float, DEFAULT_TIMEOUT)
    theme = os.getenv("JQLINE_THEME", "default")

    return QueryInputConfig(
        history_max_len=history_max_len,
        eval_timeout=eval_timeout,
        theme=theme,
    )
