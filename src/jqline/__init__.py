"""jqline - interactive jq query editor with inline path suggestions."""

__version__ = "0.1.0"
