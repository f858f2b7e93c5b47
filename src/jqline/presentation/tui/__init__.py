"""Textual application for jqline."""

from jqline.presentation.tui.app import JqLineApp

__all__ = ["JqLineApp"]
