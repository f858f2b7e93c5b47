"""Domain protocols - interfaces the core depends on.

Using protocols keeps the controller independent of the concrete line-editing
widget and lets tests drive it with lightweight fakes.
"""

from jqline.domain.protocols.line_editor import LineEditor
from jqline.domain.protocols.evaluator import QueryEvaluator

__all__ = ["LineEditor", "QueryEvaluator"]
