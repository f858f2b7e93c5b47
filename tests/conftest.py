"""Shared fixtures for jqline tests."""

import pytest

from jqline.domain.document import DocumentStore
from jqline.infrastructure.jq_evaluator import JqEvaluator


class FakeLineEditor:
    """In-memory line editor that appends typed characters and trims on backspace."""

    def __init__(self, value: str = ""):
        self.value = value
        self.cursor = len(value)

    def set_buffer(self, value: str) -> None:
        self.value = value
        self.cursor = len(value)

    def type(self, controller, text: str) -> None:
        for char in text:
            action = controller.handle_key(char)
            if not action.consumed:
                self.set_buffer(self.value + char)
                controller.buffer_changed()

    def backspace(self, controller) -> None:
        action = controller.handle_key("backspace")
        assert not action.consumed
        self.set_buffer(self.value[:-1])
        controller.buffer_changed()


@pytest.fixture
def make_document():
    def _make(raw: bytes) -> DocumentStore:
        return DocumentStore.from_bytes(raw)

    return _make


@pytest.fixture(scope="session")
def evaluator():
    """One jq worker process shared by the whole run."""
    evaluator = JqEvaluator()
    yield evaluator
    evaluator.close()


@pytest.fixture
def fake_editor() -> FakeLineEditor:
    return FakeLineEditor()
