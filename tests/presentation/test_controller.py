import pytest

from jqline.application.config import KeyMap
from jqline.application.history import HistoryLedger
from jqline.application.suggestions import PathSuggestionEngine
from jqline.presentation.controller import InputAction, QueryInputController


@pytest.fixture
def controller(make_document, evaluator, fake_editor) -> QueryInputController:
    document = make_document(b'{"alpha": 1, "alphabet": 2, "nested": {"key": true}}')
    return QueryInputController(
        fake_editor,
        PathSuggestionEngine(document, evaluator),
        HistoryLedger(),
    )


def test_typing_computes_suggestion(controller, fake_editor) -> None:
    fake_editor.type(controller, ".al")

    assert controller.suggestion == "pha"


def test_accept_appends_suggestion_and_moves_cursor(controller, fake_editor) -> None:
    fake_editor.type(controller, ".al")

    action = controller.handle_key("ctrl+l")

    assert action is InputAction.ACCEPT_SUGGESTION
    assert action.consumed
    assert fake_editor.value == ".alpha"
    assert fake_editor.cursor == len(".alpha")
    assert controller.suggestion is None


def test_accept_without_suggestion_is_noop(controller, fake_editor) -> None:
    fake_editor.type(controller, ".zz")

    controller.handle_key("ctrl+l")

    assert fake_editor.value == ".zz"
    assert controller.suggestion is None


def test_accept_nested_path(controller, fake_editor) -> None:
    fake_editor.type(controller, ".nested.")
    assert controller.suggestion == "key"

    controller.handle_key("ctrl+l")

    assert fake_editor.value == ".nested.key"


def test_backspace_discards_pending_suggestion_before_edit(controller, fake_editor) -> None:
    fake_editor.type(controller, ".alp")
    assert controller.suggestion == "ha"

    action = controller.handle_key("backspace")

    assert action is InputAction.DELETE
    assert controller.suggestion is None


def test_suggestion_recomputed_after_delete(controller, fake_editor) -> None:
    fake_editor.type(controller, ".alpx")
    assert controller.suggestion is None

    fake_editor.backspace(controller)

    assert fake_editor.value == ".alp"
    assert controller.suggestion == "ha"


def test_submit_pushes_buffer_to_history(controller, fake_editor) -> None:
    fake_editor.type(controller, ".alpha")

    action = controller.handle_key("enter")

    assert action is InputAction.SUBMIT
    assert not action.consumed
    assert controller.history.entries == (".alpha",)
    assert controller.history.cursor == 0


def test_recall_with_empty_history_keeps_buffer(controller, fake_editor) -> None:
    fake_editor.type(controller, ".al")

    controller.handle_key("up")
    controller.handle_key("down")

    assert fake_editor.value == ".al"


def test_recall_cycles_through_history(controller, fake_editor) -> None:
    for query in [".a", ".b", ".c"]:
        fake_editor.set_buffer(query)
        controller.handle_key("enter")

    seen = []
    for _ in range(3):
        controller.handle_key("up")
        seen.append(fake_editor.value)
    assert seen == [".b", ".a", ".a"]
    assert fake_editor.cursor == len(".a")

    seen = []
    for _ in range(3):
        controller.handle_key("down")
        seen.append(fake_editor.value)
    assert seen == [".b", ".c", ".c"]


def test_recalled_entry_gets_fresh_suggestion(controller, fake_editor) -> None:
    fake_editor.set_buffer(".al")
    controller.handle_key("enter")
    fake_editor.set_buffer(".zz")
    controller.handle_key("enter")

    controller.handle_key("up")

    assert fake_editor.value == ".al"
    assert controller.suggestion == "pha"


def test_other_keys_are_forwarded(controller) -> None:
    action = controller.handle_key("a")

    assert action is InputAction.EDIT
    assert not action.consumed


def test_custom_keymap(make_document, evaluator, fake_editor) -> None:
    controller = QueryInputController(
        fake_editor,
        PathSuggestionEngine(make_document(b'{"alpha": 1}'), evaluator),
        HistoryLedger(),
        KeyMap(accept_suggestion="tab"),
    )
    fake_editor.type(controller, ".a")

    assert controller.handle_key("ctrl+l") is InputAction.EDIT
    controller.handle_key("tab")

    assert fake_editor.value == ".alpha"
