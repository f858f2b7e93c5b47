import os
import time

import pytest

from jqline.domain.exceptions import EvaluationTimeout, QueryParseError, QueryRuntimeError
from jqline.domain.types import ErrorValue, NoValue, OtherValue, StringValue
from jqline.infrastructure.jq_evaluator import JqEvaluator

# Takes well over ten seconds in libjq, far past any deadline used here
SLOW_PROGRAM = "[range(30000000)] | length"


@pytest.fixture
def short_deadline():
    evaluator = JqEvaluator(timeout=0.2)
    # Start the worker outside the timed section
    assert evaluator.first(".", "null") == OtherValue(None)
    yield evaluator
    evaluator.close()


def test_first_string_value(evaluator: JqEvaluator) -> None:
    assert evaluator.first(".a", '{"a": "x"}') == StringValue("x")


def test_first_non_string_value(evaluator: JqEvaluator) -> None:
    assert evaluator.first(".a", '{"a": 1}') == OtherValue(1)


def test_first_takes_only_first_output(evaluator: JqEvaluator) -> None:
    assert evaluator.first(".[]", '["one", "two"]') == StringValue("one")


def test_first_stops_after_first_output(evaluator: JqEvaluator) -> None:
    assert evaluator.first("range(100000000)", "null") == OtherValue(0)


def test_no_output(evaluator: JqEvaluator) -> None:
    assert isinstance(evaluator.first("empty", "{}"), NoValue)


def test_runtime_error_is_tagged(evaluator: JqEvaluator) -> None:
    result = evaluator.first('error("boom")', "{}")

    assert isinstance(result, ErrorValue)
    assert isinstance(result.error, QueryRuntimeError)


def test_parse_error_raises(evaluator: JqEvaluator) -> None:
    with pytest.raises(QueryParseError) as exc_info:
        evaluator.first(" | .", "{}")

    assert exc_info.value.program == " | ."


def test_named_arguments_are_bound(evaluator: JqEvaluator) -> None:
    assert evaluator.first("$prefix", "null", args={"prefix": "ab"}) == StringValue("ab")


def test_document_change_is_picked_up(evaluator: JqEvaluator) -> None:
    assert evaluator.first(".a", '{"a": "one"}') == StringValue("one")
    assert evaluator.first(".a", '{"a": "two"}') == StringValue("two")


def test_all_outputs(evaluator: JqEvaluator) -> None:
    assert evaluator.all(".[] | . * 2", "[1, 2, 3]") == [2, 4, 6]


def test_all_runtime_error_raises(evaluator: JqEvaluator) -> None:
    with pytest.raises(QueryRuntimeError):
        evaluator.all('error("boom")', "{}")


def test_all_parse_error_raises(evaluator: JqEvaluator) -> None:
    with pytest.raises(QueryParseError):
        evaluator.all(".[", "[]")


def test_slow_program_is_cut_off_at_deadline(short_deadline: JqEvaluator) -> None:
    started = time.monotonic()
    result = short_deadline.first(SLOW_PROGRAM, "null")
    elapsed = time.monotonic() - started

    assert isinstance(result, ErrorValue)
    assert isinstance(result.error, EvaluationTimeout)
    assert result.error.timeout == 0.2
    assert elapsed < 3.0


def test_all_raises_on_deadline(short_deadline: JqEvaluator) -> None:
    started = time.monotonic()

    with pytest.raises(EvaluationTimeout):
        short_deadline.all(SLOW_PROGRAM, "null")

    assert time.monotonic() - started < 3.0


def test_runaway_worker_is_terminated(short_deadline: JqEvaluator) -> None:
    pid = short_deadline.worker_pid
    assert pid is not None

    short_deadline.first(SLOW_PROGRAM, "null")

    assert short_deadline.worker_pid is None
    with pytest.raises(OSError):
        os.kill(pid, 0)


def test_evaluator_recovers_after_timeout(short_deadline: JqEvaluator) -> None:
    short_deadline.first(SLOW_PROGRAM, '{"a": "x"}')

    assert short_deadline.first(".a", '{"a": "x"}') == StringValue("x")
    assert short_deadline.worker_pid is not None


def test_close_stops_worker() -> None:
    evaluator = JqEvaluator()
    evaluator.first(".", "null")
    assert evaluator.worker_pid is not None

    evaluator.close()

    assert evaluator.worker_pid is None


def test_close_without_worker_is_noop() -> None:
    JqEvaluator().close()
