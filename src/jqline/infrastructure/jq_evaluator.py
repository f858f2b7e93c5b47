"""
jq-backed query evaluation with a wall-clock deadline.

Programs run in a long-lived worker process (see ``jq_worker``). When an
evaluation misses its deadline the worker is terminated and a fresh one is
started on the next request, so a runaway program never outlives its bound.
"""

from __future__ import annotations

import contextlib
import multiprocessing
from typing import Any, Mapping

from jqline.domain.exceptions import EvaluationTimeout, JqLineError, QueryParseError, QueryRuntimeError
from jqline.domain.types import ErrorValue, EvalResult, NoValue, classify
from jqline.infrastructure import jq_worker
from jqline.logger import get_logger

logger = get_logger("jq_evaluator")

DEFAULT_TIMEOUT = 2.0

# Worker startup (interpreter + jq import) is not charged to the query deadline
STARTUP_TIMEOUT = 30.0


class JqEvaluator:
    """Compiles and runs jq programs against JSON text in a killable worker."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, startup_timeout: float = STARTUP_TIMEOUT) -> None:
        """
        Args:
            timeout: Deadline in seconds for a single evaluation
            startup_timeout: How long to wait for a new worker to come up
        """
        self.timeout = timeout
        self.startup_timeout = startup_timeout
        self._context = multiprocessing.get_context("spawn")
        self._process = None
        self._conn = None
        self._loaded_text: str | None = None

    @property
    def worker_pid(self) -> int | None:
        if self._process is None or not self._process.is_alive():
            return None
        return self._process.pid

    def first(
        self,
        program: str,
        document_text: str,
        args: Mapping[str, Any] | None = None,
    ) -> EvalResult:
        """
        Return the first output of ``program`` as a tagged value.

        Runtime errors, deadline expiry and worker failures come back as
        ``ErrorValue``; a program that produces nothing gives ``NoValue``.

        Raises:
            QueryParseError: If the program does not compile
        """
        try:
            values = self._request(program, document_text, args, take_all=False)
        except QueryParseError:
            raise
        except JqLineError as e:
            return ErrorValue(e)
        except Exception as e:
            logger.exception(f"Unexpected failure evaluating {program!r}")
            return ErrorValue(QueryRuntimeError(f"evaluation failed: {e}"))

        if not values:
            return NoValue()
        return classify(values[0])

    def all(self, program: str, document_text: str) -> list[Any]:
        """
        Return every output of ``program``.

        Raises:
            QueryParseError: If the program does not compile
            QueryRuntimeError: If jq reports an error while running
            EvaluationTimeout: If evaluation exceeds the deadline
        """
        return self._request(program, document_text, None, take_all=True)

    def close(self) -> None:
        """Stop the worker process, if one is running."""
        if self._conn is not None:
            with contextlib.suppress(OSError):
                self._conn.send(None)
        self._discard_worker(graceful=True)

    def _request(
        self,
        program: str,
        document_text: str,
        args: Mapping[str, Any] | None,
        take_all: bool,
    ) -> list[Any]:
        conn = self._ensure_worker()
        # The worker keeps the last document; only resend when it changes
        text = None if document_text is self._loaded_text else document_text

        try:
            conn.send((program, dict(args) if args else None, text, take_all))
        except OSError as e:
            self._discard_worker()
            raise QueryRuntimeError(f"jq worker unavailable: {e}") from e
        self._loaded_text = document_text

        if not conn.poll(self.timeout):
            logger.warning(f"Evaluation of {program!r} exceeded {self.timeout}s, terminating worker")
            self._discard_worker()
            raise EvaluationTimeout(self.timeout)

        try:
            status, payload = conn.recv()
        except (EOFError, OSError) as e:
            self._discard_worker()
            raise QueryRuntimeError("jq worker exited unexpectedly") from e

        if status == jq_worker.PARSE_ERROR:
            raise QueryParseError(program, payload)
        if status == jq_worker.RUNTIME_ERROR:
            raise QueryRuntimeError(payload)
        return payload

    def _ensure_worker(self):
        if self._process is not None and self._process.is_alive():
            return self._conn

        self._discard_worker()
        parent_conn, child_conn = self._context.Pipe()
        process = self._context.Process(
            target=jq_worker.serve,
            args=(child_conn,),
            name="jq-worker",
            daemon=True,
        )
        process.start()
        child_conn.close()

        if not parent_conn.poll(self.startup_timeout):
            process.kill()
            process.join()
            parent_conn.close()
            raise QueryRuntimeError(f"jq worker did not start within {self.startup_timeout}s")
        try:
            parent_conn.recv()
        except EOFError as e:
            process.join()
            parent_conn.close()
            raise QueryRuntimeError(f"jq worker exited during startup (code {process.exitcode})") from e

        logger.debug(f"Started jq worker (pid={process.pid})")
        self._process = process
        self._conn = parent_conn
        self._loaded_text = None
        return parent_conn

    def _discard_worker(self, graceful: bool = False) -> None:
        process, conn = self._process, self._conn
        self._process = None
        self._conn = None
        self._loaded_text = None

        if process is not None:
            if graceful:
                process.join(timeout=1.0)
            if process.is_alive():
                process.kill()
                process.join()
            logger.debug(f"Stopped jq worker (pid={process.pid})")
        if conn is not None:
            conn.close()
