"""
Worker process body for JqEvaluator.

Runs in a separate process so a runaway program can be killed outright; jq
holds the GIL while it evaluates, which rules out a worker thread. Only jq is
imported here to keep process startup cheap.
"""

from itertools import islice

import jq

READY = "ready"
OK = "ok"
PARSE_ERROR = "parse_error"
RUNTIME_ERROR = "runtime_error"


def serve(conn) -> None:
    """
    Answer evaluation requests until the parent sends None or hangs up.

    A request is ``(program, args, document_text, take_all)``. ``document_text``
    is None when the parent wants the previously sent document reused. The
    reply is ``(status, payload)``: a list of outputs for OK, otherwise the
    error message.
    """
    document_text = "null"
    conn.send((READY, None))

    while True:
        try:
            request = conn.recv()
        except EOFError:
            return
        if request is None:
            return

        program, args, text, take_all = request
        if text is not None:
            document_text = text

        try:
            compiled = jq.compile(program, args=args)
        except ValueError as e:
            conn.send((PARSE_ERROR, str(e)))
            continue

        try:
            outputs = iter(compiled.input_text(document_text))
            if take_all:
                values = list(outputs)
            else:
                values = list(islice(outputs, 1))
        except ValueError as e:
            conn.send((RUNTIME_ERROR, str(e)))
            continue

        conn.send((OK, values))
