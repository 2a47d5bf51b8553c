from __future__ import annotations

import io
import logging

from gemini_chat.common.logging_setup import setup_logging


def test_setup_logging_writes_to_given_stream() -> None:
    buf = io.StringIO()
    setup_logging(logging.INFO, stream=buf)
    logging.getLogger("gemini_chat.test").info("hello %s", "there")
    line = buf.getvalue()
    assert "INFO gemini_chat.test: hello there" in line
    assert line.startswith("[")


def test_http_request_loggers_are_quieted() -> None:
    buf = io.StringIO()
    setup_logging(logging.DEBUG, stream=buf)
    logging.getLogger("httpx").info("HTTP Request: POST https://example?key=secret")
    assert buf.getvalue() == ""
    assert logging.getLogger("httpcore").level == logging.WARNING
