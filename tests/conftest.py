"""Shared pytest fixtures and configuration for the abort-if test suite.

Guidelines
----------
* Abort guards must never end the test process; always intercept
  ``ProcessExitSignal`` with ``pytest.raises``.
* Filesystem checks use ``tmp_path`` only.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from abort_if.log import logger


class _RecordingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def log_records() -> Iterator[list[logging.LogRecord]]:
    """Collect every record written through the library logger."""
    handler = _RecordingHandler()
    log = logger()
    log.addHandler(handler)
    try:
        yield handler.records
    finally:
        log.removeHandler(handler)


@pytest.fixture
def existing_file(tmp_path) -> str:
    """Path (as ``str``) of a file that exists for the test's duration."""
    path = tmp_path / "hello.txt"
    path.write_text("hello\n")
    return str(path)
