"""abort-if — guard clauses that log and exit, plus typed assertions.

Two facilities share one error hierarchy:

* :mod:`abort_if.guards`: ``abort_if`` and friends log a fatal line to
  stderr, then raise :class:`ProcessExitSignal` (exit status 1).
* :mod:`abort_if.assertions`: ``assert_`` and friends raise
  :class:`AssertionFailureError` with a printf-style message.
"""

from abort_if.assertions import (
    assert_,
    assert_has_key,
    assert_includes,
    assert_keys,
    assert_length,
    refute,
    refute_has_key,
    refute_includes,
    render_message,
)
from abort_if.exceptions import (
    AssertionFailureError,
    Error,
    InvalidArgumentError,
    ProcessExitSignal,
)
from abort_if.guards import (
    abort_if,
    abort_if_file_exists,
    abort_unless,
    abort_unless_file_exists,
    file_exists,
)
from abort_if.log import logger
from abort_if.version import __version__

__all__: list[str] = [
    "AssertionFailureError",
    "Error",
    "InvalidArgumentError",
    "ProcessExitSignal",
    "__version__",
    "abort_if",
    "abort_if_file_exists",
    "abort_unless",
    "abort_unless_file_exists",
    "assert_",
    "assert_has_key",
    "assert_includes",
    "assert_keys",
    "assert_length",
    "file_exists",
    "logger",
    "refute",
    "refute_has_key",
    "refute_includes",
    "render_message",
]
