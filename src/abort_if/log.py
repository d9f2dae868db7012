"""Process-wide diagnostic logger.

There is exactly one logger for the library.  It is created lazily on
the first call to :func:`logger` and lives until the process ends.

Rules
-----
* Only the abort guards write through it.
* Creation is guarded by a lock; reads after creation take no lock.
* It never propagates to the root logger, so a violation is written
  exactly once however the host application configures logging.
"""

from __future__ import annotations

import logging
import threading

from rich.console import Console

LOGGER_NAME: str = "abort_if"
"""Name under which the handle is registered with :mod:`logging`."""

FORMAT: str = "%(levelname)s [%(asctime)s #%(process)d] -- %(message)s"
"""One line per record: severity, timestamp, process id, message."""

_logger: logging.Logger | None = None
_lock = threading.Lock()


class ConsoleHandler(logging.Handler):
    """Write each formatted record to a Rich console on stderr.

    Records are printed as a single soft-wrapped line: never wrapped at
    the console width, never cropped, and with markup, emoji codes and
    highlighting disabled so the message reaches stderr verbatim.
    """

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self.console: Console = console or Console(stderr=True)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.console.print(
                self.format(record),
                soft_wrap=True,
                markup=False,
                emoji=False,
                highlight=False,
            )
        except Exception:  # noqa: BLE001
            self.handleError(record)


def _build_handler() -> logging.Handler:
    handler = ConsoleHandler()
    handler.setFormatter(logging.Formatter(FORMAT))
    return handler


def _create_logger() -> logging.Logger:
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(logging.DEBUG)
    log.propagate = False
    # getLogger() is itself process-wide; never stack a second handler.
    if not any(isinstance(h, ConsoleHandler) for h in log.handlers):
        log.addHandler(_build_handler())
    return log


def logger() -> logging.Logger:
    """Return the module-level logger, creating it if needed.

    The handle is an ordinary :class:`logging.Logger`; embedders may
    change its level or attach handlers like any other logger.

    Examples
    --------
    >>> logger().error("An error occurred")  # doctest: +SKIP
    """
    global _logger
    if _logger is None:
        with _lock:
            if _logger is None:
                _logger = _create_logger()
    return _logger
