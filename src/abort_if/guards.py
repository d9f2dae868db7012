"""Abort guards: log a fatal message, then exit.

Each guard evaluates a condition and, when the guard is violated,
writes one fatal-severity line through :func:`~abort_if.log.logger`
and raises :class:`~abort_if.exceptions.ProcessExitSignal` with status
:data:`~abort_if.exit_codes.ABORT`.

Unlike the assertion helpers, guard messages are never interpolated.
"""

from __future__ import annotations

import os
from typing import Any

from abort_if import exit_codes
from abort_if.exceptions import ProcessExitSignal
from abort_if.log import logger

StrPath = str | os.PathLike[str]


def file_exists(path: StrPath) -> bool:
    """Return whether *path* exists.

    An unreadable or malformed path is reported as missing rather than
    raised.
    """
    return os.path.exists(path)


def abort_if(condition: Any, message: str = "Fatal error") -> None:
    """Log *message* at fatal severity and exit if *condition* is truthy.

    Parameters
    ----------
    condition:
        Any object; only its truthiness matters.
    message:
        The line written to the logger and carried by the exit signal.

    Raises
    ------
    ProcessExitSignal
        When *condition* is truthy.  Uncaught, the process exits with
        status 1.

    Examples
    --------
    Falsy condition, the guard passes:

    >>> abort_if([], "Array empty")

    Truthy condition, written to stderr before exiting::

        CRITICAL [2026-03-06 18:14:03,255 #5357] -- Array not empty
    """
    if condition:
        logger().critical(message)
        raise ProcessExitSignal(message, status=exit_codes.ABORT)


def abort_unless(condition: Any, message: str = "Fatal error") -> None:
    """Log *message* at fatal severity and exit if *condition* is falsy."""
    abort_if(not condition, message)


def abort_if_file_exists(path: StrPath) -> None:
    """Exit if *path* already exists."""
    abort_if(file_exists(path), f"File '{os.fspath(path)}' already exists")


def abort_unless_file_exists(path: StrPath) -> None:
    """Exit if *path* does not exist."""
    abort_unless(file_exists(path), f"File '{os.fspath(path)}' does not exist")
