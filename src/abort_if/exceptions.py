"""Custom exception hierarchy for abort-if.

Every recoverable error raised by the library inherits from
:class:`Error`, so callers can catch the whole family with one clause
while test suites still tell the individual kinds apart.

Hierarchy
---------
Error
├── InvalidArgumentError
└── AssertionFailureError

SystemExit
└── ProcessExitSignal

:class:`ProcessExitSignal` sits outside :class:`Error` on purpose: an
``except Error`` (or ``except Exception``) clause in embedding code must
not swallow an abort.  Catch it by name to intercept the exit.
"""

from __future__ import annotations

from abort_if import exit_codes


class Error(Exception):
    """Base exception for all recoverable abort-if errors."""


# --- Caller misuse ---------------------------------------------------------

class InvalidArgumentError(Error):
    """Raised when a helper is called with an argument it cannot check.

    Signals a programming bug at the call site (a collection lacking the
    required capability, or an empty key list), never a data violation.
    """


# --- Condition violations --------------------------------------------------

class AssertionFailureError(Error):
    """Raised when any assert or refute helper fails."""


# --- Abort guards ----------------------------------------------------------

class ProcessExitSignal(SystemExit):
    """Raised by the abort guards after the fatal message is logged.

    Left uncaught, the interpreter exits with :attr:`status` and prints
    no traceback.  Embedding code and tests may intercept it to inspect
    :attr:`status` and :attr:`message`.
    """

    def __init__(self, message: str = "", status: int = exit_codes.ABORT) -> None:
        super().__init__(status)
        self.status: int = status
        """Process exit status (always ``1`` for the built-in guards)."""
        self.message: str = message
        """The fatal message that was written to the logger."""

    def __str__(self) -> str:
        return self.message
