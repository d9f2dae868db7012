"""Exit-code constants used by the abort guards.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

ABORT: int = 1
"""An abort guard fired.  The fatal message was written to stderr."""
