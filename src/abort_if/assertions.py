"""Assertion helpers: raise a typed failure when a condition is violated.

Two kinds of error come out of this module and callers must keep them
apart:

* :class:`~abort_if.exceptions.InvalidArgumentError`: the helper was
  handed something it cannot check (a collection missing the needed
  capability, or no keys at all).  A bug at the call site.
* :class:`~abort_if.exceptions.AssertionFailureError`: the checked
  condition does not hold.  A data or state violation.

None of these helpers log or exit; see :mod:`abort_if.guards` for that.
"""

from __future__ import annotations

from collections.abc import Container, Iterable, Mapping, Sequence, Sized
from typing import Any

from abort_if.exceptions import AssertionFailureError, InvalidArgumentError
from abort_if.protocols import SupportsKeyedLookup

_DEFAULT_MESSAGE = "Assertion failed"

# ``in`` falls back to iteration, so plain iterables qualify too.
_MEMBERSHIP = (Container, Iterable)


# ---------------------------------------------------------------------------
# Message rendering
# ---------------------------------------------------------------------------

def render_message(message: str, args: Sequence[Any]) -> str:
    """Substitute *args*, in order, into the printf-style *message*.

    A placeholder/argument count or type mismatch raises the
    ``TypeError`` / ``ValueError`` from ``%`` formatting unchanged.
    """
    return message % tuple(args)


# ---------------------------------------------------------------------------
# Plain conditions
# ---------------------------------------------------------------------------

def assert_(condition: Any, message: str = _DEFAULT_MESSAGE, *args: Any) -> None:
    """Raise :class:`AssertionFailureError` unless *condition* is truthy.

    *message* is interpolated with *args* only when the assertion fails.

    Examples
    --------
    >>> a, b = 1, 1
    >>> assert_(a == b, "%d should equal %d", a, b)
    >>> assert_([], "List should not be empty, had %d items", 0)
    Traceback (most recent call last):
    ...
    abort_if.exceptions.AssertionFailureError: List should not be empty, had 0 items
    """
    if not condition:
        raise AssertionFailureError(render_message(message, args))


def refute(condition: Any, message: str = _DEFAULT_MESSAGE, *args: Any) -> None:
    """Raise :class:`AssertionFailureError` if *condition* is truthy."""
    assert_(not condition, message, *args)


# ---------------------------------------------------------------------------
# Capability checks
# ---------------------------------------------------------------------------

def _require(coll: Any, capability: type | tuple[type, ...], name: str) -> None:
    if not isinstance(coll, capability):
        raise InvalidArgumentError(
            f"{type(coll).__name__!r} object does not support {name}"
        )


def _lookup(coll: SupportsKeyedLookup, key: Any) -> Any:
    try:
        return coll[key]
    except LookupError:
        return None


# ---------------------------------------------------------------------------
# Collection helpers
# ---------------------------------------------------------------------------

def assert_includes(coll: Any, obj: Any) -> None:
    """Assert that *coll* contains *obj*.

    Any container or iterable is accepted.  A one-shot iterator such as
    a generator is consumed up to the first match.

    Raises
    ------
    InvalidArgumentError
        If *coll* does not support ``in``.
    AssertionFailureError
        If *obj* is not in *coll*.
    """
    _require(coll, _MEMBERSHIP, "membership tests")
    assert_(obj in coll, "Expected coll to include obj")


def refute_includes(coll: Any, obj: Any) -> None:
    """Assert that *coll* does not contain *obj*."""
    _require(coll, _MEMBERSHIP, "membership tests")
    refute(obj in coll, "Expected coll not to include obj")


def assert_keys(coll: Any, *keys: Any) -> None:
    """Assert that every key in *keys* maps to a truthy value in *coll*.

    A key that is present but mapped to a falsy value (``None``,
    ``False``, ``0``, ``""``) fails just like a missing key.  Use
    :func:`assert_has_key` to check presence alone.

    Raises
    ------
    InvalidArgumentError
        If *coll* does not support ``coll[key]`` or no keys are given.
    AssertionFailureError
        If any key is missing or maps to a falsy value.
    """
    _require(coll, SupportsKeyedLookup, "keyed lookup")
    if not keys:
        raise InvalidArgumentError("assert_keys() requires at least one key")

    assert_(
        all(_lookup(coll, key) for key in keys),
        "Expected coll to include all keys",
    )


def assert_has_key(mapping: Any, key: Any) -> None:
    """Assert that *key* is present in *mapping*, whatever its value."""
    _require(mapping, Mapping, "key presence tests")
    assert_(key in mapping, "Expected hash to include key")


def refute_has_key(mapping: Any, key: Any) -> None:
    """Assert that *key* is absent from *mapping*."""
    _require(mapping, Mapping, "key presence tests")
    refute(key in mapping, "Expected hash not to include key")


def assert_length(coll: Any, length: int) -> None:
    """Assert that ``len(coll) == length``.

    The failure message reports the expected *length*.
    """
    _require(coll, Sized, "len()")
    assert_(len(coll) == length, "Expected coll to have %d items", length)
