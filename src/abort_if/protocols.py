"""Capability interfaces checked by the assertion helpers.

Most capabilities map onto :mod:`collections.abc` directly:

* membership (``in``): :class:`~collections.abc.Container`
* length (``len``): :class:`~collections.abc.Sized`
* key presence: :class:`~collections.abc.Mapping`

Keyed lookup (``coll[key]``) has no ABC of its own, so it is expressed
here as a runtime-checkable protocol.  Any object that implements
``__getitem__`` satisfies it structurally (no explicit inheritance
required).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SupportsKeyedLookup(Protocol):
    """Contract for objects that can be indexed with ``obj[key]``.

    Implementations signal a missing key by raising a
    :class:`LookupError` subclass (``KeyError``, ``IndexError``).
    """

    def __getitem__(self, key: Any) -> Any:
        ...  # pragma: no cover
