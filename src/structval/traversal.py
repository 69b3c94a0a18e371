"""Shape classification shared by the equality, hash and formatting engines.

Text types are iterable in Python but are scalars here; every other
iterable is a sequence. Mappings are traversed as ``Pair`` entries so a
dictionary behaves like a sequence of key/value pairs.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Set, Sized
from typing import Any

from structval.pairs.types import Pair

_TEXT_TYPES = (str, bytes, bytearray, memoryview)


def is_traversable(value: Any) -> bool:
    """Return True if ``value`` is a non-text iterable."""
    return isinstance(value, Iterable) and not isinstance(value, _TEXT_TYPES)


def is_unordered(value: Any) -> bool:
    """Return True for mappings and sets, whose builtin equality ignores order."""
    return isinstance(value, (Mapping, Set))


def known_length(value: Any) -> int | None:
    """Return ``len(value)`` when it is cheaply knowable, else ``None``."""
    if isinstance(value, Sized):
        return len(value)
    return None


def iter_elements(value: Any) -> Iterator[Any]:
    """Iterate the elements of a traversable value exactly once."""
    if isinstance(value, Mapping):
        return (Pair(k, v) for k, v in value.items())
    return iter(value)
