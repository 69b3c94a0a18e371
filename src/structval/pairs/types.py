"""Pair shapes: the explicit capability the engines use to spot key/value entries.

A value is treated as a pair only when its type has a registered adapter
(see ``structval.plugins.registry``). Two shapes are understood out of the
box:

- ``Pair``, the entry type produced when a mapping is traversed.
- Any subclass of the ``PairLike`` ABC, including virtual subclasses added
  with ``PairLike.register``.

Both expose two read-only attributes, ``key`` and ``value``.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

Extractor = Callable[[Any], tuple[Any, Any]]
"""Decomposes a pair-shaped value into its ``(key, value)`` components."""


class PairLike(ABC):
    """Capability interface for values that look like a map entry.

    Subclass it, or register an existing class as a virtual subclass::

        PairLike.register(MyEntry)
    """

    @property
    @abstractmethod
    def key(self) -> Any:
        """The entry's key."""

    @property
    @abstractmethod
    def value(self) -> Any:
        """The entry's value."""


@dataclass(frozen=True, slots=True)
class Pair:
    """A plain ``(key, value)`` entry.

    Mappings are traversed as a sequence of ``Pair`` objects, one per item,
    in the mapping's iteration order.
    """

    key: Any
    value: Any


PairLike.register(Pair)


def attribute_extractor(value: Any) -> tuple[Any, Any]:
    """Read ``key`` and ``value`` attributes.

    Raises ``AttributeError`` when either accessor is missing; the detector
    treats that as "not a pair".
    """
    return value.key, value.value
