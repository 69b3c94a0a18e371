"""Combinable hash contributions.

``HashEngine.combine`` folds contributions with the classic seed/prime
scheme::

    h = 17
    for v in values:
        h = h * 486187739 + hash_of(v)

using signed 32-bit wraparound arithmetic, so the same inputs give the same
result on every platform. ``hash_of`` recurses into pairs and sequences
exactly the way ``EqualityEngine`` does, which keeps the two consistent:
structurally equal values hash equal.

Notes
-----
- Sequence hashes are order-sensitive, mirroring sequence equality.
- An optional value contributes ``combine(False)`` when absent and
  ``combine(True, value)`` when present.
- Mappings and sets use Python's order-insensitive equality, so their
  element contributions are sorted before folding.
- Scalars contribute their builtin ``hash()``. ``str`` and ``bytes`` hashes
  are salted per process unless ``PYTHONHASHSEED`` is fixed; integers,
  ``None`` and booleans are stable everywhere.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Final

from structval.optional.optional import OptionalValue
from structval.pairs.detector import PairDetector
from structval.traversal import is_traversable, is_unordered, iter_elements

SEED: Final = 17
PRIME: Final = 486187739

_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def _wrap32(n: int) -> int:
    n &= _MASK
    return n - (_MASK + 1) if n & _SIGN_BIT else n


def fold(contributions: Iterable[int]) -> int:
    """Fold already-computed hash contributions; ``0`` for none."""
    h = SEED
    empty = True
    for c in contributions:
        h = _wrap32(h * PRIME + c)
        empty = False
    return 0 if empty else h


class HashEngine:
    """Hash contributions for scalars, pairs and sequences.

    Parameters
    ----------
    detector:
        The pair detector to classify values with.
    """

    def __init__(self, detector: PairDetector) -> None:
        self._detector = detector

    def hash_of(self, value: Any) -> int:
        """Return the hash contribution of a single value."""
        if value is None:
            return 0
        if isinstance(value, OptionalValue):
            if not value.has_value:
                return self.combine(False)
            return self.combine(True, value.value())
        pair = self._detector.detect(value)
        if pair is not None:
            return self.combine(pair[0], pair[1])
        if is_traversable(value):
            contributions = [self.hash_of(e) for e in iter_elements(value)]
            if is_unordered(value):
                contributions.sort()
            return fold(contributions)
        return hash(value)

    def combine(self, *values: Any) -> int:
        """Return the combined hash of ``values`` in order; ``0`` when empty."""
        return fold(self.hash_of(v) for v in values)


def hash_of(value: Any) -> int:
    """Convenience function: hash contribution using the default semantics."""
    from structval.semantics import default_semantics

    return default_semantics().hash_of(value)


def combine(*values: Any) -> int:
    """Convenience function: combined hash using the default semantics."""
    from structval.semantics import default_semantics

    return default_semantics().combine(*values)
