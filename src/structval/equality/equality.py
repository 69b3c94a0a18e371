"""Deep structural equality.

``EqualityEngine.equal`` compares two arbitrary values:

1. ``None`` equals only ``None``.
2. Optional values are equal when their tags match and, when present,
   their contents are deeply equal under the same engine.
3. Values whose own ``==`` already reports equal are equal.
4. Pairs are equal when their keys and their values are deeply equal,
   whatever the concrete pair types are. A pair never equals a non-pair,
   even one that is iterable.
5. Mappings are equal when they hold the same keys with deeply equal
   values. Keys are matched with the keys' own ``==`` and ``hash``; only
   the values are compared structurally.
6. Sets are equal when every element of one has a deeply equal, not yet
   matched element in the other, regardless of iteration order.
7. Other traversable values are compared element by element, in lockstep;
   both must exhaust together, and a known length mismatch short-circuits.
8. Anything else is unequal.

Ordered sequences and unordered collections (mappings, sets) are never
compared with each other: their hash contributions are computed
differently, and equal values must hash equal.

Usage
-----
::

    from structval.equality import equal

    equal([1, [2, 3]], (1, (2, 3)))   # True
    equal([1, 2], [1, 2, 3])          # False
"""
from __future__ import annotations

from collections.abc import Mapping, Set
from itertools import zip_longest
from typing import Any

from structval.optional.optional import OptionalValue
from structval.pairs.detector import PairDetector
from structval.traversal import is_traversable, is_unordered, iter_elements, known_length

_EXHAUSTED = object()


class EqualityEngine:
    """Deep equality over scalars, pairs and sequences.

    Parameters
    ----------
    detector:
        The pair detector to classify values with.
    """

    def __init__(self, detector: PairDetector) -> None:
        self._detector = detector

    def equal(self, a: Any, b: Any) -> bool:
        """Return True if ``a`` and ``b`` are structurally equal."""
        if a is None or b is None:
            return a is None and b is None
        if isinstance(a, OptionalValue) or isinstance(b, OptionalValue):
            return self._equal_optionals(a, b)
        if a is b or a == b:
            return True

        a_pair = self._detector.detect(a)
        b_pair = self._detector.detect(b)
        if a_pair is not None or b_pair is not None:
            if a_pair is None or b_pair is None:
                return False
            return self.equal(a_pair[0], b_pair[0]) and self.equal(a_pair[1], b_pair[1])

        if not (is_traversable(a) and is_traversable(b)):
            return False
        if is_unordered(a) != is_unordered(b):
            return False
        if isinstance(a, Mapping) and isinstance(b, Mapping):
            return self._equal_mappings(a, b)
        if isinstance(a, Set) and isinstance(b, Set):
            return self._equal_sets(a, b)
        return self._equal_sequences(a, b)

    def _equal_optionals(self, a: Any, b: Any) -> bool:
        if not (isinstance(a, OptionalValue) and isinstance(b, OptionalValue)):
            return False
        if a.has_value != b.has_value:
            return False
        return not a.has_value or self.equal(a.value(), b.value())

    def _equal_mappings(self, a: Mapping[Any, Any], b: Mapping[Any, Any]) -> bool:
        if len(a) != len(b):
            return False
        for key, value in a.items():
            if key not in b or not self.equal(value, b[key]):
                return False
        return True

    def _equal_sets(self, a: Set[Any], b: Set[Any]) -> bool:
        if len(a) != len(b):
            return False
        unmatched = list(b)
        for x in a:
            for i, y in enumerate(unmatched):
                if self.equal(x, y):
                    del unmatched[i]
                    break
            else:
                return False
        return True

    def _equal_sequences(self, a: Any, b: Any) -> bool:
        len_a, len_b = known_length(a), known_length(b)
        if len_a is not None and len_b is not None and len_a != len_b:
            return False
        for x, y in zip_longest(iter_elements(a), iter_elements(b), fillvalue=_EXHAUSTED):
            if x is _EXHAUSTED or y is _EXHAUSTED:
                return False
            if not self.equal(x, y):
                return False
        return True


def equal(a: Any, b: Any) -> bool:
    """Convenience function: deep equality using the default semantics."""
    from structval.semantics import default_semantics

    return default_semantics().equal(a, b)
