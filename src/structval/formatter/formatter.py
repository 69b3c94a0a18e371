"""Canonical string formatting for values and composites.

Rendering rules:

- ``None`` renders as ``null``.
- A pair renders as ``(key, value)``.
- A sequence renders as ``[ a, b, c ]``; an empty one as ``[  ]``.
- A mapping is a sequence of pairs: ``[ (k1, v1), (k2, v2) ]``.
- An optional value renders as ``Absent`` or ``Present(value)``.
- Anything else renders with ``str()``.

``format_composite`` renders a named value object from its ordered
properties as ``Name { a=1, b=[ 2, 3 ] }``.

Usage
-----
::

    from structval.formatter import format_composite, format_value

    format_value([1, None, "x"])                  # '[ 1, null, x ]'
    format_composite("Point", [("x", 1), ("y", 2)])  # 'Point { x=1, y=2 }'
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from structval.optional.optional import OptionalValue
from structval.pairs.detector import PairDetector
from structval.traversal import is_traversable, iter_elements

_NULL = "null"
_ABSENT = "Absent"


class StringFormatter:
    """Produces the canonical textual form of values.

    Parameters
    ----------
    detector:
        The pair detector to classify values with.
    """

    def __init__(self, detector: PairDetector) -> None:
        self._detector = detector

    def format_value(self, value: Any) -> str:
        """Render a single value."""
        if value is None:
            return _NULL
        if isinstance(value, OptionalValue):
            if not value.has_value:
                return _ABSENT
            return f"Present({self.format_value(value.value())})"
        pair = self._detector.detect(value)
        if pair is not None:
            return f"({self.format_value(pair[0])}, {self.format_value(pair[1])})"
        if is_traversable(value):
            items = ", ".join(self.format_value(e) for e in iter_elements(value))
            return f"[ {items} ]"
        return str(value)

    def format_composite(self, type_name: str, props: Iterable[tuple[str, Any]]) -> str:
        """Render a named composite from ``(name, value)`` pairs, keeping their order.

        Parameters
        ----------
        type_name:
            The composite's type name, rendered first.
        props:
            Ordered property names and values.

        Returns
        -------
        str
            ``type_name { name=value, ... }``.
        """
        body = ", ".join(f"{name}={self.format_value(value)}" for name, value in props)
        return f"{type_name} {{ {body} }}"


def format_value(value: Any) -> str:
    """Convenience function: render ``value`` using the default semantics."""
    from structval.semantics import default_semantics

    return default_semantics().format_value(value)


def format_composite(type_name: str, props: Iterable[tuple[str, Any]]) -> str:
    """Convenience function: render a composite using the default semantics."""
    from structval.semantics import default_semantics

    return default_semantics().format_composite(type_name, props)
