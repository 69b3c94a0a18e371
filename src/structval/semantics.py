"""``ValueSemantics``: one pair detector shared by the three engines.

A ``ValueSemantics`` instance owns its shape cache, so independent callers
can hold independent configurations (for example with extra pair adapters)
without touching global state. The module-level convenience functions
across structval use ``default_semantics()``, created on first use with the
built-in adapters plus any installed "structval.pair_adapters" entry-points.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import Any

from structval.equality.equality import EqualityEngine
from structval.formatter.formatter import StringFormatter
from structval.hashing.hashing import HashEngine
from structval.pairs.detector import PairDetector
from structval.pairs.types import Extractor

logger = logging.getLogger(__name__)


class ValueSemantics:
    """Equality, hashing and formatting bound to a single ``PairDetector``.

    Parameters
    ----------
    detector:
        The pair detector to use. A new default detector is created when
        omitted.
    """

    def __init__(self, detector: PairDetector | None = None) -> None:
        self.detector = detector if detector is not None else PairDetector()
        self.equality = EqualityEngine(self.detector)
        self.hashing = HashEngine(self.detector)
        self.formatter = StringFormatter(self.detector)

    def register_pair(self, shape: type, extractor: Extractor) -> None:
        """Register an extra pair shape on this instance's detector."""
        self.detector.register(shape, extractor)

    def equal(self, a: Any, b: Any) -> bool:
        return self.equality.equal(a, b)

    def hash_of(self, value: Any) -> int:
        return self.hashing.hash_of(value)

    def combine(self, *values: Any) -> int:
        return self.hashing.combine(*values)

    def format_value(self, value: Any) -> str:
        return self.formatter.format_value(value)

    def format_composite(self, type_name: str, props: Iterable[tuple[str, Any]]) -> str:
        return self.formatter.format_composite(type_name, props)

    def __repr__(self) -> str:
        return f"ValueSemantics(adapters={self.detector.registry.list_adapters()})"


_default: ValueSemantics | None = None
_default_lock = threading.Lock()


def default_semantics() -> ValueSemantics:
    """Return the shared default ``ValueSemantics``, creating it on first use."""
    global _default
    semantics = _default
    if semantics is not None:
        return semantics
    with _default_lock:
        if _default is None:
            detector = PairDetector()
            detector.registry.load_entrypoints()
            _default = ValueSemantics(detector)
            logger.debug("Created default value semantics: %r", _default)
        return _default
