"""Pair shapes and detection.

Exports the ``PairLike`` capability, the ``Pair`` entry type, the
``ShapeCache`` and the ``PairDetector``.
"""
from __future__ import annotations

from structval.pairs.detector import NOT_A_PAIR, PairDetector, ShapeCache
from structval.pairs.types import Extractor, Pair, PairLike, attribute_extractor

__all__ = [
    "NOT_A_PAIR",
    "Extractor",
    "Pair",
    "PairDetector",
    "PairLike",
    "ShapeCache",
    "attribute_extractor",
]
