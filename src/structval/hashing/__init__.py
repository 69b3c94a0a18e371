"""Combinable hash module.

Exports the ``HashEngine`` class, the ``hash_of`` and ``combine``
convenience functions and the folding constants.
"""
from __future__ import annotations

from structval.hashing.hashing import PRIME, SEED, HashEngine, combine, fold, hash_of

__all__ = ["PRIME", "SEED", "HashEngine", "combine", "fold", "hash_of"]
