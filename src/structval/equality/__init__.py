"""Deep equality module.

Exports the ``EqualityEngine`` class and the ``equal`` convenience function.
"""
from __future__ import annotations

from structval.equality.equality import EqualityEngine, equal

__all__ = ["EqualityEngine", "equal"]
