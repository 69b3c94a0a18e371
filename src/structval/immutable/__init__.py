"""Immutable value classes.

Exports the ``immutable`` decorator, the ``ImmutableOptions`` flags and the
``prop`` / ``NullCheck`` property declarations.
"""
from __future__ import annotations

from structval.immutable.decorator import immutable
from structval.immutable.options import ImmutableOptions, NullCheck, PropertySpec, prop

__all__ = ["ImmutableOptions", "NullCheck", "PropertySpec", "immutable", "prop"]
