"""structval — structural equality, hashing and formatting for value objects.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import structval
    from structval import ABSENT, immutable

    structval.equal([1, [2, 3]], (1, (2, 3)))        # True
    structval.format_value({"a": [1, None]})         # '[ (a, [ 1, null ]) ]'
    structval.combine(1, 2, 3) == structval.combine(1, 2, 3)   # True

    @immutable
    class Money:
        amount: int
        currency: str

    price = Money(10, "EUR")
    price.with_(amount=12, currency=ABSENT)          # Money { amount=12, currency=EUR }

    structval.__version__
    '0.1.0'
"""
from __future__ import annotations

__version__: str = "0.1.0"

from structval.equality.equality import EqualityEngine, equal
from structval.errors import (
    AbsentValueError,
    AdapterAlreadyRegisteredError,
    AdapterNotFoundError,
    NullPropertyError,
    StructvalError,
)
from structval.formatter.formatter import StringFormatter, format_composite, format_value
from structval.hashing.hashing import HashEngine, combine, hash_of
from structval.immutable import ImmutableOptions, NullCheck, immutable, prop
from structval.optional.optional import ABSENT, Absent, OptionalValue, Present, as_optional, present
from structval.pairs import Pair, PairDetector, PairLike, ShapeCache
from structval.plugins.registry import PairAdapterRegistry
from structval.semantics import ValueSemantics, default_semantics

__all__ = [
    "__version__",
    # engines
    "equal",
    "hash_of",
    "combine",
    "format_value",
    "format_composite",
    "EqualityEngine",
    "HashEngine",
    "StringFormatter",
    "ValueSemantics",
    "default_semantics",
    # pairs
    "Pair",
    "PairLike",
    "PairDetector",
    "PairAdapterRegistry",
    "ShapeCache",
    # optional values
    "ABSENT",
    "Absent",
    "OptionalValue",
    "Present",
    "present",
    "as_optional",
    # immutable classes
    "immutable",
    "prop",
    "ImmutableOptions",
    "NullCheck",
    # errors
    "StructvalError",
    "AbsentValueError",
    "NullPropertyError",
    "AdapterNotFoundError",
    "AdapterAlreadyRegisteredError",
]
