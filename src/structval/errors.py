"""Exception types raised by structval.

Every error is a ``StructvalError`` and also subclasses the builtin
exception a caller would naturally catch for the same condition, so
``except LookupError`` around ``OptionalValue.value()`` keeps working.

The engines themselves (equality, hash, formatting) never raise these;
failures there are programmer errors surfaced by Python itself, such as
``TypeError`` for an unhashable scalar or ``RecursionError`` for a cyclic
value graph.
"""
from __future__ import annotations


class StructvalError(Exception):
    """Base class for all structval errors."""


class AbsentValueError(StructvalError, LookupError):
    """Raised when the value of an absent ``OptionalValue`` is requested."""

    def __init__(self) -> None:
        super().__init__(
            "OptionalValue is absent and holds no value; "
            "check has_value or use value_or() instead."
        )


class NullPropertyError(StructvalError, ValueError):
    """Raised by a generated null check when a property is ``None``.

    Parameters
    ----------
    type_name:
        Name of the immutable class being constructed.
    property_name:
        Name of the property that was ``None``.
    """

    def __init__(self, type_name: str, property_name: str) -> None:
        self.type_name = type_name
        self.property_name = property_name
        super().__init__(f"{type_name}.{property_name} must not be None")


class AdapterNotFoundError(StructvalError, KeyError):
    """Raised when no pair adapter is registered for a type."""

    def __init__(self, shape_name: str, registry_name: str) -> None:
        self.shape_name = shape_name
        self.registry_name = registry_name
        super().__init__(
            f"No pair adapter for {shape_name!r} is registered in the "
            f"{registry_name!r} registry."
        )


class AdapterAlreadyRegisteredError(StructvalError, ValueError):
    """Raised when registering a pair adapter for a type that already has one."""

    def __init__(self, shape_name: str, registry_name: str) -> None:
        self.shape_name = shape_name
        self.registry_name = registry_name
        super().__init__(
            f"A pair adapter for {shape_name!r} is already registered in the "
            f"{registry_name!r} registry. "
            "Deregister the existing adapter first."
        )
