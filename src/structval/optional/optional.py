"""Tri-state override values for partial updates.

An ``OptionalValue`` is either ``ABSENT`` ("no override supplied") or
``Present(x)`` ("replace with x"), where ``x`` may itself be ``None``. A
plain ``T | None`` parameter cannot tell "leave it alone" from "set it to
None"; this type can.

Every engine handles optional values itself, so a ``ValueSemantics`` with
extra pair adapters compares, hashes and formats their contents with those
adapters. The ``==``, ``hash()`` and ``repr()`` operators use
``default_semantics()``:

- ``ABSENT == ABSENT``; ``Present(a) == Present(b)`` iff ``equal(a, b)``.
- A present value never equals an absent one.
- ``hash(ABSENT) == combine(False)``; ``hash(Present(v)) == combine(True, v)``.
- ``repr(ABSENT) == "Absent"``; ``repr(Present([1]))  == "Present([ 1 ])"``.

Usage
-----
::

    from structval.optional import ABSENT, Present, as_optional

    Present(None).has_value      # True
    ABSENT.value_or(3)           # 3
    as_optional(5)               # Present(5)
    as_optional(ABSENT)          # Absent
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from structval.errors import AbsentValueError

T = TypeVar("T")


class OptionalValue(ABC, Generic[T]):
    """Base of the ``Present`` / ``Absent`` union."""

    __slots__ = ()

    @property
    @abstractmethod
    def has_value(self) -> bool:
        """True when a value (possibly ``None``) is held."""

    @abstractmethod
    def value(self) -> T:
        """Return the held value.

        Raises
        ------
        AbsentValueError
            If called on ``ABSENT``.
        """

    def value_or(self, default: T) -> T:
        """Return the held value, or ``default`` when absent. Never raises."""
        return self.value() if self.has_value else default

    @staticmethod
    def absent() -> "Absent":
        return ABSENT

    @staticmethod
    def of(value: T) -> "Present[T]":
        return Present(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionalValue):
            return NotImplemented
        if self.has_value != other.has_value:
            return False
        if not self.has_value:
            return True
        from structval.semantics import default_semantics

        return default_semantics().equal(self.value(), other.value())

    def __hash__(self) -> int:
        from structval.semantics import default_semantics

        if not self.has_value:
            return default_semantics().combine(False)
        return default_semantics().combine(True, self.value())


@dataclass(frozen=True, eq=False, repr=False)
class Present(OptionalValue[T]):
    """An override that was supplied."""

    content: T

    @property
    def has_value(self) -> bool:
        return True

    def value(self) -> T:
        return self.content

    def __repr__(self) -> str:
        from structval.semantics import default_semantics

        return f"Present({default_semantics().format_value(self.content)})"


class Absent(OptionalValue[Any]):
    """No override supplied. ``ABSENT`` is the only instance."""

    __slots__ = ()
    _instance: "Absent | None" = None

    def __new__(cls) -> "Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def has_value(self) -> bool:
        return False

    def value(self) -> Any:
        raise AbsentValueError()

    def __repr__(self) -> str:
        return "Absent"

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = Absent()


def present(value: T) -> Present[T]:
    """Wrap ``value`` as a supplied override."""
    return Present(value)


def as_optional(value: "T | OptionalValue[T]") -> OptionalValue[T]:
    """Pass an ``OptionalValue`` through; wrap anything else as ``Present``."""
    if isinstance(value, OptionalValue):
        return value
    return Present(value)
