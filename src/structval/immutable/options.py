"""Generation options and property declarations for ``@immutable`` classes."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum, IntFlag, auto
from typing import Any

METADATA_KEY = "structval"


class ImmutableOptions(IntFlag):
    """Which methods ``@immutable`` wires onto a class. Flags combine with ``|``.

    NONE
        Wire everything: ``__eq__``, ``__hash__``, ``__repr__`` and ``with_``.
    DISABLE_EQUALS
        Keep identity equality.
    DISABLE_GET_HASH_CODE
        Do not generate ``__hash__``. When structural ``__eq__`` is still
        generated the class becomes unhashable, as Python requires.
    ENABLE_OPERATOR_EQUALS
        Accepted for parity with the other flags. ``__eq__`` already backs
        the ``==`` and ``!=`` operators, so no extra method is generated.
    DISABLE_TO_STRING
        Keep the default ``object`` representation.
    DISABLE_WITH
        Do not generate the ``with_`` partial-update method.
    """

    NONE = 0
    DISABLE_EQUALS = 1
    DISABLE_GET_HASH_CODE = 2
    ENABLE_OPERATOR_EQUALS = 4
    DISABLE_TO_STRING = 8
    DISABLE_WITH = 16


class NullCheck(Enum):
    """When a generated constructor rejects ``None`` for a property.

    NONE
        No check.
    PRE
        After the fields are assigned, before the class's own
        ``__post_init__`` runs.
    POST
        After the class's own ``__post_init__`` has run, for properties it
        fills in.
    """

    NONE = auto()
    PRE = auto()
    POST = auto()


@dataclass(frozen=True)
class PropertySpec:
    """structval settings stored in a dataclass field's metadata."""

    computed: bool = False
    not_null: NullCheck = NullCheck.NONE


_DEFAULT_SPEC = PropertySpec()


def prop(
    *,
    default: Any = dataclasses.MISSING,
    default_factory: Any = dataclasses.MISSING,
    computed: bool = False,
    not_null: NullCheck = NullCheck.NONE,
    compare: bool = True,
    repr: bool = True,  # noqa: A002
) -> Any:
    """Declare a property of an ``@immutable`` class.

    Parameters
    ----------
    default, default_factory:
        As for ``dataclasses.field``.
    computed:
        The property is derived (typically set in ``__post_init__``). It is
        left out of ``__init__``, equality, hashing, the string form and
        ``with_``.
    not_null:
        Request a generated null check, see ``NullCheck``.
    compare:
        ``False`` leaves the property out of equality and hashing only.
    repr:
        ``False`` leaves the property out of the string form only.

    Returns
    -------
    dataclasses.Field
        The field declaration.
    """
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        init=not computed,
        compare=compare and not computed,
        repr=repr and not computed,
        metadata={METADATA_KEY: PropertySpec(computed=computed, not_null=not_null)},
    )


def property_spec(f: dataclasses.Field[Any]) -> PropertySpec:
    """Return the structval settings of a field (defaults when undeclared)."""
    return f.metadata.get(METADATA_KEY, _DEFAULT_SPEC)
