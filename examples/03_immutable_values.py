#!/usr/bin/env python3
"""Example: Immutable value classes

Demonstrates the ``@immutable`` decorator: generated structural equality,
hashing and string form, computed and null-checked properties, and
partial updates with ``with_`` and ``ABSENT``.

Usage:
    python examples/03_immutable_values.py

Requirements:
    pip install structval
"""
from __future__ import annotations

from structval import ABSENT, ImmutableOptions, NullCheck, NullPropertyError, Present, immutable, prop


@immutable
class Address:
    street: str = prop(not_null=NullCheck.PRE)
    city: str = prop(not_null=NullCheck.PRE)
    unit: str | None = None


@immutable
class Invoice:
    number: str
    lines: list[int]
    total: int = prop(computed=True)

    def __post_init__(self) -> None:
        object.__setattr__(self, "total", sum(self.lines))


@immutable(options=ImmutableOptions.DISABLE_GET_HASH_CODE)
class Draft:
    body: list[str]


def main() -> None:
    home = Address("1 Main St", "Springfield", unit="4B")
    print(home)

    # with_: plain values and Present replace; ABSENT keeps the current value
    moved = home.with_(street="9 Elm St", city=ABSENT, unit=Present(None))
    print(moved)

    # Null checks run on construction and on every copy
    try:
        home.with_(city=None)
    except NullPropertyError as exc:
        print(f"rejected: {exc}")

    # Lists inside properties compare and hash structurally
    a = Invoice("INV-1", [10, 20])
    b = Invoice("INV-1", [10, 20])
    print(a, a == b, hash(a) == hash(b))
    print(a.with_(lines=[5]).total)

    # Opting out of hashing keeps structural equality but forbids hash()
    print(Draft(["x"]) == Draft(["x"]))


if __name__ == "__main__":
    main()
