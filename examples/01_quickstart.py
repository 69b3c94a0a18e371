#!/usr/bin/env python3
"""Example: Quickstart — structval

Minimal working example: compare nested values structurally, hash them
consistently with that equality, and render their canonical form.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install structval
"""
from __future__ import annotations

import structval
from structval import Pair


def main() -> None:
    print(f"structval version: {structval.__version__}")

    left = {"order": 7, "lines": [Pair("sku-1", [1, None]), Pair("sku-2", [])]}
    right = {"lines": (Pair("sku-1", (1, None)), Pair("sku-2", ())), "order": 7}

    # Step 1: Builtin equality sees different container types
    print(f"left == right:               {left == right}")

    # Step 2: Structural equality only looks at the content
    print(f"structval.equal(left, right): {structval.equal(left, right)}")

    # Step 3: Equal values produce equal hash contributions
    print(f"hash_of(left):  {structval.hash_of(left)}")
    print(f"hash_of(right): {structval.hash_of(right)}")

    # Step 4: Canonical textual form
    print(f"format_value(left): {structval.format_value(left)}")
    print(structval.format_composite("Order", [("id", 7), ("lines", left["lines"])]))


if __name__ == "__main__":
    main()
