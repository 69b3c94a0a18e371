#!/usr/bin/env python3
"""Example: Custom pair shapes

Demonstrates teaching structval about your own key/value types, either by
subclassing ``PairLike`` or by registering an extractor on an isolated
``ValueSemantics`` instance.

Usage:
    python examples/02_custom_pairs.py

Requirements:
    pip install structval
"""
from __future__ import annotations

import structval
from structval import Pair, PairLike, ValueSemantics


class Setting(PairLike):
    """A configuration entry that is a pair through ``PairLike``."""

    def __init__(self, name: str, raw: object) -> None:
        self._name = name
        self._raw = raw

    @property
    def key(self) -> str:
        return self._name

    @property
    def value(self) -> object:
        return self._raw


class Edge:
    """A graph edge with its own attribute names."""

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target


def main() -> None:
    # PairLike subclasses work with the default semantics
    print(structval.equal(Setting("retries", [3]), Pair("retries", (3,))))
    print(structval.format_value([Setting("timeout", 30), Setting("proxy", None)]))

    # Other shapes are registered on an isolated instance
    graph = ValueSemantics()
    graph.register_pair(Edge, lambda e: (e.source, e.target))
    edges = [Edge("a", "b"), Edge("b", "c")]
    print(graph.format_value(edges))
    print(graph.equal(edges, [Pair("a", "b"), Pair("b", "c")]))

    # The default semantics do not know about Edge
    print(structval.equal(edges[0], Pair("a", "b")))


if __name__ == "__main__":
    main()
