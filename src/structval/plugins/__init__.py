"""Plugin subsystem for structval.

The registry module provides the pair adapter registration surface.
Third-party packages contribute pair shapes via ``importlib.metadata``
entry-points under the "structval.pair_adapters" group.

Example
-------
Declare an adapter in pyproject.toml:

.. code-block:: toml

    [project.entry-points."structval.pair_adapters"]
    entry = "my_package.graph:Entry"
"""
from __future__ import annotations

from structval.plugins.registry import ENTRY_POINT_GROUP, PairAdapterRegistry

__all__ = ["ENTRY_POINT_GROUP", "PairAdapterRegistry"]
