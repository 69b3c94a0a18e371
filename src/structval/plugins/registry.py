"""Pair adapter registry for structval.

A pair adapter tells the engines how to split a value of a given type into
its ``(key, value)`` components. Adapters are keyed by type and resolved
through the value's MRO, so registering an adapter for a base class covers
its subclasses too.

Third-party packages can contribute adapters by declaring entry-points in
their own ``pyproject.toml`` under the "structval.pair_adapters" group.
Each entry-point names a class exposing ``key`` and ``value`` attributes.

Example
-------
Register an adapter with the decorator::

    from structval.plugins.registry import PairAdapterRegistry

    registry = PairAdapterRegistry.with_defaults()

    @registry.register(Edge)
    def _edge(edge: Edge) -> tuple[object, object]:
        return edge.source, edge.target

Load all installed adapters via entry-points::

    registry.load_entrypoints("structval.pair_adapters")

Declare one in a downstream package::

    [project.entry-points."structval.pair_adapters"]
    entry = "my_package.graph:Entry"
"""
from __future__ import annotations

import importlib.metadata
import logging
import threading
from collections.abc import Callable

from structval.errors import AdapterAlreadyRegisteredError, AdapterNotFoundError
from structval.pairs.types import Extractor, PairLike, attribute_extractor

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "structval.pair_adapters"


def _shape_name(shape: type) -> str:
    return f"{shape.__module__}.{shape.__qualname__}"


class PairAdapterRegistry:
    """Thread-safe mapping from a type to its pair extractor.

    Every mutation bumps ``generation`` so that detectors caching lookups
    against this registry know when to start a fresh cache.

    Parameters
    ----------
    name:
        A human-readable name for this registry (used in error messages).
    """

    def __init__(self, name: str = "pair-adapters") -> None:
        self._name = name
        self._adapters: dict[type, Extractor] = {}
        self._lock = threading.Lock()
        self._generation = 0

    @classmethod
    def with_defaults(cls, name: str = "pair-adapters") -> "PairAdapterRegistry":
        """Return a registry pre-loaded with the ``PairLike`` adapter.

        ``Pair`` is a virtual ``PairLike`` subclass, so it is covered too.
        """
        registry = cls(name)
        registry.register_adapter(PairLike, attribute_extractor)
        return registry

    @property
    def name(self) -> str:
        return self._name

    @property
    def generation(self) -> int:
        """Monotonic counter incremented on every registration change."""
        return self._generation

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, shape: type) -> Callable[[Extractor], Extractor]:
        """Return a decorator that registers the decorated extractor for ``shape``.

        Parameters
        ----------
        shape:
            The type whose instances the extractor decomposes.

        Returns
        -------
        Callable[[Extractor], Extractor]
            A decorator that registers the function and returns it unchanged.

        Raises
        ------
        AdapterAlreadyRegisteredError
            If ``shape`` already has an adapter in this registry.
        TypeError
            If ``shape`` is not a class.
        """

        def decorator(extractor: Extractor) -> Extractor:
            self.register_adapter(shape, extractor)
            return extractor

        return decorator

    def register_adapter(self, shape: type, extractor: Extractor) -> None:
        """Register ``extractor`` for ``shape`` without decorator syntax.

        Raises
        ------
        AdapterAlreadyRegisteredError
            If ``shape`` already has an adapter in this registry.
        TypeError
            If ``shape`` is not a class or ``extractor`` is not callable.
        """
        if not isinstance(shape, type):
            raise TypeError(f"Cannot register a pair adapter for {shape!r}: it is not a class.")
        if not callable(extractor):
            raise TypeError(
                f"Cannot register {extractor!r} for {_shape_name(shape)}: it is not callable."
            )
        with self._lock:
            if shape in self._adapters:
                raise AdapterAlreadyRegisteredError(_shape_name(shape), self._name)
            self._adapters[shape] = extractor
            self._generation += 1
        logger.debug(
            "Registered pair adapter for %s in registry %r",
            _shape_name(shape),
            self._name,
        )

    def deregister(self, shape: type) -> None:
        """Remove the adapter registered for ``shape``.

        Raises
        ------
        AdapterNotFoundError
            If ``shape`` has no adapter in this registry.
        """
        with self._lock:
            if shape not in self._adapters:
                raise AdapterNotFoundError(_shape_name(shape), self._name)
            del self._adapters[shape]
            self._generation += 1
        logger.debug("Deregistered pair adapter for %s from registry %r", _shape_name(shape), self._name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, shape: type) -> Extractor:
        """Return the extractor registered for exactly ``shape``.

        Raises
        ------
        AdapterNotFoundError
            If no adapter is registered for ``shape`` itself.
        """
        try:
            return self._adapters[shape]
        except KeyError:
            raise AdapterNotFoundError(_shape_name(shape), self._name) from None

    def resolve(self, shape: type) -> Extractor | None:
        """Return the adapter that applies to ``shape``, or ``None``.

        The most specific class in the MRO wins; ABC registrations (virtual
        subclasses) are consulted afterwards, in registration order.
        """
        with self._lock:
            adapters = dict(self._adapters)
        for base in shape.__mro__:
            extractor = adapters.get(base)
            if extractor is not None:
                return extractor
        for registered, extractor in adapters.items():
            if issubclass(shape, registered):
                return extractor
        return None

    def list_adapters(self) -> list[str]:
        """Return the fully-qualified names of all registered shapes, sorted."""
        with self._lock:
            return sorted(_shape_name(shape) for shape in self._adapters)

    def __contains__(self, shape: object) -> bool:
        return shape in self._adapters

    def __len__(self) -> int:
        return len(self._adapters)

    def __repr__(self) -> str:
        return f"PairAdapterRegistry(name={self._name!r}, adapters={self.list_adapters()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = ENTRY_POINT_GROUP) -> None:
        """Discover and register pair shapes declared as package entry-points.

        Each entry-point must resolve to a class exposing ``key`` and
        ``value`` attributes; it is registered with the attribute extractor.
        Shapes that are already registered are skipped with a debug-level
        log entry, which makes repeated calls idempotent.

        Parameters
        ----------
        group:
            The entry-point group name, "structval.pair_adapters" by default.
        """
        for ep in importlib.metadata.entry_points(group=group):
            try:
                shape = ep.load()
            except Exception:
                logger.exception(
                    "Failed to load entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                continue
            if isinstance(shape, type) and shape in self._adapters:
                logger.debug(
                    "Entry-point %r already registered in %r; skipping.",
                    ep.name,
                    self._name,
                )
                continue
            try:
                self.register_adapter(shape, attribute_extractor)
            except (AdapterAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered "
                    "in registry %r; skipping.",
                    ep.name,
                    self._name,
                )
