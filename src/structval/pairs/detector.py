"""Pair detection with a per-shape lookup cache.

``PairDetector.detect`` answers "is this value a key/value entry, and if so
what are its two components?". The classification depends only on the
value's type, so the adapter lookup is done once per type and memoised in a
``ShapeCache``. The cache belongs to the detector instance; there is no
process-wide singleton.

Usage
-----
::

    from structval.pairs import Pair, PairDetector

    detector = PairDetector()
    detector.detect(Pair(1, "x"))   # (1, 'x')
    detector.detect([1, "x"])       # None
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Final, Union

from structval.pairs.types import Extractor

if TYPE_CHECKING:
    from structval.plugins.registry import PairAdapterRegistry

logger = logging.getLogger(__name__)


class _NotAPair:
    """Cache marker for shapes known to have no pair adapter."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NOT_A_PAIR"


NOT_A_PAIR: Final = _NotAPair()

CacheEntry = Union[Extractor, _NotAPair]


class ShapeCache:
    """Append-only ``type -> adapter`` cache safe for concurrent use.

    Reads never take the lock. Writers compute outside the lock and insert
    with first-write-wins semantics, so two threads racing on the same shape
    may both compute, but every reader sees either no entry or a complete one.

    Parameters
    ----------
    generation:
        The registry generation the cached answers were computed against.
    """

    def __init__(self, generation: int = 0) -> None:
        self.generation = generation
        self._entries: dict[type, CacheEntry] = {}
        self._lock = threading.Lock()

    def get_or_compute(self, shape: type, compute: Callable[[type], CacheEntry]) -> CacheEntry:
        """Return the cached entry for ``shape``, computing it on first use."""
        entry = self._entries.get(shape)
        if entry is not None:
            return entry
        computed = compute(shape)
        with self._lock:
            return self._entries.setdefault(shape, computed)

    def __contains__(self, shape: object) -> bool:
        return shape in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class PairDetector:
    """Detects and decomposes pair-shaped values.

    Parameters
    ----------
    registry:
        Adapter registry to consult. Defaults to a fresh registry holding
        only the built-in ``PairLike`` adapter.
    """

    def __init__(self, registry: PairAdapterRegistry | None = None) -> None:
        from structval.plugins.registry import PairAdapterRegistry

        self._registry = registry if registry is not None else PairAdapterRegistry.with_defaults()
        self._cache = ShapeCache(self._registry.generation)

    @property
    def registry(self) -> PairAdapterRegistry:
        return self._registry

    @property
    def cache(self) -> ShapeCache:
        """The shape cache for the registry's current generation."""
        cache = self._cache
        if cache.generation != self._registry.generation:
            cache = ShapeCache(self._registry.generation)
            self._cache = cache
        return cache

    def register(self, shape: type, extractor: Extractor) -> None:
        """Teach the detector a new pair shape.

        ``extractor(value)`` must return the ``(key, value)`` tuple. Any
        previously cached answers are discarded.
        """
        self._registry.register_adapter(shape, extractor)

    def detect(self, value: Any) -> tuple[Any, Any] | None:
        """Return ``(key, value)`` when ``value`` is a pair, else ``None``.

        An adapter that fails with ``AttributeError`` (a value that looks
        like a pair but lacks an accessor) yields ``None``.
        """
        entry = self.cache.get_or_compute(type(value), self._classify)
        if entry is NOT_A_PAIR:
            return None
        try:
            return entry(value)  # type: ignore[operator]
        except AttributeError:
            logger.debug("Value of type %s is missing a pair accessor", type(value).__qualname__)
            return None

    def is_pair(self, value: Any) -> bool:
        return self.detect(value) is not None

    def _classify(self, shape: type) -> CacheEntry:
        extractor = self._registry.resolve(shape)
        logger.debug(
            "Classified %s as %s",
            shape.__qualname__,
            "pair" if extractor is not None else "not a pair",
        )
        return extractor if extractor is not None else NOT_A_PAIR
