"""Unit tests for structval.plugins.registry — PairAdapterRegistry, error types,
entry-point loading, and all public methods.
"""
from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest

from structval.errors import AdapterAlreadyRegisteredError, AdapterNotFoundError, StructvalError
from structval.pairs.types import Pair, PairLike, attribute_extractor
from structval.plugins.registry import ENTRY_POINT_GROUP, PairAdapterRegistry


# ---------------------------------------------------------------------------
# Test fixtures: pair-shaped classes
# ---------------------------------------------------------------------------


class Edge:
    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target


class LabelledEdge(Edge):
    pass


class Entry:
    def __init__(self, key: object, value: object) -> None:
        self.key = key
        self.value = value


class TypedEntry(PairLike):
    def __init__(self, key: object, value: object) -> None:
        self._key = key
        self._value = value

    @property
    def key(self) -> object:
        return self._key

    @property
    def value(self) -> object:
        return self._value


def _edge_extractor(edge: Edge) -> tuple[object, object]:
    return edge.source, edge.target


def _fresh_registry(name: str = "test") -> PairAdapterRegistry:
    """Return a new empty registry for each test."""
    return PairAdapterRegistry(name)


# ===========================================================================
# Error types
# ===========================================================================


class TestAdapterNotFoundError:
    def test_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            raise AdapterNotFoundError("pkg.Edge", "my-registry")

    def test_is_structval_error(self) -> None:
        assert isinstance(AdapterNotFoundError("pkg.Edge", "r"), StructvalError)

    def test_has_shape_and_registry_attributes(self) -> None:
        error = AdapterNotFoundError("pkg.Edge", "my-registry")
        assert error.shape_name == "pkg.Edge"
        assert error.registry_name == "my-registry"

    def test_message_contains_shape_name(self) -> None:
        assert "pkg.Edge" in str(AdapterNotFoundError("pkg.Edge", "my-registry"))


class TestAdapterAlreadyRegisteredError:
    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise AdapterAlreadyRegisteredError("pkg.Edge", "my-registry")

    def test_has_shape_and_registry_attributes(self) -> None:
        error = AdapterAlreadyRegisteredError("pkg.Edge", "my-registry")
        assert error.shape_name == "pkg.Edge"
        assert error.registry_name == "my-registry"


# ===========================================================================
# Construction and defaults
# ===========================================================================


class TestRegistryConstruction:
    def test_empty_registry_has_zero_length(self) -> None:
        assert len(_fresh_registry()) == 0

    def test_empty_registry_list_adapters_is_empty(self) -> None:
        assert _fresh_registry().list_adapters() == []

    def test_repr_contains_name(self) -> None:
        assert "adapters-under-test" in repr(_fresh_registry("adapters-under-test"))

    def test_with_defaults_registers_pair_like(self) -> None:
        registry = PairAdapterRegistry.with_defaults()
        assert PairLike in registry
        assert len(registry) == 1

    def test_with_defaults_resolves_pair(self) -> None:
        registry = PairAdapterRegistry.with_defaults()
        assert registry.resolve(Pair) is attribute_extractor

    def test_generation_starts_at_zero(self) -> None:
        assert _fresh_registry().generation == 0


# ===========================================================================
# register (decorator) and register_adapter
# ===========================================================================


class TestRegisterDecorator:
    def test_decorator_registers_and_returns_function(self) -> None:
        registry = _fresh_registry()

        @registry.register(Edge)
        def extract(edge: Edge) -> tuple[object, object]:
            return edge.source, edge.target

        assert callable(extract)
        assert registry.get(Edge) is extract

    def test_decorator_duplicate_raises_already_registered(self) -> None:
        registry = _fresh_registry()
        registry.register_adapter(Edge, _edge_extractor)

        with pytest.raises(AdapterAlreadyRegisteredError):
            @registry.register(Edge)
            def again(edge: Edge) -> tuple[object, object]:
                return edge.target, edge.source

    def test_decorator_logs_debug_message(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        with caplog.at_level(logging.DEBUG, logger="structval.plugins.registry"):
            registry.register(Edge)(_edge_extractor)
        assert "Edge" in caplog.text


class TestRegisterAdapter:
    def test_non_class_shape_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            _fresh_registry().register_adapter("Edge", _edge_extractor)  # type: ignore[arg-type]

    def test_non_callable_extractor_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            _fresh_registry().register_adapter(Edge, "nope")  # type: ignore[arg-type]

    def test_registration_bumps_generation(self) -> None:
        registry = _fresh_registry()
        registry.register_adapter(Edge, _edge_extractor)
        assert registry.generation == 1

    def test_failed_registration_keeps_generation(self) -> None:
        registry = _fresh_registry()
        registry.register_adapter(Edge, _edge_extractor)
        with pytest.raises(AdapterAlreadyRegisteredError):
            registry.register_adapter(Edge, _edge_extractor)
        assert registry.generation == 1


# ===========================================================================
# deregister / get
# ===========================================================================


class TestDeregisterAndGet:
    def test_deregister_removes_adapter(self) -> None:
        registry = _fresh_registry()
        registry.register_adapter(Edge, _edge_extractor)
        registry.deregister(Edge)
        assert Edge not in registry

    def test_deregister_bumps_generation(self) -> None:
        registry = _fresh_registry()
        registry.register_adapter(Edge, _edge_extractor)
        registry.deregister(Edge)
        assert registry.generation == 2

    def test_deregister_missing_raises_not_found(self) -> None:
        with pytest.raises(AdapterNotFoundError):
            _fresh_registry().deregister(Edge)

    def test_deregister_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        registry.register_adapter(Edge, _edge_extractor)
        with caplog.at_level(logging.DEBUG, logger="structval.plugins.registry"):
            registry.deregister(Edge)
        assert "Deregistered" in caplog.text

    def test_get_missing_raises_not_found(self) -> None:
        with pytest.raises(AdapterNotFoundError):
            _fresh_registry().get(Edge)

    def test_get_is_exact_not_inherited(self) -> None:
        registry = _fresh_registry()
        registry.register_adapter(Edge, _edge_extractor)
        with pytest.raises(AdapterNotFoundError):
            registry.get(LabelledEdge)


# ===========================================================================
# resolve
# ===========================================================================


class TestResolve:
    def test_resolve_unknown_returns_none(self) -> None:
        assert _fresh_registry().resolve(int) is None

    def test_resolve_follows_mro(self) -> None:
        registry = _fresh_registry()
        registry.register_adapter(Edge, _edge_extractor)
        assert registry.resolve(LabelledEdge) is _edge_extractor

    def test_most_specific_adapter_wins(self) -> None:
        registry = _fresh_registry()
        registry.register_adapter(Edge, _edge_extractor)

        def reversed_edge(edge: Edge) -> tuple[object, object]:
            return edge.target, edge.source

        registry.register_adapter(LabelledEdge, reversed_edge)
        assert registry.resolve(LabelledEdge) is reversed_edge
        assert registry.resolve(Edge) is _edge_extractor

    def test_resolve_real_pair_like_subclass(self) -> None:
        registry = PairAdapterRegistry.with_defaults()
        assert registry.resolve(TypedEntry) is attribute_extractor

    def test_resolve_virtual_pair_like_subclass(self) -> None:
        class VirtualEntry:
            key = 1
            value = 2

        PairLike.register(VirtualEntry)
        registry = PairAdapterRegistry.with_defaults()
        assert registry.resolve(VirtualEntry) is attribute_extractor

    def test_plain_attribute_class_is_not_a_pair_without_registration(self) -> None:
        registry = PairAdapterRegistry.with_defaults()
        assert registry.resolve(Entry) is None


# ===========================================================================
# list_adapters, __contains__, __len__
# ===========================================================================


class TestMagicMethods:
    def test_list_adapters_is_sorted_and_qualified(self) -> None:
        registry = _fresh_registry()
        registry.register_adapter(LabelledEdge, _edge_extractor)
        registry.register_adapter(Edge, _edge_extractor)
        names = registry.list_adapters()
        assert names == sorted(names)
        assert all(name.startswith(__name__) for name in names)

    def test_len_grows_with_registrations(self) -> None:
        registry = _fresh_registry()
        registry.register_adapter(Edge, _edge_extractor)
        registry.register_adapter(Entry, attribute_extractor)
        assert len(registry) == 2

    def test_contains_false_when_not_registered(self) -> None:
        assert Edge not in _fresh_registry()


# ===========================================================================
# load_entrypoints
# ===========================================================================


class TestLoadEntrypoints:
    def test_default_group_name(self) -> None:
        assert ENTRY_POINT_GROUP == "structval.pair_adapters"

    def test_empty_group_does_nothing(self) -> None:
        registry = _fresh_registry()
        with patch(
            "structval.plugins.registry.importlib.metadata.entry_points",
            return_value=[],
        ):
            registry.load_entrypoints()
        assert len(registry) == 0

    def test_registers_loaded_class_with_attribute_extractor(self) -> None:
        registry = _fresh_registry()
        mock_ep = MagicMock()
        mock_ep.name = "entry"
        mock_ep.load.return_value = Entry

        with patch(
            "structval.plugins.registry.importlib.metadata.entry_points",
            return_value=[mock_ep],
        ):
            registry.load_entrypoints()

        assert registry.get(Entry) is attribute_extractor

    def test_skips_already_registered(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        registry.register_adapter(Entry, attribute_extractor)
        mock_ep = MagicMock()
        mock_ep.name = "existing-entry"
        mock_ep.load.return_value = Entry

        with patch(
            "structval.plugins.registry.importlib.metadata.entry_points",
            return_value=[mock_ep],
        ):
            with caplog.at_level(logging.DEBUG, logger="structval.plugins.registry"):
                registry.load_entrypoints()

        assert "existing-entry" in caplog.text
        assert len(registry) == 1

    def test_handles_load_exception_gracefully(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        mock_ep = MagicMock()
        mock_ep.name = "bad-entry"
        mock_ep.load.side_effect = ImportError("no module named bad_thing")

        with patch(
            "structval.plugins.registry.importlib.metadata.entry_points",
            return_value=[mock_ep],
        ):
            with caplog.at_level(logging.ERROR, logger="structval.plugins.registry"):
                registry.load_entrypoints()

        assert len(registry) == 0
        assert "bad-entry" in caplog.text

    def test_non_class_entry_point_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        mock_ep = MagicMock()
        mock_ep.name = "not-a-class"
        mock_ep.load.return_value = "just a string"

        with patch(
            "structval.plugins.registry.importlib.metadata.entry_points",
            return_value=[mock_ep],
        ):
            with caplog.at_level(logging.WARNING, logger="structval.plugins.registry"):
                registry.load_entrypoints()

        assert len(registry) == 0
        assert "not-a-class" in caplog.text

    def test_is_idempotent(self) -> None:
        registry = _fresh_registry()
        mock_ep = MagicMock()
        mock_ep.name = "stable-entry"
        mock_ep.load.return_value = Entry

        with patch(
            "structval.plugins.registry.importlib.metadata.entry_points",
            return_value=[mock_ep],
        ):
            registry.load_entrypoints()
            registry.load_entrypoints()

        assert len(registry) == 1
