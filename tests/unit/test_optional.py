"""Unit tests for structval.optional — OptionalValue, Present and ABSENT."""
from __future__ import annotations

import copy
import pickle
from dataclasses import FrozenInstanceError

import pytest

from structval.equality import equal
from structval.errors import AbsentValueError, StructvalError
from structval.hashing import combine
from structval.optional import ABSENT, Absent, OptionalValue, Present, as_optional, present
from structval.pairs import Pair
from structval.semantics import ValueSemantics


# ===========================================================================
# ABSENT
# ===========================================================================


class TestAbsent:
    def test_has_no_value(self) -> None:
        assert not ABSENT.has_value

    def test_value_raises(self) -> None:
        with pytest.raises(AbsentValueError):
            ABSENT.value()

    def test_absent_value_error_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            ABSENT.value()
        assert issubclass(AbsentValueError, StructvalError)

    def test_value_or_returns_default(self) -> None:
        assert ABSENT.value_or(3) == 3

    def test_is_singleton(self) -> None:
        assert Absent() is ABSENT
        assert OptionalValue.absent() is ABSENT

    def test_survives_copy_and_pickle(self) -> None:
        assert copy.deepcopy(ABSENT) is ABSENT
        assert pickle.loads(pickle.dumps(ABSENT)) is ABSENT

    def test_repr(self) -> None:
        assert repr(ABSENT) == "Absent"

    def test_hash(self) -> None:
        assert hash(ABSENT) == combine(False)


# ===========================================================================
# Present
# ===========================================================================


class TestPresent:
    def test_has_value(self) -> None:
        assert Present(5).has_value
        assert Present(5).value() == 5

    def test_none_is_a_present_value(self) -> None:
        opt = Present(None)
        assert opt.has_value
        assert opt.value() is None
        assert opt.value_or(3) is None

    def test_is_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            Present(1).content = 2  # type: ignore[misc]

    def test_of_and_present_helpers(self) -> None:
        assert OptionalValue.of(4) == Present(4)
        assert present(4) == Present(4)

    def test_repr_uses_canonical_form(self) -> None:
        assert repr(Present(5)) == "Present(5)"
        assert repr(Present([1, None])) == "Present([ 1, null ])"

    def test_hash(self) -> None:
        assert hash(Present(5)) == combine(True, 5)
        assert hash(Present(None)) == combine(True, None)


# ===========================================================================
# Equality
# ===========================================================================


class TestEquality:
    def test_absent_equals_absent(self) -> None:
        assert ABSENT == Absent()

    def test_present_never_equals_absent(self) -> None:
        assert Present(None) != ABSENT
        assert ABSENT != Present(None)

    def test_present_values_compared_structurally(self) -> None:
        assert Present([1, 2]) == Present((1, 2))
        assert hash(Present([1, 2])) == hash(Present((1, 2)))

    def test_present_values_differ(self) -> None:
        assert Present(1) != Present(2)

    def test_not_equal_to_raw_value(self) -> None:
        assert Present(1) != 1
        assert ABSENT != None  # noqa: E711

    def test_deep_equality_engine_agrees(self) -> None:
        assert equal(ABSENT, ABSENT)
        assert equal(Present(5), Present(5))
        assert not equal(Present(5), ABSENT)
        assert equal([Present([1])], (Present((1,)),))

    def test_usable_as_dict_key(self) -> None:
        table = {Present(1): "one", ABSENT: "none"}
        assert table[Present(1)] == "one"
        assert table[ABSENT] == "none"


# ===========================================================================
# Custom semantics
# ===========================================================================


class Edge:
    def __init__(self, source: object, target: object) -> None:
        self.source = source
        self.target = target


@pytest.fixture
def graph() -> ValueSemantics:
    semantics = ValueSemantics()
    semantics.register_pair(Edge, lambda e: (e.source, e.target))
    return semantics


class TestCustomSemantics:
    def test_contents_compared_with_registered_pairs(self, graph: ValueSemantics) -> None:
        assert graph.equal(Present(Edge(1, "x")), Present(Edge(1, "x")))
        assert graph.equal(Present(Edge(1, "x")), Present(Pair(1, "x")))
        assert not graph.equal(Present(Edge(1, "x")), Present(Edge(1, "y")))

    def test_tags_still_matter(self, graph: ValueSemantics) -> None:
        assert graph.equal(ABSENT, ABSENT)
        assert not graph.equal(Present(Edge(1, "x")), ABSENT)
        assert not graph.equal(Present(1), 1)

    def test_hash_uses_registered_pairs(self, graph: ValueSemantics) -> None:
        assert graph.hash_of(Present(Edge(1, "x"))) == graph.combine(True, Pair(1, "x"))
        assert graph.hash_of(ABSENT) == graph.combine(False)

    def test_format_uses_registered_pairs(self, graph: ValueSemantics) -> None:
        assert graph.format_value(Present(Edge(1, "x"))) == "Present((1, x))"
        assert graph.format_value([ABSENT, Present(None)]) == "[ Absent, Present(null) ]"


# ===========================================================================
# as_optional
# ===========================================================================


class TestAsOptional:
    def test_wraps_plain_value(self) -> None:
        assert as_optional(5) == Present(5)

    def test_wraps_none_as_present(self) -> None:
        assert as_optional(None) == Present(None)

    def test_passes_optional_through(self) -> None:
        opt = Present(5)
        assert as_optional(opt) is opt
        assert as_optional(ABSENT) is ABSENT
