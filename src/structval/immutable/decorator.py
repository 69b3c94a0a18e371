"""The ``@immutable`` class decorator.

Turns a class into a frozen dataclass and wires value semantics onto it
from its declared properties, in declaration order:

- ``__eq__`` compares every property with deep structural equality.
- ``__hash__`` combines the properties' hash contributions.
- ``__repr__`` renders ``Name { a=1, b=[ 2, 3 ] }``.
- ``with_(**overrides)`` returns a modified copy. Each override is an
  ``OptionalValue`` (``ABSENT`` keeps the current value, ``Present(x)``
  replaces it, even with ``None``) or a plain value, which counts as
  present.

Methods the class defines itself are never replaced.

Usage
-----
::

    from structval.immutable import immutable, prop, NullCheck

    @immutable
    class Point:
        x: int
        y: int
        tags: tuple[str, ...] = prop(default=())

    p = Point(1, 2)
    p.with_(y=5)          # Point { x=1, y=5, tags=[  ] }
"""
from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import Any, TypeVar

from structval.errors import NullPropertyError
from structval.immutable.options import ImmutableOptions, NullCheck, property_spec
from structval.optional.optional import as_optional
from structval.semantics import ValueSemantics, default_semantics

C = TypeVar("C", bound=type)


def immutable(
    cls: C | None = None,
    /,
    *,
    options: ImmutableOptions = ImmutableOptions.NONE,
    semantics: ValueSemantics | None = None,
) -> Any:
    """Class decorator wiring structural value semantics onto ``cls``.

    Usable bare (``@immutable``) or with arguments
    (``@immutable(options=ImmutableOptions.DISABLE_WITH)``).

    Parameters
    ----------
    options:
        Which methods to generate, see ``ImmutableOptions``.
    semantics:
        Engines to use. Defaults to ``default_semantics()``, looked up at
        call time.
    """

    def wrap(target: C) -> C:
        return _build(target, ImmutableOptions(options), semantics)

    if cls is None:
        return wrap
    return wrap(cls)


def _build(cls: C, options: ImmutableOptions, semantics: ValueSemantics | None) -> C:
    _install_null_checks(cls)
    cls = dataclasses.dataclass(frozen=True, eq=False, repr=False)(cls)

    resolve: Callable[[], ValueSemantics] = (
        (lambda: semantics) if semantics is not None else default_semantics
    )
    declared = [f for f in dataclasses.fields(cls) if not property_spec(f).computed]
    eq_names = tuple(f.name for f in declared if f.compare)
    repr_names = tuple(f.name for f in declared if f.repr)
    with_names = frozenset(f.name for f in declared if f.init)

    equals_enabled = not options & ImmutableOptions.DISABLE_EQUALS
    if equals_enabled:
        _set_new_attribute(cls, "__eq__", _eq_fn(eq_names, resolve))

    if not options & ImmutableOptions.DISABLE_GET_HASH_CODE:
        _set_new_attribute(cls, "__hash__", _hash_fn(eq_names, resolve))
    elif equals_enabled and "__hash__" not in cls.__dict__:
        cls.__hash__ = None  # type: ignore[assignment]

    if not options & ImmutableOptions.DISABLE_TO_STRING:
        _set_new_attribute(cls, "__repr__", _repr_fn(repr_names, resolve))

    if not options & ImmutableOptions.DISABLE_WITH:
        _set_new_attribute(cls, "with_", _with_fn(with_names))

    cls.__immutable_options__ = options  # type: ignore[attr-defined]
    return cls


def _set_new_attribute(cls: type, name: str, fn: Callable[..., Any]) -> None:
    if name in cls.__dict__:
        return
    fn.__qualname__ = f"{cls.__qualname__}.{fn.__name__}"
    setattr(cls, name, fn)


# ---------------------------------------------------------------------------
# Generated methods
# ---------------------------------------------------------------------------


def _eq_fn(names: tuple[str, ...], resolve: Callable[[], ValueSemantics]) -> Callable[..., Any]:
    def __eq__(self: Any, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        semantics = resolve()
        return all(semantics.equal(getattr(self, n), getattr(other, n)) for n in names)

    return __eq__


def _hash_fn(names: tuple[str, ...], resolve: Callable[[], ValueSemantics]) -> Callable[..., Any]:
    def __hash__(self: Any) -> int:
        return resolve().combine(*(getattr(self, n) for n in names))

    return __hash__


def _repr_fn(names: tuple[str, ...], resolve: Callable[[], ValueSemantics]) -> Callable[..., Any]:
    def __repr__(self: Any) -> str:
        props = [(n, getattr(self, n)) for n in names]
        return resolve().format_composite(type(self).__name__, props)

    return __repr__


def _with_fn(names: frozenset[str]) -> Callable[..., Any]:
    def with_(self: Any, **overrides: Any) -> Any:
        unknown = sorted(set(overrides) - names)
        if unknown:
            raise TypeError(
                f"{type(self).__name__}.with_() got unexpected properties: {', '.join(unknown)}"
            )
        changes = {}
        for name, override in overrides.items():
            opt = as_optional(override)
            if opt.has_value:
                changes[name] = opt.value()
        if not changes:
            return self
        return dataclasses.replace(self, **changes)

    return with_


# ---------------------------------------------------------------------------
# Null checks
# ---------------------------------------------------------------------------


def _install_null_checks(cls: type) -> None:
    """Wrap ``__post_init__`` with the requested null checks.

    Runs before the dataclass transform, which only emits the
    ``__post_init__`` call when the method exists at decoration time.
    """
    pre: list[str] = []
    post: list[str] = []
    for name, attr in cls.__dict__.items():
        if not isinstance(attr, dataclasses.Field):
            continue
        check = property_spec(attr).not_null
        if check is NullCheck.PRE:
            pre.append(name)
        elif check is NullCheck.POST:
            post.append(name)
    if not pre and not post:
        return

    user_post_init = getattr(cls, "__post_init__", None)
    type_name = cls.__name__

    def __post_init__(self: Any, *args: Any) -> None:
        _check_not_null(self, type_name, pre)
        if user_post_init is not None:
            user_post_init(self, *args)
        _check_not_null(self, type_name, post)

    __post_init__.__qualname__ = f"{cls.__qualname__}.__post_init__"
    cls.__post_init__ = __post_init__  # type: ignore[attr-defined]


def _check_not_null(obj: Any, type_name: str, names: list[str]) -> None:
    for name in names:
        if getattr(obj, name, None) is None:
            raise NullPropertyError(type_name, name)
