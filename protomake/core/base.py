# protomake/core/base.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Dict, Iterator, Mapping

_MISSING = object()

LINEAGE_FIELDS = frozenset({"statics", "mixins", "prototype", "super_type", "super_template"})


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _bind(value: Any, cls: type) -> Any:
    getter = getattr(type(value), "__get__", None)
    if getter is not None:
        return getter(value, cls, type(cls))
    return value


class ComposedType(type):
    """
    Root metaclass for Types produced by the composer.

    Each composed Type gets its own subclass of this metaclass. Type-level
    (static) members and lineage fields live in that subclass, so they are
    readable on the Type and inherited by Types extending it, but never seen
    by instances.

    Attribute access on a composed Type consults the static members first,
    so an instance member of the same name never hides them. Assignments to
    a composed Type (``cls.x = ...`` in a type initializer, for example) are
    stored next to its statics and leave the behavior template alone.
    """

    def __getattribute__(cls, name: str) -> Any:
        if not _is_dunder(name):
            value = static_member(cls, name, _MISSING)
            if value is not _MISSING:
                return value
        return super().__getattribute__(name)

    def __setattr__(cls, name: str, value: Any) -> None:
        if _is_dunder(name) or not owns_metaclass(cls):
            super().__setattr__(name, value)
            return
        current = static_member(cls, name, _MISSING, bind=False)
        if hasattr(type(current), "__set__"):
            super().__setattr__(name, value)
            return
        setattr(type(cls), name, value)

    def __delattr__(cls, name: str) -> None:
        if not _is_dunder(name) and owns_metaclass(cls) and name in type(cls).__dict__:
            delattr(type(cls), name)
            return
        super().__delattr__(name)

    def __repr__(cls) -> str:
        return f"<composed type {cls.__qualname__!r}>"


def metaclass_for(base: type) -> type:
    """Return the metaclass a Type extending ``base`` should derive its own from."""
    base_meta = type(base)
    if issubclass(base_meta, ComposedType):
        return base_meta
    if base_meta is type:
        return ComposedType
    return type(f"Composed{base_meta.__name__}", (ComposedType, base_meta), {})


def owns_metaclass(cls: type) -> bool:
    """True when ``cls`` is the composed Type its metaclass was built for."""
    template = type(cls).__dict__.get("prototype")
    return getattr(template, "constructor", None) is cls


def _static_namespaces(cls: type) -> Iterator[Mapping[str, Any]]:
    # Per-Type metaclasses all precede ComposedType in the MRO.
    for klass in type(cls).__mro__:
        if klass is ComposedType:
            return
        yield klass.__dict__


def static_member(cls: type, name: str, default: Any = None, bind: bool = True) -> Any:
    """Look up ``name`` among the static members of ``cls`` and its composed bases."""
    for namespace in _static_namespaces(cls):
        if name in namespace:
            value = namespace[name]
            return _bind(value, cls) if bind else value
    return default


def type_member(cls: type, name: str, default: Any = None) -> Any:
    """
    Look up a type-level member of ``cls`` and bind it to ``cls``.

    Only the metaclass chain is searched, so instance-level members stored in
    the class namespace never shadow a static member of the same name.
    """
    for klass in type(cls).__mro__:
        if name in klass.__dict__:
            return _bind(klass.__dict__[name], cls)
    return default


def statics_of(cls: type) -> Dict[str, Any]:
    """
    The own static members of a composed Type; plain classes have none.

    Besides the declared statics this includes attributes assigned to the
    Type after composition, such as those set by its type initializer.
    """
    if not owns_metaclass(cls):
        return {}
    members = dict(type(cls).__dict__["statics"])
    for name, value in type(cls).__dict__.items():
        if not _is_dunder(name) and name not in LINEAGE_FIELDS:
            members[name] = value
    return members
