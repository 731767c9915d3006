# protomake/core/prototype.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import inspect
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from protomake.core.base import type_member
from protomake.core.merge import own_members

_MISSING = object()


class Prototype(Mapping):
    """
    The behavior template shared by every instance of a Type.

    As a mapping it exposes the Type's own instance-level members only.
    Attribute access walks own members and then the parent chain, returning
    raw values, so inherited behavior can be invoked explicitly::

        Child.super_template._init(self, *args)

    Templates are read-only. ``constructor`` is bound once, to the Type the
    template belongs to.
    """

    __slots__ = ("_members", "_parent", "_constructor")

    def __init__(self, members: Mapping, parent: Optional["Prototype"] = None) -> None:
        object.__setattr__(self, "_members", dict(members))
        object.__setattr__(self, "_parent", parent)
        object.__setattr__(self, "_constructor", None)

    @property
    def parent(self) -> Optional["Prototype"]:
        """The base Type's template, or None for the root."""
        return self._parent

    @property
    def constructor(self) -> Optional[type]:
        """The Type this template belongs to."""
        return self._constructor

    def _bind(self, cls: type) -> None:
        if self._constructor is not None:
            raise AttributeError(f"Template is already bound to {self._constructor!r}")
        object.__setattr__(self, "_constructor", cls)

    def lookup(self, name: str, default: Any = _MISSING) -> Any:
        """
        Resolve ``name`` through this template and its ancestors.

        :raises AttributeError: If no template in the chain defines ``name``
            and no default is given.
        """
        template = self
        while template is not None:
            if name in template._members:
                return template._members[name]
            template = template._parent
        if default is _MISSING:
            raise AttributeError(name)
        return default

    def __getattr__(self, name: str) -> Any:
        if name in Prototype.__slots__:
            raise AttributeError(name)
        return self.lookup(name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Prototype members are read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Prototype members are read-only")

    def __getitem__(self, name: str) -> Any:
        return self._members[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        owner = self._constructor.__name__ if self._constructor is not None else None
        return f"Prototype(owner={owner!r}, members={sorted(self._members)!r})"


def template_of(cls: type) -> Prototype:
    """
    Return the behavior template of ``cls``.

    Composed Types carry their template. For any other class one is derived
    from its public class members, chained to the template of its base.
    """
    template = type_member(cls, "prototype")
    if isinstance(template, Prototype) and template.constructor is cls:
        return template

    parent = template_of(cls.__base__) if cls.__base__ is not None else None
    derived = Prototype(own_members(cls), parent=parent)
    derived._bind(cls)
    return derived


def create(cls: type) -> Any:
    """Produce a bare instance of ``cls`` without running any initializer."""
    return cls.__new__(cls)


def instance_member(instance: Any, name: str) -> Optional[Any]:
    """
    Look up ``name`` on a finished instance, returning None when absent.

    Errors raised while computing a member that does exist propagate.
    """
    if inspect.getattr_static(instance, name, _MISSING) is _MISSING:
        # Only a dynamic __getattr__ can still supply it.
        return getattr(instance, name, None)
    return getattr(instance, name)


def snapshot(cls: type) -> Dict[str, Any]:
    """Capture the statics, template members and lineage of a composed Type."""
    template = template_of(cls)
    return {
        "statics": dict(type_member(cls, "statics", {}) or {}),
        "prototype": dict(template),
        "mixins": type_member(cls, "mixins"),
        "super_type": type_member(cls, "super_type"),
        "super_template": type_member(cls, "super_template"),
    }
