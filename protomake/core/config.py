# protomake/core/config.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Optional, Sequence, Tuple

from protomake.core.initializers import DEFAULT_INIT_NAME
from protomake.interfaces.types import Behavior, InitializerSelector

DEFAULT_TYPE_NAME = "Composed"

# base, mixins, instance behavior, type behavior, init, type init, type init args
_POSITIONAL_ARITY = 7
_MISSING = object()


@dataclass(frozen=True)
class MakeConfig:
    """
    Everything the composer needs to build a Type.

    :param instance_behavior: Instance-level members, merged onto the template.
    :param base: Type to extend.
    :param mixins: Types whose templates and statics are copied in, in order.
    :param type_behavior: Type-level (static) members.
    :param init: Instance initializer selector.
    :param type_init: Type initializer selector.
    :param type_init_args: Arguments passed to the type initializer.
    :param name: ``__name__`` of the produced class.
    """

    instance_behavior: Behavior
    base: type = object
    mixins: Tuple[type, ...] = ()
    type_behavior: Optional[Behavior] = None
    init: InitializerSelector = DEFAULT_INIT_NAME
    type_init: InitializerSelector = DEFAULT_INIT_NAME
    type_init_args: Tuple[Any, ...] = ()
    name: str = DEFAULT_TYPE_NAME

    def __post_init__(self) -> None:
        object.__setattr__(self, "base", self.base or object)
        object.__setattr__(self, "mixins", tuple(self.mixins or ()))
        object.__setattr__(self, "type_init_args", tuple(self.type_init_args or ()))
        object.__setattr__(self, "name", self.name or DEFAULT_TYPE_NAME)

    @classmethod
    def simple(cls, instance_behavior: Behavior, type_behavior: Optional[Behavior] = None, **options) -> "MakeConfig":
        """A Type with no base and no mixins."""
        return cls(instance_behavior=instance_behavior, type_behavior=type_behavior, **options)

    @classmethod
    def extending(
        cls, base: type, instance_behavior: Behavior, type_behavior: Optional[Behavior] = None, **options
    ) -> "MakeConfig":
        """A Type extending ``base``."""
        return cls(instance_behavior=instance_behavior, base=base, type_behavior=type_behavior, **options)

    @classmethod
    def mixing(
        cls, mixins: Sequence[type], instance_behavior: Behavior, type_behavior: Optional[Behavior] = None, **options
    ) -> "MakeConfig":
        """A Type blending in ``mixins``."""
        return cls(instance_behavior=instance_behavior, mixins=tuple(mixins), type_behavior=type_behavior, **options)

    def with_initializer(self, selector: InitializerSelector) -> "MakeConfig":
        return replace(self, init=selector)

    def with_type_initializer(self, selector: InitializerSelector, *args: Any) -> "MakeConfig":
        return replace(self, type_init=selector, type_init_args=args)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_static_behavior(value: Any) -> bool:
    if value is _MISSING:
        return False
    if value is None or isinstance(value, Mapping):
        return True
    return not (callable(value) or isinstance(value, str) or _is_sequence(value))


def parse_arguments(*args: Any, name: Optional[str] = None) -> MakeConfig:
    """
    Classify the flexible positional form
    ``(base, mixins, instance_behavior, type_behavior, init, type_init, type_init_args)``
    into a :class:`MakeConfig`. Leading and middle inputs may be omitted:

    - a first argument that is not a class means no base;
    - a second argument that is not a list or tuple means no mixins;
    - a fourth argument that is callable, a string, a list or a tuple means no
      type behavior;
    - a list or tuple in the ``init`` position is the type initializer's
      argument list, as is one in the ``type_init`` position.
    """
    slots = list(args) + [_MISSING] * _POSITIONAL_ARITY

    if not isinstance(slots[0], type):
        slots.insert(0, object)
    if not _is_sequence(slots[1]):
        slots.insert(1, None)
    if not _is_static_behavior(slots[3]):
        slots.insert(3, None)

    base, mixins, instance_behavior, type_behavior, init, type_init, type_init_args = (
        None if slot is _MISSING else slot for slot in slots[:_POSITIONAL_ARITY]
    )

    if _is_sequence(init):
        type_init_args = init
        type_init = DEFAULT_INIT_NAME
        init = DEFAULT_INIT_NAME
    else:
        init = init or DEFAULT_INIT_NAME
        if _is_sequence(type_init):
            type_init_args = type_init
            type_init = DEFAULT_INIT_NAME
        else:
            type_init = type_init or DEFAULT_INIT_NAME

    return MakeConfig(
        instance_behavior=instance_behavior,
        base=base,
        mixins=mixins or (),
        type_behavior=type_behavior,
        init=init,
        type_init=type_init,
        type_init_args=type_init_args if _is_sequence(type_init_args) else (),
        name=name or DEFAULT_TYPE_NAME,
    )
