# protomake/core/composer.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
from types import MappingProxyType
from typing import Any, Dict, Optional

from protomake.core.base import metaclass_for, statics_of, type_member
from protomake.core.config import MakeConfig, parse_arguments
from protomake.core.initializers import resolve_initializer
from protomake.core.merge import mixin
from protomake.core.prototype import Prototype, create, instance_member, template_of

logger = logging.getLogger(__name__)


def compose(config: MakeConfig) -> Any:
    """
    Build a new Type from ``config`` and run its type initializer.

    Members override in this order: the base's template (by chained lookup),
    then each mixin in order, then the explicit behavior. Mixins are copied
    in and never become ancestors. The return value is whatever the type
    initializer returns, or the Type itself when no initializer resolves.
    Constructing an instance yields the instance when its initializer
    returns None.
    """
    base = config.base
    super_template = template_of(base)
    members: Dict[str, Any] = {}
    static_source = config.type_behavior

    if config.mixins:
        static_members: Dict[str, Any] = {}
        for mixin_type in config.mixins:
            mixin(statics_of(mixin_type), static_members)
            mixin(template_of(mixin_type), members)
        if config.type_behavior is not None:
            mixin(config.type_behavior, static_members)
        static_source = static_members

    mixin(config.instance_behavior, members)
    template = Prototype(members, parent=super_template)

    initializer = resolve_initializer(config.init)

    def construct(cls, *args, **kwargs):
        instance = create(cls)
        result = initializer.invoke(instance, args, kwargs, instance_member)
        return instance if result is None else result

    statics: Dict[str, Any] = {}
    if static_source is not None:
        mixin(static_source, statics)

    namespace = dict(statics)
    namespace.update(
        __call__=construct,
        statics=MappingProxyType(statics),
        mixins=config.mixins,
        prototype=template,
        super_type=base,
        super_template=super_template,
    )
    metaclass = type(f"{config.name}Type", (metaclass_for(base),), namespace)
    cls = metaclass(config.name, (base,), dict(members))
    template._bind(cls)

    type_initializer = resolve_initializer(config.type_init)
    logger.debug(
        "Composed %s from base %s with mixins %s (init=%r, type_init=%r)",
        config.name,
        base.__name__,
        [mixin_type.__name__ for mixin_type in config.mixins],
        initializer,
        type_initializer,
    )
    return type_initializer.invoke(cls, config.type_init_args, None, type_member)


def make(*args: Any, name: Optional[str] = None) -> Any:
    """
    Compose a Type from the flexible positional form::

        make(base, mixins, instance_behavior, type_behavior, init, type_init, type_init_args)

    Any of ``base``, ``mixins`` and ``type_behavior`` may be left out, and
    trailing arguments may be omitted. See :func:`parse_arguments` for how
    the arguments are classified.

    Example:
        Point = make({"_init": lambda self, x, y: ...}, name="Point")
        Point3 = make(Point, [Serializable], {"z": 0})
    """
    return compose(parse_arguments(*args, name=name))
