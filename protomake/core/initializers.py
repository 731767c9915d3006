# protomake/core/initializers.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from protomake.interfaces.types import InitFunction, InitializerSelector, MemberLookup, MemberName

DEFAULT_INIT_NAME = "_init"


class Initializer(ABC):
    """
    An initializer resolved once at composition time.

    Invoking it runs against a target (a new instance, or the Type itself for
    type-level initializers) and returns the initializer's result, or the
    bare target when nothing is invoked.
    """

    @abstractmethod
    def invoke(
        self,
        target: Any,
        args: Sequence[Any],
        kwargs: Optional[Dict[str, Any]],
        lookup: MemberLookup,
    ) -> Any:
        """
        Run the initializer.

        :param target: The object being initialized.
        :param args: Positional arguments for the initializer.
        :param kwargs: Keyword arguments for the initializer, if any.
        :param lookup: Resolves a member name on ``target``; returns None if absent.
        :return: The initializer result.
        """


@dataclass(frozen=True)
class ExplicitInitializer(Initializer):
    """Calls a given function with the target as its first argument."""

    function: InitFunction

    def invoke(self, target, args, kwargs, lookup):
        return self.function(target, *args, **(kwargs or {}))


@dataclass(frozen=True)
class NamedInitializer(Initializer):
    """
    Looks the name up on the finished target at every call, so methods
    attached to individual targets are honored. A missing or non-callable
    member yields the bare target.
    """

    name: MemberName

    def invoke(self, target, args, kwargs, lookup):
        method = lookup(target, self.name)
        if not callable(method):
            return target
        return method(*args, **(kwargs or {}))


@dataclass(frozen=True)
class NoInitializer(Initializer):
    """Returns the bare target."""

    def invoke(self, target, args, kwargs, lookup):
        return target


NO_INITIALIZER = NoInitializer()


def resolve_initializer(selector: InitializerSelector) -> Initializer:
    """
    Turn an initializer selector into an :class:`Initializer` variant.

    Falsy selectors fall back to the conventional ``_init`` name. Selectors
    that are neither callable nor a name resolve to no initializer.
    """
    if isinstance(selector, Initializer):
        return selector
    if not selector:
        return NamedInitializer(DEFAULT_INIT_NAME)
    if isinstance(selector, str):
        return NamedInitializer(selector)
    if callable(selector):
        return ExplicitInitializer(selector)
    return NO_INITIALIZER
