# protomake/core/merge.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from collections.abc import Mapping, MutableMapping
from typing import Any, Dict

from protomake.core.errors import MergeError


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def own_members(source: Any) -> Dict[str, Any]:
    """
    Collect the members of ``source`` that a shallow merge copies.

    Mappings contribute every item (a :class:`Prototype` contributes its own
    members only). Any other object contributes its ``vars()`` minus dunder
    names, so inherited members and interpreter bookkeeping are never copied.

    :raises MergeError: If ``source`` has no members to copy.
    """
    if isinstance(source, Mapping):
        return dict(source)
    try:
        namespace = vars(source)
    except TypeError as exc:
        raise MergeError(
            f"Cannot merge members from {type(source).__name__!r}",
            details={"source_type": type(source).__name__},
        ) from exc
    return {name: value for name, value in namespace.items() if not _is_dunder(name)}


def mixin(source: Any, target: Any) -> Any:
    """
    Copy every own member of ``source`` onto ``target``, overwriting
    same-named members, and return ``target``.

    :param source: Mapping or object whose own members are copied.
    :param target: Mutable mapping or object receiving the members.
    :raises MergeError: If either side cannot take part in a merge.
    """
    members = own_members(source)
    if target is None:
        raise MergeError("Cannot merge members onto None", details={"target_type": "NoneType"})

    if isinstance(target, MutableMapping):
        target.update(members)
    else:
        for name, value in members.items():
            setattr(target, name, value)
    return target
