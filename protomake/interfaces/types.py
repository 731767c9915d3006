# protomake/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Callable, Union

MemberName = str

# A mapping of member name to value/function, or any object whose public
# attributes are copied by the shallow merge.
Behavior = Any

# Callback Types
InitFunction = Callable[..., Any]
MemberLookup = Callable[[Any, MemberName], Any]

# A function used directly, a member name resolved per call, or None for the
# conventional name. Resolved Initializer variants are accepted as well.
InitializerSelector = Union[InitFunction, MemberName, None]
