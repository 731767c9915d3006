"""
Core composition machinery: the composer, its configuration, behavior
templates, initializer variants and the shallow merge it relies on.
"""

from .config import DEFAULT_TYPE_NAME, MakeConfig, parse_arguments
from .errors import MergeError, ProtomakeError
from .initializers import (
    DEFAULT_INIT_NAME,
    NO_INITIALIZER,
    ExplicitInitializer,
    Initializer,
    NamedInitializer,
    NoInitializer,
    resolve_initializer,
)
from .composer import compose, make
from .merge import mixin
from .prototype import Prototype, create, snapshot, template_of

__all__ = [
    "DEFAULT_INIT_NAME",
    "DEFAULT_TYPE_NAME",
    "NO_INITIALIZER",
    "ExplicitInitializer",
    "Initializer",
    "MakeConfig",
    "MergeError",
    "NamedInitializer",
    "NoInitializer",
    "Prototype",
    "ProtomakeError",
    "compose",
    "create",
    "make",
    "mixin",
    "parse_arguments",
    "resolve_initializer",
    "snapshot",
    "template_of",
]
