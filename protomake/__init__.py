"""protomake: prototype-style Type composition for Python

This package builds constructible Types from an optional base, an ordered
list of mixins, instance-level and type-level behavior, and optional
initializers run at construction time and at composition time.

Responsibilities:
    - Normalizing the flexible positional calling convention
    - Linking behavior templates to their base
    - Copying mixin members in order, explicit behavior last
    - Recording lineage (mixins, super_type, super_template)
    - Running instance and type initializers

Cross-cutting Concerns:
    Error Handling:
        - Merge failures raise MergeError, a TypeError
        - Initializer errors propagate untouched

    Logging:
        - Composition is logged at DEBUG under the "protomake" logger
        - No handlers are installed by the library
"""

from protomake.core import (
    DEFAULT_INIT_NAME,
    NO_INITIALIZER,
    ExplicitInitializer,
    Initializer,
    MakeConfig,
    MergeError,
    NamedInitializer,
    NoInitializer,
    Prototype,
    ProtomakeError,
    compose,
    make,
    mixin,
    parse_arguments,
    snapshot,
    template_of,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_INIT_NAME",
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
    "make",
    "mixin",
    "parse_arguments",
    "snapshot",
    "template_of",
]
