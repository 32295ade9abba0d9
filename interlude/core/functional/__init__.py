"""
Functional helpers: combinators, composition wrappers, folds and lift/unlift.
"""

# Combinators
from interlude.core.functional.combinators import (
    FIELD_PATH_SEPARATOR,
    all_,
    any_,
    constant,
    elem,
    find,
    get,
    get_deep,
    has,
    identity,
    invoke,
    none,
    noop,
    not_,
    not_elem,
    pluck,
)

# Composition
from interlude.core.functional.composition import (
    compose,
    curry,
    either,
    guard,
    memoize,
    rcurry,
    seq,
    trace,
)

# Folds
from interlude.core.functional.folds import (
    filter_,
    fold,
    lift,
    map_,
    scan,
    unlift,
)

__all__ = [
    # Combinators — Constants
    "FIELD_PATH_SEPARATOR",
    # Combinators — Functions
    "identity",
    "noop",
    "constant",
    "has",
    "not_",
    "all_",
    "any_",
    "none",
    "elem",
    "not_elem",
    "find",
    "get",
    "get_deep",
    "pluck",
    "invoke",
    # Composition
    "seq",
    "compose",
    "curry",
    "rcurry",
    "guard",
    "either",
    "memoize",
    "trace",
    # Folds
    "fold",
    "scan",
    "lift",
    "unlift",
    "map_",
    "filter_",
]
