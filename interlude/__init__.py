"""
interlude - Point-free functional combinators for Python sequences.

Core modules:
- interlude.core.sequences: comparators, nub/group, set algebra, zip
- interlude.core.functional: fold/scan, lift/unlift, composition wrappers
- interlude.core.math: numeric helpers and ranges
- interlude.core.contracts: JSON sort-spec validation
"""

from interlude.core.domain import ComparatorSpecError, SortDirection, SortKey, SortSpec
from interlude.core.functional import fold, lift, scan, unlift
from interlude.core.sequences import (
    compare,
    comparing,
    difference,
    difference_by,
    equality,
    group,
    group_by,
    insert,
    insert_by,
    intersect,
    intersect_by,
    nub,
    nub_by,
    union,
    union_by,
    zip_,
    zip_with,
)

__version__ = "1.0.0"
__all__ = [
    "ComparatorSpecError",
    "SortDirection",
    "SortKey",
    "SortSpec",
    "compare",
    "comparing",
    "difference",
    "difference_by",
    "equality",
    "fold",
    "group",
    "group_by",
    "insert",
    "insert_by",
    "intersect",
    "intersect_by",
    "lift",
    "nub",
    "nub_by",
    "scan",
    "union",
    "union_by",
    "unlift",
    "zip_",
    "zip_with",
]
