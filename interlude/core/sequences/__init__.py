"""
Sequence algebra для interlude

Комбинаторы равенства и порядка, сортированная вставка, дедупликация,
группировка смежных элементов, алгебра множеств и вариадический zip.
"""

# Comparators
from interlude.core.sequences.comparators import (
    Comparator,
    EqualityPredicate,
    compare,
    comparing,
    comparing_by,
    equality,
    field_getter,
    signed_difference,
)

# Ordered
from interlude.core.sequences.ordered import (
    delete,
    delete_by,
    insert,
    insert_by,
    maximum,
    maximum_by,
    minimum,
    minimum_by,
    sort_by,
)

# Dedup
from interlude.core.sequences.dedup import (
    group,
    group_by,
    nub,
    nub_by,
)

# Set Algebra
from interlude.core.sequences.set_algebra import (
    difference,
    difference_by,
    intersect,
    intersect_by,
    partition,
    union,
    union_by,
)

# Zipping
from interlude.core.sequences.zipping import (
    zip_,
    zip_with,
)

__all__ = [
    # Comparators — Types
    "Comparator",
    "EqualityPredicate",
    # Comparators — Functions
    "equality",
    "compare",
    "comparing",
    "comparing_by",
    "field_getter",
    "signed_difference",
    # Ordered
    "insert_by",
    "insert",
    "delete_by",
    "delete",
    "sort_by",
    "maximum",
    "minimum",
    "maximum_by",
    "minimum_by",
    # Dedup
    "nub",
    "nub_by",
    "group",
    "group_by",
    # Set Algebra
    "intersect_by",
    "intersect",
    "union_by",
    "union",
    "difference_by",
    "difference",
    "partition",
    # Zipping
    "zip_with",
    "zip_",
]
