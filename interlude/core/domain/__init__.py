"""
Domain models and value objects.

Contains the immutable sort-key models used to configure composite comparators.
"""

from interlude.core.domain.sort_key import (
    DEFAULT_DIRECTION,
    DIRECTION_FACTORS,
    ComparatorSpecError,
    FieldRef,
    SortDirection,
    SortKey,
    SortSpec,
)

__all__ = [
    # Constants
    "DEFAULT_DIRECTION",
    "DIRECTION_FACTORS",
    # Exceptions
    "ComparatorSpecError",
    # Types
    "FieldRef",
    "SortDirection",
    "SortKey",
    "SortSpec",
]
