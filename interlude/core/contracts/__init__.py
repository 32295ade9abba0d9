"""
Contract Validation Module

Валидация JSON-конфигурации компараторов по схеме sort_spec.
"""

from .validators import (
    SCHEMA_DIR,
    SORT_SPEC_SCHEMA,
    SchemaLoader,
    SortSpecValidator,
    comparing_from_spec,
    default_validator,
    parse_sort_spec,
    validate_sort_spec,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "SORT_SPEC_SCHEMA",
    # Classes
    "SchemaLoader",
    "SortSpecValidator",
    # Functions
    "default_validator",
    "validate_sort_spec",
    "parse_sort_spec",
    "comparing_from_spec",
]
