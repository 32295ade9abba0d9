"""
Core math modules для interlude

Скалярные числовые помощники и генераторы диапазонов.
"""

# Numeric
from interlude.core.math.numeric import (
    even,
    gcd,
    lcm,
    log_base,
    odd,
    power,
)

# Ranges
from interlude.core.math.ranges import (
    iterate,
    range_inclusive,
    replicate,
)

__all__ = [
    # Numeric
    "gcd",
    "lcm",
    "power",
    "log_base",
    "even",
    "odd",
    # Ranges
    "range_inclusive",
    "replicate",
    "iterate",
]
