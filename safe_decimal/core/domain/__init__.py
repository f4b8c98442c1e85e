"""
Domain models and value objects.

Contains configuration records for formatting: Radix, Rounding, FormatOptions.
"""

from safe_decimal.core.domain.format_options import (
    FormatOptions,
    Radix,
    Rounding,
    RoundingDirection,
)

__all__ = [
    "FormatOptions",
    "Radix",
    "Rounding",
    "RoundingDirection",
]
