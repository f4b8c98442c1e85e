"""
Contract Validation Module

Валидация JSON контракта сериализованного SafeDecimal.
"""

from .validators import (
    SafeDecimalValidator,
    SchemaLoader,
    pair_violations,
    validate_safe_decimal,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "SafeDecimalValidator",
    # Functions
    "pair_violations",
    "validate_safe_decimal",
]
