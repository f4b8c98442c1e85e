"""
Core math modules для safe_decimal

Числовое ядро: битовый кодек float, нормализатор, арифметика и порядок
над парой (numerator, denominator).
"""

# Float Bits
from safe_decimal.core.math.float_bits import (
    # Formats
    FORMATS,
    FP32,
    FP64,
    FloatFormat,
    # Bit decomposition
    decompose,
    reconstruct,
    # Exponential form
    exponential_form,
    from_exponential_form,
    is_sign_negative,
)

# Padding iterator
from safe_decimal.core.math.iter_pad import Pad

# Decimal value
from safe_decimal.core.math.decimal_value import DecimalValue

# Normalizer
from safe_decimal.core.math.normalizer import (
    exponent_shift,
    reduce_exponent,
    simplify_factors,
)

# Arithmetic
from safe_decimal.core.math.arithmetic import (
    absolute,
    add,
    div,
    inv,
    mul,
    neg,
    sub,
)

# Ordering
from safe_decimal.core.math.ordering import compare, equals

__all__ = [
    # Float Bits — Formats
    "FORMATS",
    "FP32",
    "FP64",
    "FloatFormat",
    # Float Bits — Functions
    "decompose",
    "reconstruct",
    "exponential_form",
    "from_exponential_form",
    "is_sign_negative",
    # Padding
    "Pad",
    # Decimal value
    "DecimalValue",
    # Normalizer
    "exponent_shift",
    "reduce_exponent",
    "simplify_factors",
    # Arithmetic
    "absolute",
    "add",
    "div",
    "inv",
    "mul",
    "neg",
    "sub",
    # Ordering
    "compare",
    "equals",
]
