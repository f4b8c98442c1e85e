"""
safe_decimal — десятичная арифметика на паре float'ов

Значение хранится как numerator / denominator в двоичном float формате
(FP64 или FP32). Сложение, вычитание, умножение и деление конечных
десятичных дробей не накапливают ошибку двоичного округления, пока поля
остаются в диапазоне формата.

Examples:
    >>> from safe_decimal import SafeDecimal
    >>> 0.1 + 0.2 == 0.3
    False
    >>> SafeDecimal(0.1) + SafeDecimal(0.2) == SafeDecimal(0.3)
    True
    >>> str(SafeDecimal("-0xa.ff"))
    '-10.99609375'
"""

# Public number type
from safe_decimal.number import E, ONE, PI, ZERO, SafeDecimal, SafeDecimalInput

# Kernel
from safe_decimal.core.math import FP32, FP64, DecimalValue, FloatFormat

# Format options
from safe_decimal.core.domain import FormatOptions, Radix, Rounding, RoundingDirection

# Errors
from safe_decimal.conversion.parsing import DecimalParseError, ParseErrorKind

__version__ = "0.1.0"

__all__ = [
    # Number
    "SafeDecimal",
    "SafeDecimalInput",
    "ZERO",
    "ONE",
    "PI",
    "E",
    # Kernel
    "DecimalValue",
    "FloatFormat",
    "FP32",
    "FP64",
    # Format options
    "FormatOptions",
    "Radix",
    "Rounding",
    "RoundingDirection",
    # Errors
    "DecimalParseError",
    "ParseErrorKind",
]
