"""
Arithmetic — операции над DecimalValue

add, sub, mul, div, neg, absolute, inv. Все операции чистые: операнды не
изменяются, результат — новый DecimalValue.

Каждое промежуточное умножение/сложение округляется в ширину формата
(fmt.round), поэтому FP32 значения ведут себя как нативная single precision.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Перед перекрёстным умножением множители сокращаются (simplify_factors)
2. Результаты add/mul проходят через reduce_exponent
3. inv/div нуля возвращают None (отсутствующий результат), не исключение
4. Операнды разных форматов не смешиваются (ValueError)
"""

from typing import Optional

from safe_decimal.core.math.decimal_value import DecimalValue, require_same_format
from safe_decimal.core.math.float_bits import is_sign_negative
from safe_decimal.core.math.normalizer import reduce_exponent, simplify_factors


# =============================================================================
# УНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def neg(value: DecimalValue) -> DecimalValue:
    """Смена знака numerator."""
    return DecimalValue(-value.numerator, value.denominator, value.fmt)


def absolute(value: DecimalValue) -> DecimalValue:
    """value, если sign bit numerator сброшен, иначе neg(value)."""
    if is_sign_negative(value.numerator):
        return neg(value)
    return value


def inv(value: DecimalValue) -> Optional[DecimalValue]:
    """
    Обратное значение 1 / value.

    Numerator и denominator меняются местами. Если numerator был
    отрицательным, оба поля меняют знак, чтобы denominator остался
    неотрицательным.

    Returns:
        Обратное значение или None для нуля

    Examples:
        >>> reciprocal = inv(DecimalValue(-2.0, 3.0))
        >>> reciprocal.numerator, reciprocal.denominator
        (-3.0, 2.0)
        >>> inv(DecimalValue.zero()) is None
        True
    """
    if value.numerator == 0:
        return None
    if is_sign_negative(value.numerator):
        return DecimalValue(-value.denominator, -value.numerator, value.fmt)
    return DecimalValue(value.denominator, value.numerator, value.fmt)


# =============================================================================
# БИНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def add(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """
    Сумма a + b.

    x / y — сокращённое отношение знаменателей, поэтому
    a.denominator * y является общим кратным обоих знаменателей.
    При неотрицательных знаменателях x и y тоже неотрицательны.
    """
    require_same_format(a, b)
    fmt = a.fmt

    x, y = simplify_factors(a.denominator, b.denominator, fmt)
    denominator = fmt.round(a.denominator * y)
    numerator = fmt.round(fmt.round(a.numerator * y) + fmt.round(b.numerator * x))

    return reduce_exponent(DecimalValue(numerator, denominator, fmt))


def sub(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """Разность a - b = a + (-b)."""
    return add(a, neg(b))


def mul(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """
    Произведение a * b.

    Наивное {a.n * b.n, a.d * b.d} раздувает и числитель, и знаменатель
    до переполнения. Сначала сокращаются перекрёстные пары
    (a.n, b.d) и (b.n, a.d), затем перемножаются.
    """
    require_same_format(a, b)
    fmt = a.fmt

    a_num, b_den = simplify_factors(a.numerator, b.denominator, fmt)
    b_num, a_den = simplify_factors(b.numerator, a.denominator, fmt)

    return reduce_exponent(
        DecimalValue(fmt.round(a_num * b_num), fmt.round(a_den * b_den), fmt)
    )


def div(a: DecimalValue, b: DecimalValue) -> Optional[DecimalValue]:
    """
    Частное a / b.

    Returns:
        a * inv(b) или None, если b равно нулю
    """
    reciprocal = inv(b)
    if reciprocal is None:
        return None
    return mul(a, reciprocal)
