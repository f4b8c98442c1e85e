"""
Normalizer — удержание numerator/denominator в диапазоне float

Две операции:
- simplify_factors: сокращение общего целого делителя (GCD на экспоненциальных
  формах) и балансировка степеней двойки между двумя множителями
- reduce_exponent: та же балансировка экспонент для готового результата,
  без GCD

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Представленное значение не меняется (кроме канонизации нуля)
2. Сумма экспонент сохраняется, каждая из них максимально близка к нулю
3. simplify_factors вызывается ДО умножения, иначе произведение может
   переполниться раньше, чем его удастся нормализовать
"""

import math

from safe_decimal.core.math.decimal_value import DecimalValue
from safe_decimal.core.math.float_bits import (
    FP64,
    FloatFormat,
    decompose,
    exponential_form,
    from_exponential_form,
    reconstruct,
)


def exponent_shift(first_exponent: int, second_exponent: int) -> int:
    """
    Сдвиг, вычитаемый из обеих экспонент.

    Половина суммы с усечением к нулю: после сдвига сумма сохраняется,
    а обе экспоненты максимально близки к нулю.

    Examples:
        >>> exponent_shift(7, 0)
        3
        >>> exponent_shift(-3, 0)
        -1
    """
    return math.trunc((first_exponent + second_exponent) / 2)


def simplify_factors(a: float, b: float, fmt: FloatFormat = FP64) -> tuple[float, float]:
    """
    Сокращение двух множителей перед перекрёстным умножением.

    a и b — множители, которые будут умножены на посторонние значения
    (например, знаменатели при сложении). Общий нечётный делитель
    сокращается, степени двойки перераспределяются поровну.

    Args:
        a: Первый множитель
        b: Второй множитель
        fmt: Формат float (default: FP64)

    Returns:
        (a', b') с a' / b' == a / b

    Examples:
        >>> simplify_factors(90.0, 420.0)
        (3.0, 14.0)
        >>> simplify_factors(0.0, 5.0)
        (0.0, 1.0)
        >>> simplify_factors(5.0, 0.0)
        (1.0, 0.0)
    """
    if a == 0:
        return 0.0, 1.0
    if b == 0:
        return 1.0, 0.0

    a_sign, a_int, a_exp = exponential_form(a, fmt)
    b_sign, b_int, b_exp = exponential_form(b, fmt)

    divisor = math.gcd(a_int, b_int)
    shift = exponent_shift(a_exp, b_exp)

    return (
        from_exponential_form(a_sign, a_int // divisor, a_exp - shift, fmt),
        from_exponential_form(b_sign, b_int // divisor, b_exp - shift, fmt),
    )


def reduce_exponent(value: DecimalValue) -> DecimalValue:
    """
    Балансировка экспонент numerator/denominator результата.

    Применяется к результатам сложения и умножения. GCD не вычисляется:
    числитель суммы не является произведением исходных множителей.
    Нулевой numerator канонизируется в {0, 1}.

    Examples:
        >>> reduce_exponent(DecimalValue(21.0, 10.0)).numerator
        2.625
    """
    fmt = value.fmt
    if value.numerator == 0:
        return DecimalValue.zero(fmt)

    n_sign, n_exp, n_mant = decompose(value.numerator, fmt)
    d_sign, d_exp, d_mant = decompose(value.denominator, fmt)
    shift = exponent_shift(n_exp, d_exp)

    return DecimalValue(
        reconstruct(n_sign, n_exp - shift, n_mant, fmt),
        reconstruct(d_sign, d_exp - shift, d_mant, fmt),
        fmt,
    )
