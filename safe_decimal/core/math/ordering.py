"""
Ordering — полный порядок DecimalValue через перекрёстное умножение

Нормализация для корректности не нужна. Предусловие: оба операнда
конечные и корректно сформированные (не перепроверяется). Операнды
разных форматов не сравниваются (ValueError), как и в арифметике.
"""

from safe_decimal.core.math.decimal_value import DecimalValue, require_same_format


def compare(a: DecimalValue, b: DecimalValue) -> int:
    """
    Сравнение a.numerator * b.denominator с a.denominator * b.numerator.

    Returns:
        -1 если a < b
         0 если a == b
        +1 если a > b

    Raises:
        ValueError: Форматы операндов различаются

    Examples:
        >>> compare(DecimalValue(1.0, 3.0), DecimalValue(2.0, 6.0))
        0
        >>> compare(DecimalValue(-1.0, 2.0), DecimalValue(1.0, 4.0))
        -1
    """
    require_same_format(a, b)
    fmt = a.fmt
    left = fmt.round(a.numerator * b.denominator)
    right = fmt.round(a.denominator * b.numerator)

    if left == right:
        return 0
    elif left > right:
        return 1
    else:
        return -1


def equals(a: DecimalValue, b: DecimalValue) -> bool:
    """Равенство значений (не полей): compare(a, b) == 0."""
    return compare(a, b) == 0
