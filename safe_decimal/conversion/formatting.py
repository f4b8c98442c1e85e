"""
Formatting — DecimalValue -> строка

Длинное деление в целевом radix: целая часть, затем до max_decimals раз
остаток умножается на radix и извлекается следующая цифра. Деление
останавливается, как только остаток стал точно нулём.

Если после max_decimals цифр остаток ненулевой, применяется политика
округления (FormatOptions.rounding):
- не-nearest политики решают только по направлению
- HALF_* политики сравнивают 2 * остаток со знаменателем; ровно половина
  решается направлением, больше — вверх, меньше — вниз

Вывод: "-" только для ненулевого отрицательного результата, цифры целевого
radix без префикса, хвостовые нули дробной части отбрасываются, ноль — "0".
"""

from typing import Final, Optional

from safe_decimal.core.domain.format_options import (
    FormatOptions,
    Rounding,
    RoundingDirection,
)
from safe_decimal.core.math.decimal_value import DecimalValue

DIGIT_ALPHABET: Final[str] = "0123456789abcdef"

INTEGER_FORMAT_SPECS: Final[dict[int, str]] = {
    2: "b",
    8: "o",
    10: "d",
    16: "x",
}


# =============================================================================
# ROUNDING
# =============================================================================


def direction_rounds_up(
    direction: RoundingDirection, is_negative: bool, is_odd: bool
) -> bool:
    """
    Решение по направлению, без учёта близости к половине.

    Args:
        direction: Направление округления
        is_negative: Значение отрицательное
        is_odd: Последняя цифра (или целая часть) нечётная

    Returns:
        True если модуль нужно увеличить на единицу последнего разряда
    """
    if direction is RoundingDirection.UP:
        # <- 0 ->
        return True
    elif direction is RoundingDirection.DOWN:
        # -> 0 <-
        return False
    elif direction is RoundingDirection.CEIL:
        # -> +Infinity
        return not is_negative
    elif direction is RoundingDirection.FLOOR:
        # <- -Infinity
        return is_negative
    else:
        return is_odd


def should_round_up(
    rounding: Rounding, is_negative: bool, is_odd: bool, half_cmp: int
) -> bool:
    """
    Нужно ли увеличивать модуль отсечённого результата.

    Args:
        rounding: Политика округления
        is_negative: Значение отрицательное
        is_odd: Последняя цифра (или целая часть) нечётная
        half_cmp: Знак (2 * остаток - знаменатель): -1, 0 или +1

    Examples:
        >>> should_round_up(Rounding.HALF_EVEN, False, False, 0)
        False
        >>> should_round_up(Rounding.HALF_DOWN, False, False, 1)
        True
        >>> should_round_up(Rounding.CEIL, True, False, 1)
        False
    """
    if not rounding.nearest or half_cmp == 0:
        return direction_rounds_up(rounding.direction, is_negative, is_odd)
    return half_cmp > 0


def increment(digits: list[int], radix: int) -> int:
    """
    Прибавление единицы к последней цифре с переносом (in-place).

    Returns:
        Перенос в целую часть (0 или 1)

    Examples:
        >>> digits = [1, 9, 9]
        >>> increment(digits, 10), digits
        (0, [2, 0, 0])
        >>> digits = [15]
        >>> increment(digits, 16), digits
        (1, [0])
    """
    for position in range(len(digits) - 1, -1, -1):
        if digits[position] < radix - 1:
            digits[position] += 1
            return 0
        digits[position] = 0
    return 1


# =============================================================================
# FORMATTING
# =============================================================================


def to_decimal_string(value: DecimalValue, options: Optional[FormatOptions] = None) -> str:
    """
    Строковое представление value в целевом radix.

    Args:
        value: Конечное значение
        options: Параметры форматирования (default: FormatOptions())

    Returns:
        Строка вида [-]integer[.digits]

    Examples:
        >>> to_decimal_string(DecimalValue(1.0, 3.0), FormatOptions(max_decimals=2))
        '0.33'
        >>> to_decimal_string(DecimalValue(26.0, 1.0), FormatOptions(radix=16))
        '1a'
    """
    options = options if options is not None else FormatOptions()
    fmt = value.fmt
    radix = int(options.radix)

    is_negative = value.numerator < 0
    numerator = abs(value.numerator)
    denominator = value.denominator

    integer_part = int(fmt.round(numerator / denominator))
    numerator = fmt.round(numerator - fmt.round(fmt.from_int(integer_part) * denominator))

    digits: list[int] = []
    for _ in range(options.max_decimals):
        if numerator == 0:
            break
        numerator = fmt.round(numerator * radix)
        digit = int(fmt.round(numerator / denominator))
        digits.append(digit)
        numerator = fmt.round(numerator - fmt.round(digit * denominator))

    if numerator != 0:
        if options.max_decimals == 0:
            is_odd = integer_part % 2 == 1
        else:
            is_odd = digits[-1] % 2 == 1

        doubled = 2 * numerator
        half_cmp = (doubled > denominator) - (doubled < denominator)

        if should_round_up(options.rounding, is_negative, is_odd, half_cmp):
            integer_part += increment(digits, radix)

    fraction_text = "".join(DIGIT_ALPHABET[digit] for digit in digits).rstrip("0")

    if integer_part == 0 and not fraction_text:
        # Ноль без знака
        return "0"

    sign = "-" if is_negative else ""
    integer_text = format(integer_part, INTEGER_FORMAT_SPECS[radix])
    if fraction_text:
        return f"{sign}{integer_text}.{fraction_text}"
    return f"{sign}{integer_text}"


def to_fixed(
    value: DecimalValue,
    decimals: int,
    rounding: Rounding = Rounding.HALF_CEIL,
    options: Optional[FormatOptions] = None,
) -> str:
    """
    Строка ровно с decimals цифрами после разделителя.

    Examples:
        >>> to_fixed(DecimalValue(5.0, 2.0), 3)
        '2.500'
        >>> to_fixed(DecimalValue(2.0, 3.0), 0)
        '1'
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    options = FormatOptions.merged(options, max_decimals=decimals, rounding=rounding)
    text = to_decimal_string(value, options)
    if decimals == 0:
        return text

    integer_text, _, fraction_text = text.partition(".")
    return f"{integer_text}.{fraction_text.ljust(decimals, '0')}"
