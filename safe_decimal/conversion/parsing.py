"""
Parsing — строка -> DecimalValue

Грамматика: ["-"|"+"] ["0b"|"0o"|"0x"] digits ["." digits], radix по
умолчанию 10.

- Целая часть: беззнаковое целое произвольной длины, затем float, знаменатель 1
- Дробная часть по radix:
  - 2: точно, биты после первой '1' напрямую становятся мантиссой
  - 8 / 16: каждая цифра раскрывается в 3 / 4 бита, далее как radix 2
  - 10: не более DECIMAL_DIGITS_LIMIT (22) цифр для обеих ширин;
    numerator = digits / 2^n, denominator = 5^n
- Знак применяется один раз к собранному значению

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Некорректная цифра или пустая обязательная часть -> DecimalParseError
2. Частичный результат никогда не возвращается
"""

import math
from enum import Enum
from itertools import islice
from typing import Callable, Final, Optional

from safe_decimal.core.math.arithmetic import add, neg
from safe_decimal.core.math.decimal_value import DecimalValue
from safe_decimal.core.math.float_bits import FP64, FloatFormat, reconstruct
from safe_decimal.core.math.iter_pad import Pad

# =============================================================================
# CONSTANTS
# =============================================================================

RADIX_PREFIXES: Final[dict[str, int]] = {
    "0b": 2,
    "0o": 8,
    "0x": 16,
}

DIGIT_ALPHABET: Final[str] = "0123456789abcdef"

# Максимум дробных цифр base-10 (5**22 < 2**53), общий для FP64 и FP32
DECIMAL_DIGITS_LIMIT: Final[int] = 22

# Ширина двоичной группы для одной цифры radix 8 / 16
BITS_PER_DIGIT: Final[dict[int, int]] = {
    8: 3,
    16: 4,
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ParseErrorKind(str, Enum):
    """Причина ошибки парсинга"""

    EMPTY = "empty"  # нет цифр там, где они обязательны
    INVALID_DIGIT = "invalid_digit"  # символ не является цифрой активного radix


class DecimalParseError(ValueError):
    """
    Строка не соответствует грамматике числа.

    Attributes:
        text: Исходная строка
        kind: Причина (ParseErrorKind)
        position: Индекс ошибочного символа в text (для EMPTY — позиция,
            где ожидалась цифра)
    """

    def __init__(self, text: str, kind: ParseErrorKind, position: int):
        self.text = text
        self.kind = kind
        self.position = position

        if kind is ParseErrorKind.EMPTY:
            detail = f"expected digits at position {position}"
        else:
            detail = f"invalid digit {text[position]!r} at position {position}"
        super().__init__(f"Cannot parse {text!r} as a decimal number: {detail}")


def _check_digits(text: str, digits: str, offset: int, radix: int) -> None:
    allowed = DIGIT_ALPHABET[:radix]
    for index, char in enumerate(digits):
        if char.lower() not in allowed:
            raise DecimalParseError(text, ParseErrorKind.INVALID_DIGIT, offset + index)


# =============================================================================
# ЦЕЛАЯ ЧАСТЬ
# =============================================================================


def _parse_integer_part(
    text: str, integer_part: str, fmt: FloatFormat
) -> tuple[bool, int, DecimalValue]:
    """
    Разбор знака, префикса radix и цифр целой части.

    Returns:
        (is_negative, radix, абсолютное значение {n, 1})
    """
    is_negative = integer_part.startswith("-")
    offset = 1 if integer_part[:1] in ("-", "+") else 0

    radix = RADIX_PREFIXES.get(integer_part[offset:offset + 2], 10)
    if radix != 10:
        offset += 2

    digits = integer_part[offset:]
    if not digits:
        raise DecimalParseError(text, ParseErrorKind.EMPTY, offset)
    _check_digits(text, digits, offset, radix)

    return is_negative, radix, DecimalValue.from_integer(int(digits, radix), fmt)


# =============================================================================
# ДРОБНАЯ ЧАСТЬ
# =============================================================================


def fractional_part_2(fraction: str, fmt: FloatFormat = FP64) -> DecimalValue:
    """
    Точный разбор двоичной дроби.

    Позиция p первой '1' задаёт экспоненту -(p + 1); следующие за ней биты
    (не более ширины мантиссы, дополненные нулями справа) становятся
    мантиссой. Округления нет: base-2 дробь совпадает с radix самого float.

    Examples:
        >>> fractional_part_2("1").numerator
        0.5
        >>> fractional_part_2("011").numerator
        0.375
    """
    first_one = fraction.find("1")
    if first_one < 0:
        return DecimalValue.zero(fmt)

    exponent = -(first_one + 1)
    bits = islice(fraction[first_one + 1:], fmt.mantissa_bits)

    mantissa = 0
    for bit in Pad(bits, fmt.mantissa_bits, "0"):
        mantissa = (mantissa << 1) | (bit == "1")

    return DecimalValue(reconstruct(0, exponent, mantissa, fmt), 1.0, fmt)


def _expand_to_bits(fraction: str, radix: int) -> str:
    width = BITS_PER_DIGIT[radix]
    return "".join(format(int(char, radix), f"0{width}b") for char in fraction)


def fractional_part_8(fraction: str, fmt: FloatFormat = FP64) -> DecimalValue:
    """Восьмеричная дробь через 3-битное раскрытие цифр."""
    return fractional_part_2(_expand_to_bits(fraction, 8), fmt)


def fractional_part_16(fraction: str, fmt: FloatFormat = FP64) -> DecimalValue:
    """Шестнадцатеричная дробь через 4-битное раскрытие цифр."""
    return fractional_part_2(_expand_to_bits(fraction, 16), fmt)


def fractional_part_10(fraction: str, fmt: FloatFormat = FP64) -> DecimalValue:
    """
    Десятичная дробь 0.<fraction> в виде (digits / 2^n) / 5^n.

    Цифры усекаются до DECIMAL_DIGITS_LIMIT (22) для обеих ширин. В FP64 при
    этой длине 5^n представимо точно, а деление на 2^n — точное масштабирование.
    В FP32 5^n округляется, и отношение теряет точность за пределами 24 бит.
    Ошибка округления digits сокращается в отношении, поэтому
    numerator / denominator == digits / 10^n.

    Examples:
        >>> value = fractional_part_10("34")
        >>> value.numerator, value.denominator
        (8.5, 25.0)
    """
    digits = fraction[:DECIMAL_DIGITS_LIMIT]
    if not digits:
        return DecimalValue.zero(fmt)

    count = len(digits)
    numerator = fmt.round(math.ldexp(fmt.from_int(int(digits)), -count))
    denominator = fmt.from_int(5 ** count)
    return DecimalValue(numerator, denominator, fmt)


FRACTION_PARSERS: Final[dict[int, Callable[[str, FloatFormat], DecimalValue]]] = {
    2: fractional_part_2,
    8: fractional_part_8,
    10: fractional_part_10,
    16: fractional_part_16,
}


# =============================================================================
# PUBLIC API
# =============================================================================


def parse_integer(text: str, fmt: FloatFormat = FP64) -> DecimalValue:
    """
    Разбор строки без дробной части в {n, 1} (со знаком).

    Raises:
        DecimalParseError: Некорректные цифры или пустая строка
    """
    is_negative, _, value = _parse_integer_part(text, text, fmt)
    return neg(value) if is_negative else value


def from_parts(
    integer_part: str,
    fractional_part: Optional[str],
    fmt: FloatFormat = FP64,
    text: Optional[str] = None,
) -> DecimalValue:
    """
    Сборка значения из целой и дробной части.

    fractional_part=None означает отсутствие разделителя: возвращается
    ненормализованное {n, 1}. Пустая строка допустима ("12." == 12).

    Args:
        integer_part: Целая часть со знаком и префиксом radix
        fractional_part: Цифры после разделителя или None
        fmt: Формат float (default: FP64)
        text: Исходная строка для сообщений об ошибке

    Raises:
        DecimalParseError: Некорректные цифры или пустая целая часть
    """
    if fractional_part is None:
        return parse_integer(integer_part, fmt)

    if text is None:
        text = f"{integer_part}.{fractional_part}"

    is_negative, radix, integer_value = _parse_integer_part(text, integer_part, fmt)
    _check_digits(text, fractional_part, len(integer_part) + 1, radix)

    fraction_value = FRACTION_PARSERS[radix](fractional_part, fmt)
    parsed = add(integer_value, fraction_value)
    return neg(parsed) if is_negative else parsed


def parse(text: str, fmt: FloatFormat = FP64) -> DecimalValue:
    """
    Разбор строки по грамматике ["-"|"+"] ["0b"|"0o"|"0x"] digits ["." digits].

    Args:
        text: Исходная строка
        fmt: Формат float (default: FP64)

    Returns:
        DecimalValue

    Raises:
        DecimalParseError: Строка не соответствует грамматике

    Examples:
        >>> parse("0x1A").to_float()
        26.0
        >>> parse("-0xa.ff").to_float()
        -10.99609375
        >>> parse("-0b1.11").to_float()
        -1.75
    """
    integer_part, separator, fractional_part = text.partition(".")
    if not separator:
        return parse_integer(text, fmt)
    return from_parts(integer_part, fractional_part, fmt, text=text)
