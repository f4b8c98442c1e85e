"""
Float Import — нативный float -> DecimalValue

Float, полученный из предыдущих вычислений, уже округлён. Максимально точное
значение 0.1 — это 0.1000000000000000055511151231257827..., поэтому
импорт идёт через кратчайшую round-trip строку ("0.1"), а не через биты.

Эвристика повторяющихся дробей:
    Если 1 / 0.<fraction> имеет более короткую дробную часть, значение
    собирается как integer + inv(import(1 / 0.<fraction>)) точной
    арифметикой. Так ловятся простые периодические дроби (1/3, 1/7 и их
    суммы). Это не детектор цепных дробей: более сложные периоды
    импортируются через base-10 путь (не более 22 значащих дробных цифр).

Дробную часть нельзя получить численно (123456.1 - 123456.0 != 0.1),
поэтому вся работа идёт со строковым представлением.

ИЗВЕСТНЫЕ ОГРАНИЧЕНИЯ:
- import_float(v).to_float() == v не гарантируется. Если целое из цифр
  кратчайшей записи шире мантиссы (16-17 значащих цифр), numerator
  округляется, а to_float() округляет частное ещё раз. Результат может
  отличаться от v на 1 ulp (например 0.9137380191693291 -> ...292).
  Значения, импортированные base-10 путём с не более чем 15 значащими
  цифрами, восстанавливаются точно.
"""

import logging
import math

from safe_decimal.conversion.parsing import from_parts, parse_integer
from safe_decimal.core.math.arithmetic import absolute, add, inv, neg
from safe_decimal.core.math.decimal_value import DecimalValue
from safe_decimal.core.math.float_bits import FP64, FloatFormat

logger = logging.getLogger(__name__)


def split_float(value: float, fmt: FloatFormat = FP64) -> tuple[str, str]:
    """
    Разбиение float на целую и дробную части в виде строк цифр.

    Научная запись кратчайшего round-trip представления раскладывается по
    экспоненте: положительная экспонента дописывает нули справа к целой
    части, отрицательная — ведущие нули к дробной. Хвостовые нули дробной
    части отбрасываются.

    Args:
        value: Конечное значение в ширине fmt
        fmt: Формат float (default: FP64)

    Returns:
        (integer_part со знаком, fractional_part)

    Examples:
        >>> split_float(123456.1)
        ('123456', '1')
        >>> split_float(-0.00125)
        ('-0', '00125')
        >>> split_float(1e20)
        ('100000000000000000000', '')
    """
    significand, _, exponent_text = fmt.shortest_repr(value).partition("e")
    sign = "-" if significand.startswith("-") else ""
    digits = significand.replace(".", "").replace("-", "")
    exponent = int(exponent_text)

    if exponent < 0:
        zeros = "0" * (-exponent - 1)
        return sign + "0", zeros + digits.rstrip("0")

    integer_part = digits[: exponent + 1].ljust(exponent + 1, "0")
    fractional_part = digits[exponent + 1:].rstrip("0")
    return sign + integer_part, fractional_part


def _from_float_parts(
    integer_part: str, fractional_part: str, fmt: FloatFormat
) -> DecimalValue:
    if not fractional_part:
        return from_parts(integer_part, "", fmt)

    # Проверяем, сокращает ли инверсия дробной части число цифр
    inverted = fmt.round(1.0 / fmt.round(float("0." + fractional_part)))
    if not math.isfinite(inverted):
        logger.debug(
            "Inverting 0.%s overflows %s, importing digits directly",
            fractional_part,
            fmt.name,
        )
        return from_parts(integer_part, fractional_part, fmt)

    inv_integer_part, inv_fractional_part = split_float(inverted, fmt)
    if len(inv_fractional_part) >= len(fractional_part):
        return from_parts(integer_part, fractional_part, fmt)

    logger.debug(
        "Fraction 0.%s imported as 1/%s.%s",
        fractional_part,
        inv_integer_part,
        inv_fractional_part,
    )

    # Знак снимается до разделения на целую и дробную части
    is_negative = integer_part.startswith("-")
    integer_value = absolute(parse_integer(integer_part, fmt))
    reciprocal = _from_float_parts(inv_integer_part, inv_fractional_part, fmt)

    # Все слагаемые уже точные дроби: обратная инверсия без потерь
    parsed = add(integer_value, inv(reciprocal))
    return neg(parsed) if is_negative else parsed


def import_float(value: float, fmt: FloatFormat = FP64) -> DecimalValue:
    """
    DecimalValue, равный кратчайшей десятичной записи value.

    Args:
        value: Конечный float (округляется в ширину fmt)
        fmt: Формат float (default: FP64)

    Returns:
        DecimalValue, равный кратчайшей записи value (to_float() может
        отличаться от value на 1 ulp, см. ИЗВЕСТНЫЕ ОГРАНИЧЕНИЯ)

    Raises:
        ValueError: Если value NaN или Inf

    Examples:
        >>> import_float(0.1).to_float()
        0.1
        >>> value = import_float(10 / 21)
        >>> value.numerator, value.denominator
        (1.25, 2.625)
    """
    if not math.isfinite(value):
        raise ValueError(f"value must be a finite float (not NaN/Inf), got {value}")

    value = fmt.round(value)
    integer_part, fractional_part = split_float(value, fmt)
    return _from_float_parts(integer_part, fractional_part, fmt)
