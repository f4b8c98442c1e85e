"""
Float Bits — IEEE-754 декомпозиция и реконструкция

Модуль работает с битовым представлением двоичных float'ов:
- FloatFormat: параметры ширины (FP32 / FP64), округление в ширину
- decompose / reconstruct: (sign, unbiased exponent, mantissa) <-> float
- exponential_form / from_exponential_form: (sign, odd-or-zero integer, exponent)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. decompose и reconstruct взаимно обратны для всех конечных нормальных значений
2. exponential_form возвращает нечётное целое (или 0 для нуля)
3. Все операции детерминированы и не имеют состояния

ИЗВЕСТНЫЕ ОГРАНИЧЕНИЯ:
- reconstruct не проверяет диапазон экспоненты. Вышедшая за поле экспонента
  заворачивается по модулю ширины формата (результат: infinity, NaN или
  "обёрнутое" значение), ошибка не сообщается.
- Subnormal значения декомпозируются как нормальные (implicit bit
  восстанавливается), поэтому decompose/reconstruct остаются взаимно
  обратными, но exponential_form для них не равен истинному значению.
"""

import math
import struct
from dataclasses import dataclass
from typing import Final


# =============================================================================
# FLOAT FORMAT
# =============================================================================


@dataclass(frozen=True)
class FloatFormat:
    """
    Параметры двоичного float формата.

    Экземпляр описывает capability набор конкретной ширины: битовую
    декомпозицию, реконструкцию, округление арифметики в ширину формата
    и кратчайшее round-trip представление.
    """

    name: str
    exponent_bits: int
    mantissa_bits: int
    float_code: str  # struct код float ('d' / 'f')
    uint_code: str  # struct код беззнакового целого той же ширины
    significant_digits: int  # максимум цифр для кратчайшего round-trip

    @property
    def bias(self) -> int:
        return (1 << (self.exponent_bits - 1)) - 1

    @property
    def total_bits(self) -> int:
        return 1 + self.exponent_bits + self.mantissa_bits

    @property
    def exponent_mask(self) -> int:
        return (1 << self.exponent_bits) - 1

    @property
    def mantissa_mask(self) -> int:
        return (1 << self.mantissa_bits) - 1

    @property
    def bits_mask(self) -> int:
        return (1 << self.total_bits) - 1

    def to_bits(self, value: float) -> int:
        """Битовое представление value в данном формате."""
        return struct.unpack("<" + self.uint_code, struct.pack("<" + self.float_code, value))[0]

    def from_bits(self, bits: int) -> float:
        """Float из битового представления данного формата."""
        return struct.unpack("<" + self.float_code, struct.pack("<" + self.uint_code, bits))[0]

    def round(self, value: float) -> float:
        """
        Округление value в ширину формата (round-half-even).

        Для FP64 — тождество. Для FP32 переполнение даёт infinity со знаком,
        как и нативная арифметика single precision.

        Examples:
            >>> FP32.round(0.1)
            0.10000000149011612
            >>> FP32.round(1e39)
            inf
        """
        try:
            return struct.unpack("<" + self.float_code, struct.pack("<" + self.float_code, value))[0]
        except OverflowError:
            return math.inf if value > 0 else -math.inf

    def from_int(self, value: int) -> float:
        """
        Конверсия целого произвольной длины в float формата.

        Целые вне диапазона формата становятся infinity со знаком.
        """
        try:
            converted = float(value)
        except OverflowError:
            converted = math.inf if value > 0 else -math.inf
        return self.round(converted)

    def shortest_repr(self, value: float) -> str:
        """
        Кратчайшая научная запись, которая round-trip'ится в value.

        Examples:
            >>> FP64.shortest_repr(0.1)
            '1e-01'
            >>> FP64.shortest_repr(123456.1)
            '1.234561e+05'
        """
        for precision in range(self.significant_digits):
            text = f"{value:.{precision}e}"
            if self.round(float(text)) == value:
                return text
        return f"{value:.{self.significant_digits - 1}e}"


FP64: Final[FloatFormat] = FloatFormat(
    name="fp64",
    exponent_bits=11,
    mantissa_bits=52,
    float_code="d",
    uint_code="Q",
    significant_digits=17,
)

FP32: Final[FloatFormat] = FloatFormat(
    name="fp32",
    exponent_bits=8,
    mantissa_bits=23,
    float_code="f",
    uint_code="I",
    significant_digits=9,
)

FORMATS: Final[dict[str, FloatFormat]] = {fmt.name: fmt for fmt in (FP64, FP32)}


# =============================================================================
# БИТОВАЯ ДЕКОМПОЗИЦИЯ
# =============================================================================


def decompose(value: float, fmt: FloatFormat = FP64) -> tuple[int, int, int]:
    """
    Извлечение полей IEEE-754: (sign, unbiased exponent, mantissa).

    Mantissa возвращается без implicit bit.

    Args:
        value: Исходное значение (уже в ширине fmt)
        fmt: Формат float (default: FP64)

    Returns:
        (sign, exponent, mantissa), где sign в {0, 1}

    Examples:
        >>> decompose(1.0)
        (0, 0, 0)
        >>> decompose(-2.5)
        (1, 1, 1125899906842624)
        >>> decompose(0.0)
        (0, -1023, 0)
    """
    bits = fmt.to_bits(value)
    sign = bits >> (fmt.exponent_bits + fmt.mantissa_bits)
    exponent = ((bits >> fmt.mantissa_bits) & fmt.exponent_mask) - fmt.bias
    mantissa = bits & fmt.mantissa_mask
    return sign, exponent, mantissa


def reconstruct(sign: int, exponent: int, mantissa: int, fmt: FloatFormat = FP64) -> float:
    """
    Сборка float из (sign, unbiased exponent, mantissa).

    ВНИМАНИЕ: диапазон экспоненты не проверяется. Если exponent + bias не
    помещается в поле экспоненты, биты заворачиваются в two's complement
    по ширине формата: результат — infinity, NaN или "обёрнутое" значение.

    Examples:
        >>> reconstruct(0, 0, 0)
        1.0
        >>> reconstruct(1, 1, 1 << 50)
        -2.5
    """
    biased = exponent + fmt.bias
    bits = ((((sign << fmt.exponent_bits) | biased) << fmt.mantissa_bits) | mantissa) & fmt.bits_mask
    return fmt.from_bits(bits)


# =============================================================================
# ЭКСПОНЕНЦИАЛЬНАЯ ФОРМА
# =============================================================================


def exponential_form(value: float, fmt: FloatFormat = FP64) -> tuple[int, int, int]:
    """
    Каноническая форма value = (-1)^sign * integer * 2^exponent.

    Восстанавливает implicit bit и переносит хвостовые нулевые биты целого
    в экспоненту, так что integer нечётный. Ноль: (sign, 0, 0).

    Examples:
        >>> exponential_form(12.0)
        (0, 3, 2)
        >>> exponential_form(0.375)
        (0, 3, -3)
        >>> exponential_form(-0.0)
        (1, 0, 0)
    """
    sign, exponent, mantissa = decompose(value, fmt)
    if exponent == -fmt.bias and mantissa == 0:
        return sign, 0, 0

    integer = mantissa | (1 << fmt.mantissa_bits)
    trailing_zeros = (integer & -integer).bit_length() - 1
    return sign, integer >> trailing_zeros, exponent - fmt.mantissa_bits + trailing_zeros


def from_exponential_form(
    sign: int, integer: int, exponent: int, fmt: FloatFormat = FP64
) -> float:
    """
    Обратная операция к exponential_form.

    Сдвигает integer так, чтобы старший бит попал на позицию implicit bit,
    корректирует экспоненту, отбрасывает implicit bit и собирает float.
    Тот же неохраняемый диапазон экспоненты, что и у reconstruct.

    Examples:
        >>> from_exponential_form(0, 3, 2)
        12.0
        >>> from_exponential_form(1, 5, -1)
        -2.5
    """
    if integer == 0:
        return reconstruct(sign, -fmt.bias, 0, fmt)

    top_bit = integer.bit_length() - 1
    if top_bit <= fmt.mantissa_bits:
        mantissa = (integer << (fmt.mantissa_bits - top_bit)) & fmt.mantissa_mask
    else:
        # Целые шире мантиссы усекаются
        mantissa = (integer >> (top_bit - fmt.mantissa_bits)) & fmt.mantissa_mask
    return reconstruct(sign, exponent + top_bit, mantissa, fmt)


def is_sign_negative(value: float) -> bool:
    """Установлен ли sign bit (включая -0.0)."""
    return math.copysign(1.0, value) < 0
