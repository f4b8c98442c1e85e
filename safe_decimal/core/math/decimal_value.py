"""
DecimalValue — пара float'ов (numerator, denominator)

Immutable значение numerator / denominator в двоичном float формате.
Ядро (normalizer, arithmetic, parsing, formatting) работает только с ним;
публичный SafeDecimal оборачивает его.

ИНВАРИАНТЫ:
1. Знак хранится в numerator после нормализации (denominator >= 0)
2. Канонический ноль: {0, 1}
3. Каждая операция возвращает новый экземпляр
"""

from dataclasses import dataclass, field

from safe_decimal.core.math.float_bits import FP64, FloatFormat


@dataclass(frozen=True)
class DecimalValue:
    """
    Значение numerator / denominator.

    Конструктор не валидирует поля: экземпляры создаются на горячем пути
    арифметики.
    """

    numerator: float
    denominator: float
    fmt: FloatFormat = field(default=FP64, compare=False)

    @classmethod
    def zero(cls, fmt: FloatFormat = FP64) -> "DecimalValue":
        """Канонический ноль {0, 1}."""
        return cls(0.0, 1.0, fmt)

    @classmethod
    def from_integer(cls, value: int, fmt: FloatFormat = FP64) -> "DecimalValue":
        """
        {value, 1} для целого произвольной длины.

        Целые вне диапазона формата дают infinity (без ошибки).
        """
        return cls(fmt.from_int(value), 1.0, fmt)

    def to_float(self) -> float:
        """
        numerator / denominator в ширине формата.

        Здесь снова появляется обычное округление float: цель конверсии —
        float конечной точности.
        """
        return self.fmt.round(self.numerator / self.denominator)


def require_same_format(a: DecimalValue, b: DecimalValue) -> None:
    """
    Проверка, что два операнда одной ширины.

    Raises:
        ValueError: Форматы операндов различаются
    """
    if a.fmt != b.fmt:
        raise ValueError(
            f"Cannot combine values of different float formats: {a.fmt.name} and {b.fmt.name}"
        )
