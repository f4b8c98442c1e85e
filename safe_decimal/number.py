"""
SafeDecimal — публичный десятичный тип на паре float'ов

Immutable обёртка над DecimalValue с операторами Python, конструированием
из float / int / str и форматированием.

Конструирование:
- float -> import_float (кратчайшая десятичная запись)
- int -> точный разбор str(value)
- str -> parse (["-"|"+"] ["0b"|"0o"|"0x"] digits ["." digits])
- SafeDecimal / DecimalValue -> без изменений

Отсутствующие результаты:
- inv() и div() нуля возвращают None
- оператор / на ноль бросает ZeroDivisionError (конвенция Python)
"""

import math
from typing import Any, Dict, Final, Optional, Union

from safe_decimal.contracts.validators import validate_safe_decimal
from safe_decimal.conversion.float_import import import_float
from safe_decimal.conversion.formatting import to_decimal_string, to_fixed
from safe_decimal.conversion.parsing import parse, parse_integer
from safe_decimal.core.domain.format_options import FormatOptions, Rounding
from safe_decimal.core.math.arithmetic import absolute, add, div, inv, mul, neg, sub
from safe_decimal.core.math.decimal_value import DecimalValue
from safe_decimal.core.math.float_bits import FORMATS, FP64, FloatFormat
from safe_decimal.core.math.normalizer import reduce_exponent
from safe_decimal.core.math.ordering import compare

SafeDecimalInput = Union["SafeDecimal", DecimalValue, float, int, str]


def _coerce(value: Any, fmt: FloatFormat) -> DecimalValue:
    """
    Приведение входа к DecimalValue.

    Raises:
        TypeError: Неподдерживаемый тип (включая bool)
        DecimalParseError: Некорректная строка
        ValueError: NaN/Inf float
    """
    if isinstance(value, SafeDecimal):
        return value._value
    if isinstance(value, DecimalValue):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a valid SafeDecimal input")
    if isinstance(value, int):
        return parse_integer(str(value), fmt)
    if isinstance(value, float):
        return import_float(value, fmt)
    if isinstance(value, str):
        return parse(value, fmt)
    raise TypeError(f"Unsupported SafeDecimal input type: {type(value).__name__}")


class SafeDecimal:
    """
    Десятичное значение numerator / denominator на паре float'ов.

    Examples:
        >>> SafeDecimal(0.1) + SafeDecimal(0.2) == SafeDecimal(0.3)
        True
        >>> str(SafeDecimal("12.34"))
        '12.34'
        >>> SafeDecimal(1).div(0) is None
        True
    """

    __slots__ = ("_value",)

    def __init__(self, value: SafeDecimalInput = 0, fmt: FloatFormat = FP64):
        object.__setattr__(self, "_value", _coerce(value, fmt))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str, fmt: FloatFormat = FP64) -> "SafeDecimal":
        """Разбор строки (DecimalParseError при некорректном вводе)."""
        return cls(parse(text, fmt))

    @classmethod
    def from_float(cls, value: float, fmt: FloatFormat = FP64) -> "SafeDecimal":
        """Значение, равное кратчайшей десятичной записи float."""
        return cls(import_float(value, fmt))

    @classmethod
    def from_fraction(
        cls, numerator: float, denominator: float, fmt: FloatFormat = FP64
    ) -> "SafeDecimal":
        """
        Значение numerator / denominator из готовой пары float'ов.

        Знак переносится в numerator, экспоненты балансируются.

        Raises:
            ValueError: denominator равен нулю или поля NaN/Inf
        """
        if not (math.isfinite(numerator) and math.isfinite(denominator)):
            raise ValueError(
                f"numerator and denominator must be finite, got {numerator}/{denominator}"
            )
        if denominator == 0:
            raise ValueError("denominator must be non-zero")

        numerator, denominator = fmt.round(numerator), fmt.round(denominator)
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        return cls(reduce_exponent(DecimalValue(numerator, denominator, fmt)))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SafeDecimal":
        """
        Восстановление из to_dict() после проверки контракта.

        Raises:
            jsonschema.ValidationError: Данные не соответствуют JSON Schema
            ValueError: Поле NaN/Inf, переполняет формат или denominator <= 0
        """
        validate_safe_decimal(data)
        fmt = FORMATS[data["format"]]
        return cls(DecimalValue(fmt.round(data["numerator"]), fmt.round(data["denominator"]), fmt))

    def _wrap(self, value: Optional[DecimalValue]) -> Optional["SafeDecimal"]:
        if value is None:
            return None
        return type(self)(value)

    def _other(self, other: SafeDecimalInput) -> DecimalValue:
        return _coerce(other, self.fmt)

    # -------------------------------------------------------------------------
    # Поля
    # -------------------------------------------------------------------------

    @property
    def numerator(self) -> float:
        return self._value.numerator

    @property
    def denominator(self) -> float:
        return self._value.denominator

    @property
    def fmt(self) -> FloatFormat:
        return self._value.fmt

    @property
    def value(self) -> DecimalValue:
        return self._value

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def to_float(self) -> float:
        return self._value.to_float()

    def to_decimal_string(
        self, options: Optional[FormatOptions] = None, **overrides: Any
    ) -> str:
        """
        Строка в radix / точности / округлении из options и overrides.

        Examples:
            >>> SafeDecimal(1).div(3).to_decimal_string(max_decimals=2)
            '0.33'
        """
        return to_decimal_string(self._value, FormatOptions.merged(options, **overrides))

    def to_fixed(self, decimals: int, rounding: Rounding = Rounding.HALF_CEIL) -> str:
        """Строка ровно с decimals дробными цифрами."""
        return to_fixed(self._value, decimals, rounding)

    def to_fraction_string(self) -> str:
        """Пара как есть: '<numerator>/<denominator>'."""
        return f"{self.numerator!r}/{self.denominator!r}"

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация пары (контракт safe_decimal.json)."""
        return {
            "numerator": self.numerator,
            "denominator": self.denominator,
            "format": self.fmt.name,
        }

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return self.numerator != 0

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __repr__(self) -> str:
        return f"SafeDecimal({str(self)!r})"

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def neg(self) -> "SafeDecimal":
        return type(self)(neg(self._value))

    def abs(self) -> "SafeDecimal":
        return type(self)(absolute(self._value))

    def inv(self) -> Optional["SafeDecimal"]:
        """1 / self или None для нуля."""
        return self._wrap(inv(self._value))

    def add(self, other: SafeDecimalInput) -> "SafeDecimal":
        return type(self)(add(self._value, self._other(other)))

    def sub(self, other: SafeDecimalInput) -> "SafeDecimal":
        return type(self)(sub(self._value, self._other(other)))

    def mul(self, other: SafeDecimalInput) -> "SafeDecimal":
        return type(self)(mul(self._value, self._other(other)))

    def div(self, other: SafeDecimalInput) -> Optional["SafeDecimal"]:
        """self / other или None, если other равен нулю."""
        return self._wrap(div(self._value, self._other(other)))

    def __neg__(self) -> "SafeDecimal":
        return self.neg()

    def __pos__(self) -> "SafeDecimal":
        return self

    def __abs__(self) -> "SafeDecimal":
        return self.abs()

    def __add__(self, other: Any) -> "SafeDecimal":
        if not isinstance(other, (SafeDecimal, int, float, str)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> "SafeDecimal":
        if not isinstance(other, (int, float, str)):
            return NotImplemented
        return type(self)(other, self.fmt).add(self)

    def __sub__(self, other: Any) -> "SafeDecimal":
        if not isinstance(other, (SafeDecimal, int, float, str)):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: Any) -> "SafeDecimal":
        if not isinstance(other, (int, float, str)):
            return NotImplemented
        return type(self)(other, self.fmt).sub(self)

    def __mul__(self, other: Any) -> "SafeDecimal":
        if not isinstance(other, (SafeDecimal, int, float, str)):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: Any) -> "SafeDecimal":
        if not isinstance(other, (int, float, str)):
            return NotImplemented
        return type(self)(other, self.fmt).mul(self)

    def __truediv__(self, other: Any) -> "SafeDecimal":
        if not isinstance(other, (SafeDecimal, int, float, str)):
            return NotImplemented
        result = self.div(other)
        if result is None:
            raise ZeroDivisionError("SafeDecimal division by zero")
        return result

    def __rtruediv__(self, other: Any) -> "SafeDecimal":
        if not isinstance(other, (int, float, str)):
            return NotImplemented
        return type(self)(other, self.fmt) / self

    # -------------------------------------------------------------------------
    # Порядок
    # -------------------------------------------------------------------------

    def cmp(self, other: SafeDecimalInput) -> int:
        """-1, 0 или +1 через перекрёстное умножение."""
        return compare(self._value, self._other(other))

    def eq(self, other: SafeDecimalInput) -> bool:
        return self.cmp(other) == 0

    def _comparable(self, other: Any) -> bool:
        if isinstance(other, bool):
            return False
        if isinstance(other, float):
            return math.isfinite(other)
        return isinstance(other, (SafeDecimal, int))

    def __eq__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.cmp(other) == 0

    def __lt__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.cmp(other) < 0

    def __le__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.cmp(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.cmp(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.cmp(other) >= 0

    def __hash__(self) -> int:
        # Согласован с __eq__ для значений, чьё частное округляется одинаково
        return hash(self.to_float())

    # -------------------------------------------------------------------------
    # Функции через float
    # -------------------------------------------------------------------------
    # Результат может быть иррациональным: точность не гарантируется.

    def log(self) -> "SafeDecimal":
        return self.from_float(math.log(self.numerator) - math.log(self.denominator), self.fmt)

    def log10(self) -> "SafeDecimal":
        return self.from_float(
            math.log10(self.numerator) - math.log10(self.denominator), self.fmt
        )

    def log2(self) -> "SafeDecimal":
        return self.from_float(math.log2(self.numerator) - math.log2(self.denominator), self.fmt)

    # Деление выполняется до вызова функции, поэтому точность теряется раньше
    def sin(self) -> "SafeDecimal":
        return self.from_float(math.sin(self.to_float()), self.fmt)

    def cos(self) -> "SafeDecimal":
        return self.from_float(math.cos(self.to_float()), self.fmt)

    def tan(self) -> "SafeDecimal":
        return self.from_float(math.tan(self.to_float()), self.fmt)

    def exp(self) -> "SafeDecimal":
        return self.from_float(math.exp(self.to_float()), self.fmt)

    def pow(self, other: SafeDecimalInput) -> "SafeDecimal":
        exponent = type(self)(self._other(other))
        return self.from_float(math.pow(self.to_float(), exponent.to_float()), self.fmt)


# =============================================================================
# CONSTANTS
# =============================================================================

ZERO: Final[SafeDecimal] = SafeDecimal(0)
ONE: Final[SafeDecimal] = SafeDecimal(1)
PI: Final[SafeDecimal] = SafeDecimal(math.pi)
E: Final[SafeDecimal] = SafeDecimal(math.e)
