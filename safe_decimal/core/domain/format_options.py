"""
FormatOptions — конфигурация форматирования в строку

Immutable Pydantic модель: radix, max_decimals, rounding.
Переопределение полей создаёт новый валидированный экземпляр.
"""

from enum import Enum, IntEnum
from typing import Any, Optional

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class Radix(IntEnum):
    """Основание системы счисления для парсинга и форматирования"""

    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEXADECIMAL = 16


class RoundingDirection(str, Enum):
    """Направление округления"""

    UP = "up"  # от нуля
    DOWN = "down"  # к нулю
    CEIL = "ceil"  # к +infinity
    FLOOR = "floor"  # к -infinity
    EVEN = "even"  # к чётной последней цифре


class Rounding(str, Enum):
    """
    Политика округления: направление x флаг nearest.

    HALF_* политики округляют к ближайшему соседу и применяют направление
    только к ровной половине.
    """

    UP = "up"
    DOWN = "down"
    CEIL = "ceil"
    FLOOR = "floor"
    EVEN = "even"
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"
    HALF_CEIL = "half_ceil"
    HALF_FLOOR = "half_floor"
    HALF_EVEN = "half_even"

    @property
    def nearest(self) -> bool:
        return self.value.startswith("half_")

    @property
    def direction(self) -> RoundingDirection:
        return RoundingDirection(self.value.removeprefix("half_"))


# =============================================================================
# FORMAT OPTIONS
# =============================================================================


class FormatOptions(BaseModel):
    """
    Параметры форматирования SafeDecimal в строку.

    Immutable модель (frozen=True): with_* методы возвращают новый экземпляр
    и проходят валидацию заново.
    """

    radix: Radix = Field(default=Radix.DECIMAL, description="Основание вывода")
    max_decimals: int = Field(
        default=16, ge=0, description="Максимум цифр после разделителя"
    )
    rounding: Rounding = Field(
        default=Rounding.HALF_CEIL,
        description="Политика округления при отсечении цифр",
    )

    model_config = {"frozen": True}  # Immutable

    def with_radix(self, radix: Radix) -> "FormatOptions":
        return self._override(radix=radix)

    def with_max_decimals(self, max_decimals: int) -> "FormatOptions":
        return self._override(max_decimals=max_decimals)

    def with_rounding(self, rounding: Rounding) -> "FormatOptions":
        return self._override(rounding=rounding)

    def _override(self, **overrides: Any) -> "FormatOptions":
        return type(self)(**{**self.model_dump(), **overrides})

    @classmethod
    def merged(
        cls, options: Optional["FormatOptions"] = None, **overrides: Any
    ) -> "FormatOptions":
        """
        Опции по умолчанию (или options) с переопределёнными полями.

        Examples:
            >>> FormatOptions.merged(max_decimals=2).max_decimals
            2
            >>> FormatOptions.merged().rounding
            <Rounding.HALF_CEIL: 'half_ceil'>
        """
        base = options if options is not None else cls()
        if not overrides:
            return base
        return base._override(**overrides)
