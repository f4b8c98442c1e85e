"""
JSON Schema Contract Validators

Валидация сериализованного SafeDecimal в два шага:
1. JSON Schema контракт safe_decimal.json: структура, типы, enum формата,
   denominator > 0 (jsonschema.ValidationError)
2. Доменные проверки, которые JSON Schema не выражает (ValueError):
   - numerator и denominator конечны (не NaN/Inf)
   - поля остаются конечными после округления в ширину формата
   - denominator после округления строго положителен

Python json принимает NaN/Infinity, а "type": "number" пропускает их,
поэтому шаг 2 обязателен перед созданием DecimalValue.
"""

import json
import math
from pathlib import Path
from typing import Any, Dict, Final, Iterator, Optional, Tuple

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from safe_decimal.core.math.float_bits import FORMATS

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"
SAFE_DECIMAL_SCHEMA: Final[str] = "safe_decimal"
PAIR_FIELDS: Final[Tuple[str, str]] = ("numerator", "denominator")


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema из данных пакета (contracts/schema/).

    Каждая схема читается и проходит meta-validation один раз.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени без расширения.

        Raises:
            FileNotFoundError: Файл схемы не найден
            ValueError: Схема не проходит Draft 2020-12 meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# =============================================================================
# ДОМЕННЫЕ ПРОВЕРКИ
# =============================================================================


def pair_violations(data: Dict[str, Any]) -> Iterator[Tuple[str, str]]:
    """
    Нарушения пары (field, message) для данных, уже прошедших схему.

    Examples:
        >>> list(pair_violations({"numerator": 1.0, "denominator": 2.0, "format": "fp64"}))
        []
        >>> list(pair_violations({"numerator": 1e39, "denominator": 1.0, "format": "fp32"}))
        [('numerator', 'numerator overflows fp32: 1e+39')]
    """
    fmt = FORMATS[data["format"]]
    for field in PAIR_FIELDS:
        value = data[field]
        if isinstance(value, float) and not math.isfinite(value):
            yield field, f"{field} must be finite (not NaN/Inf), got {value}"
        elif not math.isfinite(fmt.round(value)):
            yield field, f"{field} overflows {fmt.name}: {value}"

    denominator = fmt.round(data["denominator"])
    if math.isfinite(denominator) and denominator <= 0:
        yield "denominator", (
            f"denominator must be positive in {fmt.name}, got {data['denominator']}"
        )


# =============================================================================
# VALIDATOR
# =============================================================================


class SafeDecimalValidator:
    """
    Валидатор сериализованного SafeDecimal: схема, затем доменные проверки.

    Доменные проверки выполняются только для данных, прошедших схему.
    """

    def __init__(self, loader: Optional[SchemaLoader] = None):
        self.schema = (loader or SchemaLoader()).load_schema(SAFE_DECIMAL_SCHEMA)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Данные не соответствуют схеме
            ValueError: Поле NaN/Inf, переполняет формат или denominator <= 0
        """
        self._validator.validate(data)
        violation = next(pair_violations(data), None)
        if violation is not None:
            raise ValueError(violation[1])

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения в виде ValidationError (схема, затем пара)."""
        schema_valid = True
        for error in self._validator.iter_errors(data):
            schema_valid = False
            yield error

        if schema_valid:
            for field, message in pair_violations(data):
                yield ValidationError(message, path=(field,), instance=data[field])

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return next(self.iter_errors(data), None) is None


_VALIDATOR = SafeDecimalValidator()


def validate_safe_decimal(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного SafeDecimal общим экземпляром валидатора.

    Raises:
        ValidationError: Данные не соответствуют схеме
        ValueError: Поле NaN/Inf, переполняет формат или denominator <= 0
    """
    _VALIDATOR.validate(data)
