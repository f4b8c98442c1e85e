"""
Tests for JSON Schema Contract Validators

Проверяет:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints (exclusiveMinimum, enum)
- Доменные проверки пары: NaN/Inf, переполнение формата, denominator <= 0
- Интеграция с SafeDecimal.to_dict()
"""

import math

import pytest
from jsonschema import Draft202012Validator, ValidationError

from safe_decimal import FP32, SafeDecimal
from safe_decimal.contracts import (
    SafeDecimalValidator,
    SchemaLoader,
    pair_violations,
    validate_safe_decimal,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_safe_decimal():
    """Валидный сериализованный SafeDecimal."""
    return {
        "numerator": 0.75,
        "denominator": 2.5,
        "format": "fp64",
    }


# =============================================================================
# ТЕСТЫ ЗАГРУЗКИ СХЕМ
# =============================================================================


class TestSchemaLoader:
    """Тесты SchemaLoader"""

    def test_schema_is_valid(self):
        """Схема проходит meta-validation."""
        schema = SchemaLoader().load_schema("safe_decimal")
        Draft202012Validator.check_schema(schema)
        assert schema["title"] == "SafeDecimal"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("safe_decimal") is loader.load_schema("safe_decimal")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestSafeDecimalValidator:
    """Тесты SafeDecimalValidator"""

    def test_valid_data(self, valid_safe_decimal):
        validate_safe_decimal(valid_safe_decimal)
        assert SafeDecimalValidator().is_valid(valid_safe_decimal)

    def test_negative_numerator_allowed(self, valid_safe_decimal):
        valid_safe_decimal["numerator"] = -0.75
        validate_safe_decimal(valid_safe_decimal)

    @pytest.mark.parametrize("field", ["numerator", "denominator", "format"])
    def test_missing_required_field(self, valid_safe_decimal, field):
        del valid_safe_decimal[field]
        with pytest.raises(ValidationError):
            validate_safe_decimal(valid_safe_decimal)

    def test_extra_field_rejected(self, valid_safe_decimal):
        valid_safe_decimal["scale"] = 2
        with pytest.raises(ValidationError):
            validate_safe_decimal(valid_safe_decimal)

    def test_wrong_type(self, valid_safe_decimal):
        valid_safe_decimal["numerator"] = "0.75"
        with pytest.raises(ValidationError):
            validate_safe_decimal(valid_safe_decimal)

    def test_non_positive_denominator(self, valid_safe_decimal):
        for denominator in (0.0, -2.5):
            valid_safe_decimal["denominator"] = denominator
            assert not SafeDecimalValidator().is_valid(valid_safe_decimal)

    def test_unknown_format(self, valid_safe_decimal):
        valid_safe_decimal["format"] = "fp16"
        with pytest.raises(ValidationError):
            validate_safe_decimal(valid_safe_decimal)

    def test_iter_errors_reports_all(self):
        errors = list(SafeDecimalValidator().iter_errors({"numerator": "x", "denominator": 0}))
        # Тип numerator, exclusiveMinimum и отсутствующий format
        assert len(errors) == 3


# =============================================================================
# ТЕСТЫ ДОМЕННЫХ ПРОВЕРОК ПАРЫ
# =============================================================================


class TestPairViolations:
    """Проверки, которые JSON Schema не выражает"""

    @pytest.mark.parametrize("field", ["numerator", "denominator"])
    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite_field_rejected(self, valid_safe_decimal, field, value):
        """NaN и +Inf проходят "type": "number", но не контракт"""
        valid_safe_decimal[field] = value
        with pytest.raises(ValueError, match="NaN/Inf"):
            validate_safe_decimal(valid_safe_decimal)

    def test_non_finite_reported_as_validation_error(self, valid_safe_decimal):
        valid_safe_decimal["numerator"] = math.nan
        validator = SafeDecimalValidator()

        assert not validator.is_valid(valid_safe_decimal)
        errors = list(validator.iter_errors(valid_safe_decimal))
        assert len(errors) == 1
        assert list(errors[0].path) == ["numerator"]

    def test_fp32_overflow_rejected(self, valid_safe_decimal):
        valid_safe_decimal.update(numerator=1e39, format="fp32")
        with pytest.raises(ValueError, match="overflows fp32"):
            validate_safe_decimal(valid_safe_decimal)

    def test_fp32_denominator_underflow_rejected(self, valid_safe_decimal):
        """Положительный FP64 denominator, обнуляющийся в FP32"""
        valid_safe_decimal.update(denominator=1e-50, format="fp32")
        with pytest.raises(ValueError, match="denominator must be positive"):
            validate_safe_decimal(valid_safe_decimal)

    def test_valid_pair_has_no_violations(self, valid_safe_decimal):
        assert list(pair_violations(valid_safe_decimal)) == []

    def test_large_integer_fields(self, valid_safe_decimal):
        """Целые вне диапазона float не роняют проверку"""
        valid_safe_decimal["numerator"] = 10**400
        assert [field for field, _ in pair_violations(valid_safe_decimal)] == ["numerator"]


# =============================================================================
# ИНТЕГРАЦИЯ С SAFEDECIMAL
# =============================================================================


class TestSafeDecimalIntegration:
    """to_dict() всегда соответствует контракту"""

    @pytest.mark.parametrize("text", ["0", "0.1", "-12.34", "0xff.8", "123456789"])
    def test_to_dict_is_valid(self, text):
        validate_safe_decimal(SafeDecimal(text).to_dict())

    def test_fp32_to_dict_is_valid(self):
        validate_safe_decimal(SafeDecimal("-0.3", FP32).to_dict())
