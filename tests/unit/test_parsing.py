"""
Тесты для модуля Parsing

Проверяет:
1. Десятичные строки (знак, целая и дробная части)
2. Префиксы radix (0b / 0o / 0x), регистр шестнадцатеричных цифр
3. Точность дробей radix 2 / 8 / 16
4. Усечение десятичной дроби по лимиту формата
5. Ошибки: пустые части, некорректные цифры, позиция ошибки
"""

import pytest

from safe_decimal.conversion.formatting import to_decimal_string
from safe_decimal.conversion.parsing import (
    DecimalParseError,
    ParseErrorKind,
    fractional_part_2,
    fractional_part_10,
    fractional_part_16,
    from_parts,
    parse,
    parse_integer,
)
from safe_decimal.core.domain.format_options import FormatOptions
from safe_decimal.core.math.float_bits import FP32
from safe_decimal.core.math.ordering import equals


def decimal_text(text: str, max_decimals: int = 20) -> str:
    return to_decimal_string(parse(text), FormatOptions(max_decimals=max_decimals))


# =============================================================================
# ТЕСТЫ ДЕСЯТИЧНЫХ СТРОК
# =============================================================================


class TestDecimalParsing:
    """Тесты разбора base-10"""

    def test_simple_decimal(self):
        value = parse("12.34")
        assert (value.numerator, value.denominator) == (4.8203125, 0.390625)
        assert decimal_text("12.34") == "12.34"

    def test_sign(self):
        assert parse("-1.5").to_float() == -1.5
        assert parse("+1.5").to_float() == 1.5
        assert parse("-7").to_float() == -7.0

    def test_integer_is_not_normalized(self):
        """Строка без разделителя даёт {n, 1}"""
        value = parse("12")
        assert (value.numerator, value.denominator) == (12.0, 1.0)

    def test_trailing_separator(self):
        """"12." == 12"""
        assert equals(parse("12."), parse("12"))

    def test_long_fraction_roundtrips(self):
        assert decimal_text("0.1234567890123456") == "0.1234567890123456"
        assert parse("123456.1").to_float() == 123456.1

    def test_large_integer(self):
        text = "123456789012345678901234567890"
        assert parse(text).to_float() == float(int(text))

    def test_fraction_truncated_to_format_limit(self):
        """Цифры после 22-й дробной не влияют на результат"""
        assert equals(parse("0." + "1" * 22), parse("0." + "1" * 22 + "999"))

    def test_fp32(self):
        value = parse("0.1", FP32)
        assert value.fmt is FP32
        assert value.to_float() == FP32.round(0.1)

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0.000000000123", 1.23e-10),
            ("0.0000000000000005", 5e-16),
            ("-1.00000000025", -1.00000000025),
        ],
    )
    def test_fp32_long_fraction_keeps_significant_digits(self, text, expected):
        """Ведущие нули FP32 дроби не отсекают значащие цифры"""
        assert parse(text, FP32).to_float() == pytest.approx(expected, rel=1e-6)

    def test_fractional_part_10(self):
        value = fractional_part_10("34")
        assert (value.numerator, value.denominator) == (8.5, 25.0)
        assert fractional_part_10("").numerator == 0.0


# =============================================================================
# ТЕСТЫ ПРЕФИКСОВ RADIX
# =============================================================================


class TestRadixParsing:
    """Тесты разбора base-2 / 8 / 16"""

    def test_hex_integer(self):
        assert parse("0x1A").to_float() == 26.0
        assert parse("0xff").to_float() == 255.0

    def test_hex_fraction(self):
        assert parse("-0xa.ff").to_float() == -10.99609375
        assert decimal_text("-0xa.ff") == "-10.99609375"
        assert parse("0x0.1").to_float() == 0.0625

    def test_hex_fraction_exact(self):
        """Шестнадцатеричная дробь переводится без потерь"""
        assert decimal_text("0xbeef.decaf", 30) == "48879.87028408050537109375"

    def test_binary(self):
        assert parse("-0b1.11").to_float() == -1.75
        assert parse("+0b10.0000000001").to_float() == 2.0009765625
        assert parse("0b101").to_float() == 5.0

    def test_octal(self):
        assert parse("0o17").to_float() == 15.0
        assert parse("0o7.4").to_float() == 7.5
        assert parse("0o0.01").to_float() == 0.015625

    def test_fractional_part_2(self):
        assert fractional_part_2("1").numerator == 0.5
        assert fractional_part_2("011").numerator == 0.375
        assert fractional_part_2("000").numerator == 0.0

    def test_fractional_part_16(self):
        assert fractional_part_16("8").numerator == 0.5
        assert fractional_part_16("F").numerator == 0.9375


# =============================================================================
# ТЕСТЫ ОШИБОК
# =============================================================================


class TestParseErrors:
    """Тесты DecimalParseError"""

    def test_empty_string(self):
        with pytest.raises(DecimalParseError) as exc_info:
            parse("")
        assert exc_info.value.kind is ParseErrorKind.EMPTY
        assert exc_info.value.position == 0

    def test_sign_only(self):
        with pytest.raises(DecimalParseError) as exc_info:
            parse("-")
        assert exc_info.value.kind is ParseErrorKind.EMPTY
        assert exc_info.value.position == 1

    def test_prefix_only(self):
        with pytest.raises(DecimalParseError) as exc_info:
            parse("0x")
        assert exc_info.value.kind is ParseErrorKind.EMPTY
        assert exc_info.value.position == 2

    def test_missing_integer_part(self):
        with pytest.raises(DecimalParseError) as exc_info:
            parse(".5")
        assert exc_info.value.kind is ParseErrorKind.EMPTY

    def test_invalid_integer_digit(self):
        with pytest.raises(DecimalParseError) as exc_info:
            parse("12a")
        assert exc_info.value.kind is ParseErrorKind.INVALID_DIGIT
        assert exc_info.value.position == 2

    def test_invalid_fraction_digit(self):
        with pytest.raises(DecimalParseError) as exc_info:
            parse("1.2x")
        assert exc_info.value.kind is ParseErrorKind.INVALID_DIGIT
        assert exc_info.value.position == 3

    def test_digit_outside_radix(self):
        """Цифра 2 недопустима в base-2, 8 — в base-8"""
        with pytest.raises(DecimalParseError) as exc_info:
            parse("0b102")
        assert exc_info.value.position == 4

        with pytest.raises(DecimalParseError) as exc_info:
            parse("0b1.2")
        assert exc_info.value.position == 4

        with pytest.raises(DecimalParseError):
            parse("0o8")

    def test_second_separator(self):
        with pytest.raises(DecimalParseError) as exc_info:
            parse("1.2.3")
        assert exc_info.value.position == 3

    def test_whitespace_rejected(self):
        with pytest.raises(DecimalParseError):
            parse(" 1")
        with pytest.raises(DecimalParseError):
            parse("1_000")

    def test_is_value_error(self):
        """DecimalParseError — подкласс ValueError"""
        with pytest.raises(ValueError, match="Cannot parse 'abc'"):
            parse("abc")


# =============================================================================
# ТЕСТЫ СБОРКИ ИЗ ЧАСТЕЙ
# =============================================================================


class TestFromParts:
    """Тесты parse_integer / from_parts"""

    def test_parse_integer(self):
        assert parse_integer("-42").to_float() == -42.0
        assert parse_integer("0x10").to_float() == 16.0

    def test_parse_integer_rejects_fraction(self):
        with pytest.raises(DecimalParseError):
            parse_integer("1.5")

    def test_from_parts(self):
        assert from_parts("-3", "35").to_float() == -3.35
        assert equals(from_parts("3", None), parse("3"))
        assert equals(from_parts("3", ""), parse("3"))
