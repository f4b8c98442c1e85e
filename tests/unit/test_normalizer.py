"""
Тесты для модуля Normalizer

Проверяет:
1. Сдвиг экспонент (усечение к нулю)
2. simplify_factors: GCD, балансировка, нулевые множители, знак
3. reduce_exponent: сохранение значения, канонический ноль
"""

import pytest

from safe_decimal.core.math.decimal_value import DecimalValue
from safe_decimal.core.math.float_bits import FP32, decompose
from safe_decimal.core.math.normalizer import (
    exponent_shift,
    reduce_exponent,
    simplify_factors,
)


# =============================================================================
# ТЕСТЫ СДВИГА ЭКСПОНЕНТ
# =============================================================================


class TestExponentShift:
    """Тесты exponent_shift"""

    def test_positive_sum(self):
        assert exponent_shift(7, 0) == 3
        assert exponent_shift(4, 2) == 3

    def test_negative_sum_truncates_toward_zero(self):
        """-1.5 -> -1, а не -2"""
        assert exponent_shift(-3, 0) == -1
        assert exponent_shift(-7, -2) == -4

    def test_balanced(self):
        assert exponent_shift(5, -5) == 0


# =============================================================================
# ТЕСТЫ SIMPLIFY_FACTORS
# =============================================================================


class TestSimplifyFactors:
    """Тесты simplify_factors"""

    def test_common_divisor_removed(self):
        """90 / 420 == 3 / 14"""
        assert simplify_factors(90.0, 420.0) == (3.0, 14.0)

    def test_zero_factors(self):
        """Нулевой множитель даёт (0, 1) или (1, 0)"""
        assert simplify_factors(0.0, 5.0) == (0.0, 1.0)
        assert simplify_factors(5.0, 0.0) == (1.0, 0.0)

    def test_sign_preserved(self):
        assert simplify_factors(-90.0, 420.0) == (-3.0, 14.0)
        assert simplify_factors(90.0, -420.0) == (3.0, -14.0)

    def test_ratio_preserved(self):
        """a' / b' == a / b (точное сравнение через перекрёстное умножение)"""
        pairs = [(0.75, 2.5), (1e10, 3.0), (0.001953125, 6.0), (2.0**60, 2.0**-40)]
        for a, b in pairs:
            a2, b2 = simplify_factors(a, b)
            assert a2 * b == b2 * a

    def test_exponents_balanced(self):
        """Степени двойки перераспределены поровну"""
        a, b = simplify_factors(2.0**60, 2.0**-40)
        assert (a, b) == (2.0**50, 2.0**-50)

    def test_fp32(self):
        assert simplify_factors(90.0, 420.0, FP32) == (3.0, 14.0)


# =============================================================================
# ТЕСТЫ REDUCE_EXPONENT
# =============================================================================


class TestReduceExponent:
    """Тесты reduce_exponent"""

    def test_value_preserved(self):
        value = DecimalValue(21.0, 10.0)
        reduced = reduce_exponent(value)
        assert reduced.numerator / reduced.denominator == value.to_float()
        assert reduced.numerator == 2.625

    def test_large_exponents_balanced(self):
        reduced = reduce_exponent(DecimalValue(2.0**100, 2.0**90))
        assert (reduced.numerator, reduced.denominator) == (2.0**5, 2.0**-5)

    def test_exponents_close_to_zero(self):
        reduced = reduce_exponent(DecimalValue(3.0 * 2.0**200, 5.0 * 2.0**180))
        _, n_exp, _ = decompose(reduced.numerator)
        _, d_exp, _ = decompose(reduced.denominator)
        assert abs(n_exp) <= 12
        assert abs(d_exp) <= 12
        assert reduced.to_float() == pytest.approx(0.6 * 2.0**20)

    def test_zero_canonicalized(self):
        """Нулевой numerator канонизируется в {0, 1}"""
        reduced = reduce_exponent(DecimalValue(-0.0, 8.0))
        assert reduced.numerator == 0.0
        assert reduced.denominator == 1.0

    def test_sign_stays_in_numerator(self):
        reduced = reduce_exponent(DecimalValue(-12.0, 4.0))
        assert reduced.numerator < 0
        assert reduced.denominator > 0
        assert reduced.to_float() == -3.0

    def test_format_kept(self):
        reduced = reduce_exponent(DecimalValue(21.0, 10.0, FP32))
        assert reduced.fmt is FP32
