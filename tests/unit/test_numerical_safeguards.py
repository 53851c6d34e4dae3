"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Тотальность exp/log/cos/sin/деления (без исключений на NaN/Inf/overflow)
2. Epsilon-сравнения float
3. copy_sign с конвенцией "ноль и NaN положительны"
4. Тотальное сравнение float для сортировки
"""

import math
from fractions import Fraction

import pytest

from maths.core.math import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    compare_floats,
    copy_sign,
    ieee_divide,
    is_close,
    is_valid_float,
    safe_cos,
    safe_exp,
    safe_log,
    safe_sin,
    to_float,
)

# =============================================================================
# ТЕСТЫ ПРОВЕРОК FLOAT
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_valid(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e308)

    def test_nan_inf_invalid(self) -> None:
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)


class TestToFloat:
    """Тесты для to_float"""

    def test_in_range(self) -> None:
        assert to_float(3) == 3.0
        assert isinstance(to_float(3), float)
        assert to_float(Fraction(1, 4)) == 0.25

    def test_out_of_range_is_infinite(self) -> None:
        """Значения вне диапазона float дают ±Inf вместо OverflowError"""
        assert to_float(10**400) == math.inf
        assert to_float(-(10**400)) == -math.inf
        assert to_float(Fraction(-(10**400), 7)) == -math.inf

    def test_special_floats_unchanged(self) -> None:
        assert math.isnan(to_float(math.nan))
        assert to_float(-math.inf) == -math.inf


class TestIsClose:
    """Тесты для is_close"""

    def test_default_tolerances(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_close_values(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(0.0, 1e-13)
        assert is_close(1e10, 1e10 + 1.0)

    def test_distant_values(self) -> None:
        assert not is_close(1.0, 1.1)
        assert not is_close(0.0, 1e-6)


# =============================================================================
# ТЕСТЫ ЗНАКА И СРАВНЕНИЯ
# =============================================================================


class TestCopySign:
    """Тесты для copy_sign"""

    def test_negative_sign(self) -> None:
        assert copy_sign(1.0, -3.0) == -1.0
        assert copy_sign(-1.0, -3.0) == -1.0

    def test_positive_sign(self) -> None:
        assert copy_sign(1.0, 2.0) == 1.0
        assert copy_sign(-1.0, 2.0) == 1.0

    def test_zero_sign_keeps_magnitude(self) -> None:
        """Знак нуля (включая -0.0) не переносится, в отличие от math.copysign"""
        assert copy_sign(1.0, 0.0) == 1.0
        assert copy_sign(1.0, -0.0) == 1.0
        assert math.copysign(1.0, -0.0) == -1.0

    def test_nan_sign_keeps_magnitude(self) -> None:
        assert copy_sign(2.0, math.nan) == 2.0


class TestCompareFloats:
    """Тесты для compare_floats"""

    def test_ordered_values(self) -> None:
        assert compare_floats(1.0, 2.0) == -1
        assert compare_floats(2.0, 1.0) == 1
        assert compare_floats(-math.inf, 0.0) == -1

    def test_equal_values(self) -> None:
        assert compare_floats(1.5, 1.5) == 0
        assert compare_floats(-0.0, 0.0) == 0

    def test_nan_is_greatest(self) -> None:
        assert compare_floats(math.nan, math.inf) == 1
        assert compare_floats(math.inf, math.nan) == -1
        assert compare_floats(math.nan, math.nan) == 0


# =============================================================================
# ТЕСТЫ ТОТАЛЬНЫХ ФУНКЦИЙ
# =============================================================================


class TestIeeeDivide:
    """Тесты для ieee_divide"""

    def test_regular_division(self) -> None:
        assert ieee_divide(10.0, 4.0) == 2.5

    def test_division_by_zero(self) -> None:
        assert ieee_divide(1.0, 0.0) == math.inf
        assert ieee_divide(-1.0, 0.0) == -math.inf
        assert ieee_divide(1.0, -0.0) == -math.inf

    def test_zero_by_zero_is_nan(self) -> None:
        assert math.isnan(ieee_divide(0.0, 0.0))
        assert math.isnan(ieee_divide(math.nan, 0.0))


class TestSafeExpLog:
    """Тесты для safe_exp / safe_log"""

    def test_exp_regular(self) -> None:
        assert safe_exp(0.0) == 1.0
        assert safe_exp(1.0) == pytest.approx(math.e)

    def test_exp_overflow(self) -> None:
        """Переполнение даёт +Inf вместо OverflowError"""
        assert safe_exp(1000.0) == math.inf
        assert safe_exp(math.inf) == math.inf

    def test_exp_underflow_and_nan(self) -> None:
        assert safe_exp(-math.inf) == 0.0
        assert math.isnan(safe_exp(math.nan))

    def test_log_regular(self) -> None:
        assert safe_log(1.0) == 0.0
        assert safe_log(math.e) == pytest.approx(1.0)

    def test_log_domain_edges(self) -> None:
        """Ноль → -Inf, отрицательные и NaN → NaN вместо ValueError"""
        assert safe_log(0.0) == -math.inf
        assert safe_log(-0.0) == -math.inf
        assert math.isnan(safe_log(-1.0))
        assert math.isnan(safe_log(math.nan))
        assert safe_log(math.inf) == math.inf


class TestSafeTrig:
    """Тесты для safe_cos / safe_sin"""

    def test_regular(self) -> None:
        assert safe_cos(0.0) == 1.0
        assert safe_sin(0.0) == 0.0
        assert safe_sin(math.pi / 2) == pytest.approx(1.0)

    def test_infinite_argument(self) -> None:
        assert math.isnan(safe_cos(math.inf))
        assert math.isnan(safe_sin(-math.inf))

    def test_nan_argument(self) -> None:
        assert math.isnan(safe_cos(math.nan))
        assert math.isnan(safe_sin(math.nan))
