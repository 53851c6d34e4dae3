"""
Numerical Safeguards — Total Float Primitives

Модуль обеспечивает тотальность скалярных операций для Complex:
- Экспонента/логарифм/тригонометрия без исключений (NaN/Inf вместо ValueError/OverflowError)
- Epsilon-сравнения float с учётом машинной точности
- copy_sign с конвенцией "ноль и NaN → положительный знак"
- Тотальное трёхзначное сравнение float для сортировки

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция модуля не бросает исключение на NaN/Inf/overflow
2. NaN пропагируется как значение, а не как ошибка
3. Float сравнения с толерантностью всегда учитывают машинную точность
4. Все операции детерминированы и воспроизводимы
"""

import math
import numbers
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close и Complex.is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def to_float(value: numbers.Real) -> float:
    """
    Конверсия числа Python во float без OverflowError.

    Args:
        value: int, float, Fraction и т.п. (может не помещаться во float)

    Returns:
        float(value); ±Inf если значение вне диапазона float

    Examples:
        >>> to_float(3)
        3.0
        >>> to_float(-10**400)
        -inf
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ЗНАК И СРАВНЕНИЕ
# =============================================================================


def copy_sign(magnitude: float, sign: float) -> float:
    """
    Перенос знака sign на magnitude.

    В отличие от math.copysign, знак нуля (в том числе -0.0) и NaN
    считается положительным: magnitude возвращается без изменений.

    Args:
        magnitude: Значение, чей модуль сохраняется
        sign: Источник знака

    Returns:
        magnitude со знаком sign

    Examples:
        >>> copy_sign(1.0, -3.0)
        -1.0
        >>> copy_sign(1.0, -0.0)
        1.0
        >>> copy_sign(-1.0, 2.0)
        1.0
    """
    if sign == 0.0 or math.isnan(sign) or (magnitude < 0) == (sign < 0):
        return magnitude
    return -magnitude


def compare_floats(a: float, b: float) -> int:
    """
    Тотальное трёхзначное сравнение float.

    NaN больше любого числа и равен NaN; -0.0 равен 0.0.

    Returns:
        -1 если a < b, 0 если равны, +1 если a > b
    """
    a_nan = math.isnan(a)
    b_nan = math.isnan(b)

    if a_nan or b_nan:
        # NaN в конце любой сортировки
        return int(a_nan) - int(b_nan)

    if a < b:
        return -1
    if a > b:
        return 1
    return 0


# =============================================================================
# ТОТАЛЬНЫЕ ТРАНСЦЕНДЕНТНЫЕ ФУНКЦИИ
# =============================================================================


def safe_exp(value: float) -> float:
    """
    Экспонента без OverflowError.

    Args:
        value: Показатель степени (может быть NaN/Inf)

    Returns:
        exp(value); +Inf при переполнении, NaN для NaN

    Examples:
        >>> safe_exp(0.0)
        1.0
        >>> safe_exp(1000.0)
        inf
    """
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление по правилам IEEE-754 без ZeroDivisionError.

    Args:
        numerator: Числитель
        denominator: Знаменатель (может быть ±0.0)

    Returns:
        numerator / denominator; для нулевого знаменателя:
        - NaN если числитель 0 или NaN
        - ±Inf со знаком numerator * denominator иначе

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return math.nan

    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def safe_log(value: float) -> float:
    """
    Натуральный логарифм без ValueError.

    Returns:
        log(value); -Inf для 0, NaN для отрицательных и NaN, +Inf для +Inf
    """
    if math.isnan(value) or value < 0.0:
        return math.nan
    if value == 0.0:
        return -math.inf
    return math.log(value)


def safe_cos(value: float) -> float:
    """Косинус: NaN для бесконечного аргумента вместо ValueError."""
    if math.isinf(value):
        return math.nan
    return math.cos(value)


def safe_sin(value: float) -> float:
    """Синус: NaN для бесконечного аргумента вместо ValueError."""
    if math.isinf(value):
        return math.nan
    return math.sin(value)
