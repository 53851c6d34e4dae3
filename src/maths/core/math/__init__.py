"""
Core math modules для maths

Скалярные численные примитивы с гарантией тотальности (без исключений на NaN/Inf).
"""

from maths.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Float checks
    is_close,
    is_valid_float,
    # Sign and ordering
    compare_floats,
    copy_sign,
    # Total arithmetic
    ieee_divide,
    safe_cos,
    safe_exp,
    safe_log,
    safe_sin,
    to_float,
)

__all__ = [
    # Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Float checks
    "is_close",
    "is_valid_float",
    # Sign and ordering
    "compare_floats",
    "copy_sign",
    # Total arithmetic
    "ieee_divide",
    "safe_cos",
    "safe_exp",
    "safe_log",
    "safe_sin",
    "to_float",
]
