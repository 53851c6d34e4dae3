"""
Contract Validation Module

Модуль для валидации JSON контрактов wire-формы Complex.
"""

from .validators import (
    ComplexValidator,
    ContractValidator,
    SchemaLoader,
    validate_complex,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComplexValidator",
    # Functions
    "validate_complex",
]
