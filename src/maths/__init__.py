"""
maths — immutable complex number value type with IEEE-754 extended semantics.
"""

from maths.core.contracts import ComplexValidator, validate_complex
from maths.core.domain import Complex

__all__ = [
    "Complex",
    "ComplexValidator",
    "validate_complex",
]

__version__ = "0.1.0"
