"""
Domain models and value objects.

Contains the immutable Complex value type.
"""

from maths.core.domain.complex import NAN_HASH, Complex, ComplexLike

__all__ = [
    "Complex",
    "ComplexLike",
    "NAN_HASH",
]
