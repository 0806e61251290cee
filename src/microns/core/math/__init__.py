"""
Core math modules для microns

Целочисленные и float примитивы с гарантией стабильности.
"""

from microns.core.math.numerical_safeguards import (
    # I32 bounds
    I32_MAX,
    I32_MIN,
    # Float checks
    is_nan,
    is_real_number,
    is_valid_float,
    # I32 checks and truncation
    div_trunc,
    fits_i32,
    trunc_to_int,
    # Validation
    validate_i32,
    validate_in_open_range,
)

__all__ = [
    # Numerical Safeguards: I32 bounds
    "I32_MAX",
    "I32_MIN",
    # Numerical Safeguards: Float checks
    "is_nan",
    "is_real_number",
    "is_valid_float",
    # Numerical Safeguards: I32 checks and truncation
    "div_trunc",
    "fits_i32",
    "trunc_to_int",
    # Numerical Safeguards: Validation
    "validate_i32",
    "validate_in_open_range",
]
