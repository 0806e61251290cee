"""
Domain models and value objects.

Contains the Microns scaled-integer value type, unit converters and errors.
"""

from microns.core.domain.exceptions import (
    MicronsAbsOverflow,
    MicronsDivideByZero,
    MicronsError,
    MicronsOutOfRange,
    MicronsOverflow,
)
from microns.core.domain.microns import Microns, MicronsConversion
from microns.core.domain.units import (
    MAX_MM,
    MICRONS_PER_MM,
    MIN_MM,
    is_convertible_mm,
    mm_to_raw,
    raw_to_mm,
    validate_convertible_mm,
)

__all__ = [
    # Units module
    "MICRONS_PER_MM",
    "MIN_MM",
    "MAX_MM",
    "is_convertible_mm",
    "validate_convertible_mm",
    "mm_to_raw",
    "raw_to_mm",
    # Microns value type
    "Microns",
    "MicronsConversion",
    # Exceptions
    "MicronsError",
    "MicronsOutOfRange",
    "MicronsDivideByZero",
    "MicronsAbsOverflow",
    "MicronsOverflow",
]
