"""
microns — fixed-precision lengths as scaled integers.

Значения в миллиметрах хранятся как i32 в микронах (1/1000 mm).
"""

from microns.core.contracts import (
    dump_microns,
    dump_microns_json,
    load_microns,
    load_microns_json,
    validate_microns,
)
from microns.core.domain import (
    MAX_MM,
    MICRONS_PER_MM,
    MIN_MM,
    Microns,
    MicronsAbsOverflow,
    MicronsConversion,
    MicronsDivideByZero,
    MicronsError,
    MicronsOutOfRange,
    MicronsOverflow,
    is_convertible_mm,
)

__all__ = [
    # Value type
    "Microns",
    "MicronsConversion",
    # Units
    "MICRONS_PER_MM",
    "MIN_MM",
    "MAX_MM",
    "is_convertible_mm",
    # Exceptions
    "MicronsError",
    "MicronsOutOfRange",
    "MicronsDivideByZero",
    "MicronsAbsOverflow",
    "MicronsOverflow",
    # Serialization
    "dump_microns",
    "dump_microns_json",
    "load_microns",
    "load_microns_json",
    "validate_microns",
]
