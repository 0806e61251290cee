"""
Contract Validation Module

Валидация и сериализация Microns согласно JSON Schema контракту.
"""

from .serialization import (
    MICRONS_ADAPTER,
    dump_microns,
    dump_microns_json,
    load_microns,
    load_microns_json,
    microns_json_schema,
)
from .validators import (
    ContractValidator,
    MicronsValidator,
    SchemaLoader,
    validate_microns,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MicronsValidator",
    # Functions
    "validate_microns",
    "dump_microns",
    "dump_microns_json",
    "load_microns",
    "load_microns_json",
    "microns_json_schema",
    # Adapters
    "MICRONS_ADAPTER",
]
