"""
Microns Serialization — pydantic + JSON Schema

Сериализованная форма Microns: структурная запись с одним полем
{"raw": <i32>}. Генерация и разбор делегированы pydantic (TypeAdapter),
входящие данные дополнительно проверяются контрактом microns.json.

Порядок при загрузке:
1. JSON Schema контракт (jsonschema): форма записи и диапазон i32
2. pydantic валидация: строгий int, создание Microns
"""

import json
from typing import Any, Dict, Final

from pydantic import TypeAdapter

from microns.core.contracts.validators import validate_microns
from microns.core.domain.microns import Microns

MICRONS_ADAPTER: Final[TypeAdapter[Microns]] = TypeAdapter(Microns)


def dump_microns(value: Microns) -> Dict[str, Any]:
    """
    Сериализация Microns в dict.

    Examples:
        >>> dump_microns(Microns(1500))
        {'raw': 1500}
    """
    return MICRONS_ADAPTER.dump_python(value)


def dump_microns_json(value: Microns) -> str:
    """Сериализация Microns в JSON строку: '{"raw":1500}'."""
    return MICRONS_ADAPTER.dump_json(value).decode("utf-8")


def load_microns(data: Dict[str, Any]) -> Microns:
    """
    Десериализация Microns из dict.

    Raises:
        jsonschema.ValidationError: Если данные нарушают контракт
        pydantic.ValidationError: Если raw не строгий int
    """
    validate_microns(data)
    return MICRONS_ADAPTER.validate_python(data)


def load_microns_json(payload: str | bytes) -> Microns:
    """Десериализация Microns из JSON строки через контракт."""
    return load_microns(json.loads(payload))


def microns_json_schema() -> Dict[str, Any]:
    """JSON Schema, сгенерированная pydantic для Microns."""
    return MICRONS_ADAPTER.json_schema()
