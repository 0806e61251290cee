"""
Tests for Microns Serialization & JSON Schema Contract

Проверяет:
- Валидность самой схемы microns.json
- Валидацию правильных и неправильных записей
- Сериализацию через pydantic ({"raw": <int>})
- Загрузку через контракт
- Интеграцию с Pydantic моделями
"""

import json

import jsonschema
import pytest
from pydantic import BaseModel, ValidationError

from microns import Microns
from microns.core.contracts import (
    MicronsValidator,
    SchemaLoader,
    dump_microns,
    dump_microns_json,
    load_microns,
    load_microns_json,
    microns_json_schema,
    validate_microns,
)
from microns.core.math.numerical_safeguards import I32_MAX, I32_MIN


# =============================================================================
# FIXTURES
# =============================================================================


class Segment(BaseModel):
    """Отрезок траектории инструмента."""

    start: Microns
    end: Microns

    model_config = {"frozen": True}


@pytest.fixture
def valid_segment_data():
    """Валидные данные отрезка."""
    return {"start": {"raw": 0}, "end": {"raw": 1500}}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_load_microns_schema(self) -> None:
        """Схема загружается и проходит meta-validation"""
        schema = SchemaLoader().load_schema("microns")

        assert schema["title"] == "Microns"
        assert schema["required"] == ["raw"]
        jsonschema.Draft202012Validator.check_schema(schema)

    def test_schema_cached(self) -> None:
        """Повторная загрузка возвращает тот же объект"""
        loader = SchemaLoader()
        assert loader.load_schema("microns") is loader.load_schema("microns")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "missing")

    def test_invalid_schema(self, tmp_path) -> None:
        """Невалидная JSON Schema отклоняется"""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_schema_bounds_match_i32(self) -> None:
        """Границы контракта совпадают с i32"""
        raw_schema = SchemaLoader().load_schema("microns")["properties"]["raw"]

        assert raw_schema["minimum"] == I32_MIN
        assert raw_schema["maximum"] == I32_MAX


# =============================================================================
# CONTRACT VALIDATION
# =============================================================================


class TestValidateMicrons:
    """Тесты валидации записей"""

    @pytest.mark.parametrize("raw", [0, -7, I32_MIN, I32_MAX])
    def test_valid(self, raw) -> None:
        validate_microns({"raw": raw})
        assert MicronsValidator().is_valid({"raw": raw})

    @pytest.mark.parametrize(
        "data",
        [
            pytest.param({}, id="missing-raw"),
            pytest.param({"raw": I32_MAX + 1}, id="above-max"),
            pytest.param({"raw": I32_MIN - 1}, id="below-min"),
            pytest.param({"raw": "5"}, id="string"),
            pytest.param({"raw": True}, id="bool"),
            pytest.param({"raw": 1.5}, id="fractional"),
            pytest.param({"raw": 1, "unit": "mm"}, id="extra-field"),
        ],
    )
    def test_invalid(self, data) -> None:
        with pytest.raises(jsonschema.ValidationError):
            validate_microns(data)

        assert not MicronsValidator().is_valid(data)

    def test_iter_errors(self) -> None:
        """Все нарушения перечисляются"""
        errors = list(MicronsValidator().iter_errors({"raw": "5", "unit": "mm"}))
        assert len(errors) == 2


# =============================================================================
# SERIALIZATION
# =============================================================================


class TestSerialization:
    """Тесты dump/load"""

    def test_dump_is_single_field_record(self) -> None:
        assert dump_microns(Microns(1500)) == {"raw": 1500}
        assert dump_microns(Microns.MIN) == {"raw": I32_MIN}

    def test_dump_json(self) -> None:
        assert json.loads(dump_microns_json(Microns(-7))) == {"raw": -7}

    def test_dump_satisfies_contract(self) -> None:
        """Вывод pydantic проходит JSON Schema контракт"""
        for value in (Microns.MIN, Microns.ZERO, Microns.MAX):
            validate_microns(dump_microns(value))

    def test_load(self) -> None:
        assert load_microns({"raw": -7}) == Microns(-7)
        assert load_microns_json('{"raw": 42}') == Microns(42)
        assert load_microns_json(b'{"raw": 42}') == Microns(42)

    @pytest.mark.parametrize("value", [Microns.MIN, Microns(-1111), Microns.MAX])
    def test_json_round_trip(self, value) -> None:
        assert load_microns_json(dump_microns_json(value)) == value

    def test_load_rejects_contract_violation(self) -> None:
        with pytest.raises(jsonschema.ValidationError):
            load_microns({"raw": I32_MAX + 1})

        with pytest.raises(jsonschema.ValidationError):
            load_microns_json('{"value": 1}')

    def test_pydantic_schema_matches_contract(self) -> None:
        """Схема pydantic и контракт согласованы по границам"""
        raw_schema = microns_json_schema()["properties"]["raw"]

        assert raw_schema["type"] == "integer"
        assert raw_schema["minimum"] == I32_MIN
        assert raw_schema["maximum"] == I32_MAX


# =============================================================================
# PYDANTIC INTEGRATION
# =============================================================================


class TestPydanticIntegration:
    """Microns как поле Pydantic моделей"""

    def test_model_from_dict(self, valid_segment_data) -> None:
        segment = Segment(**valid_segment_data)

        assert segment.start == Microns.ZERO
        assert segment.end == Microns(1500)
        assert segment.end - segment.start == Microns.from_float(1.5)

    def test_model_dump(self, valid_segment_data) -> None:
        segment = Segment(start=Microns(0), end=Microns(1500))
        assert segment.model_dump() == valid_segment_data

    def test_model_json_round_trip(self) -> None:
        segment = Segment(start=Microns(-250), end=Microns(I32_MAX))
        restored = Segment.model_validate_json(segment.model_dump_json())

        assert restored == segment

    def test_nested_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Segment(start={"raw": 0}, end={"raw": I32_MAX + 1})

    def test_nested_non_int_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Segment(start={"raw": "0"}, end={"raw": 1})

    def test_model_frozen(self, valid_segment_data) -> None:
        segment = Segment(**valid_segment_data)

        with pytest.raises(ValidationError, match="frozen"):
            segment.start = Microns(1)  # type: ignore
