"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидатора wire-формы Complex:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и лишних полей
- Интеграция с Pydantic моделью Complex
"""

import json
import math

import pytest
from jsonschema import ValidationError

from maths import Complex
from maths.core.contracts import (
    ComplexValidator,
    ContractValidator,
    SchemaLoader,
    validate_complex,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_complex():
    """Валидная wire-форма Complex."""
    return {"real": 3.0, "image": -4.5}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


def test_schema_loader_loads_complex_schema():
    """Схема complex загружается и проходит meta-validation."""
    loader = SchemaLoader()
    schema = loader.load_schema("complex")

    assert schema["title"] == "Complex"
    assert schema["required"] == ["real", "image"]


def test_schema_loader_caches_schemas():
    """Повторная загрузка возвращает кэшированный объект."""
    loader = SchemaLoader()
    assert loader.load_schema("complex") is loader.load_schema("complex")


def test_schema_loader_raises_on_missing_schema():
    loader = SchemaLoader()
    with pytest.raises(FileNotFoundError, match="Schema not found"):
        loader.load_schema("nonexistent")


def test_schema_loader_raises_on_missing_directory(tmp_path):
    with pytest.raises(RuntimeError, match="Schema directory not found"):
        SchemaLoader(tmp_path / "missing")


def test_schema_loader_rejects_invalid_schema(tmp_path):
    """Невалидная JSON Schema отклоняется при загрузке."""
    (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
    loader = SchemaLoader(tmp_path)

    with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
        loader.load_schema("broken")


def test_contract_validator_with_custom_loader(tmp_path):
    (tmp_path / "pair.json").write_text(
        json.dumps({"type": "array", "minItems": 2, "maxItems": 2}), encoding="utf-8"
    )
    validator = ContractValidator("pair", loader=SchemaLoader(tmp_path))

    assert validator.is_valid([1, 2])
    assert not validator.is_valid([1])


# =============================================================================
# COMPLEX CONTRACT
# =============================================================================


class TestComplexContract:
    """Тесты для complex контракта"""

    def test_valid_data(self, valid_complex):
        validate_complex(valid_complex)
        assert ComplexValidator().is_valid(valid_complex)

    def test_integers_are_numbers(self):
        validate_complex({"real": 3, "image": 0})

    def test_missing_required_field(self, valid_complex):
        del valid_complex["image"]
        with pytest.raises(ValidationError, match="'image' is a required property"):
            validate_complex(valid_complex)

    def test_wrong_type(self, valid_complex):
        valid_complex["real"] = "3.0"
        with pytest.raises(ValidationError):
            validate_complex(valid_complex)

    def test_boolean_is_not_number(self, valid_complex):
        valid_complex["real"] = True
        assert not ComplexValidator().is_valid(valid_complex)

    def test_additional_properties_rejected(self, valid_complex):
        valid_complex["imag"] = 1.0
        with pytest.raises(ValidationError):
            validate_complex(valid_complex)

    def test_iter_errors_reports_all_violations(self):
        errors = list(ComplexValidator().iter_errors({"real": "x"}))
        assert len(errors) == 2


class TestComplexContractIntegration:
    """Интеграция контракта с Pydantic моделью"""

    def test_model_dump_satisfies_contract(self):
        validate_complex(Complex(1.5, -2).model_dump())

    def test_special_values_satisfy_contract(self):
        """NaN/Inf компоненты остаются числами в wire-форме"""
        validate_complex(Complex.NAN.model_dump())
        validate_complex(Complex.INFINITY.model_dump())

    def test_json_payload_round_trip(self, valid_complex):
        payload = json.dumps(valid_complex)
        validate_complex(json.loads(payload))

        z = Complex.model_validate_json(payload)
        assert z == Complex(3.0, -4.5)

    def test_json_constants_parsed(self):
        """JSON-константы NaN/Infinity читаются json.loads как float"""
        data = json.loads('{"real": NaN, "image": Infinity}')
        validate_complex(data)

        z = Complex.model_validate(data)
        assert math.isnan(z.real)
        assert z.image == math.inf
