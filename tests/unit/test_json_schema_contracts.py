"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и pattern
- Кодирование/декодирование Magnitude и SignedInteger
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from arbint import Magnitude, SignedInteger
from arbint.core.contracts import (
    MagnitudeValidator,
    SchemaLoader,
    SignedIntegerValidator,
    magnitude_from_contract,
    magnitude_to_contract,
    signed_integer_from_contract,
    signed_integer_to_contract,
    validate_magnitude,
    validate_signed_integer,
)

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_magnitude():
    """Валидный magnitude контракт."""
    return {"hex": "0x10000000000000002"}


@pytest.fixture
def valid_signed_integer():
    """Валидный signed_integer контракт."""
    return {"negative": True, "magnitude": "0xDEADBEEF"}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Загрузка и кэширование схем"""

    def test_loads_and_caches(self) -> None:
        loader = SchemaLoader()
        first = loader.load_schema("magnitude")
        assert first["title"] == "magnitude"
        assert loader.load_schema("magnitude") is first

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# MAGNITUDE CONTRACT
# =============================================================================


class TestMagnitudeContract:
    """magnitude.json"""

    def test_valid_data(self, valid_magnitude) -> None:
        validate_magnitude(valid_magnitude)
        assert MagnitudeValidator().is_valid(valid_magnitude)

    def test_missing_required(self) -> None:
        with pytest.raises(ValidationError):
            validate_magnitude({})

    @pytest.mark.parametrize("hex_value", ["ff", "0x", "0x12 34", "-0x1", 255])
    def test_invalid_hex(self, hex_value) -> None:
        assert not MagnitudeValidator().is_valid({"hex": hex_value})

    def test_additional_properties_rejected(self, valid_magnitude) -> None:
        valid_magnitude["extra"] = 1
        errors = list(MagnitudeValidator().iter_errors(valid_magnitude))
        assert len(errors) == 1

    def test_encode(self) -> None:
        value = Magnitude.from_words([2, 1])
        assert magnitude_to_contract(value) == {"hex": "0x10000000000000002"}

    def test_decode(self, valid_magnitude) -> None:
        assert magnitude_from_contract(valid_magnitude) == Magnitude.from_words([2, 1])

    def test_roundtrip_through_json(self) -> None:
        value = Magnitude.from_int(3**200)
        payload = json.loads(json.dumps(magnitude_to_contract(value)))
        assert magnitude_from_contract(payload) == value

    def test_decode_invalid_raises(self) -> None:
        with pytest.raises(ValidationError):
            magnitude_from_contract({"hex": "not hex"})


# =============================================================================
# SIGNED INTEGER CONTRACT
# =============================================================================


class TestSignedIntegerContract:
    """signed_integer.json"""

    def test_valid_data(self, valid_signed_integer) -> None:
        validate_signed_integer(valid_signed_integer)
        assert SignedIntegerValidator().is_valid(valid_signed_integer)

    def test_wrong_sign_type(self, valid_signed_integer) -> None:
        valid_signed_integer["negative"] = "true"
        with pytest.raises(ValidationError):
            validate_signed_integer(valid_signed_integer)

    def test_encode(self) -> None:
        value = SignedInteger.from_int(-255)
        assert signed_integer_to_contract(value) == {"negative": True, "magnitude": "0xFF"}

    def test_decode(self, valid_signed_integer) -> None:
        assert int(signed_integer_from_contract(valid_signed_integer)) == -0xDEADBEEF

    def test_negative_zero_decodes_to_canonical_zero(self) -> None:
        value = signed_integer_from_contract({"negative": True, "magnitude": "0x0"})
        assert value == SignedInteger.zero()
        assert signed_integer_to_contract(value) == {"negative": False, "magnitude": "0x0"}

    def test_roundtrip(self) -> None:
        for number in (-(2**200), -1, 0, 1, 2**64 + 5):
            value = SignedInteger.from_int(number)
            assert signed_integer_from_contract(signed_integer_to_contract(value)) == value
