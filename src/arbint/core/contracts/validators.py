"""
JSON Schema Contract Validators

Модуль для валидации JSON представлений значений arbint согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (package data, arbint/core/contracts/schema/):
- magnitude.json: {"hex": "0x..."}
- signed_integer.json: {"negative": bool, "magnitude": "0x..."}

Кодирование использует compact hex формат (без пробелов), поэтому
decode(encode(x)) == x для любого канонического значения.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from arbint.core.domain.magnitude import Magnitude
from arbint.core.domain.signed import SignedInteger

# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'magnitude')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class MagnitudeValidator(ContractValidator):
    """Валидатор для magnitude контракта."""

    def __init__(self):
        super().__init__("magnitude")


class SignedIntegerValidator(ContractValidator):
    """Валидатор для signed_integer контракта."""

    def __init__(self):
        super().__init__("signed_integer")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_magnitude(data: Dict[str, Any]) -> None:
    """
    Валидация magnitude данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MagnitudeValidator().validate(data)


def validate_signed_integer(data: Dict[str, Any]) -> None:
    """
    Валидация signed_integer данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    SignedIntegerValidator().validate(data)


def magnitude_to_contract(value: Magnitude) -> Dict[str, Any]:
    """Magnitude → dict, соответствующий magnitude.json."""
    return {"hex": value.to_hex_string()}


def magnitude_from_contract(data: Dict[str, Any]) -> Magnitude:
    """
    dict → Magnitude с предварительной валидацией по схеме.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_magnitude(data)
    return Magnitude.from_hex_string(data["hex"])


def signed_integer_to_contract(value: SignedInteger) -> Dict[str, Any]:
    """SignedInteger → dict, соответствующий signed_integer.json."""
    return {"negative": value.negative, "magnitude": value.magnitude.to_hex_string()}


def signed_integer_from_contract(data: Dict[str, Any]) -> SignedInteger:
    """
    dict → SignedInteger с предварительной валидацией по схеме.

    {"negative": true, "magnitude": "0x0"} допустим и даёт канонический ноль.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_signed_integer(data)
    return SignedInteger.from_sign_magnitude(
        data["negative"], Magnitude.from_hex_string(data["magnitude"])
    )
