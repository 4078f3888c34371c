"""
JSON Schema Contract Validators

Валидация wire-формы ставки (JSON) против формальной JSON Schema.
Использует библиотеку jsonschema (Draft 2020-12).

Схемы:
- bid.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик схем wire-формы ставки.

    bid.json лежит в schema/ рядом с этим модулем и ставится как package data,
    поэтому контракт не зависит от расположения checkout. Каждая схема один
    раз проходит meta-validation и кэшируется: кодек создаёт BidValidator
    на каждый decode_bid(), а схема читается с диска только при первом вызове.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Bid contract schema directory not found: {self._schema_dir}")

        # schema_name → схема, уже прошедшая check_schema
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'bid')

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
            raise FileNotFoundError(f"Bid contract schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # В кэш попадают только схемы, прошедшие meta-validation
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

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        """
        Args:
            schema_name: Имя схемы для валидации
            loader: Загрузчик схем (по умолчанию глобальный)
        """
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception"""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации"""
        return self.validator.iter_errors(data)


class BidValidator(ContractValidator):
    """Валидатор для bid контракта"""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("bid", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_bid(data: Dict[str, Any]) -> None:
    """
    Валидация wire-формы ставки.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BidValidator().validate(data)
