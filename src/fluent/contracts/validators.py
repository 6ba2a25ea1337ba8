"""
JSON Schema Contract Validators

Модуль для валидации JSON данных recipe согласно формальным JSON Schema
контрактам. Использует библиотеку jsonschema для проверки соответствия данных
схемам.

Схемы:
- chain_recipe.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator

from src.fluent.domain.recipe import ChainRecipe
from src.fluent.logger import logger

# Корень проекта: 4 уровня вверх от этого файла
DEFAULT_SCHEMA_DIR = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию ищет схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else DEFAULT_SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'chain_recipe')

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

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER: Optional[SchemaLoader] = None


def get_schema_loader() -> SchemaLoader:
    """Глобальный экземпляр загрузчика (создаётся при первом обращении)."""
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


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
            loader: Загрузчик схем (default: глобальный)
        """
        self.schema_name = schema_name
        self.schema = (loader or get_schema_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class ChainRecipeValidator(ContractValidator):
    """Валидатор для chain_recipe контракта."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("chain_recipe", loader=loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_chain_recipe(data: Dict[str, Any]) -> None:
    """
    Валидация chain_recipe данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ChainRecipeValidator().validate(data)


def load_chain_recipe(data: Dict[str, Any]) -> ChainRecipe:
    """
    Валидация по контракту и построение ChainRecipe.

    Args:
        data: JSON-совместимый dict

    Returns:
        ChainRecipe

    Raises:
        jsonschema.ValidationError: нарушение контракта
        pydantic.ValidationError: нарушение инвариантов модели (NaN, дубли имён)
    """
    validate_chain_recipe(data)
    return ChainRecipe.model_validate(data)
