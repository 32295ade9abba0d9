"""
Sort Spec Contract

JSON-конфигурация составного компаратора проверяется по JSON Schema
(Draft 2020-12, interlude/core/contracts/schema/sort_spec.json), после чего
превращается в Pydantic SortSpec и далее в компаратор.

Пример конфигурации:
    {
        "schema_version": "1",
        "keys": [
            {"field": "age", "direction": "+"},
            {"field": "name", "direction": "-"}
        ]
    }

Направление ключа можно опустить (default: "+"); field — непустая строка
или неотрицательный индекс.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator

from interlude.core.domain.sort_key import SortKey, SortSpec
from interlude.core.sequences.comparators import Comparator, comparing_by
from interlude.logger import logger

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"
SORT_SPEC_SCHEMA: Final[str] = "sort_spec"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Чтение JSON Schema из каталога с проверкой самой схемы.

    По умолчанию каталог — schema/ внутри пакета; другой каталог удобен
    для тестов и для схем приложения.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения; повторные вызовы берут её из кэша.

        Raises:
            FileNotFoundError: Если файла схемы нет
            ValueError: Если содержимое не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# =============================================================================
# SORT SPEC VALIDATOR
# =============================================================================


class SortSpecValidator:
    """Проверка JSON-конфигурации компаратора по схеме sort_spec."""

    def __init__(self, loader: SchemaLoader | None = None):
        schema = (loader or SchemaLoader()).load_schema(SORT_SPEC_SCHEMA)
        self._validator = Draft202012Validator(schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первая найденная ошибка
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        """Все нарушения схемы (пустой итератор для валидных данных)."""
        return self._validator.iter_errors(data)


@lru_cache(maxsize=1)
def default_validator() -> SortSpecValidator:
    """Общий валидатор для схемы, поставляемой с пакетом."""
    return SortSpecValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_sort_spec(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    default_validator().validate(data)


def parse_sort_spec(data: Dict[str, Any]) -> SortSpec:
    """
    Валидация JSON-конфигурации и построение SortSpec.

    Args:
        data: Конфигурация (dict, например из json.load)

    Returns:
        Immutable SortSpec

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    validate_sort_spec(data)
    spec = SortSpec(keys=tuple(SortKey(**key) for key in data["keys"]))
    logger.debug("Parsed sort spec with %d key(s)", len(spec.keys))
    return spec


def comparing_from_spec(data: Dict[str, Any]) -> Comparator:
    """
    Составной компаратор из JSON-конфигурации.

    Examples:
        >>> cmp = comparing_from_spec({"schema_version": "1",
        ...                            "keys": [{"field": "age"}]})
        >>> cmp({"age": 1}, {"age": 3})
        -2
    """
    return comparing_by(parse_sort_spec(data))
