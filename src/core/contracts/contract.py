"""
Контракты функции валидации корзины (JSON Schema, Draft 2020-12)

Схемы поставляются внутри пакета (schema/*.json) и читаются через
importlib.resources, поэтому работают и из wheel, и из исходников.

Проверка толерантная: нарушения возвращаются списком ContractViolation,
а не бросаются. Вызывающий код решает сам (логировать, отклонять).
"""

import json
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from typing import Any, Final

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR: Final[str] = "schema"

CART_VALIDATIONS_INPUT_SCHEMA: Final[str] = "cart_validations_input"
CART_VALIDATIONS_RESULT_SCHEMA: Final[str] = "cart_validations_result"


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> dict[str, Any]:
    """
    Чтение схемы из ресурсов пакета.

    Args:
        schema_name: имя схемы без расширения (например, 'cart_validations_input')

    Returns:
        Схема как dict (кэшируется)

    Raises:
        FileNotFoundError: схемы нет среди ресурсов пакета
        ValueError: схема не проходит meta-validation
    """
    resource = resources.files(__package__).joinpath(SCHEMA_DIR).joinpath(f"{schema_name}.json")
    if not resource.is_file():
        raise FileNotFoundError(f"Schema not found in package resources: {schema_name}.json")

    schema = json.loads(resource.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

    return schema


# =============================================================================
# CONTRACT
# =============================================================================


@dataclass(frozen=True)
class ContractViolation:
    """Одно нарушение контракта."""

    # Путь до поля через "/", например "cart/lines/0/quantity"; "" для корня
    path: str
    message: str


class Contract:
    """Именованная схема с толерантной проверкой."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self._validator = Draft202012Validator(load_schema(schema_name))

    def violations(self, data: Any) -> tuple[ContractViolation, ...]:
        """
        Все нарушения контракта в data.

        Returns:
            Пустой tuple, если data соответствует схеме
        """
        return tuple(
            ContractViolation(
                path="/".join(str(part) for part in error.absolute_path),
                message=error.message,
            )
            for error in self._validator.iter_errors(data)
        )

    def conforms(self, data: Any) -> bool:
        return self._validator.is_valid(data)


# Вход от checkout платформы и ответ ей
CART_VALIDATIONS_INPUT: Final[Contract] = Contract(CART_VALIDATIONS_INPUT_SCHEMA)
CART_VALIDATIONS_RESULT: Final[Contract] = Contract(CART_VALIDATIONS_RESULT_SCHEMA)
