"""
CartValidationsResult — Модель результата валидации корзины

Immutable Pydantic модели выхода функции:
    {"operations": [{"validationAdd": {"errors": [{"message", "target"}]}}]}

Соответствует схеме src/core/contracts/schema/cart_validations_result.json.
"""

from collections.abc import Iterable
from typing import Any, Final

from pydantic import BaseModel, Field

# Ошибка относится ко всей корзине
DEFAULT_ERROR_TARGET: Final[str] = "cart"


class CartValidationError(BaseModel):
    """Сообщение валидации для покупателя (не исключение)."""

    message: str = Field(..., min_length=1, description="Текст для покупателя")
    target: str = Field(DEFAULT_ERROR_TARGET, min_length=1, description="Локус ошибки")

    model_config = {"frozen": True}


class ValidationAdd(BaseModel):
    """Набор ошибок, добавляемых к checkout."""

    errors: tuple[CartValidationError, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}


class Operation(BaseModel):
    """Операция ответа функции (поддерживается только validationAdd)."""

    validation_add: ValidationAdd = Field(..., alias="validationAdd")

    model_config = {"frozen": True, "populate_by_name": True}


class CartValidationsResult(BaseModel):
    """
    Результат функции валидации корзины.

    Всегда ровно одна операция validationAdd (возможно с пустым списком ошибок).
    """

    operations: tuple[Operation, ...] = Field(..., min_length=1, max_length=1)

    model_config = {"frozen": True}

    @classmethod
    def from_errors(cls, errors: Iterable[CartValidationError]) -> "CartValidationsResult":
        """Оборачивание ошибок в единственную операцию validationAdd."""
        return cls(operations=(Operation(validation_add=ValidationAdd(errors=tuple(errors))),))

    @classmethod
    def empty(cls) -> "CartValidationsResult":
        return cls.from_errors(())

    @property
    def errors(self) -> tuple[CartValidationError, ...]:
        """Все ошибки по всем операциям, в исходном порядке."""
        return tuple(error for op in self.operations for error in op.validation_add.errors)

    def to_payload(self) -> dict[str, Any]:
        """
        Сериализация в формат ответа хосту.

        Returns:
            JSON-совместимый dict с ключами в camelCase
        """
        return self.model_dump(mode="json", by_alias=True)
