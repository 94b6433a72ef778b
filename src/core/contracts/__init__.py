"""
Contract Validation Module

JSON Schema контракты входа и ответа функции валидации корзины.
"""

from .contract import (
    CART_VALIDATIONS_INPUT,
    CART_VALIDATIONS_INPUT_SCHEMA,
    CART_VALIDATIONS_RESULT,
    CART_VALIDATIONS_RESULT_SCHEMA,
    Contract,
    ContractViolation,
    load_schema,
)

__all__ = [
    # Classes
    "Contract",
    "ContractViolation",
    # Contracts
    "CART_VALIDATIONS_INPUT",
    "CART_VALIDATIONS_RESULT",
    "CART_VALIDATIONS_INPUT_SCHEMA",
    "CART_VALIDATIONS_RESULT_SCHEMA",
    # Functions
    "load_schema",
]
