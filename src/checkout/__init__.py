"""Checkout — валидация корзины на шагах checkout.

- config: наборы product id по окружению развертывания
- rules: правила Mystery Box / Deposit
- run: точка входа для checkout платформы
"""

from .config import (
    DEFAULT_ENVIRONMENT,
    PRODUCT_ID_SETS,
    CartRulesConfig,
    DeploymentEnvironment,
    ProductIdSets,
)
from .rules import CartRule, CartRulesEvaluator, CartRulesResult
from .run import cart_validations_generate_run

__all__ = [
    "DEFAULT_ENVIRONMENT",
    "PRODUCT_ID_SETS",
    "CartRulesConfig",
    "DeploymentEnvironment",
    "ProductIdSets",
    "CartRule",
    "CartRulesEvaluator",
    "CartRulesResult",
    "cart_validations_generate_run",
]
