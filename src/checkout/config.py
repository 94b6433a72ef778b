"""Конфигурация правил корзины по окружению развертывания

Наборы product id (mystery box / deposit) различаются для test и production
магазина. Окружение выбирается один раз при старте процесса константой
DEFAULT_ENVIRONMENT; runtime переконфигурация не поддерживается.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from src.core.domain.cart import CHECKOUT_STEPS, BuyerJourneyStep
from src.core.domain.validation import DEFAULT_ERROR_TARGET


# =============================================================================
# ENVIRONMENT
# =============================================================================


class DeploymentEnvironment(str, Enum):
    """Окружение развертывания функции"""

    TEST = "test"
    PRODUCTION = "production"


# Окружение текущей сборки (менять на PRODUCTION при выкладке в боевой магазин)
DEFAULT_ENVIRONMENT: Final[DeploymentEnvironment] = DeploymentEnvironment.TEST


# =============================================================================
# PRODUCT ID SETS
# =============================================================================


@dataclass(frozen=True)
class ProductIdSets:
    """Наборы товаров, участвующих в правилах.

    mystery_box_ids: взаимозаменяемые mystery box товары (лимит 1 шт. на заказ)
    deposit_product_ids: депозитные товары, несовместимые с mystery box
    """

    mystery_box_ids: frozenset[str]
    deposit_product_ids: frozenset[str]


PRODUCT_ID_SETS: Final[dict[DeploymentEnvironment, ProductIdSets]] = {
    DeploymentEnvironment.TEST: ProductIdSets(
        mystery_box_ids=frozenset(
            {
                "gid://shopify/Product/8953675907329",  # Mystery Box 1
                "gid://shopify/Product/8953675940097",  # Mystery Box 2
            }
        ),
        deposit_product_ids=frozenset(
            {
                "gid://shopify/Product/8953676398849",  # WH80 1 Dollar Deposit
                "gid://shopify/Product/8953676103937",  # Node75 1 Dollar Deposit
            }
        ),
    ),
    DeploymentEnvironment.PRODUCTION: ProductIdSets(
        mystery_box_ids=frozenset(
            {
                "gid://shopify/Product/7867011006573",  # Black Friday Mystery Box - $4.99
                "gid://shopify/Product/7867007238253",  # Black Friday Mystery Box - $0.99
            }
        ),
        deposit_product_ids=frozenset(
            {
                "gid://shopify/Product/7824752115821",  # WH80 1 Dollar Deposit
                "gid://shopify/Product/7843318890605",  # Node75 1 Dollar Deposit
            }
        ),
    ),
}


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CartRulesConfig:
    """Конфигурация CartRulesEvaluator.

    Usage::

        config = CartRulesConfig.for_environment(DeploymentEnvironment.PRODUCTION)
        evaluator = CartRulesEvaluator(config)
    """

    environment: DeploymentEnvironment
    product_ids: ProductIdSets

    # Шаги покупателя, на которых правила применяются
    checkout_steps: frozenset[BuyerJourneyStep] = CHECKOUT_STEPS

    error_target: str = DEFAULT_ERROR_TARGET
    max_mystery_box_quantity: int = 1

    @classmethod
    def for_environment(
        cls,
        environment: DeploymentEnvironment | str = DEFAULT_ENVIRONMENT,
    ) -> "CartRulesConfig":
        """Конфигурация для окружения.

        Args:
            environment: DeploymentEnvironment или его строковое значение

        Returns:
            CartRulesConfig с наборами product id окружения

        Raises:
            ValueError: неизвестное окружение
        """
        try:
            env = DeploymentEnvironment(environment)
        except ValueError:
            raise ValueError(
                f"Unknown deployment environment: {environment!r} "
                f"(expected one of {[e.value for e in DeploymentEnvironment]})"
            ) from None
        return cls(environment=env, product_ids=PRODUCT_ID_SETS[env])
