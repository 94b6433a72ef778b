"""Точка входа функции валидации корзины для checkout платформы

payload хоста → контрактная проверка (только логирование) → CartValidationsInput
→ CartRulesEvaluator → {"operations": [{"validationAdd": {"errors": [...]}}]}

Функция не бросает исключений на входах документированной формы:
нарушения контракта логируются, оценка продолжается толерантно.
"""

from typing import Any

from src.checkout.config import DEFAULT_ENVIRONMENT, CartRulesConfig
from src.checkout.rules.cart_rules import CartRulesEvaluator
from src.core.contracts import CART_VALIDATIONS_INPUT
from src.core.domain.cart import CartValidationsInput
from src.core.logging import get_logger

logger = get_logger(__name__)

# Выбирается один раз при старте процесса
_DEFAULT_CONFIG = CartRulesConfig.for_environment(DEFAULT_ENVIRONMENT)


def cart_validations_generate_run(
    payload: Any,
    config: CartRulesConfig | None = None,
) -> dict[str, Any]:
    """Валидация корзины по payload хоста.

    Args:
        payload: вход от checkout платформы (buyerJourney, cart.lines)
        config: конфигурация правил (по умолчанию: DEFAULT_ENVIRONMENT)

    Returns:
        Ответ хосту с единственной операцией validationAdd
    """
    for violation in CART_VALIDATIONS_INPUT.violations(payload):
        logger.warning(
            "cart_input_contract_violation",
            path=violation.path,
            error=violation.message,
        )

    cart_input = CartValidationsInput.from_payload(payload)
    result = CartRulesEvaluator(config or _DEFAULT_CONFIG).evaluate(cart_input)
    return result.validation.to_payload()
