"""Rules — правила корзины, оцениваемые на шагах checkout.

- Rule 1: лимит 1 mystery box на заказ
- Rule 2: mystery box несовместим с deposit товарами
- Rule 3: mystery box нельзя купить отдельно
"""

from .cart_rules import (
    RULE_MESSAGES,
    CartClassification,
    CartRule,
    CartRulesEvaluator,
    CartRulesResult,
    classify_cart,
)

__all__ = [
    "RULE_MESSAGES",
    "CartClassification",
    "CartRule",
    "CartRulesEvaluator",
    "CartRulesResult",
    "classify_cart",
]
