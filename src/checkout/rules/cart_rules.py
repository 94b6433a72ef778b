"""Правила корзины: Mystery Box / Deposit

Проверки корзины на шагах checkout:
- Rule 1: не более 1 mystery box на заказ (суммарно по всем mystery box товарам)
- Rule 2: mystery box и deposit товары нельзя покупать вместе
- Rule 3: mystery box нельзя купить отдельно от других товаров

Порядок оценки:
1. Stage gate: вне CHECKOUT_INTERACTION / CHECKOUT_COMPLETION правила не оцениваются
2. Классификация строк корзины за один проход
3. Правила применяются только при mystery_box_quantity > 0; все три
   независимы и могут сработать одновременно (порядок 1, 2, 3)

Evaluator stateless: читает только вход и immutable конфигурацию.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from src.checkout.config import CartRulesConfig, ProductIdSets
from src.core.domain.cart import Cart, CartValidationsInput
from src.core.domain.validation import CartValidationError, CartValidationsResult
from src.core.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# RULES
# =============================================================================


class CartRule(str, Enum):
    """Идентификатор правила корзины"""

    MYSTERY_BOX_QUANTITY_LIMIT = "mystery_box_quantity_limit"
    MYSTERY_BOX_WITH_DEPOSIT = "mystery_box_with_deposit"
    MYSTERY_BOX_ALONE = "mystery_box_alone"


RULE_MESSAGES: Final[dict[CartRule, str]] = {
    CartRule.MYSTERY_BOX_QUANTITY_LIMIT: "You can only purchase one Mystery Box per order.",
    CartRule.MYSTERY_BOX_WITH_DEPOSIT: (
        "Mystery Box and deposit products can’t be bought together."
    ),
    CartRule.MYSTERY_BOX_ALONE: (
        "Mystery Box cannot be purchased alone. Please add something else to your cart."
    ),
}


# =============================================================================
# CLASSIFICATION
# =============================================================================


@dataclass(frozen=True)
class CartClassification:
    """Итоги классификации строк корзины."""

    # Сумма quantity строк с mystery box (включая нулевые)
    mystery_box_quantity: int

    deposit_present: bool
    other_present: bool

    # Строки без product id (не ProductVariant, product=null)
    ignored_lines: int

    @property
    def has_mystery_box(self) -> bool:
        return self.mystery_box_quantity > 0


def classify_cart(cart: Cart, product_ids: ProductIdSets) -> CartClassification:
    """Один проход по строкам корзины.

    Товар из обоих наборов считается mystery box.

    Args:
        cart: снапшот корзины
        product_ids: наборы mystery box / deposit товаров

    Returns:
        CartClassification
    """
    mystery_box_quantity = 0
    deposit_present = False
    other_present = False
    ignored_lines = 0

    for line in cart.lines:
        product_id = line.product_id
        if product_id is None:
            ignored_lines += 1
            continue

        if product_id in product_ids.mystery_box_ids:
            mystery_box_quantity += line.quantity
        elif product_id in product_ids.deposit_product_ids:
            deposit_present = True
        else:
            other_present = True

    return CartClassification(
        mystery_box_quantity=mystery_box_quantity,
        deposit_present=deposit_present,
        other_present=other_present,
        ignored_lines=ignored_lines,
    )


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CartRulesResult:
    """Результат оценки правил корзины."""

    is_checkout_step: bool

    # None, если stage gate пропустил оценку
    classification: CartClassification | None

    violated_rules: tuple[CartRule, ...]
    validation: CartValidationsResult

    # Детали
    details: str

    @property
    def errors(self) -> tuple[CartValidationError, ...]:
        return self.validation.errors


# =============================================================================
# EVALUATOR
# =============================================================================


class CartRulesEvaluator:
    """Оценка правил Mystery Box / Deposit для корзины."""

    def __init__(self, config: CartRulesConfig | None = None):
        """
        Args:
            config: конфигурация (по умолчанию: DEFAULT_ENVIRONMENT)
        """
        self.config = config or CartRulesConfig.for_environment()

    def evaluate(self, cart_input: CartValidationsInput) -> CartRulesResult:
        """Оценка правил корзины.

        Args:
            cart_input: вход функции (шаг покупателя + корзина)

        Returns:
            CartRulesResult; ошибки в validation всегда обернуты в одну
            операцию validationAdd
        """
        step = cart_input.checkout_step

        # 1. Stage gate
        if step not in self.config.checkout_steps:
            logger.debug("cart_rules_skipped", step=step.value if step else None)
            return CartRulesResult(
                is_checkout_step=False,
                classification=None,
                violated_rules=(),
                validation=CartValidationsResult.empty(),
                details=f"SKIP: not a checkout step ({step.value if step else 'none'})",
            )

        # 2. Классификация
        classification = classify_cart(cart_input.cart, self.config.product_ids)

        # 3. Правила
        violated_rules = self._violated_rules(classification)
        errors = [
            CartValidationError(message=RULE_MESSAGES[rule], target=self.config.error_target)
            for rule in violated_rules
        ]

        if violated_rules:
            logger.debug(
                "cart_rules_violated",
                step=step.value,
                rules=[rule.value for rule in violated_rules],
                mystery_box_quantity=classification.mystery_box_quantity,
            )
            details = f"BLOCK: {', '.join(rule.value for rule in violated_rules)}"
        else:
            details = (
                f"PASS: step={step.value}, "
                f"mystery_box_quantity={classification.mystery_box_quantity}"
            )

        return CartRulesResult(
            is_checkout_step=True,
            classification=classification,
            violated_rules=violated_rules,
            validation=CartValidationsResult.from_errors(errors),
            details=details,
        )

    def _violated_rules(self, classification: CartClassification) -> tuple[CartRule, ...]:
        """Нарушенные правила в фиксированном порядке 1, 2, 3."""
        if not classification.has_mystery_box:
            return ()

        violated: list[CartRule] = []

        if classification.mystery_box_quantity > self.config.max_mystery_box_quantity:
            violated.append(CartRule.MYSTERY_BOX_QUANTITY_LIMIT)

        if classification.deposit_present:
            violated.append(CartRule.MYSTERY_BOX_WITH_DEPOSIT)

        if not classification.other_present and not classification.deposit_present:
            violated.append(CartRule.MYSTERY_BOX_ALONE)

        return tuple(violated)
