"""
Domain models and value objects.

Contains the checkout function contract: cart snapshot input and
validation result output.
"""

from src.core.domain.cart import (
    CHECKOUT_STEPS,
    PRODUCT_VARIANT_TYPENAME,
    BuyerJourney,
    BuyerJourneyStep,
    Cart,
    CartLine,
    CartValidationsInput,
    Merchandise,
    OtherMerchandise,
    Product,
    ProductVariant,
    parse_merchandise,
)
from src.core.domain.validation import (
    DEFAULT_ERROR_TARGET,
    CartValidationError,
    CartValidationsResult,
    Operation,
    ValidationAdd,
)

__all__ = [
    # Cart input
    "CHECKOUT_STEPS",
    "PRODUCT_VARIANT_TYPENAME",
    "BuyerJourney",
    "BuyerJourneyStep",
    "Cart",
    "CartLine",
    "CartValidationsInput",
    "Merchandise",
    "OtherMerchandise",
    "Product",
    "ProductVariant",
    "parse_merchandise",
    # Validation result
    "DEFAULT_ERROR_TARGET",
    "CartValidationError",
    "CartValidationsResult",
    "Operation",
    "ValidationAdd",
]
