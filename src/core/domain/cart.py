"""
Cart — Модель снапшота корзины от checkout платформы

Immutable Pydantic модели входа функции валидации корзины:
- BuyerJourney (шаг покупателя: корзина / checkout)
- Cart → CartLine → Merchandise (ProductVariant | OtherMerchandise)

Соответствует схеме src/core/contracts/schema/cart_validations_input.json.
Парсинг толерантный: битые строки корзины не ломают весь вход.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Final, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from src.core.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Значение __typename для вариантов товара
PRODUCT_VARIANT_TYPENAME: Final[str] = "ProductVariant"


# =============================================================================
# ENUMS
# =============================================================================


class BuyerJourneyStep(str, Enum):
    """Шаг покупателя, на котором платформа вызывает валидацию"""

    CART_INTERACTION = "CART_INTERACTION"
    CHECKOUT_INTERACTION = "CHECKOUT_INTERACTION"
    CHECKOUT_COMPLETION = "CHECKOUT_COMPLETION"


# Шаги, на которых правила корзины применяются
CHECKOUT_STEPS: Final[frozenset[BuyerJourneyStep]] = frozenset(
    {
        BuyerJourneyStep.CHECKOUT_INTERACTION,
        BuyerJourneyStep.CHECKOUT_COMPLETION,
    }
)


# =============================================================================
# MERCHANDISE
# =============================================================================


class Product(BaseModel):
    """Ссылка на товар каталога (opaque GID)."""

    id: str | None = Field(None, description="Product GID, например 'gid://shopify/Product/1'")

    model_config = {"frozen": True}

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> str | None:
        """
        Нестроковый id (число, объект) сохраняется строкой: 123 → "123".

        Пустые значения (false, 0) трактуются как отсутствие id.
        """
        if v is None or isinstance(v, str):
            return v
        if v is False or (isinstance(v, (int, float)) and v == 0):
            return None
        return str(v)


class ProductVariant(BaseModel):
    """
    Вариант товара: единственный вид merchandise, участвующий в правилах.

    product может отсутствовать (null), такая строка игнорируется.
    """

    kind: Literal["ProductVariant"] = Field(PRODUCT_VARIANT_TYPENAME, alias="__typename")
    product: Product | None = Field(None, description="Товар, к которому относится вариант")

    model_config = {"frozen": True, "populate_by_name": True}


class OtherMerchandise(BaseModel):
    """Любой другой вид merchandise (CustomProduct, неизвестный тег, нет тега)."""

    kind: str | None = Field(None, alias="__typename", description="Исходный __typename")

    model_config = {"frozen": True, "populate_by_name": True}


Merchandise = ProductVariant | OtherMerchandise


def parse_merchandise(raw: Any) -> Merchandise:
    """
    Разбор merchandise по тегу __typename.

    Всё, что не читается как ProductVariant, становится OtherMerchandise.
    ProductVariant с нечитаемым product (не объект) сохраняет тег, но теряет
    product. Нестроковый product.id сохраняется строкой (см. Product).

    Args:
        raw: merchandise из payload (dict) или готовая модель

    Returns:
        ProductVariant или OtherMerchandise
    """
    if isinstance(raw, (ProductVariant, OtherMerchandise)):
        return raw
    if not isinstance(raw, Mapping):
        return OtherMerchandise()

    kind = raw.get("__typename")
    if kind != PRODUCT_VARIANT_TYPENAME:
        return OtherMerchandise(kind=kind if isinstance(kind, str) else None)

    try:
        return ProductVariant.model_validate(raw)
    except ValidationError:
        return ProductVariant(product=None)


# =============================================================================
# CART
# =============================================================================


class CartLine(BaseModel):
    """
    Строка корзины.

    quantity без значения трактуется как 0.
    """

    quantity: int = Field(0, ge=0, description="Количество единиц в строке")
    merchandise: Merchandise = Field(
        default_factory=OtherMerchandise, description="Что лежит в строке"
    )

    model_config = {"frozen": True}

    @field_validator("merchandise", mode="before")
    @classmethod
    def resolve_merchandise(cls, v: Any) -> Merchandise:
        """Сведение произвольного merchandise к sum type."""
        return parse_merchandise(v)

    @property
    def product_id(self) -> str | None:
        """
        Product id строки.

        Returns:
            id товара для ProductVariant с непустым id, иначе None
        """
        match self.merchandise:
            case ProductVariant(product=Product(id=str(product_id))) if product_id:
                return product_id
            case _:
                return None


class Cart(BaseModel):
    """Снапшот корзины: упорядоченные строки."""

    lines: tuple[CartLine, ...] = Field(default_factory=tuple, description="Строки корзины")

    model_config = {"frozen": True}

    @field_validator("lines", mode="before")
    @classmethod
    def drop_unreadable_lines(cls, v: Any) -> tuple[CartLine, ...]:
        """
        Отбрасывание строк, которые невозможно прочитать.

        Строка с некорректным quantity (отрицательное, дробное, не число)
        исключается из оценки целиком, остальные строки сохраняются.
        """
        if not isinstance(v, (list, tuple)):
            return ()

        readable: list[CartLine] = []
        for index, raw in enumerate(v):
            if isinstance(raw, CartLine):
                readable.append(raw)
                continue
            try:
                readable.append(CartLine.model_validate(raw))
            except ValidationError as exc:
                logger.warning(
                    "cart_line_dropped",
                    line_index=index,
                    error_count=exc.error_count(),
                )
        return tuple(readable)


# =============================================================================
# FUNCTION INPUT
# =============================================================================


class BuyerJourney(BaseModel):
    """
    Положение покупателя в воронке.

    step хранится как строка: неизвестные шаги не являются ошибкой входа.
    """

    step: str | None = Field(None, description="Текущий шаг (например, CHECKOUT_COMPLETION)")

    model_config = {"frozen": True}

    @field_validator("step", mode="before")
    @classmethod
    def ignore_non_string_step(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None

    def journey_step(self) -> BuyerJourneyStep | None:
        """Распознанный шаг или None для неизвестного/пустого."""
        if self.step is None:
            return None
        try:
            return BuyerJourneyStep(self.step)
        except ValueError:
            return None


class CartValidationsInput(BaseModel):
    """
    Вход функции валидации корзины.

    Immutable модель (frozen=True). Поля payload хоста:
    - buyerJourney.step (может отсутствовать)
    - cart.lines[] (quantity, merchandise.__typename, merchandise.product.id)
    """

    buyer_journey: BuyerJourney | None = Field(
        None, alias="buyerJourney", description="Шаг покупателя"
    )
    cart: Cart = Field(default_factory=Cart, description="Снапшот корзины")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("buyer_journey", mode="before")
    @classmethod
    def ignore_unreadable_journey(cls, v: Any) -> Any:
        return v if isinstance(v, (Mapping, BuyerJourney)) else None

    @field_validator("cart", mode="before")
    @classmethod
    def ignore_unreadable_cart(cls, v: Any) -> Any:
        return v if isinstance(v, (Mapping, Cart)) else Cart()

    @classmethod
    def from_payload(cls, payload: Any) -> "CartValidationsInput":
        """
        Построение входа из payload хоста.

        Args:
            payload: JSON-объект от checkout платформы

        Returns:
            CartValidationsInput (пустой, если payload не объект)
        """
        if not isinstance(payload, Mapping):
            return cls()
        return cls.model_validate(payload)

    @property
    def checkout_step(self) -> BuyerJourneyStep | None:
        """Распознанный шаг покупателя."""
        if self.buyer_journey is None:
            return None
        return self.buyer_journey.journey_step()
