"""
Unit tests for cart domain models

Проверяем:
1. Парсинг payload хоста (camelCase, __typename)
2. Sum type merchandise и product_id
3. Immutability (frozen=True)
4. Толерантность к битым строкам
5. Сериализация результата
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    BuyerJourney,
    BuyerJourneyStep,
    Cart,
    CartLine,
    CartValidationError,
    CartValidationsInput,
    CartValidationsResult,
    OtherMerchandise,
    Product,
    ProductVariant,
    parse_merchandise,
)


PRODUCT_ID = "gid://shopify/Product/8953675907329"


class TestMerchandise:
    """Тесты sum type merchandise"""

    def test_product_variant_parsed(self):
        """ProductVariant с product.id"""
        merchandise = parse_merchandise(
            {"__typename": "ProductVariant", "product": {"id": PRODUCT_ID}}
        )

        assert isinstance(merchandise, ProductVariant)
        assert merchandise.product == Product(id=PRODUCT_ID)

    def test_other_typename_is_catch_all(self):
        """Любой другой __typename → OtherMerchandise с исходным тегом"""
        merchandise = parse_merchandise(
            {"__typename": "CustomProduct", "product": {"id": PRODUCT_ID}}
        )

        assert merchandise == OtherMerchandise(kind="CustomProduct")

    @pytest.mark.parametrize("raw", [None, "ProductVariant", 42, [], {}])
    def test_unreadable_merchandise(self, raw):
        """Не-объект или объект без тега → OtherMerchandise"""
        merchandise = parse_merchandise(raw)

        assert isinstance(merchandise, OtherMerchandise)
        assert merchandise.kind is None

    def test_variant_with_unreadable_product(self):
        """ProductVariant с product не-объектом сохраняет тег без product"""
        merchandise = parse_merchandise({"__typename": "ProductVariant", "product": "gid"})

        assert merchandise == ProductVariant(product=None)

    @pytest.mark.parametrize(("raw_id", "product_id"), [(123, "123"), (True, "True"), (1.5, "1.5")])
    def test_variant_with_non_string_product_id(self, raw_id, product_id):
        """Непустой нестроковый id сохраняется строкой"""
        line = CartLine.model_validate(
            {"quantity": 1, "merchandise": {"__typename": "ProductVariant", "product": {"id": raw_id}}}
        )

        assert line.merchandise == ProductVariant(product=Product(id=product_id))
        assert line.product_id == product_id

    @pytest.mark.parametrize("raw_id", [0, False, ""])
    def test_variant_with_empty_product_id(self, raw_id):
        line = CartLine.model_validate(
            {"quantity": 1, "merchandise": {"__typename": "ProductVariant", "product": {"id": raw_id}}}
        )

        assert line.product_id is None

    def test_models_pass_through(self):
        """Готовые модели не пересоздаются"""
        variant = ProductVariant(product=Product(id=PRODUCT_ID))

        assert parse_merchandise(variant) is variant


class TestCartLine:
    """Тесты строки корзины"""

    def test_product_id_for_variant(self):
        line = CartLine.model_validate(
            {
                "quantity": 2,
                "merchandise": {"__typename": "ProductVariant", "product": {"id": PRODUCT_ID}},
            }
        )

        assert line.quantity == 2
        assert line.product_id == PRODUCT_ID

    @pytest.mark.parametrize(
        "merchandise",
        [
            {"__typename": "ProductVariant", "product": None},
            {"__typename": "ProductVariant"},
            {"__typename": "ProductVariant", "product": {"id": ""}},
            {"__typename": "ProductVariant", "product": {}},
            {"__typename": "CustomProduct", "product": {"id": PRODUCT_ID}},
        ],
    )
    def test_no_product_id(self, merchandise):
        """product_id есть только у ProductVariant с непустым id"""
        line = CartLine.model_validate({"quantity": 1, "merchandise": merchandise})

        assert line.product_id is None

    def test_defaults(self):
        """Без полей: quantity 0, OtherMerchandise"""
        line = CartLine.model_validate({})

        assert line.quantity == 0
        assert isinstance(line.merchandise, OtherMerchandise)

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError):
            CartLine(quantity=-1)

    def test_immutability(self):
        """CartLine immutable (frozen=True)"""
        line = CartLine(quantity=1)
        with pytest.raises(ValidationError):
            line.quantity = 5


class TestCart:
    """Тесты корзины"""

    def test_unreadable_lines_dropped(self):
        """Строки с некорректным quantity отбрасываются, остальные сохраняются"""
        cart = Cart.model_validate(
            {
                "lines": [
                    {"quantity": "many"},
                    {"quantity": 1.5},
                    None,
                    {"quantity": 3},
                ]
            }
        )

        assert len(cart.lines) == 1
        assert cart.lines[0].quantity == 3

    @pytest.mark.parametrize("lines", [None, "lines", 7, {"quantity": 1}])
    def test_non_list_lines(self, lines):
        """lines не-список → пустая корзина"""
        assert Cart.model_validate({"lines": lines}).lines == ()

    def test_lines_order_preserved(self):
        cart = Cart.model_validate({"lines": [{"quantity": 1}, {"quantity": 2}, {"quantity": 3}]})

        assert [line.quantity for line in cart.lines] == [1, 2, 3]


class TestCartValidationsInput:
    """Тесты входа функции"""

    def test_from_host_payload(self):
        """camelCase payload хоста"""
        cart_input = CartValidationsInput.from_payload(
            {
                "buyerJourney": {"step": "CHECKOUT_COMPLETION"},
                "cart": {
                    "lines": [
                        {
                            "quantity": 1,
                            "merchandise": {
                                "__typename": "ProductVariant",
                                "product": {"id": PRODUCT_ID},
                            },
                        }
                    ]
                },
            }
        )

        assert cart_input.checkout_step == BuyerJourneyStep.CHECKOUT_COMPLETION
        assert cart_input.cart.lines[0].product_id == PRODUCT_ID

    @pytest.mark.parametrize("payload", [None, [], "payload", {}])
    def test_empty_or_unreadable_payload(self, payload):
        """Нечитаемый payload → пустой вход без шага"""
        cart_input = CartValidationsInput.from_payload(payload)

        assert cart_input.checkout_step is None
        assert cart_input.cart.lines == ()

    @pytest.mark.parametrize(
        "journey",
        [None, "CHECKOUT_COMPLETION", {"step": None}, {"step": 3}, {"step": "UNKNOWN"}, {}],
    )
    def test_unrecognized_journey(self, journey):
        cart_input = CartValidationsInput.from_payload({"buyerJourney": journey, "cart": {"lines": []}})

        assert cart_input.checkout_step is None

    def test_unreadable_cart(self):
        cart_input = CartValidationsInput.from_payload(
            {"buyerJourney": {"step": "CHECKOUT_INTERACTION"}, "cart": None}
        )

        assert cart_input.checkout_step == BuyerJourneyStep.CHECKOUT_INTERACTION
        assert cart_input.cart == Cart()

    def test_journey_step(self):
        assert BuyerJourney(step="CART_INTERACTION").journey_step() == BuyerJourneyStep.CART_INTERACTION
        assert BuyerJourney().journey_step() is None


class TestCartValidationsResult:
    """Тесты результата функции"""

    def test_empty_payload(self):
        assert CartValidationsResult.empty().to_payload() == {
            "operations": [{"validationAdd": {"errors": []}}]
        }

    def test_payload_with_errors(self):
        result = CartValidationsResult.from_errors(
            [CartValidationError(message="first"), CartValidationError(message="second")]
        )

        assert result.to_payload() == {
            "operations": [
                {
                    "validationAdd": {
                        "errors": [
                            {"message": "first", "target": "cart"},
                            {"message": "second", "target": "cart"},
                        ]
                    }
                }
            ]
        }
        assert [error.message for error in result.errors] == ["first", "second"]

    def test_duplicate_errors_kept(self):
        """Ошибки не дедуплицируются"""
        error = CartValidationError(message="same")

        assert len(CartValidationsResult.from_errors([error, error]).errors) == 2

    def test_single_operation_enforced(self):
        with pytest.raises(ValidationError):
            CartValidationsResult(operations=())

    def test_empty_message_rejected(self):
        with pytest.raises(ValidationError):
            CartValidationError(message="")
