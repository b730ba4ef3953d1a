"""Unit tests for domain entities and value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.customer import Customer
from storefront.domain.model.gift_card import GiftCard
from storefront.domain.model.product import Product, RecurringCyclePeriod
from storefront.domain.model.recurring_cycle import RecurringCycleInfo
from storefront.domain.model.value_objects import Money


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_of_factory(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_invalid_amount_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    @pytest.mark.parametrize("raw", ["Infinity", "-inf", "NaN", "sNaN"])
    def test_non_finite_amount_rejected(self, raw):
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of(raw)

    def test_str_formatting(self):
        assert str(Money.of("9.5")) == "$9.50"


# ── Product ──────────────────────────────────────────────────────────────────


class TestProduct:

    def test_not_recurring_by_default(self):
        p = Product(id="1", name="Tea", price=Money.of("4"))
        assert p.is_recurring is False
        assert p.is_ship_enabled is True

    def test_make_recurring(self):
        p = Product(id="1", name="Tea", price=Money.of("4"))
        p.make_recurring(2, RecurringCyclePeriod.WEEKS, 12)
        assert p.is_recurring is True
        assert p.recurring_cycle_length == 2
        assert p.recurring_cycle_period == RecurringCyclePeriod.WEEKS
        assert p.recurring_total_cycles == 12

    @pytest.mark.parametrize("length,total,message", [
        (0, 5, "must be positive"),
        (-1, 5, "must be positive"),
        (5, -1, "cannot be negative"),
    ])
    def test_invalid_schedule_rejected(self, length, total, message):
        p = Product(id="1", name="Tea", price=Money.of("4"))
        with pytest.raises(ValidationError, match=message):
            p.make_recurring(length, RecurringCyclePeriod.DAYS, total)
        assert p.is_recurring is False

    def test_zero_total_cycles_allowed(self):
        p = Product(id="1", name="Tea", price=Money.of("4"))
        p.make_recurring(30, RecurringCyclePeriod.DAYS, 0)
        assert p.is_recurring is True
        assert p.recurring_total_cycles == 0


# ── CartLineItem ─────────────────────────────────────────────────────────────


class TestCartLineItem:

    def test_zero_quantity_allowed(self):
        item = CartLineItem(id=1, product_id="1", quantity=0, shipping_enabled=False,
                            customer=Customer(id="c"))
        assert item.quantity == 0
        assert item.product is None

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            CartLineItem(id=1, product_id="1", quantity=-1, shipping_enabled=False,
                         customer=Customer(id="c"))

    @pytest.mark.parametrize("quantity", [True, False, 1.5])
    def test_non_integer_quantity_rejected(self, quantity):
        with pytest.raises(ValidationError, match="must be an integer"):
            CartLineItem(id=1, product_id="1", quantity=quantity, shipping_enabled=False,
                         customer=Customer(id="c"))


# ── Customer ─────────────────────────────────────────────────────────────────


class TestCustomer:

    def test_apply_code_once(self):
        c = Customer(id="c")
        c.apply_gift_card_code(" ABC ")
        c.apply_gift_card_code("abc")
        assert c.applied_gift_card_codes == ["ABC"]

    def test_blank_code_rejected(self):
        with pytest.raises(ValidationError, match="code is required"):
            Customer(id="c").apply_gift_card_code("  ")

    def test_remove_code(self):
        c = Customer(id="c", applied_gift_card_codes=["ABC", "DEF"])
        c.remove_gift_card_code("abc")
        assert c.applied_gift_card_codes == ["DEF"]


# ── GiftCard ─────────────────────────────────────────────────────────────────


class TestGiftCard:

    def test_new_card_is_inactive_and_invalid(self):
        card = GiftCard(id=None, code="X", amount=Money.of("10"))
        assert card.is_activated is False
        assert card.is_valid is False

    def test_activate_and_deactivate(self):
        card = GiftCard(id=None, code="X", amount=Money.of("10"))
        card.activate()
        assert card.is_valid is True
        card.deactivate()
        assert card.is_valid is False

    def test_double_activation_rejected(self):
        card = GiftCard(id=None, code="X", amount=Money.of("10"), is_activated=True)
        with pytest.raises(ValidationError, match="already activated"):
            card.activate()

    def test_deactivate_inactive_rejected(self):
        card = GiftCard(id=None, code="X", amount=Money.of("10"))
        with pytest.raises(ValidationError, match="not activated"):
            card.deactivate()


# ── RecurringCycleInfo ───────────────────────────────────────────────────────


class TestRecurringCycleInfo:

    def test_empty(self):
        info = RecurringCycleInfo()
        assert info.has_values is False
        assert info.has_conflict is False

    def test_with_values_and_error(self):
        info = RecurringCycleInfo(30, RecurringCyclePeriod.DAYS, 3, error_message="boom")
        assert info.has_values is True
        assert info.has_conflict is True
