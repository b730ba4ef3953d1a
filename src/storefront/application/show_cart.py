"""Application service: Show Cart use case (query).

Computes every derived cart fact in one pass over the repository data.
A line whose product has been deleted makes the recurring schedule
reconciliation fail with DataIntegrityError, which is propagated.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO, CartLineDTO, RecurringScheduleDTO
from storefront.domain.model.cart import CartLineItem
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.service import cart_aggregator
from storefront.domain.service.localization_service import LocalizationService

logger = structlog.get_logger(__name__)


class ShowCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        localization: LocalizationService,
    ) -> None:
        self._cart_repo = cart_repo
        self._localization = localization

    def handle(self, customer_id: str) -> CartDTO:
        cart = self._cart_repo.get_cart(customer_id)

        cycle_info = cart_aggregator.get_recurring_cycle_info(cart, self._localization)
        if cycle_info.has_conflict:
            logger.warning("recurring_schedule_conflict", customer_id=customer_id)

        schedule = None
        if cycle_info.has_values:
            schedule = RecurringScheduleDTO(
                cycle_length=cycle_info.cycle_length,  # type: ignore[arg-type]
                cycle_period=cycle_info.cycle_period.value,  # type: ignore[union-attr]
                total_cycles=cycle_info.total_cycles,  # type: ignore[arg-type]
            )

        return CartDTO(
            customer_id=customer_id,
            lines=[self._to_line_dto(item) for item in cart],
            total_quantity=cart_aggregator.get_total_quantity(cart),
            shipping_required=cart_aggregator.is_shipping_required(cart),
            recurring=cart_aggregator.is_recurring(cart),
            schedule=schedule,
            schedule_error=cycle_info.error_message,
        )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_line_dto(item: CartLineItem) -> CartLineDTO:
        return CartLineDTO(
            product_id=item.product_id,
            product_name=item.product.name if item.product else "(missing)",
            quantity=item.quantity,
            shipping_enabled=item.shipping_enabled,
            recurring=bool(item.product and item.product.is_recurring),
        )
