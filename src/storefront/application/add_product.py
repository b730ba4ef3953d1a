"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import RecurringScheduleSpec
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product, RecurringCyclePeriod
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        ship_enabled: bool = True,
        recurring: RecurringScheduleSpec | None = None,
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        # Auto-assign ID based on existing products
        all_products = self._product_repo.list_all()
        if all_products:
            next_id = str(max(int(p.id) for p in all_products) + 1)
        else:
            next_id = "1"

        product = Product(
            id=next_id,
            name=name.strip(),
            price=Money.of(price),
            is_ship_enabled=ship_enabled,
        )
        if recurring is not None:
            product.make_recurring(
                cycle_length=recurring.cycle_length,
                cycle_period=_parse_period(recurring.cycle_period),
                total_cycles=recurring.total_cycles,
            )

        self._product_repo.save(product)
        logger.info(
            "product_added",
            product_id=product.id,
            recurring=product.is_recurring,
        )
        return product


def _parse_period(raw: str) -> RecurringCyclePeriod:
    try:
        return RecurringCyclePeriod[raw.strip().upper()]
    except KeyError:
        allowed = ", ".join(p.name for p in RecurringCyclePeriod)
        raise ValidationError(
            f"Unknown cycle period '{raw}' (expected one of {allowed})"
        ) from None
