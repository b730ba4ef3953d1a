"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.infrastructure.config import StorefrontSettings
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from storefront.infrastructure.persistence.json_gift_card_repository import (
    JsonGiftCardRepository,
)
from storefront.infrastructure.persistence.json_localization_service import (
    JsonLocalizationService,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def settings() -> StorefrontSettings:
    # Not cached: the environment is re-read on every CLI invocation.
    return StorefrontSettings()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def customer_repository() -> JsonCustomerRepository:
    return JsonCustomerRepository(settings().data_dir / "customers.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(
        settings().data_dir / "cart_items.json",
        product_repo=product_repository(),
        customer_repo=customer_repository(),
    )


def gift_card_repository() -> JsonGiftCardRepository:
    return JsonGiftCardRepository(settings().data_dir / "gift_cards.json")


def localization_service() -> JsonLocalizationService:
    current = settings()
    return JsonLocalizationService(current.data_dir / f"resources.{current.language}.json")
