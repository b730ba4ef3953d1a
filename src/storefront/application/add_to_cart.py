"""Application service: Add To Cart use case.

The first item added for an unknown customer registers that customer.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.customer import Customer
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._customer_repo = customer_repo

    def handle(self, customer_id: str, product_name: str, quantity: int) -> CartLineItem:
        if not customer_id or not customer_id.strip():
            raise ValidationError("Customer ID is required")
        if quantity <= 0:
            raise ValidationError("Quantity must be positive")

        product = self._product_repo.get_by_name(product_name)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_name}'")

        customer = self._customer_repo.get_by_id(customer_id.strip())
        if customer is None:
            customer = Customer(id=customer_id.strip())
            self._customer_repo.save(customer)
            logger.info("customer_registered", customer_id=customer.id)

        item = CartLineItem(
            id=self._cart_repo.next_id(),
            product_id=product.id,
            quantity=quantity,
            shipping_enabled=product.is_ship_enabled,  # copied at add time
            customer=customer,
            product=product,
        )
        self._cart_repo.save(item)
        logger.info(
            "cart_item_added",
            customer_id=customer.id,
            product_id=product.id,
            quantity=quantity,
        )
        return item
