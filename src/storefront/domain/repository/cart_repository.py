"""Abstract repository for shopping cart line items."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import CartLineItem


class CartRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique line item ID."""

    @abstractmethod
    def get_cart(self, customer_id: str) -> list[CartLineItem]:
        """Return the customer's line items in the order they were added.

        Products and the customer are resolved eagerly; a line whose
        product no longer exists has ``product`` set to None.
        """

    @abstractmethod
    def save(self, item: CartLineItem) -> None:
        """Persist a new or updated line item."""
