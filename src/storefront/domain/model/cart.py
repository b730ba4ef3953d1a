"""Shopping cart line items.

A cart is simply the ordered list of a customer's line items; there is
no separate cart aggregate. The ``product`` and ``customer`` references
are resolved by the repository before the items reach the domain.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.customer import Customer
from storefront.domain.model.product import Product


@dataclass
class CartLineItem:
    """One product entry in a shopping cart.

    ``product`` is None when the referenced product no longer exists
    (e.g. it was deleted from the catalog after being added).
    """

    id: int
    product_id: str
    quantity: int
    shipping_enabled: bool
    customer: Customer
    product: Product | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.quantity, int) or isinstance(self.quantity, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity < 0:
            raise ValidationError("Quantity cannot be negative")
