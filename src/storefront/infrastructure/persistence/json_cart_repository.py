"""JSON-file-backed implementation of CartRepository.

Only IDs are stored; products and customers are resolved through their
own repositories when a cart is loaded.
"""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.customer import Customer
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.product_repository import ProductRepository


class JsonCartRepository(CartRepository):

    def __init__(
        self,
        file_path: Path,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._file_path = file_path
        self._product_repo = product_repo
        self._customer_repo = customer_repo
        self._ensure_file()

    # --- CartRepository interface ---------------------------------------------

    def next_id(self) -> int:
        items = self._load_raw()
        if not items:
            return 1
        return max(i["id"] for i in items) + 1

    def get_cart(self, customer_id: str) -> list[CartLineItem]:
        raw_items = [i for i in self._load_raw() if i["customer_id"] == customer_id]
        if not raw_items:
            return []

        customer = self._customer_repo.get_by_id(customer_id) or Customer(id=customer_id)
        catalog = {p.id: p for p in self._product_repo.list_all()}
        return [
            CartLineItem(
                id=raw["id"],
                product_id=raw["product_id"],
                quantity=raw["quantity"],
                shipping_enabled=raw["shipping_enabled"],
                customer=customer,
                product=catalog.get(raw["product_id"]),
            )
            for raw in raw_items
        ]

    def save(self, item: CartLineItem) -> None:
        items = self._load_raw()
        raw = {
            "id": item.id,
            "customer_id": item.customer.id,
            "product_id": item.product_id,
            "quantity": item.quantity,
            "shipping_enabled": item.shipping_enabled,
        }

        # Upsert: replace if exists, otherwise append
        for i, existing in enumerate(items):
            if existing["id"] == item.id:
                items[i] = raw
                break
        else:
            items.append(raw)

        self._file_path.write_text(
            json.dumps(items, indent=2) + "\n", encoding="utf-8"
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
