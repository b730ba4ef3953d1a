"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product, RecurringCyclePeriod
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: self._to_domain(item) for item in raw}

    @staticmethod
    def _to_domain(item: dict) -> Product:
        recurring = item.get("recurring") or {}
        return Product(
            id=item["id"],
            name=item["name"],
            price=Money(Decimal(item["price"]), item.get("currency", "USD")),
            is_ship_enabled=item.get("ship_enabled", True),
            is_recurring=bool(recurring),
            recurring_cycle_length=recurring.get("cycle_length", 100),
            recurring_cycle_period=RecurringCyclePeriod(
                recurring.get("cycle_period", RecurringCyclePeriod.DAYS.value)
            ),
            recurring_total_cycles=recurring.get("total_cycles", 10),
        )

    @staticmethod
    def _to_raw(p: Product) -> dict:
        raw: dict = {
            "id": p.id,
            "name": p.name,
            "price": str(p.price.amount),
            "currency": p.price.currency,
            "ship_enabled": p.is_ship_enabled,
        }
        if p.is_recurring:
            raw["recurring"] = {
                "cycle_length": p.recurring_cycle_length,
                "cycle_period": p.recurring_cycle_period.value,
                "total_cycles": p.recurring_total_cycles,
            }
        return raw

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [self._to_raw(p) for p in products.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
