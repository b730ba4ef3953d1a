"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.model.customer import Customer
from storefront.domain.repository.customer_repository import CustomerRepository


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def get_by_id(self, customer_id: str) -> Customer | None:
        for raw in self._load_raw():
            if raw["id"] == customer_id:
                return Customer(
                    id=raw["id"],
                    name=raw.get("name", ""),
                    applied_gift_card_codes=list(raw.get("gift_card_codes", [])),
                )
        return None

    def save(self, customer: Customer) -> None:
        customers = [c for c in self._load_raw() if c["id"] != customer.id]
        customers.append(
            {
                "id": customer.id,
                "name": customer.name,
                "gift_card_codes": customer.applied_gift_card_codes,
            }
        )
        self._file_path.write_text(
            json.dumps(customers, indent=2) + "\n", encoding="utf-8"
        )

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
