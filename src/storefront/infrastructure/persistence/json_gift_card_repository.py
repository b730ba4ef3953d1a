"""JSON-file-backed implementation of GiftCardRepository.

Codes are matched case-insensitively.
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.gift_card import GiftCard
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.gift_card_repository import GiftCardRepository


class JsonGiftCardRepository(GiftCardRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- GiftCardRepository interface -----------------------------------------

    def get_by_code(self, code: str) -> GiftCard | None:
        for raw in self._load_raw():
            if raw["code"].lower() == code.lower():
                return self._to_domain(raw)
        return None

    def find_by_codes(self, codes: list[str]) -> list[GiftCard]:
        wanted = {c.lower() for c in codes}
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["code"].lower() in wanted
        ]

    def save(self, gift_card: GiftCard) -> None:
        cards = self._load_raw()

        if gift_card.id is None:
            gift_card.id = max((c["id"] for c in cards), default=0) + 1

        for i, raw in enumerate(cards):
            if raw["id"] == gift_card.id:
                cards[i] = self._to_raw(gift_card)
                break
        else:
            cards.append(self._to_raw(gift_card))

        self._file_path.write_text(
            json.dumps(cards, indent=2) + "\n", encoding="utf-8"
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(card: GiftCard) -> dict:
        return {
            "id": card.id,
            "code": card.code,
            "amount": str(card.amount.amount),
            "currency": card.amount.currency,
            "is_activated": card.is_activated,
            "created_at": card.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> GiftCard:
        return GiftCard(
            id=raw["id"],
            code=raw["code"],
            amount=Money(Decimal(raw["amount"]), raw.get("currency", "USD")),
            is_activated=raw["is_activated"],
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
