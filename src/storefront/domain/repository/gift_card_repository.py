"""Abstract repository for GiftCard aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.gift_card import GiftCard


class GiftCardRepository(ABC):

    @abstractmethod
    def get_by_code(self, code: str) -> GiftCard | None:
        """Return the gift card with this coupon code, or None."""

    @abstractmethod
    def find_by_codes(self, codes: list[str]) -> list[GiftCard]:
        """Return the gift cards matching any of *codes* (unknown codes are skipped)."""

    @abstractmethod
    def save(self, gift_card: GiftCard) -> None:
        """Persist a new or updated gift card."""
