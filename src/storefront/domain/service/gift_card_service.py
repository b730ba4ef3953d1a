"""Domain service: gift card codes and applied gift cards."""

from __future__ import annotations

import uuid

from storefront.domain.model.customer import Customer
from storefront.domain.model.gift_card import GiftCard
from storefront.domain.repository.gift_card_repository import GiftCardRepository

GIFT_CARD_CODE_LENGTH = 13


class GiftCardService:

    def __init__(self, gift_card_repo: GiftCardRepository) -> None:
        self._gift_card_repo = gift_card_repo

    def generate_gift_card_code(self) -> str:
        """Return a new random gift card code.

        The code is the leading part of a random UUID, so collisions are
        unlikely but possible; callers that need uniqueness must check.
        """
        return str(uuid.uuid4())[:GIFT_CARD_CODE_LENGTH]

    def get_active_gift_cards_applied_by_customer(
        self, customer: Customer | None
    ) -> list[GiftCard]:
        """Return the valid gift cards whose codes the customer has applied.

        Cards come back in the order the customer applied them. Unknown
        codes and inactive cards are skipped.
        """
        if customer is None or not customer.applied_gift_card_codes:
            return []

        by_code = {
            card.code.lower(): card
            for card in self._gift_card_repo.find_by_codes(customer.applied_gift_card_codes)
        }
        result: list[GiftCard] = []
        for code in customer.applied_gift_card_codes:
            card = by_code.get(code.lower())
            if card is not None and card.is_valid:
                result.append(card)
        return result
