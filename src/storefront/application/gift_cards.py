"""Application services: gift card use cases.

Issue, activate/deactivate, apply to a customer, and list the active
gift cards a customer has applied.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import GiftCardDTO
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.gift_card import GiftCard
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.gift_card_repository import GiftCardRepository
from storefront.domain.service.gift_card_service import GiftCardService

logger = structlog.get_logger(__name__)

MAX_CODE_ATTEMPTS = 5


def to_gift_card_dto(card: GiftCard) -> GiftCardDTO:
    return GiftCardDTO(
        code=card.code,
        amount=str(card.amount),
        is_activated=card.is_activated,
        created_at=card.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


class IssueGiftCardHandler:

    def __init__(self, gift_card_repo: GiftCardRepository) -> None:
        self._gift_card_repo = gift_card_repo
        self._service = GiftCardService(gift_card_repo)

    def handle(self, amount: str) -> GiftCardDTO:
        """Issue a new, inactive gift card worth *amount*.

        Generated codes are only probably unique, so a code already in
        use is regenerated a few times before giving up.
        """
        value = Money.of(amount)
        if value.is_zero:
            raise ValidationError("Gift card amount must be greater than zero")

        for _ in range(MAX_CODE_ATTEMPTS):
            code = self._service.generate_gift_card_code()
            if self._gift_card_repo.get_by_code(code) is None:
                break
            logger.warning("gift_card_code_collision", code=code)
        else:
            raise ValidationError(
                f"Could not generate a unique gift card code after {MAX_CODE_ATTEMPTS} attempts"
            )

        card = GiftCard(id=None, code=code, amount=value)
        self._gift_card_repo.save(card)
        logger.info("gift_card_issued", gift_card_id=card.id, amount=str(value))
        return to_gift_card_dto(card)


class ActivateGiftCardHandler:

    def __init__(self, gift_card_repo: GiftCardRepository) -> None:
        self._gift_card_repo = gift_card_repo

    def handle(self, code: str, activate: bool = True) -> GiftCardDTO:
        card = self._gift_card_repo.get_by_code(code)
        if card is None:
            raise EntityNotFoundError(f"Gift card '{code}' not found")

        if activate:
            card.activate()
        else:
            card.deactivate()
        self._gift_card_repo.save(card)
        logger.info(
            "gift_card_activation_changed", code=card.code, activated=card.is_activated
        )
        return to_gift_card_dto(card)


class ApplyGiftCardHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        gift_card_repo: GiftCardRepository,
    ) -> None:
        self._customer_repo = customer_repo
        self._gift_card_repo = gift_card_repo

    def handle(self, customer_id: str, code: str) -> None:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")

        card = self._gift_card_repo.get_by_code(code.strip())
        if card is None:
            raise EntityNotFoundError(f"Gift card '{code}' not found")

        customer.apply_gift_card_code(card.code)
        self._customer_repo.save(customer)
        logger.info("gift_card_applied", customer_id=customer.id, code=card.code)


class ListAppliedGiftCardsHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        gift_card_repo: GiftCardRepository,
    ) -> None:
        self._customer_repo = customer_repo
        self._service = GiftCardService(gift_card_repo)

    def handle(self, customer_id: str) -> list[GiftCardDTO]:
        customer = self._customer_repo.get_by_id(customer_id)
        cards = self._service.get_active_gift_cards_applied_by_customer(customer)
        return [to_gift_card_dto(card) for card in cards]


class RemoveGiftCardHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: str, code: str) -> None:
        """Forget a gift card code the customer applied earlier."""
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")

        before = len(customer.applied_gift_card_codes)
        customer.remove_gift_card_code(code)
        if len(customer.applied_gift_card_codes) == before:
            raise EntityNotFoundError(
                f"Gift card '{code}' is not applied for customer '{customer_id}'"
            )

        self._customer_repo.save(customer)
        logger.info("gift_card_removed", customer_id=customer.id, code=code)
