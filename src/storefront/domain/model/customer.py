"""Customer aggregate (the parts the cart and gift cards care about)."""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError


@dataclass
class Customer:

    id: str
    name: str = ""
    applied_gift_card_codes: list[str] = field(default_factory=list)

    def apply_gift_card_code(self, code: str) -> None:
        """Remember a gift card coupon code entered by the customer.

        Codes are kept in the order they were applied; applying the same
        code twice (ignoring case) is a no-op.
        """
        code = (code or "").strip()
        if not code:
            raise ValidationError("Gift card code is required")
        if any(c.lower() == code.lower() for c in self.applied_gift_card_codes):
            return
        self.applied_gift_card_codes.append(code)

    def remove_gift_card_code(self, code: str) -> None:
        self.applied_gift_card_codes = [
            c for c in self.applied_gift_card_codes if c.lower() != code.strip().lower()
        ]
