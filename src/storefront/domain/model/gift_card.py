"""GiftCard aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class GiftCard:
    """A gift card identified by its coupon code.

    Cards are issued inactive and must be activated (typically once the
    order that bought them is paid) before they can be redeemed.
    """

    id: int | None
    code: str
    amount: Money
    is_activated: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_valid(self) -> bool:
        return self.is_activated and not self.amount.is_zero

    def activate(self) -> None:
        if self.is_activated:
            raise ValidationError(f"Gift card {self.code} is already activated")
        self.is_activated = True

    def deactivate(self) -> None:
        if not self.is_activated:
            raise ValidationError(f"Gift card {self.code} is not activated")
        self.is_activated = False
