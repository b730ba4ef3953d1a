"""RecurringCycleInfo value object."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.product import RecurringCyclePeriod


@dataclass(frozen=True)
class RecurringCycleInfo:
    """The recurring schedule shared by all recurring items of a cart.

    The schedule fields come from the first recurring item; they stay
    None for a cart without recurring items. ``error_message`` is set
    when a later recurring item has a different schedule.
    """

    cycle_length: int | None = None
    cycle_period: RecurringCyclePeriod | None = None
    total_cycles: int | None = None
    error_message: str | None = None

    @property
    def has_values(self) -> bool:
        return (
            self.cycle_length is not None
            and self.cycle_period is not None
            and self.total_cycles is not None
        )

    @property
    def has_conflict(self) -> bool:
        return bool(self.error_message)
