"""Product aggregate.

Products live in the catalog independently of any cart. A product may
be sold on a recurring schedule (auto-ship / subscription), described by
a cycle length, a cycle period and the total number of cycles.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


class RecurringCyclePeriod(Enum):
    DAYS = "DAYS"
    WEEKS = "WEEKS"
    MONTHS = "MONTHS"
    YEARS = "YEARS"


@dataclass
class Product:
    """A product in the catalog.

    The recurring fields always carry a value; they only matter when
    ``is_recurring`` is set.
    """

    id: str
    name: str
    price: Money
    is_ship_enabled: bool = True
    is_recurring: bool = False
    recurring_cycle_length: int = 100
    recurring_cycle_period: RecurringCyclePeriod = RecurringCyclePeriod.DAYS
    recurring_total_cycles: int = 10

    def make_recurring(
        self,
        cycle_length: int,
        cycle_period: RecurringCyclePeriod,
        total_cycles: int,
    ) -> None:
        """Put the product on a recurring schedule."""
        if cycle_length <= 0:
            raise ValidationError("Recurring cycle length must be positive")
        if total_cycles < 0:
            raise ValidationError("Recurring total cycles cannot be negative")
        self.is_recurring = True
        self.recurring_cycle_length = cycle_length
        self.recurring_cycle_period = cycle_period
        self.recurring_total_cycles = total_cycles
