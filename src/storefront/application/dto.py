"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RecurringScheduleSpec:
    """Input: the recurring schedule for a new product."""

    cycle_length: int
    cycle_period: str  # RecurringCyclePeriod name, e.g. "DAYS"
    total_cycles: int


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: str
    product_name: str  # "(missing)" when the product no longer exists
    quantity: int
    shipping_enabled: bool
    recurring: bool


@dataclass(frozen=True)
class RecurringScheduleDTO:
    cycle_length: int
    cycle_period: str
    total_cycles: int


@dataclass(frozen=True)
class CartDTO:
    """Output: a customer's cart with its derived facts."""

    customer_id: str
    lines: list[CartLineDTO]
    total_quantity: int
    shipping_required: bool
    recurring: bool
    schedule: RecurringScheduleDTO | None
    schedule_error: str | None


@dataclass(frozen=True)
class GiftCardDTO:
    code: str
    amount: str  # formatted, e.g. "$25.00"
    is_activated: bool
    created_at: str
