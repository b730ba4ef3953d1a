"""Abstract repository for Customer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: str) -> Customer | None:
        """Return a customer by ID, or None if not found."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Persist a new or updated customer."""
