"""Localized string lookup used by domain services."""

from __future__ import annotations

from abc import ABC, abstractmethod


class LocalizationService(ABC):

    @abstractmethod
    def get_resource(self, key: str) -> str:
        """Return the human-readable text for a resource *key*."""
