"""Localization resources backed by an optional JSON file.

The file maps resource keys to text and overrides the built-in English
defaults. It is only read, never created.
"""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.service.localization_service import LocalizationService

DEFAULT_RESOURCES: dict[str, str] = {
    "ShoppingCart.ConflictingShipmentSchedules": (
        "Your cart has auto-ship (recurring) items with conflicting shipment "
        "schedules. Only one auto-ship schedule is allowed per order."
    ),
}


class JsonLocalizationService(LocalizationService):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._resources: dict[str, str] | None = None

    def get_resource(self, key: str) -> str:
        value = self._load().get(key)
        if not value:
            raise EntityNotFoundError(f"Resource '{key}' not found")
        return value

    def _load(self) -> dict[str, str]:
        if self._resources is None:
            resources = dict(DEFAULT_RESOURCES)
            if self._file_path.exists():
                resources.update(json.loads(self._file_path.read_text(encoding="utf-8")))
            self._resources = resources
        return self._resources
