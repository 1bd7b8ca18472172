from __future__ import annotations

from artist_portal.application.ports.catalog_port import CatalogPort
from artist_portal.domain.entities.catalog import Addon


class ListAddonsUseCase:
    def __init__(self, *, catalog_port: CatalogPort):
        self._catalog_port = catalog_port

    def execute(self, *, category: str | None = None) -> list[Addon]:
        category = (category or "").strip() or None
        return self._catalog_port.list_active_addons(category=category)
