from __future__ import annotations

from artist_portal.application.ports.catalog_port import CatalogPort
from artist_portal.domain.entities.catalog import Plan


class ListPlansUseCase:
    def __init__(self, *, catalog_port: CatalogPort):
        self._catalog_port = catalog_port

    def execute(self) -> list[Plan]:
        return self._catalog_port.list_active_plans()
