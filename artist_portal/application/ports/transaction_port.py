from __future__ import annotations

from typing import Callable, Protocol, TypeVar

from artist_portal.application.ports.activity_port import ActivityPort
from artist_portal.application.ports.booking_port import BookingPort
from artist_portal.application.ports.catalog_port import CatalogPort
from artist_portal.application.ports.project_port import ProjectPort


TResult = TypeVar("TResult")


class TransactionScope(Protocol):
    """Ports bound to one open transaction."""

    projects: ProjectPort
    catalog: CatalogPort
    activities: ActivityPort
    bookings: BookingPort


class TransactionPort(Protocol):
    def execute_in_transaction(self, fn: Callable[[TransactionScope], TResult]) -> TResult:
        ...
