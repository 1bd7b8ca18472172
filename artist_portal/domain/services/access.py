from __future__ import annotations

from dataclasses import dataclass

from artist_portal.domain.entities.user import ROLE_ADMIN, User


PUBLIC_PATHS = frozenset({"/", "/auth"})
LOGIN_PATH = "/auth"
HOME_PATH = "/app"
ADMIN_PREFIX = "/admin"


@dataclass(frozen=True)
class RouteAccess:
    allowed: bool
    redirect_to: str | None = None


def can_manage(*, owner_id: str, user: User) -> bool:
    return owner_id == user.id or user.role == ROLE_ADMIN


def is_admin_path(path: str) -> bool:
    return path == ADMIN_PREFIX or path.startswith(ADMIN_PREFIX + "/")


def evaluate_route_access(*, path: str, user: User | None) -> RouteAccess:
    normalized = "/" + path.strip().lstrip("/")
    if len(normalized) > 1:
        normalized = normalized.rstrip("/")

    if normalized in PUBLIC_PATHS:
        return RouteAccess(allowed=True)
    if user is None:
        return RouteAccess(allowed=False, redirect_to=LOGIN_PATH)
    if is_admin_path(normalized) and user.role != ROLE_ADMIN:
        return RouteAccess(allowed=False, redirect_to=HOME_PATH)
    return RouteAccess(allowed=True)
