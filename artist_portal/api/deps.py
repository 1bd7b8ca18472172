from __future__ import annotations

from functools import lru_cache

from fastapi import Cookie, Depends, HTTPException, Response

from artist_portal.application.use_cases.auth_gate import AuthGate
from artist_portal.application.use_cases.create_booking import CreateBookingUseCase
from artist_portal.application.use_cases.get_me import GetMeUseCase
from artist_portal.application.use_cases.get_project import GetProjectUseCase
from artist_portal.application.use_cases.list_activities import ListActivitiesUseCase
from artist_portal.application.use_cases.list_addons import ListAddonsUseCase
from artist_portal.application.use_cases.list_bookings import ListBookingsUseCase
from artist_portal.application.use_cases.list_deliverable_comments import ListDeliverableCommentsUseCase
from artist_portal.application.use_cases.list_deliverables import ListDeliverablesUseCase
from artist_portal.application.use_cases.list_goals import ListGoalsUseCase
from artist_portal.application.use_cases.list_metrics import ListMetricsUseCase
from artist_portal.application.use_cases.list_notifications import ListNotificationsUseCase
from artist_portal.application.use_cases.list_plans import ListPlansUseCase
from artist_portal.application.use_cases.list_projects import ListProjectsUseCase
from artist_portal.application.use_cases.list_users import ListUsersUseCase
from artist_portal.application.use_cases.login import LoginUseCase
from artist_portal.application.use_cases.logout_session import LogoutSessionUseCase
from artist_portal.application.use_cases.post_project_message import PostProjectMessageUseCase
from artist_portal.application.use_cases.purchase_addon import PurchaseAddonUseCase
from artist_portal.application.use_cases.recompute_progress import ProgressAggregator
from artist_portal.application.use_cases.record_activity import ActivityLogger
from artist_portal.application.use_cases.session_store import SessionStore
from artist_portal.application.use_cases.subscribe_plan import SubscribePlanUseCase
from artist_portal.application.use_cases.update_booking import UpdateBookingUseCase
from artist_portal.application.use_cases.update_deliverable import UpdateDeliverableUseCase
from artist_portal.domain.entities.user import ROLE_ADMIN, User, UserRole
from artist_portal.domain.exceptions import ForbiddenError, UnauthenticatedError
from artist_portal.infrastructure.db.engine import get_engine
from artist_portal.infrastructure.db.repositories.accounts_repository import SqlAccountsRepository
from artist_portal.infrastructure.db.repositories.activity_repository import SqlActivityRepository
from artist_portal.infrastructure.db.repositories.bookings_repository import SqlBookingsRepository
from artist_portal.infrastructure.db.repositories.catalog_repository import SqlCatalogRepository
from artist_portal.infrastructure.db.repositories.insights_repository import SqlInsightsRepository
from artist_portal.infrastructure.db.repositories.projects_repository import SqlProjectsRepository
from artist_portal.infrastructure.db.repositories.transaction import SqlTransactionRunner
from artist_portal.infrastructure.security.token_service import SessionTokenService
from artist_portal.shared.config import get_settings


SESSION_COOKIE_NAME = "artist-portal-session"
SESSION_COOKIE_PATH = "/"


def _get_db_engine():
    settings = get_settings()
    if not settings.database_url:
        raise HTTPException(status_code=500, detail="DATABASE_URL is required.")
    return get_engine(settings.database_url)


def _get_accounts_repository() -> SqlAccountsRepository:
    return SqlAccountsRepository(_get_db_engine())


def _get_catalog_repository() -> SqlCatalogRepository:
    return SqlCatalogRepository(_get_db_engine())


def _get_projects_repository() -> SqlProjectsRepository:
    return SqlProjectsRepository(_get_db_engine())


def _get_transaction_runner() -> SqlTransactionRunner:
    return SqlTransactionRunner(_get_db_engine())


@lru_cache(maxsize=1)
def _get_token_service() -> SessionTokenService:
    settings = get_settings()
    return SessionTokenService(session_ttl_days=settings.session_ttl_days)


@lru_cache(maxsize=1)
def _get_activity_logger() -> ActivityLogger:
    return ActivityLogger()


def get_session_store() -> SessionStore:
    return SessionStore(auth_port=_get_accounts_repository(), token_port=_get_token_service())


def get_auth_gate() -> AuthGate:
    return AuthGate(auth_port=_get_accounts_repository(), session_store=get_session_store())


def get_login_use_case() -> LoginUseCase:
    return LoginUseCase(
        auth_port=_get_accounts_repository(),
        session_store=get_session_store(),
        demo_passcode=get_settings().demo_passcode,
    )


def get_logout_session_use_case() -> LogoutSessionUseCase:
    return LogoutSessionUseCase(session_store=get_session_store())


def get_list_users_use_case() -> ListUsersUseCase:
    return ListUsersUseCase(auth_port=_get_accounts_repository())


def get_get_me_use_case() -> GetMeUseCase:
    return GetMeUseCase(auth_port=_get_accounts_repository(), catalog_port=_get_catalog_repository())


def get_list_plans_use_case() -> ListPlansUseCase:
    return ListPlansUseCase(catalog_port=_get_catalog_repository())


def get_list_addons_use_case() -> ListAddonsUseCase:
    return ListAddonsUseCase(catalog_port=_get_catalog_repository())


def get_purchase_addon_use_case() -> PurchaseAddonUseCase:
    return PurchaseAddonUseCase(
        catalog_port=_get_catalog_repository(),
        transaction_port=_get_transaction_runner(),
        activity_logger=_get_activity_logger(),
    )


def get_subscribe_plan_use_case() -> SubscribePlanUseCase:
    return SubscribePlanUseCase(
        catalog_port=_get_catalog_repository(),
        transaction_port=_get_transaction_runner(),
        activity_logger=_get_activity_logger(),
    )


def get_list_projects_use_case() -> ListProjectsUseCase:
    return ListProjectsUseCase(project_port=_get_projects_repository())


def get_get_project_use_case() -> GetProjectUseCase:
    return GetProjectUseCase(project_port=_get_projects_repository())


def get_post_project_message_use_case() -> PostProjectMessageUseCase:
    return PostProjectMessageUseCase(
        transaction_port=_get_transaction_runner(),
        activity_logger=_get_activity_logger(),
    )


def get_list_deliverables_use_case() -> ListDeliverablesUseCase:
    return ListDeliverablesUseCase(project_port=_get_projects_repository())


def get_update_deliverable_use_case() -> UpdateDeliverableUseCase:
    return UpdateDeliverableUseCase(
        transaction_port=_get_transaction_runner(),
        activity_logger=_get_activity_logger(),
        progress_aggregator=ProgressAggregator(),
    )


def get_list_deliverable_comments_use_case() -> ListDeliverableCommentsUseCase:
    return ListDeliverableCommentsUseCase(project_port=_get_projects_repository())


def get_list_bookings_use_case() -> ListBookingsUseCase:
    return ListBookingsUseCase(booking_port=SqlBookingsRepository(_get_db_engine()))


def get_create_booking_use_case() -> CreateBookingUseCase:
    return CreateBookingUseCase(
        transaction_port=_get_transaction_runner(),
        activity_logger=_get_activity_logger(),
    )


def get_update_booking_use_case() -> UpdateBookingUseCase:
    return UpdateBookingUseCase(
        transaction_port=_get_transaction_runner(),
        activity_logger=_get_activity_logger(),
    )


def get_list_activities_use_case() -> ListActivitiesUseCase:
    return ListActivitiesUseCase(
        activity_port=SqlActivityRepository(_get_db_engine()),
        default_limit=get_settings().activity_default_limit,
    )


def get_list_notifications_use_case() -> ListNotificationsUseCase:
    return ListNotificationsUseCase(insights_port=SqlInsightsRepository(_get_db_engine()))


def get_list_goals_use_case() -> ListGoalsUseCase:
    return ListGoalsUseCase(insights_port=SqlInsightsRepository(_get_db_engine()))


def get_list_metrics_use_case() -> ListMetricsUseCase:
    return ListMetricsUseCase(insights_port=SqlInsightsRepository(_get_db_engine()))


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(key=SESSION_COOKIE_NAME, path=SESSION_COOKIE_PATH)


def _unauthenticated(exc: UnauthenticatedError, session_token: str | None) -> HTTPException:
    headers = None
    if session_token:
        cleared = Response()
        clear_session_cookie(cleared)
        headers = {"set-cookie": cleared.headers["set-cookie"]}
    return HTTPException(status_code=401, detail=str(exc), headers=headers)


def get_current_user(
    response: Response,
    session_token: str | None = Cookie(default=None, alias=SESSION_COOKIE_NAME),
    auth_gate: AuthGate = Depends(get_auth_gate),
) -> User | None:
    user = auth_gate.current_user(token=session_token)
    if user is None and session_token:
        clear_session_cookie(response)
    return user


def require_auth(
    session_token: str | None = Cookie(default=None, alias=SESSION_COOKIE_NAME),
    auth_gate: AuthGate = Depends(get_auth_gate),
) -> User:
    try:
        return auth_gate.require_auth(token=session_token)
    except UnauthenticatedError as exc:
        raise _unauthenticated(exc, session_token) from exc


def require_role(role: UserRole):
    def _dependency(
        session_token: str | None = Cookie(default=None, alias=SESSION_COOKIE_NAME),
        auth_gate: AuthGate = Depends(get_auth_gate),
    ) -> User:
        try:
            return auth_gate.require_role(token=session_token, role=role)
        except UnauthenticatedError as exc:
            raise _unauthenticated(exc, session_token) from exc
        except ForbiddenError as exc:
            raise HTTPException(status_code=403, detail=str(exc)) from exc

    return _dependency


require_admin = require_role(ROLE_ADMIN)
