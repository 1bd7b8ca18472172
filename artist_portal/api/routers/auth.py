from __future__ import annotations

from fastapi import APIRouter, Cookie, Depends, HTTPException, Query, Response

from artist_portal.api.deps import (
    SESSION_COOKIE_NAME,
    SESSION_COOKIE_PATH,
    clear_session_cookie,
    get_current_user,
    get_list_users_use_case,
    get_login_use_case,
    get_logout_session_use_case,
)
from artist_portal.api.schemas.auth import (
    AuthUserResponse,
    LoginRequest,
    LogoutResponse,
    RouteAccessResponse,
    UsersResponse,
)
from artist_portal.api.schemas.common import UserResponse, from_entity
from artist_portal.application.dto.auth import LoginInput, LogoutInput
from artist_portal.application.use_cases.list_users import ListUsersUseCase
from artist_portal.application.use_cases.login import LoginUseCase
from artist_portal.application.use_cases.logout_session import LogoutSessionUseCase
from artist_portal.domain.entities.user import User
from artist_portal.domain.exceptions import InvalidPasscodeError, UserNotFoundError
from artist_portal.domain.services.access import evaluate_route_access
from artist_portal.shared.config import get_settings


router = APIRouter()


def _set_session_cookie(response: Response, session_token: str, max_age_seconds: int) -> None:
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=session_token,
        httponly=True,
        samesite="lax",
        secure=not get_settings().is_development,
        max_age=max_age_seconds,
        path=SESSION_COOKIE_PATH,
    )


def _cookie_max_age_seconds() -> int:
    return get_settings().session_ttl_days * 86400


@router.post("/api/auth/login", response_model=AuthUserResponse)
def login(
    req: LoginRequest,
    response: Response,
    use_case: LoginUseCase = Depends(get_login_use_case),
):
    try:
        output = use_case.execute(LoginInput(user_id=req.user_id, passcode=req.passcode))
    except InvalidPasscodeError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    _set_session_cookie(
        response,
        output.session_token,
        max_age_seconds=_cookie_max_age_seconds(),
    )
    return AuthUserResponse(user=from_entity(UserResponse, output.user))


@router.post("/api/auth/logout", response_model=LogoutResponse)
def logout(
    response: Response,
    session_token: str | None = Cookie(default=None, alias=SESSION_COOKIE_NAME),
    use_case: LogoutSessionUseCase = Depends(get_logout_session_use_case),
):
    use_case.execute(LogoutInput(session_token=session_token))
    clear_session_cookie(response)
    return LogoutResponse(message="Logged out successfully")


@router.get("/api/auth/users", response_model=UsersResponse)
def list_users(use_case: ListUsersUseCase = Depends(get_list_users_use_case)):
    users = use_case.execute()
    return UsersResponse(users=[from_entity(UserResponse, user) for user in users])


@router.get("/api/auth/route-access", response_model=RouteAccessResponse)
def route_access(
    path: str = Query(..., min_length=1, max_length=2048),
    current_user: User | None = Depends(get_current_user),
):
    decision = evaluate_route_access(path=path, user=current_user)
    return RouteAccessResponse(allowed=decision.allowed, redirect_to=decision.redirect_to)
