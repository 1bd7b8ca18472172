from __future__ import annotations

from pydantic import Field

from .common import ApiModel, SuccessResponse, UserResponse


class LoginRequest(ApiModel):
    user_id: str = Field(..., min_length=1, max_length=120)
    passcode: str | None = Field(default=None, max_length=256)


class AuthUserResponse(SuccessResponse):
    user: UserResponse | None


class LogoutResponse(SuccessResponse):
    message: str
    user: None = None


class UsersResponse(SuccessResponse):
    users: list[UserResponse]


class RouteAccessResponse(SuccessResponse):
    allowed: bool
    redirect_to: str | None = None
