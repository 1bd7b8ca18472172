from __future__ import annotations

from dataclasses import asdict
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


TModel = TypeVar("TModel", bound="ApiModel")


class ApiModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SuccessResponse(ApiModel):
    success: bool = True


class ErrorResponse(ApiModel):
    success: bool = False
    status_code: int
    message: str


class UserResponse(ApiModel):
    id: str
    email: str
    name: str
    avatar_url: str | None = None
    role: str


def from_entity(model: type[TModel], entity: Any, **extra: Any) -> TModel:
    """Validate a response model from a domain dataclass plus computed fields."""
    return model.model_validate({**asdict(entity), **extra})
