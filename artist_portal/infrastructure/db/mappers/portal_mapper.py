from __future__ import annotations

import json
from typing import Any, Mapping

from artist_portal.domain.entities.activity import Activity
from artist_portal.domain.entities.booking import Booking
from artist_portal.domain.entities.catalog import Addon, Plan, PlanDeliverable, Purchase
from artist_portal.domain.entities.insights import Goal, Metric, Notification
from artist_portal.domain.entities.project import (
    Attachment,
    Deliverable,
    DeliverableComment,
    Message,
    Project,
)
from artist_portal.domain.entities.subscription import Subscription
from artist_portal.domain.entities.user import ArtistProfile, AuthSession, User


def _as_str(value: Any) -> str:
    return str(value)


def _as_opt_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _load_json(value: Any) -> Any:
    # Drivers hand back decoded JSON; legacy rows may still hold the raw text.
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        try:
            return json.loads(value)
        except ValueError:
            return None
    return value


def _as_str_tuple(value: Any) -> tuple[str, ...]:
    loaded = _load_json(value)
    if not isinstance(loaded, list):
        return ()
    items = []
    for item in loaded:
        if item is None:
            continue
        text = str(item).strip()
        if text:
            items.append(text)
    return tuple(items)


def _as_dict(value: Any) -> dict[str, Any]:
    loaded = _load_json(value)
    if not isinstance(loaded, dict):
        return {}
    return dict(loaded)


def _as_plan_deliverables(value: Any) -> tuple[PlanDeliverable, ...]:
    loaded = _load_json(value)
    if not isinstance(loaded, list):
        return ()
    out = []
    for item in loaded:
        if not isinstance(item, dict) or not item.get("name"):
            continue
        try:
            count = int(item.get("count") or 0)
        except (TypeError, ValueError):
            count = 0
        out.append(PlanDeliverable(name=str(item["name"]), count=count))
    return tuple(out)


def _as_opt_int(value: Any) -> int | None:
    if value is None:
        return None
    return int(value)


def _as_opt_float(value: Any) -> float | None:
    if value is None:
        return None
    return float(value)


def map_row_to_user(row: Mapping[str, Any]) -> User:
    return User(
        id=_as_str(row["id"]),
        email=row["email"],
        name=row["name"],
        avatar_url=row.get("avatar_url"),
        role=row["role"],
        created_at=row["created_at"],
    )


def map_row_to_artist_profile(row: Mapping[str, Any]) -> ArtistProfile:
    return ArtistProfile(
        id=_as_str(row["id"]),
        user_id=_as_str(row["user_id"]),
        genre=row.get("genre"),
        bio=row.get("bio"),
        goals=_as_str_tuple(row.get("goals")),
        social_links={str(k): str(v) for k, v in _as_dict(row.get("social_links")).items() if v},
        monthly_listeners=_as_opt_int(row.get("monthly_listeners")),
        followers=_as_opt_int(row.get("followers")),
    )


def map_row_to_auth_session(row: Mapping[str, Any]) -> AuthSession:
    return AuthSession(
        id=_as_str(row["id"]),
        user_id=_as_str(row["user_id"]),
        expires_at=row["expires_at"],
        created_at=row["created_at"],
    )


def map_row_to_plan(row: Mapping[str, Any]) -> Plan:
    return Plan(
        id=_as_str(row["id"]),
        name=row["name"],
        slug=row["slug"],
        description=row.get("description"),
        price_monthly=float(row["price_monthly"]),
        price_yearly=_as_opt_float(row.get("price_yearly")),
        features=_as_str_tuple(row.get("features")),
        deliverables=_as_plan_deliverables(row.get("deliverables")),
        sessions_per_month=int(row.get("sessions_per_month") or 0),
        response_sla=row.get("response_sla"),
        is_popular=bool(row.get("is_popular")),
        active=bool(row["active"]),
        sort_order=int(row["sort_order"]),
    )


def map_row_to_addon(row: Mapping[str, Any]) -> Addon:
    return Addon(
        id=_as_str(row["id"]),
        name=row["name"],
        slug=row["slug"],
        category=row["category"],
        description=row.get("description"),
        price=float(row["price"]),
        delivery_days=int(row["delivery_days"]),
        scope=_as_str_tuple(row.get("scope")),
        requirements=_as_str_tuple(row.get("requirements")),
        active=bool(row["active"]),
        sort_order=int(row["sort_order"]),
    )


def map_row_to_subscription(row: Mapping[str, Any]) -> Subscription:
    return Subscription(
        id=_as_str(row["id"]),
        user_id=_as_str(row["user_id"]),
        plan_id=_as_str(row["plan_id"]),
        status=row["status"],
        current_period_start=row.get("current_period_start"),
        current_period_end=row.get("current_period_end"),
        created_at=row["created_at"],
    )


def map_row_to_purchase(row: Mapping[str, Any]) -> Purchase:
    return Purchase(
        id=_as_str(row["id"]),
        user_id=_as_str(row["user_id"]),
        addon_id=_as_str(row["addon_id"]),
        project_id=_as_opt_str(row.get("project_id")),
        amount=float(row["amount"]),
        status=row["status"],
        created_at=row["created_at"],
    )


def map_row_to_project(row: Mapping[str, Any]) -> Project:
    return Project(
        id=_as_str(row["id"]),
        user_id=_as_str(row["user_id"]),
        title=row["title"],
        description=row.get("description"),
        type=row["type"],
        status=row["status"],
        progress=int(row.get("progress") or 0),
        start_date=row.get("start_date"),
        due_date=row.get("due_date"),
        completed_at=row.get("completed_at"),
        created_at=row["created_at"],
        meta=_as_dict(row.get("meta")),
    )


def map_row_to_deliverable(row: Mapping[str, Any]) -> Deliverable:
    return Deliverable(
        id=_as_str(row["id"]),
        project_id=_as_str(row["project_id"]),
        title=row["title"],
        description=row.get("description"),
        status=row["status"],
        priority=row["priority"],
        due_date=row.get("due_date"),
        completed_at=row.get("completed_at"),
        assigned_to=_as_opt_str(row.get("assigned_to")),
        sort_order=int(row.get("sort_order") or 0),
        created_at=row["created_at"],
        meta=_as_dict(row.get("meta")),
        project_title=row.get("project_title"),
    )


def map_row_to_comment(row: Mapping[str, Any]) -> DeliverableComment:
    return DeliverableComment(
        id=_as_str(row["id"]),
        deliverable_id=_as_str(row["deliverable_id"]),
        author_id=_as_str(row["author_id"]),
        content=row["content"],
        is_internal=bool(row["is_internal"]),
        created_at=row["created_at"],
    )


def map_row_to_message(row: Mapping[str, Any]) -> Message:
    return Message(
        id=_as_str(row["id"]),
        project_id=_as_str(row["project_id"]),
        author_id=_as_str(row["author_id"]),
        content=row["content"],
        attachment_url=row.get("attachment_url"),
        read_at=row.get("read_at"),
        created_at=row["created_at"],
        author_name=row.get("author_name"),
        author_avatar=row.get("author_avatar"),
        author_role=row.get("author_role"),
    )


def map_row_to_attachment(row: Mapping[str, Any]) -> Attachment:
    return Attachment(
        id=_as_str(row["id"]),
        project_id=_as_opt_str(row.get("project_id")),
        deliverable_id=_as_opt_str(row.get("deliverable_id")),
        name=row["name"],
        url=row["url"],
        type=row.get("type"),
        size=_as_opt_int(row.get("size")),
        uploaded_by=_as_opt_str(row.get("uploaded_by")),
        created_at=row["created_at"],
    )


def map_row_to_booking(row: Mapping[str, Any]) -> Booking:
    return Booking(
        id=_as_str(row["id"]),
        user_id=_as_str(row["user_id"]),
        session_type=row["session_type"],
        title=row["title"],
        description=row.get("description"),
        start_at=row["start_at"],
        end_at=row["end_at"],
        status=row["status"],
        meeting_url=row.get("meeting_url"),
        notes=row.get("notes"),
        created_at=row["created_at"],
    )


def map_row_to_notification(row: Mapping[str, Any]) -> Notification:
    return Notification(
        id=_as_str(row["id"]),
        user_id=_as_str(row["user_id"]),
        type=row["type"],
        title=row["title"],
        content=row.get("content"),
        link_url=row.get("link_url"),
        read_at=row.get("read_at"),
        created_at=row["created_at"],
    )


def map_row_to_goal(row: Mapping[str, Any]) -> Goal:
    return Goal(
        id=_as_str(row["id"]),
        user_id=_as_str(row["user_id"]),
        title=row["title"],
        type=row["type"],
        target=int(row["target"]),
        current=int(row.get("current") or 0),
        period=row["period"],
        start_date=row.get("start_date"),
        end_date=row.get("end_date"),
        created_at=row["created_at"],
    )


def map_row_to_metric(row: Mapping[str, Any]) -> Metric:
    return Metric(
        id=_as_str(row["id"]),
        user_id=_as_str(row["user_id"]),
        type=row["type"],
        date=row["date"],
        value=float(row["value"]),
        created_at=row["created_at"],
        meta=_as_dict(row.get("meta")),
    )


def map_row_to_activity(row: Mapping[str, Any]) -> Activity:
    return Activity(
        id=_as_str(row["id"]),
        user_id=_as_opt_str(row.get("user_id")),
        type=row["type"],
        action=row["action"],
        entity_type=row.get("entity_type"),
        entity_id=_as_opt_str(row.get("entity_id")),
        created_at=row["created_at"],
        meta=_as_dict(row.get("meta")),
        user_name=row.get("user_name"),
        user_avatar=row.get("user_avatar"),
        user_role=row.get("user_role"),
    )
