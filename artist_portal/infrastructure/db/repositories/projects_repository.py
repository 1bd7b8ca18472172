from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import case, func, insert, select, update

from artist_portal.application.ports.project_port import ProjectPort
from artist_portal.domain.entities.project import DeliverableCounts
from artist_portal.infrastructure.db.mappers.portal_mapper import (
    map_row_to_attachment,
    map_row_to_comment,
    map_row_to_deliverable,
    map_row_to_message,
    map_row_to_project,
)
from artist_portal.infrastructure.db.models.portal import (
    AttachmentModel,
    DeliverableCommentModel,
    DeliverableModel,
    MessageModel,
    ProjectModel,
    UserModel,
)

from .base import SqlRepository


projects = ProjectModel.__table__
deliverables = DeliverableModel.__table__
comments = DeliverableCommentModel.__table__
messages = MessageModel.__table__
attachments = AttachmentModel.__table__
users = UserModel.__table__

_approved_count = func.coalesce(
    func.sum(case((deliverables.c.status == "approved", 1), else_=0)),
    0,
)


class SqlProjectsRepository(SqlRepository, ProjectPort):
    def list_projects_for_user(self, *, user_id: str, status: str | None = None):
        stmt = select(projects).where(projects.c.user_id == user_id)
        if status:
            stmt = stmt.where(projects.c.status == status)
        stmt = stmt.order_by(projects.c.created_at.desc())
        with self._read() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [map_row_to_project(row) for row in rows]

    def list_all_projects(self, *, status: str | None = None):
        stmt = select(projects)
        if status:
            stmt = stmt.where(projects.c.status == status)
        stmt = stmt.order_by(projects.c.created_at.desc())
        with self._read() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [map_row_to_project(row) for row in rows]

    def get_project(self, *, project_id: str, for_update: bool = False):
        stmt = select(projects).where(projects.c.id == project_id).limit(1)
        if for_update:
            # Serializes progress recomputation per project; SQLite compiles this away.
            stmt = stmt.with_for_update()
        with self._read() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return map_row_to_project(row)

    def create_project(
        self,
        *,
        project_id: str,
        user_id: str,
        title: str,
        description: str | None,
        type: str,
        status: str,
        progress: int,
        start_date: datetime | None,
        due_date: datetime | None,
        meta: dict[str, Any],
        created_at: datetime,
    ):
        values = {
            "id": project_id,
            "user_id": user_id,
            "title": title,
            "description": description,
            "type": type,
            "status": status,
            "progress": progress,
            "start_date": start_date,
            "due_date": due_date,
            "completed_at": None,
            "meta": meta,
            "created_at": created_at,
        }
        with self._write() as conn:
            conn.execute(insert(projects).values(**values))
        return map_row_to_project(values)

    def update_project_progress(self, *, project_id: str, progress: int) -> None:
        stmt = update(projects).where(projects.c.id == project_id).values(progress=progress)
        with self._write() as conn:
            conn.execute(stmt)

    def count_deliverables(self, *, project_id: str) -> DeliverableCounts:
        stmt = select(
            func.count(deliverables.c.id).label("total"),
            _approved_count.label("approved"),
        ).where(deliverables.c.project_id == project_id)
        with self._read() as conn:
            row = conn.execute(stmt).mappings().one()
        return DeliverableCounts(total=int(row["total"] or 0), approved=int(row["approved"] or 0))

    def count_deliverables_by_project(self, *, project_ids: list[str]) -> dict[str, DeliverableCounts]:
        if not project_ids:
            return {}
        stmt = (
            select(
                deliverables.c.project_id,
                func.count(deliverables.c.id).label("total"),
                _approved_count.label("approved"),
            )
            .where(deliverables.c.project_id.in_(project_ids))
            .group_by(deliverables.c.project_id)
        )
        with self._read() as conn:
            rows = conn.execute(stmt).mappings().all()
        return {
            str(row["project_id"]): DeliverableCounts(
                total=int(row["total"] or 0),
                approved=int(row["approved"] or 0),
            )
            for row in rows
        }

    def list_deliverables_for_project(self, *, project_id: str):
        stmt = (
            select(deliverables)
            .where(deliverables.c.project_id == project_id)
            .order_by(deliverables.c.sort_order, deliverables.c.created_at)
        )
        with self._read() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [map_row_to_deliverable(row) for row in rows]

    def list_deliverables_for_user(
        self,
        *,
        user_id: str,
        status: str | None = None,
        project_id: str | None = None,
    ):
        stmt = (
            select(deliverables, projects.c.title.label("project_title"))
            .join(projects, projects.c.id == deliverables.c.project_id)
            .where(projects.c.user_id == user_id)
        )
        if status:
            stmt = stmt.where(deliverables.c.status == status)
        if project_id:
            stmt = stmt.where(deliverables.c.project_id == project_id)
        # Undated deliverables sort last on every backend.
        stmt = stmt.order_by(
            deliverables.c.due_date.is_(None),
            deliverables.c.due_date,
            deliverables.c.sort_order,
        )
        with self._read() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [map_row_to_deliverable(row) for row in rows]

    def get_deliverable(self, *, deliverable_id: str):
        stmt = select(deliverables).where(deliverables.c.id == deliverable_id).limit(1)
        with self._read() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return map_row_to_deliverable(row)

    def create_deliverable(
        self,
        *,
        deliverable_id: str,
        project_id: str,
        title: str,
        status: str,
        priority: str,
        due_date: datetime | None,
        sort_order: int,
        created_at: datetime,
    ):
        values = {
            "id": deliverable_id,
            "project_id": project_id,
            "title": title,
            "description": None,
            "status": status,
            "priority": priority,
            "due_date": due_date,
            "completed_at": None,
            "assigned_to": None,
            "meta": {},
            "sort_order": sort_order,
            "created_at": created_at,
        }
        with self._write() as conn:
            conn.execute(insert(deliverables).values(**values))
        return map_row_to_deliverable(values)

    def update_deliverable_status(
        self,
        *,
        deliverable_id: str,
        status: str,
        completed_at: datetime | None,
    ) -> None:
        stmt = (
            update(deliverables)
            .where(deliverables.c.id == deliverable_id)
            .values(status=status, completed_at=completed_at)
        )
        with self._write() as conn:
            conn.execute(stmt)

    def create_comment(
        self,
        *,
        comment_id: str,
        deliverable_id: str,
        author_id: str,
        content: str,
        is_internal: bool,
        created_at: datetime,
    ):
        values = {
            "id": comment_id,
            "deliverable_id": deliverable_id,
            "author_id": author_id,
            "content": content,
            "is_internal": is_internal,
            "created_at": created_at,
        }
        with self._write() as conn:
            conn.execute(insert(comments).values(**values))
        return map_row_to_comment(values)

    def list_comments(self, *, deliverable_id: str, include_internal: bool):
        stmt = select(comments).where(comments.c.deliverable_id == deliverable_id)
        if not include_internal:
            stmt = stmt.where(comments.c.is_internal.is_(False))
        stmt = stmt.order_by(comments.c.created_at)
        with self._read() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [map_row_to_comment(row) for row in rows]

    def list_messages(self, *, project_id: str):
        stmt = (
            select(
                messages,
                users.c.name.label("author_name"),
                users.c.avatar_url.label("author_avatar"),
                users.c.role.label("author_role"),
            )
            .outerjoin(users, users.c.id == messages.c.author_id)
            .where(messages.c.project_id == project_id)
            .order_by(messages.c.created_at)
        )
        with self._read() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [map_row_to_message(row) for row in rows]

    def create_message(
        self,
        *,
        message_id: str,
        project_id: str,
        author_id: str,
        content: str,
        attachment_url: str | None,
        created_at: datetime,
    ):
        values = {
            "id": message_id,
            "project_id": project_id,
            "author_id": author_id,
            "content": content,
            "attachment_url": attachment_url,
            "read_at": None,
            "created_at": created_at,
        }
        with self._write() as conn:
            conn.execute(insert(messages).values(**values))
        return map_row_to_message(values)

    def list_attachments(self, *, project_id: str):
        stmt = (
            select(attachments)
            .where(attachments.c.project_id == project_id)
            .order_by(attachments.c.created_at.desc())
        )
        with self._read() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [map_row_to_attachment(row) for row in rows]
