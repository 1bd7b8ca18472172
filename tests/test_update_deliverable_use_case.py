from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from artist_portal.application.dto.deliverables import UpdateDeliverableInput
from artist_portal.application.use_cases.record_activity import ActivityLogger
from artist_portal.application.use_cases.recompute_progress import ProgressAggregator
from artist_portal.application.use_cases.update_deliverable import UpdateDeliverableUseCase
from artist_portal.domain.entities.project import Deliverable, DeliverableComment, DeliverableCounts, Project
from artist_portal.domain.entities.user import User
from artist_portal.domain.exceptions import DeliverableNotFoundError, ForbiddenError


NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class FakeProjectPort:
    def __init__(self, project: Project, deliverables: list[Deliverable]):
        self.projects = {project.id: project}
        self.deliverables = {d.id: d for d in deliverables}
        self.comments: list[DeliverableComment] = []
        self.locked: list[str] = []

    def get_project(self, *, project_id, for_update=False):
        if for_update:
            self.locked.append(project_id)
        return self.projects.get(project_id)

    def get_deliverable(self, *, deliverable_id):
        return self.deliverables.get(deliverable_id)

    def update_deliverable_status(self, *, deliverable_id, status, completed_at):
        self.deliverables[deliverable_id] = replace(
            self.deliverables[deliverable_id], status=status, completed_at=completed_at
        )

    def count_deliverables(self, *, project_id):
        rows = [d for d in self.deliverables.values() if d.project_id == project_id]
        return DeliverableCounts(total=len(rows), approved=sum(1 for d in rows if d.status == "approved"))

    def update_project_progress(self, *, project_id, progress):
        self.projects[project_id] = replace(self.projects[project_id], progress=progress)

    def create_comment(self, *, comment_id, deliverable_id, author_id, content, is_internal, created_at):
        comment = DeliverableComment(
            id=comment_id,
            deliverable_id=deliverable_id,
            author_id=author_id,
            content=content,
            is_internal=is_internal,
            created_at=created_at,
        )
        self.comments.append(comment)
        return comment


class FakeActivityPort:
    def __init__(self, *, fail=False):
        self.fail = fail
        self.rows: list[dict] = []

    def append_activity(self, **kwargs):
        if self.fail:
            raise RuntimeError("insert failed")
        self.rows.append(kwargs)
        return None


class FakeScope:
    def __init__(self, projects: FakeProjectPort, activities: FakeActivityPort):
        self.projects = projects
        self.activities = activities
        self.catalog = None
        self.bookings = None


class FakeTransactionPort:
    def __init__(self, scope: FakeScope):
        self.scope = scope
        self.calls = 0

    def execute_in_transaction(self, fn):
        self.calls += 1
        return fn(self.scope)


def _user(user_id: str, role: str) -> User:
    return User(id=user_id, email=f"{user_id}@demo.com", name=user_id, avatar_url=None, role=role, created_at=NOW)


def _project(progress: int = 0) -> Project:
    return Project(
        id="project-1",
        user_id="artist-1",
        title="Monthly Retainer",
        description=None,
        type="subscription",
        status="active",
        progress=progress,
        start_date=NOW,
        due_date=None,
        completed_at=None,
        created_at=NOW,
    )


def _deliverable(deliverable_id: str, status: str) -> Deliverable:
    return Deliverable(
        id=deliverable_id,
        project_id="project-1",
        title=deliverable_id,
        description=None,
        status=status,
        priority="medium",
        due_date=None,
        completed_at=NOW if status == "approved" else None,
        assigned_to=None,
        sort_order=0,
        created_at=NOW,
    )


def _build(statuses, *, fail_activity=False):
    projects = FakeProjectPort(
        _project(),
        [_deliverable(f"d{index}", status) for index, status in enumerate(statuses, start=1)],
    )
    activities = FakeActivityPort(fail=fail_activity)
    transaction_port = FakeTransactionPort(FakeScope(projects, activities))
    use_case = UpdateDeliverableUseCase(
        transaction_port=transaction_port,
        activity_logger=ActivityLogger(clock=lambda: NOW),
        progress_aggregator=ProgressAggregator(),
        clock=lambda: NOW,
    )
    return use_case, projects, activities


def test_approving_third_of_four_moves_progress_to_75():
    use_case, projects, activities = _build(["approved", "approved", "review", "in_progress"])

    output = use_case.execute(
        UpdateDeliverableInput(deliverable_id="d3", status="approved"),
        actor=_user("admin-1", "admin"),
    )

    assert output.project_progress == 75
    assert output.completed_at == NOW
    assert projects.projects["project-1"].progress == 75
    assert projects.locked == ["project-1"]
    assert activities.rows[0]["action"] == "approved"
    assert activities.rows[0]["meta"] == {"newStatus": "approved"}


def test_moving_away_from_approved_clears_completion_and_lowers_progress():
    use_case, projects, activities = _build(["approved", "approved", "approved"])

    output = use_case.execute(
        UpdateDeliverableInput(deliverable_id="d1", status="revision"),
        actor=_user("artist-1", "artist"),
    )

    assert output.project_progress == 67
    assert projects.deliverables["d1"].completed_at is None
    assert activities.rows[0]["action"] == "updated"


def test_off_workflow_transition_is_still_written():
    use_case, projects, _ = _build(["not_started", "not_started"])

    output = use_case.execute(
        UpdateDeliverableInput(deliverable_id="d1", status="approved"),
        actor=_user("artist-1", "artist"),
    )

    assert output.status == "approved"
    assert projects.deliverables["d1"].status == "approved"
    assert output.project_progress == 50


def test_missing_deliverable_raises_not_found():
    use_case, _, _ = _build(["review"])

    with pytest.raises(DeliverableNotFoundError):
        use_case.execute(UpdateDeliverableInput(deliverable_id="missing", status="approved"), actor=_user("admin-1", "admin"))


def test_other_artist_is_forbidden_and_nothing_changes():
    use_case, projects, activities = _build(["review"])

    with pytest.raises(ForbiddenError):
        use_case.execute(
            UpdateDeliverableInput(deliverable_id="d1", status="approved"),
            actor=_user("artist-2", "artist"),
        )

    assert projects.deliverables["d1"].status == "review"
    assert activities.rows == []


def test_comment_only_update_keeps_status_and_progress():
    use_case, projects, activities = _build(["review", "approved"])

    output = use_case.execute(
        UpdateDeliverableInput(deliverable_id="d1", comment="Looks great"),
        actor=_user("artist-1", "artist"),
    )

    assert output.status == "review"
    assert output.project_progress == 0
    assert output.comment_id == projects.comments[0].id
    assert activities.rows == []


def test_internal_flag_is_ignored_for_artists():
    use_case, projects, _ = _build(["review"])

    use_case.execute(
        UpdateDeliverableInput(deliverable_id="d1", comment="note", is_internal=True),
        actor=_user("artist-1", "artist"),
    )
    use_case.execute(
        UpdateDeliverableInput(deliverable_id="d1", comment="team note", is_internal=True),
        actor=_user("admin-1", "admin"),
    )

    assert [comment.is_internal for comment in projects.comments] == [False, True]


def test_activity_failure_does_not_fail_the_update():
    use_case, projects, _ = _build(["review"], fail_activity=True)

    output = use_case.execute(
        UpdateDeliverableInput(deliverable_id="d1", status="approved"),
        actor=_user("admin-1", "admin"),
    )

    assert output.project_progress == 100
    assert projects.deliverables["d1"].status == "approved"
