from __future__ import annotations

import logging

from artist_portal.application.ports.project_port import ProjectPort
from artist_portal.domain.services.progress import calculate_progress


logger = logging.getLogger(__name__)


class ProgressAggregator:
    def recompute(self, projects: ProjectPort, *, project_id: str) -> int | None:
        """Refresh ``projects.progress`` from the deliverable statuses.

        Must run in the same transaction as the status write, after the project
        row has been locked with ``get_project(for_update=True)``.
        """
        counts = projects.count_deliverables(project_id=project_id)
        progress = calculate_progress(approved=counts.approved, total=counts.total)
        if progress is None:
            logger.debug("progress_aggregator: no_deliverables project_id=%s", project_id)
            return None

        projects.update_project_progress(project_id=project_id, progress=progress)
        logger.debug(
            "progress_aggregator: recomputed project_id=%s approved=%s total=%s progress=%s",
            project_id,
            counts.approved,
            counts.total,
            progress,
        )
        return progress
