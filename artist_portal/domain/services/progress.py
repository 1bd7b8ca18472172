from __future__ import annotations


def calculate_progress(*, approved: int, total: int) -> int | None:
    """Percentage of approved deliverables, rounded half up.

    Returns None when the project has no deliverables; callers leave the stored
    progress untouched in that case.
    """
    if total <= 0:
        return None
    approved = min(max(approved, 0), total)
    return (200 * approved + total) // (2 * total)
