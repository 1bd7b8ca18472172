from __future__ import annotations

from datetime import datetime, timezone
import unittest

from artist_portal.domain.services.deliverable_workflow import apply_status_change, is_workflow_transition


NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class DeliverableWorkflowTests(unittest.TestCase):
    def test_approval_stamps_completed_at(self):
        change = apply_status_change("approved", now=NOW)

        self.assertEqual(change.status, "approved")
        self.assertEqual(change.completed_at, NOW)
        self.assertEqual(change.activity_action, "approved")
        self.assertEqual(change.activity_meta, {"newStatus": "approved"})

    def test_other_statuses_clear_completed_at(self):
        for status in ("not_started", "in_progress", "review", "revision", "cancelled"):
            change = apply_status_change(status, now=NOW)
            self.assertIsNone(change.completed_at, status)
            self.assertEqual(change.activity_action, "updated")
            self.assertEqual(change.activity_meta, {"newStatus": status})

    def test_canonical_review_loop(self):
        self.assertTrue(is_workflow_transition("not_started", "in_progress"))
        self.assertTrue(is_workflow_transition("in_progress", "review"))
        self.assertTrue(is_workflow_transition("review", "approved"))
        self.assertTrue(is_workflow_transition("review", "revision"))
        self.assertTrue(is_workflow_transition("revision", "review"))

    def test_cancel_is_allowed_from_anywhere(self):
        self.assertTrue(is_workflow_transition("approved", "cancelled"))
        self.assertTrue(is_workflow_transition("not_started", "cancelled"))

    def test_skipping_review_is_off_workflow(self):
        self.assertFalse(is_workflow_transition("not_started", "approved"))
        self.assertFalse(is_workflow_transition("approved", "in_progress"))


if __name__ == "__main__":
    unittest.main()
