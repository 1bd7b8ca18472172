from __future__ import annotations

from datetime import datetime, timezone
import unittest

from artist_portal.infrastructure.db.mappers.portal_mapper import (
    map_row_to_activity,
    map_row_to_addon,
    map_row_to_artist_profile,
    map_row_to_plan,
)


CREATED_AT = datetime(2026, 1, 10, tzinfo=timezone.utc)


class PortalMapperTests(unittest.TestCase):
    def test_map_row_to_addon_decodes_scope_and_drops_blank_items(self):
        row = {
            "id": "addon_ig_audit",
            "name": "Instagram Audit & Strategy",
            "slug": "ig-audit",
            "category": "social",
            "description": None,
            "price": 299,
            "delivery_days": 5,
            "scope": '["Profile optimization", "", "  ", "Growth roadmap"]',
            "requirements": None,
            "active": 1,
            "sort_order": 1,
        }

        addon = map_row_to_addon(row)

        self.assertEqual(addon.scope, ("Profile optimization", "Growth roadmap"))
        self.assertEqual(addon.requirements, ())
        self.assertEqual(addon.price, 299.0)
        self.assertTrue(addon.active)

    def test_map_row_to_plan_accepts_decoded_json(self):
        row = {
            "id": "plan_premium",
            "name": "Premium",
            "slug": "premium",
            "description": "Level up",
            "price_monthly": 999,
            "price_yearly": None,
            "features": ["Press release writing"],
            "deliverables": [{"name": "Social posts", "count": 24}, {"count": 3}],
            "sessions_per_month": 2,
            "response_sla": "24 hours",
            "is_popular": 1,
            "active": 1,
            "sort_order": 2,
        }

        plan = map_row_to_plan(row)

        self.assertEqual(plan.features, ("Press release writing",))
        self.assertEqual(len(plan.deliverables), 1)
        self.assertEqual(plan.deliverables[0].name, "Social posts")
        self.assertEqual(plan.deliverables[0].count, 24)
        self.assertIsNone(plan.price_yearly)
        self.assertTrue(plan.is_popular)

    def test_map_row_to_artist_profile_tolerates_malformed_json(self):
        row = {
            "id": "profile-1",
            "user_id": "user_artist_demo",
            "genre": "Indie Pop",
            "bio": None,
            "goals": "not json",
            "social_links": '{"instagram": "@jordan", "tiktok": null}',
            "monthly_listeners": None,
            "followers": "15200",
        }

        profile = map_row_to_artist_profile(row)

        self.assertEqual(profile.goals, ())
        self.assertEqual(profile.social_links, {"instagram": "@jordan"})
        self.assertIsNone(profile.monthly_listeners)
        self.assertEqual(profile.followers, 15200)

    def test_map_row_to_activity_defaults_meta_to_empty_dict(self):
        row = {
            "id": "activity-1",
            "user_id": None,
            "type": "purchase",
            "action": "purchased",
            "entity_type": "addon",
            "entity_id": "addon_ig_audit",
            "meta": None,
            "created_at": CREATED_AT,
        }

        activity = map_row_to_activity(row)

        self.assertEqual(activity.meta, {})
        self.assertIsNone(activity.user_id)
        self.assertIsNone(activity.user_name)


if __name__ == "__main__":
    unittest.main()
