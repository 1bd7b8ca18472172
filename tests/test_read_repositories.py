from __future__ import annotations

from datetime import datetime, timezone
import unittest

from artist_portal.application.use_cases.list_goals import ListGoalsUseCase
from artist_portal.application.use_cases.list_metrics import ListMetricsUseCase
from artist_portal.application.use_cases.list_notifications import ListNotificationsUseCase
from artist_portal.infrastructure.db.engine import create_db_engine, create_schema
from artist_portal.infrastructure.db.repositories.accounts_repository import SqlAccountsRepository
from artist_portal.infrastructure.db.repositories.catalog_repository import SqlCatalogRepository
from artist_portal.infrastructure.db.repositories.insights_repository import SqlInsightsRepository
from artist_portal.infrastructure.db.repositories.projects_repository import SqlProjectsRepository
from artist_portal.infrastructure.db.seeds.seed_demo import ADMIN_USER_ID, ARTIST_USER_ID, seed_demo


NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class ReadRepositoryTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.engine = create_db_engine("sqlite://")
        create_schema(cls.engine)
        seed_demo(cls.engine, now=NOW)
        cls.artist = SqlAccountsRepository(cls.engine).get_user_by_id(user_id=ARTIST_USER_ID)

    @classmethod
    def tearDownClass(cls):
        cls.engine.dispose()

    def test_users_list_artists_first(self):
        users = SqlAccountsRepository(self.engine).list_users()

        self.assertEqual([user.id for user in users], [ARTIST_USER_ID, ADMIN_USER_ID])
        self.assertEqual(users[0].created_at.tzinfo, timezone.utc)

    def test_artist_profile_json_fields(self):
        profile = SqlAccountsRepository(self.engine).get_artist_profile(user_id=ARTIST_USER_ID)

        self.assertEqual(profile.genre, "Indie Pop / Electronic")
        self.assertIn("Release EP by Q2", profile.goals)
        self.assertEqual(profile.social_links["instagram"], "@jordanrivers")

    def test_catalog_is_sorted_and_filterable(self):
        catalog = SqlCatalogRepository(self.engine)

        plans = catalog.list_active_plans()
        social = catalog.list_active_addons(category="social")

        self.assertEqual([plan.id for plan in plans], ["plan_standard", "plan_premium", "plan_deluxe"])
        self.assertTrue(social)
        self.assertTrue(all(addon.category == "social" for addon in social))
        self.assertEqual(catalog.get_addon(addon_id="addon_ig_audit").delivery_days, 5)

    def test_project_detail_reads(self):
        projects = SqlProjectsRepository(self.engine)
        retainer = projects.list_projects_for_user(user_id=ARTIST_USER_ID)[0]

        deliverables = projects.list_deliverables_for_project(project_id=retainer.id)
        messages = projects.list_messages(project_id=retainer.id)
        counts = projects.count_deliverables_by_project(project_ids=[retainer.id])

        self.assertEqual([d.sort_order for d in deliverables], list(range(8)))
        self.assertEqual([m.author_role for m in messages], ["admin", "artist"])
        self.assertEqual(counts[retainer.id].total, 8)
        self.assertEqual(counts[retainer.id].approved, 3)

    def test_deliverables_for_user_carry_project_title(self):
        deliverables = SqlProjectsRepository(self.engine).list_deliverables_for_user(
            user_id=ARTIST_USER_ID,
            status="approved",
        )

        self.assertEqual(len(deliverables), 3)
        self.assertEqual({d.project_title for d in deliverables}, {"Monthly Retainer"})

    def test_unread_notifications(self):
        use_case = ListNotificationsUseCase(insights_port=SqlInsightsRepository(self.engine))

        every = use_case.execute(user=self.artist)
        unread = use_case.execute(user=self.artist, unread_only=True)

        self.assertEqual(len(every), 2)
        self.assertEqual([n.title for n in unread], ["Stories Ready for Review"])

    def test_goals_and_metrics(self):
        insights = SqlInsightsRepository(self.engine)

        goals = ListGoalsUseCase(insights_port=insights).execute(user=self.artist)
        engagement = ListMetricsUseCase(insights_port=insights).execute(user=self.artist, type="engagement")
        every = ListMetricsUseCase(insights_port=insights).execute(user=self.artist)

        self.assertEqual({goal.title for goal in goals}, {"Weekly Posts", "Monthly Deliverables"})
        self.assertEqual(len(engagement), 13)
        self.assertEqual(len(every), 52)
        self.assertEqual(engagement[-1].date, NOW)


if __name__ == "__main__":
    unittest.main()
