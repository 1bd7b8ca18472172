from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from uuid import uuid4

from sqlalchemy import insert, select
from sqlalchemy.engine import Connection, Engine

from artist_portal.infrastructure.db.models.portal import (
    AddonModel,
    ArtistProfileModel,
    BookingModel,
    DeliverableModel,
    GoalModel,
    MessageModel,
    MetricModel,
    NotificationModel,
    PlanModel,
    ProjectModel,
    SubscriptionModel,
    UserModel,
)


logger = logging.getLogger(__name__)

ARTIST_USER_ID = "user_artist_demo"
ADMIN_USER_ID = "user_admin_demo"

_ADDON_REQUIREMENTS = ["Brief/questionnaire completion", "Asset access if needed"]

_PLANS = [
    {
        "id": "plan_standard",
        "name": "Standard",
        "slug": "standard",
        "description": "Essential services for emerging artists ready to grow their presence.",
        "price_monthly": 499,
        "price_yearly": 4990,
        "features": [
            "Monthly content calendar",
            "Social media management (2 platforms)",
            "Basic analytics reporting",
            "Email support (48h response)",
            "Asset library access",
        ],
        "deliverables": [
            {"name": "Social posts", "count": 12},
            {"name": "Story designs", "count": 8},
            {"name": "Monthly report", "count": 1},
        ],
        "sessions_per_month": 1,
        "response_sla": "48 hours",
        "is_popular": False,
        "sort_order": 1,
    },
    {
        "id": "plan_premium",
        "name": "Premium",
        "slug": "premium",
        "description": "Comprehensive support for artists ready to level up their career.",
        "price_monthly": 999,
        "price_yearly": 9990,
        "features": [
            "Everything in Standard",
            "Social media management (4 platforms)",
            "Spotify playlist pitching",
            "Press release writing",
            "Priority support (24h response)",
            "Dedicated account manager",
            "Bi-weekly strategy calls",
        ],
        "deliverables": [
            {"name": "Social posts", "count": 24},
            {"name": "Story designs", "count": 16},
            {"name": "Reels/TikToks", "count": 4},
            {"name": "Press releases", "count": 2},
            {"name": "Monthly report", "count": 1},
        ],
        "sessions_per_month": 2,
        "response_sla": "24 hours",
        "is_popular": True,
        "sort_order": 2,
    },
    {
        "id": "plan_deluxe",
        "name": "Deluxe",
        "slug": "deluxe",
        "description": "Full-service agency partnership for established artists.",
        "price_monthly": 2499,
        "price_yearly": 24990,
        "features": [
            "Everything in Premium",
            "Full social media takeover",
            "Spotify campaign management",
            "PR & media outreach",
            "Influencer partnerships",
            "Ad campaign management",
            "VIP support (same-day response)",
            "Weekly strategy calls",
            "Exclusive industry connections",
        ],
        "deliverables": [
            {"name": "Social posts", "count": 40},
            {"name": "Story designs", "count": 30},
            {"name": "Reels/TikToks", "count": 8},
            {"name": "Press releases", "count": 4},
            {"name": "Blog features", "count": 2},
            {"name": "Monthly report", "count": 1},
        ],
        "sessions_per_month": 4,
        "response_sla": "Same day",
        "is_popular": False,
        "sort_order": 3,
    },
]

# (slug, name, category, description, price, delivery_days, scope)
_ADDONS = [
    (
        "ig-audit",
        "Instagram Audit & Strategy",
        "social",
        "Deep-dive analysis of your Instagram presence with actionable growth strategy.",
        299,
        5,
        [
            "Profile optimization recommendations",
            "Content strategy plan",
            "Hashtag research",
            "Competitor analysis",
            "Growth roadmap",
        ],
    ),
    (
        "tiktok-launch",
        "TikTok Launch Package",
        "social",
        "Everything you need to launch and grow on TikTok.",
        599,
        7,
        [
            "Account setup & optimization",
            "10 video concepts",
            "Trending audio strategy",
            "Posting schedule",
            "First 5 video scripts",
        ],
    ),
    (
        "spotify-optimization",
        "Spotify Profile Optimization",
        "spotify",
        "Maximize your Spotify presence for playlist consideration.",
        199,
        3,
        [
            "Artist bio writing",
            "Profile image recommendations",
            "Canvas strategy",
            "Playlist pitch template",
            "About section optimization",
        ],
    ),
    (
        "playlist-pitching",
        "Playlist Pitching Campaign",
        "spotify",
        "Professional pitching to 50+ independent playlist curators.",
        399,
        14,
        [
            "Curator research",
            "Personalized pitches to 50+ playlists",
            "Follow-up management",
            "Placement report",
            "Playlist tracker access",
        ],
    ),
    (
        "visual-identity",
        "Visual Identity Package",
        "branding",
        "Complete visual branding for your artist project.",
        1299,
        14,
        [
            "Logo design (3 concepts)",
            "Color palette",
            "Typography system",
            "Social media templates",
            "Press kit template",
            "Brand guidelines PDF",
        ],
    ),
    (
        "press-release",
        "Press Release + Distribution",
        "pr",
        "Professional press release with distribution to music media.",
        349,
        5,
        [
            "Professionally written release",
            "Distribution to 100+ outlets",
            "Media list targeting",
            "Follow-up emails",
            "Coverage report",
        ],
    ),
    (
        "spotify-ads",
        "Spotify Ad Campaign",
        "ads",
        "Managed Spotify advertising campaign for your release.",
        699,
        30,
        [
            "Ad creative development",
            "Audience targeting setup",
            "Campaign management (30 days)",
            "$300 ad spend included",
            "Performance reporting",
        ],
    ),
    (
        "release-strategy",
        "Release Strategy Session",
        "strategy",
        "90-minute strategy session for your upcoming release.",
        249,
        1,
        [
            "Pre-call questionnaire",
            "90-minute video call",
            "Release timeline",
            "Marketing checklist",
            "Recording of session",
            "Follow-up notes",
        ],
    ),
]

# (title, status, priority, due offset in days)
_RETAINER_DELIVERABLES = [
    ("Week 1 Social Posts (6x)", "approved", "medium", -8),
    ("Week 1 Stories (4x)", "approved", "medium", -8),
    ("Week 2 Social Posts (6x)", "approved", "medium", -1),
    ("Week 2 Stories (4x)", "review", "medium", -1),
    ("Week 3 Social Posts (6x)", "in_progress", "medium", 6),
    ("Week 3 Stories (4x)", "not_started", "medium", 6),
    ("Monthly Reels (4x)", "in_progress", "high", 10),
    ("Monthly Analytics Report", "not_started", "low", 15),
]

_METRIC_TYPES = ("content_cadence", "campaign_progress", "completion_rate", "engagement")


def addon_id_for_slug(slug: str) -> str:
    return "addon_" + slug.replace("-", "_")


def _seed_catalog(conn: Connection, *, now: datetime) -> None:
    for plan in _PLANS:
        conn.execute(
            insert(PlanModel.__table__).values(active=True, created_at=now - timedelta(days=365), **plan)
        )

    for index, (slug, name, category, description, price, delivery_days, scope) in enumerate(_ADDONS):
        conn.execute(
            insert(AddonModel.__table__).values(
                id=addon_id_for_slug(slug),
                name=name,
                slug=slug,
                category=category,
                description=description,
                price=price,
                delivery_days=delivery_days,
                scope=scope,
                requirements=_ADDON_REQUIREMENTS,
                active=True,
                sort_order=index + 1,
                created_at=now - timedelta(days=180),
            )
        )


def _seed_accounts(conn: Connection, *, now: datetime) -> None:
    conn.execute(
        insert(UserModel.__table__),
        [
            {
                "id": ARTIST_USER_ID,
                "email": "artist@demo.com",
                "name": "Jordan Rivers",
                "avatar_url": "https://api.dicebear.com/7.x/avataaars/svg?seed=jordan",
                "role": "artist",
                "created_at": now - timedelta(days=90),
            },
            {
                "id": ADMIN_USER_ID,
                "email": "admin@demo.com",
                "name": "Alex Morgan",
                "avatar_url": "https://api.dicebear.com/7.x/avataaars/svg?seed=alex",
                "role": "admin",
                "created_at": now - timedelta(days=180),
            },
        ],
    )
    conn.execute(
        insert(ArtistProfileModel.__table__).values(
            id=str(uuid4()),
            user_id=ARTIST_USER_ID,
            genre="Indie Pop / Electronic",
            bio="Emerging indie-electronic artist blending dreamy synths with heartfelt lyrics.",
            goals=["Release EP by Q2", "Reach 50k monthly listeners", "Book 10 live shows"],
            social_links={
                "spotify": "https://spotify.com/artist/demo",
                "instagram": "@jordanrivers",
                "tiktok": "@jordanriversmusic",
            },
            monthly_listeners=23450,
            followers=15200,
            created_at=now - timedelta(days=90),
        )
    )
    conn.execute(
        insert(SubscriptionModel.__table__).values(
            id=str(uuid4()),
            user_id=ARTIST_USER_ID,
            plan_id="plan_premium",
            status="active",
            current_period_start=now - timedelta(days=15),
            current_period_end=now + timedelta(days=15),
            created_at=now - timedelta(days=60),
        )
    )


def _seed_workspace(conn: Connection, *, now: datetime) -> None:
    project_id = str(uuid4())
    approved = sum(1 for _, status, _, _ in _RETAINER_DELIVERABLES if status == "approved")
    total = len(_RETAINER_DELIVERABLES)
    conn.execute(
        insert(ProjectModel.__table__).values(
            id=project_id,
            user_id=ARTIST_USER_ID,
            title="Monthly Retainer",
            description="Premium plan deliverables for the current period",
            type="subscription",
            status="active",
            progress=(200 * approved + total) // (2 * total),
            start_date=now - timedelta(days=15),
            due_date=now + timedelta(days=15),
            meta={"planId": "plan_premium"},
            created_at=now - timedelta(days=15),
        )
    )
    for index, (title, status, priority, due_offset) in enumerate(_RETAINER_DELIVERABLES):
        conn.execute(
            insert(DeliverableModel.__table__).values(
                id=str(uuid4()),
                project_id=project_id,
                title=title,
                description=f"Deliverable for {title}",
                status=status,
                priority=priority,
                due_date=now + timedelta(days=due_offset),
                completed_at=now - timedelta(days=1) if status == "approved" else None,
                assigned_to=ADMIN_USER_ID,
                meta={},
                sort_order=index,
                created_at=now - timedelta(days=15),
            )
        )

    conn.execute(
        insert(MessageModel.__table__),
        [
            {
                "id": str(uuid4()),
                "project_id": project_id,
                "author_id": ADMIN_USER_ID,
                "content": "Content is looking strong. Engagement on last week's posts was up 23%!",
                "read_at": now - timedelta(days=1),
                "created_at": now - timedelta(days=3),
            },
            {
                "id": str(uuid4()),
                "project_id": project_id,
                "author_id": ARTIST_USER_ID,
                "content": "That's incredible! The new content strategy is really working.",
                "read_at": None,
                "created_at": now - timedelta(days=2),
            },
        ],
    )

    start_at = now + timedelta(days=3)
    conn.execute(
        insert(BookingModel.__table__).values(
            id=str(uuid4()),
            user_id=ARTIST_USER_ID,
            session_type="strategy",
            title="Quarterly Strategy Planning",
            description="Review goals and plan campaign priorities",
            start_at=start_at,
            end_at=start_at + timedelta(hours=1),
            status="scheduled",
            meeting_url="https://meet.example.com/artist-portal/strategy",
            created_at=now - timedelta(days=5),
        )
    )

    conn.execute(
        insert(NotificationModel.__table__),
        [
            {
                "id": str(uuid4()),
                "user_id": ARTIST_USER_ID,
                "type": "deliverable",
                "title": "Stories Ready for Review",
                "content": "Alex has uploaded the Week 2 stories.",
                "link_url": "/app/deliverables",
                "read_at": None,
                "created_at": now - timedelta(hours=2),
            },
            {
                "id": str(uuid4()),
                "user_id": ARTIST_USER_ID,
                "type": "booking",
                "title": "Upcoming Session",
                "content": "Reminder: Quarterly Strategy Planning is in three days.",
                "link_url": "/app/schedule",
                "read_at": now - timedelta(days=1),
                "created_at": now - timedelta(days=1),
            },
            {
                "id": str(uuid4()),
                "user_id": ADMIN_USER_ID,
                "type": "system",
                "title": "New Artist Signup",
                "content": "A new artist has signed up for the Premium plan.",
                "link_url": "/admin/artists",
                "read_at": None,
                "created_at": now - timedelta(days=1),
            },
        ],
    )

    conn.execute(
        insert(GoalModel.__table__),
        [
            {
                "id": str(uuid4()),
                "user_id": ARTIST_USER_ID,
                "title": "Weekly Posts",
                "type": "posts_per_week",
                "target": 6,
                "current": 4,
                "period": "weekly",
                "start_date": now - timedelta(days=7),
                "end_date": now,
                "created_at": now - timedelta(days=30),
            },
            {
                "id": str(uuid4()),
                "user_id": ARTIST_USER_ID,
                "title": "Monthly Deliverables",
                "type": "deliverables_per_month",
                "target": 20,
                "current": 13,
                "period": "monthly",
                "start_date": now - timedelta(days=15),
                "end_date": now + timedelta(days=15),
                "created_at": now - timedelta(days=30),
            },
        ],
    )

    metric_rows = []
    for week in range(12, -1, -1):
        date = now - timedelta(days=week * 7)
        values = {
            "content_cadence": 4 + (week * 5) % 8,
            "campaign_progress": min(100, 30 + (12 - week) * 6),
            "completion_rate": 70 + (week * 7) % 25,
            "engagement": round(2 + ((week * 13) % 40) / 10, 2),
        }
        for metric_type in _METRIC_TYPES:
            metric_rows.append(
                {
                    "id": str(uuid4()),
                    "user_id": ARTIST_USER_ID,
                    "type": metric_type,
                    "date": date,
                    "value": values[metric_type],
                    "meta": {},
                    "created_at": date,
                }
            )
    conn.execute(insert(MetricModel.__table__), metric_rows)


def seed_demo(engine: Engine, *, now: datetime | None = None) -> bool:
    """Insert demo catalog, accounts and workspace. No-op when the demo artist exists."""
    now = now or datetime.now(timezone.utc)
    with engine.begin() as conn:
        existing = conn.execute(
            select(UserModel.__table__.c.id).where(UserModel.__table__.c.id == ARTIST_USER_ID)
        ).first()
        if existing is not None:
            logger.info("seed_demo: skipped reason=already_seeded")
            return False
        _seed_catalog(conn, now=now)
        _seed_accounts(conn, now=now)
        _seed_workspace(conn, now=now)
    logger.info("seed_demo: completed plans=%s addons=%s", len(_PLANS), len(_ADDONS))
    return True


def main() -> None:
    from artist_portal.infrastructure.db.engine import create_schema, get_engine
    from artist_portal.shared.config import get_settings

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    engine = get_engine(settings.database_url)
    create_schema(engine)
    seed_demo(engine)


if __name__ == "__main__":
    main()
