"""Badge definitions and unlock logic.

Badges are permanent achievements. Each catalog row pairs a definition with
the predicate over ``UserStats`` that unlocks it; rows without a predicate
are externally gated and only reach a user through ``grant_external``.
Adding a badge is a single ``_register`` call.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType

from gigcampus.shared.utils.datetime_utils import Clock, ensure_utc, utcnow
from gigcampus.shared.utils.logging import get_logger

from .exceptions import BadgeAlreadyAwardedError, BadgeNotGrantableError, UnknownBadgeError
from .schemas import AwardedBadge, Badge, Rarity, UserStats

logger = get_logger(__name__)

Predicate = Callable[[UserStats], bool]


@dataclass(frozen=True)
class BadgeRule:
    """A catalog row: the badge and what unlocks it."""

    badge: Badge
    predicate: Predicate | None = None

    @property
    def externally_gated(self) -> bool:
        return self.predicate is None


# Registry of all badges, in catalog order
_CATALOG: dict[str, BadgeRule] = {}

# Read-only view shared with callers
BADGE_CATALOG = MappingProxyType(_CATALOG)


def _register(
    badge_id: str,
    name: str,
    description: str,
    icon: str,
    rarity: Rarity,
    requirement: str,
    points: int,
    predicate: Predicate | None,
) -> BadgeRule:
    rule = BadgeRule(
        badge=Badge(
            id=badge_id,
            name=name,
            description=description,
            icon=icon,
            rarity=rarity,
            requirement=requirement,
            points=points,
        ),
        predicate=predicate,
    )
    _CATALOG[badge_id] = rule
    return rule


def _perfectionist(stats: UserStats) -> bool:
    # Not awarded until the marketplace reports revision counts
    return (
        stats.revisions_requested is not None
        and stats.revisions_requested == 0
        and stats.completed_projects >= 20
    )


def _lightning_fast(stats: UserStats) -> bool:
    return stats.fast_response_count is not None and stats.fast_response_count >= 50


# ── Completion ──
_register(
    "first-project", "First Steps", "Complete your first project", "🎯",
    Rarity.COMMON, "Complete 1 project", 50,
    lambda s: s.completed_projects >= 1,
)
_register(
    "project-veteran", "Project Veteran", "Complete 10 projects successfully", "🏆",
    Rarity.UNCOMMON, "Complete 10 projects", 200,
    lambda s: s.completed_projects >= 10,
)
_register(
    "project-master", "Project Master", "Complete 50 projects successfully", "👑",
    Rarity.RARE, "Complete 50 projects", 500,
    lambda s: s.completed_projects >= 50,
)

# ── Quality ──
_register(
    "five-star", "Five Star Performer", "Maintain 5.0 rating across 10+ projects", "⭐",
    Rarity.RARE, "5.0 rating with 10+ reviews", 300,
    lambda s: s.average_rating == 5.0 and s.total_reviews >= 10,
)
_register(
    "client-favorite", "Client Favorite", "Maintain 4.8+ rating across 25+ projects", "💖",
    Rarity.EPIC, "4.8+ rating with 25+ reviews", 400,
    lambda s: s.average_rating >= 4.8 and s.total_reviews >= 25,
)

# ── Speed ──
_register(
    "speed-demon", "Speed Demon", "Deliver 5 projects ahead of deadline", "⚡",
    Rarity.UNCOMMON, "Deliver 5 projects early", 150,
    lambda s: s.on_time_deliveries >= 5,
)
_register(
    "lightning-fast", "Lightning Fast", "Respond to messages within 1 hour (50 times)", "🚀",
    Rarity.RARE, "Quick response 50 times", 250,
    _lightning_fast,
)

# ── Loyalty ──
_register(
    "loyal-freelancer", "Loyal Freelancer", "Work with 3 repeat clients", "🤝",
    Rarity.UNCOMMON, "3 repeat clients", 200,
    lambda s: s.repeat_clients >= 3,
)
_register(
    "client-magnet", "Client Magnet", "Work with 10 repeat clients", "🧲",
    Rarity.EPIC, "10 repeat clients", 600,
    lambda s: s.repeat_clients >= 10,
)

# ── Earnings ──
_register(
    "first-earnings", "First Paycheck", "Earn your first $100", "💰",
    Rarity.COMMON, "Earn $100", 75,
    lambda s: s.total_earnings >= 100,
)
_register(
    "high-earner", "High Earner", "Earn $5,000 total", "💎",
    Rarity.RARE, "Earn $5,000 total", 400,
    lambda s: s.total_earnings >= 5000,
)
_register(
    "top-earner", "Top Earner", "Earn $25,000 total", "👑",
    Rarity.LEGENDARY, "Earn $25,000 total", 1000,
    lambda s: s.total_earnings >= 25000,
)

# ── Special ──
_register(
    "perfectionist", "Perfectionist", "Complete 20 projects with 0 revisions", "✨",
    Rarity.LEGENDARY, "20 projects, no revisions", 800,
    _perfectionist,
)
_register(
    "early-adopter", "Early Adopter", "One of the first 100 users on GigCampus", "🌟",
    Rarity.LEGENDARY, "Join in first 100 users", 500,
    None,
)
_register(
    "community-helper", "Community Helper", "Help 10 new freelancers get started", "🤗",
    Rarity.EPIC, "Mentor 10 new users", 350,
    None,
)


def _held_ids(current_badges: Iterable[str | Badge]) -> set[str]:
    return {b if isinstance(b, str) else b.id for b in current_badges}


def get_all_badges() -> list[Badge]:
    """Every catalog badge, in catalog order."""
    return [rule.badge for rule in _CATALOG.values()]


def get_badge(badge_id: str) -> Badge:
    rule = _CATALOG.get(badge_id)
    if rule is None:
        raise UnknownBadgeError(badge_id)
    return rule.badge


def check_unlocked_badges(
    stats: UserStats,
    current_badges: Iterable[str | Badge],
    *,
    now: Clock = utcnow,
) -> list[AwardedBadge]:
    """Check which badges are newly earned.

    ``current_badges`` holds the ids (or badge objects) the user already
    has; ids missing from the catalog are ignored. Returns the newly
    unlocked badges in catalog order, all stamped with the same time.
    Externally gated badges are never returned.
    """
    held = _held_ids(current_badges)
    unlocked_at: datetime | None = None
    newly_unlocked: list[AwardedBadge] = []

    for badge_id, rule in _CATALOG.items():
        if badge_id in held or rule.predicate is None:
            continue
        if not rule.predicate(stats):
            continue
        if unlocked_at is None:
            unlocked_at = ensure_utc(now())
        newly_unlocked.append(rule.badge.awarded(unlocked_at))

    return newly_unlocked


def grant_external(
    user_id: str,
    badge_id: str,
    current_badges: Iterable[str | Badge],
    *,
    now: Clock = utcnow,
) -> AwardedBadge:
    """Award an externally gated badge (e.g. early-adopter) to a user.

    Raises:
        UnknownBadgeError: badge_id is not in the catalog
        BadgeNotGrantableError: the badge is unlocked from stats instead
        BadgeAlreadyAwardedError: the user already holds it
    """
    rule = _CATALOG.get(badge_id)
    if rule is None:
        raise UnknownBadgeError(badge_id)
    if not rule.externally_gated:
        raise BadgeNotGrantableError(badge_id)
    if badge_id in _held_ids(current_badges):
        raise BadgeAlreadyAwardedError(user_id, badge_id)

    awarded = rule.badge.awarded(ensure_utc(now()))
    logger.info(
        "badge_granted_externally",
        user_id=user_id,
        badge_id=badge_id,
        points=awarded.points,
    )
    return awarded


def total_points(badges: Iterable[Badge]) -> int:
    """Cumulative points carried by a collection of awarded badges."""
    return sum(badge.points for badge in badges)
