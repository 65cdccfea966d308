"""Ranking & Achievement Engine.

Composite reputation score, tier bands, the level curve, and badge unlocks
for GigCampus freelancers.
"""

from gigcampus.ranking.badges import (
    BADGE_CATALOG,
    BadgeRule,
    check_unlocked_badges,
    get_all_badges,
    get_badge,
    grant_external,
    total_points,
)
from gigcampus.ranking.calculator import (
    RANKING_WEIGHTS,
    TIER_COLORS,
    calculate_level,
    calculate_ranking_score,
    get_points_for_next_level,
    get_tier,
    points_for_level,
    score_breakdown,
    tier_rank,
)
from gigcampus.ranking.exceptions import (
    BadgeAlreadyAwardedError,
    BadgeNotGrantableError,
    InvalidStatsError,
    RankingError,
    UnknownBadgeError,
)
from gigcampus.ranking.schemas import (
    AwardedBadge,
    Badge,
    LevelProgress,
    RankingUpdate,
    Rarity,
    Tier,
    UserRanking,
    UserStats,
)
from gigcampus.ranking.service import RankingService

__all__ = [
    "BADGE_CATALOG",
    "RANKING_WEIGHTS",
    "TIER_COLORS",
    "AwardedBadge",
    "Badge",
    "BadgeAlreadyAwardedError",
    "BadgeNotGrantableError",
    "BadgeRule",
    "InvalidStatsError",
    "LevelProgress",
    "RankingError",
    "RankingService",
    "RankingUpdate",
    "Rarity",
    "Tier",
    "UnknownBadgeError",
    "UserRanking",
    "UserStats",
    "calculate_level",
    "calculate_ranking_score",
    "check_unlocked_badges",
    "get_all_badges",
    "get_badge",
    "get_points_for_next_level",
    "get_tier",
    "grant_external",
    "points_for_level",
    "score_breakdown",
    "tier_rank",
    "total_points",
]
