"""Pydantic v2 schemas for the Ranking & Achievement Engine."""

from datetime import datetime
from enum import Enum

from pydantic import Field

from gigcampus.shared.schemas.base import BaseSchema, FrozenSchema


class Tier(str, Enum):
    """Coarse score band, lowest to highest."""

    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"
    DIAMOND = "Diamond"


class Rarity(str, Enum):
    """Display rarity of a badge. Has no effect on points or predicates."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


class UserStats(FrozenSchema):
    """Performance snapshot of one freelancer.

    Produced by the marketplace; the engine never mutates it. Every field
    defaults to zero, so ``UserStats()`` is a brand-new user. The two
    optional counters are ``None`` when the marketplace does not track them.
    """

    total_projects: int = 0
    completed_projects: int = 0
    on_time_deliveries: int = 0
    repeat_clients: int = 0
    total_reviews: int = 0
    average_rating: float = 0.0
    total_earnings: float = 0.0
    response_time: float = 0.0  # hours
    profile_completeness: int = 0  # percentage
    revisions_requested: int | None = None
    fast_response_count: int | None = None

    def violations(self) -> list[str]:
        """List every range or consistency constraint this snapshot breaks."""
        problems: list[str] = []

        for name in (
            "total_projects",
            "completed_projects",
            "on_time_deliveries",
            "repeat_clients",
            "total_reviews",
            "revisions_requested",
            "fast_response_count",
        ):
            value = getattr(self, name)
            if value is not None and value < 0:
                problems.append(f"{name} must be non-negative (got {value})")

        if not 0 <= self.average_rating <= 5:
            problems.append(f"average_rating must be within [0, 5] (got {self.average_rating})")
        if self.total_earnings < 0:
            problems.append(f"total_earnings must be non-negative (got {self.total_earnings})")
        if self.response_time < 0:
            problems.append(f"response_time must be non-negative (got {self.response_time})")
        if not 0 <= self.profile_completeness <= 100:
            problems.append(
                f"profile_completeness must be within [0, 100] (got {self.profile_completeness})"
            )

        if self.completed_projects > self.total_projects:
            problems.append("completed_projects exceeds total_projects")
        if self.on_time_deliveries > self.completed_projects:
            problems.append("on_time_deliveries exceeds completed_projects")
        if self.repeat_clients > self.total_projects:
            problems.append("repeat_clients exceeds total_projects")

        return problems


class Badge(FrozenSchema):
    """A catalog entry. Shared by reference; never modified."""

    id: str
    name: str
    description: str
    icon: str
    rarity: Rarity
    requirement: str
    points: int = Field(ge=0)

    def awarded(self, unlocked_at: datetime) -> "AwardedBadge":
        """Stamp this badge as unlocked at ``unlocked_at``."""
        return AwardedBadge(**self.model_dump(), unlocked_at=unlocked_at)


class AwardedBadge(Badge):
    """A badge held by a user."""

    unlocked_at: datetime


class LevelProgress(FrozenSchema):
    """Points earned inside the current level and the cost to finish it."""

    current: int
    required: int
    progress_percent: int = Field(ge=0, le=100)


class UserRanking(BaseSchema):
    """Aggregate ranking card for one user."""

    user_id: str
    rank: int | None = None  # assigned by the caller after sorting scores
    score: float
    level: int
    points: int
    badges: list[AwardedBadge] = Field(default_factory=list)
    stats: UserStats
    tier: Tier
    progress: LevelProgress


class RankingUpdate(BaseSchema):
    """Result of refreshing a user's ranking."""

    ranking: UserRanking
    badges_unlocked: list[AwardedBadge] = Field(default_factory=list)
    points_awarded: int = 0
    previous_level: int
    level_up: bool = False
