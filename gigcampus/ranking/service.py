"""RankingService: composes score, tier, level, and badges into a ranking card."""

from collections.abc import Sequence

from gigcampus.shared.utils.datetime_utils import Clock, utcnow
from gigcampus.shared.utils.logging import get_logger, user_context

from . import badges as badge_catalog
from .calculator import (
    calculate_level,
    calculate_ranking_score,
    get_points_for_next_level,
    get_tier,
)
from .config import RankingSettings, get_settings
from .exceptions import InvalidStatsError
from .schemas import AwardedBadge, RankingUpdate, UserRanking, UserStats

logger = get_logger(__name__)


class RankingService:
    """Builds and refreshes user rankings.

    Stateless apart from its settings and clock: callers pass in the stats
    snapshot and the badges already held, and persist whatever comes back.
    """

    def __init__(
        self,
        settings: RankingSettings | None = None,
        clock: Clock = utcnow,
    ):
        self.settings = settings or get_settings()
        self.clock = clock

    def _check_stats(self, stats: UserStats) -> None:
        """Apply the input policy: reject in strict mode, otherwise note the clamp."""
        violations = stats.violations()
        if not violations:
            return
        if self.settings.strict_stats:
            logger.warning("stats_rejected", violations=violations)
            raise InvalidStatsError(violations)
        logger.warning("stats_clamped", violations=violations)

    def build_ranking(
        self,
        user_id: str,
        stats: UserStats,
        badges: Sequence[AwardedBadge],
        rank: int | None = None,
    ) -> UserRanking:
        """Snapshot view of a user from their stats and held badges."""
        with user_context(user_id):
            self._check_stats(stats)
            return self._assemble(user_id, stats, badges, rank)

    def _assemble(
        self,
        user_id: str,
        stats: UserStats,
        badges: Sequence[AwardedBadge],
        rank: int | None,
    ) -> UserRanking:
        score = calculate_ranking_score(stats)
        points = badge_catalog.total_points(badges)
        return UserRanking(
            user_id=user_id,
            rank=rank,
            score=score,
            level=calculate_level(points),
            points=points,
            badges=list(badges),
            stats=stats,
            tier=get_tier(score),
            progress=get_points_for_next_level(points),
        )

    def refresh(
        self,
        user_id: str,
        stats: UserStats,
        badges: Sequence[AwardedBadge],
        rank: int | None = None,
    ) -> RankingUpdate:
        """Unlock any newly earned badges and rebuild the ranking."""
        with user_context(user_id):
            self._check_stats(stats)
            unlocked = badge_catalog.check_unlocked_badges(stats, badges, now=self.clock)
            for badge in unlocked:
                logger.info("badge_unlocked", badge_id=badge.id, points=badge.points)
            return self._update(user_id, stats, badges, unlocked, rank)

    def grant_external(
        self,
        user_id: str,
        badge_id: str,
        stats: UserStats,
        badges: Sequence[AwardedBadge],
        rank: int | None = None,
    ) -> RankingUpdate:
        """Award an externally gated badge and rebuild the ranking."""
        with user_context(user_id):
            self._check_stats(stats)
            awarded = badge_catalog.grant_external(user_id, badge_id, badges, now=self.clock)
            return self._update(user_id, stats, badges, [awarded], rank)

    def _update(
        self,
        user_id: str,
        stats: UserStats,
        badges: Sequence[AwardedBadge],
        unlocked: list[AwardedBadge],
        rank: int | None,
    ) -> RankingUpdate:
        previous_level = calculate_level(badge_catalog.total_points(badges))
        ranking = self._assemble(user_id, stats, [*badges, *unlocked], rank)
        level_up = ranking.level > previous_level

        logger.info(
            "ranking_refreshed",
            score=ranking.score,
            tier=ranking.tier.value,
            points=ranking.points,
            level=ranking.level,
            level_up=level_up,
            badges_unlocked=[b.id for b in unlocked],
        )

        return RankingUpdate(
            ranking=ranking,
            badges_unlocked=unlocked,
            points_awarded=badge_catalog.total_points(unlocked),
            previous_level=previous_level,
            level_up=level_up,
        )
