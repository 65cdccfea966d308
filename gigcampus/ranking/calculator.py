"""Ranking calculation engine: stateless, deterministic, cacheable.

Score measures recent quality of work; level measures career accumulation
of badge points. The two are independent dimensions.
"""

from decimal import ROUND_HALF_UP, Decimal
from math import isqrt
from typing import Final

from .schemas import LevelProgress, Tier, UserStats

# Weights of the normalized score factors (sum to 1.0)
RANKING_WEIGHTS: Final[dict[str, float]] = {
    "average_rating": 0.25,  # quality of work
    "completion_rate": 0.20,
    "on_time_rate": 0.20,
    "repeat_client_rate": 0.15,  # client retention
    "profile_completeness": 0.10,
    "response_time": 0.10,  # communication speed
}

MAX_RATING: Final[float] = 5.0
RESPONSE_TIME_CAP_HOURS: Final[float] = 24.0

# Minimum score for each tier, highest first
TIER_THRESHOLDS: Final[list[tuple[float, Tier]]] = [
    (90.0, Tier.DIAMOND),
    (80.0, Tier.PLATINUM),
    (70.0, Tier.GOLD),
    (60.0, Tier.SILVER),
]

TIER_ORDER: Final[list[Tier]] = [
    Tier.BRONZE,
    Tier.SILVER,
    Tier.GOLD,
    Tier.PLATINUM,
    Tier.DIAMOND,
]

# Text colour class used by the ranking card
TIER_COLORS: Final[dict[Tier, str]] = {
    Tier.DIAMOND: "text-cyan-400",
    Tier.PLATINUM: "text-gray-300",
    Tier.GOLD: "text-yellow-500",
    Tier.SILVER: "text-gray-400",
    Tier.BRONZE: "text-amber-600",
}

# Finishing level n costs LEVEL_BASE_COST + LEVEL_STEP_COST * n (100, 150, 200, ...)
LEVEL_BASE_COST: Final[int] = 50
LEVEL_STEP_COST: Final[int] = 50

_TWO_PLACES = Decimal("0.01")


def _clamp(value: float, min_val: float = 0.0, max_val: float = 1.0) -> float:
    """Clamp a value to [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def _ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator clamped to [0, 1]; 0 when the denominator is not positive."""
    if denominator <= 0:
        return 0.0
    return _clamp(numerator / denominator)


def _round_half_up(value: float, places: Decimal = _TWO_PLACES) -> Decimal:
    return Decimal(repr(value)).quantize(places, rounding=ROUND_HALF_UP)


def normalized_factors(stats: UserStats) -> dict[str, float]:
    """Each score factor scaled to [0, 1].

    Out-of-range inputs are clamped: rating to [0, 5], response time to
    [0, inf), profile completeness to [0, 100], and every rate to [0, 1].
    Response time counts from the first snapshot: a user with no projects
    still earns it, so an all-zero snapshot scores 10.
    """
    rating = _clamp(stats.average_rating, 0.0, MAX_RATING)
    response_time = max(0.0, stats.response_time)
    completeness = _clamp(stats.profile_completeness, 0, 100)

    return {
        "average_rating": rating / MAX_RATING,
        "completion_rate": _ratio(stats.completed_projects, stats.total_projects),
        "on_time_rate": _ratio(stats.on_time_deliveries, stats.completed_projects),
        "repeat_client_rate": _ratio(stats.repeat_clients, stats.total_projects),
        "profile_completeness": completeness / 100,
        "response_time": max(0.0, 1 - response_time / RESPONSE_TIME_CAP_HOURS),
    }


def score_breakdown(stats: UserStats) -> dict[str, float]:
    """Weighted contribution of each factor, in score points (unrounded)."""
    factors = normalized_factors(stats)
    return {
        name: factors[name] * weight * 100
        for name, weight in RANKING_WEIGHTS.items()
    }


def calculate_ranking_score(stats: UserStats) -> float:
    """Composite reputation score in [0, 100], rounded half-up to two decimals.

    Pure function, no side effects.
    """
    raw = sum(score_breakdown(stats).values())
    return _clamp(float(_round_half_up(raw)), 0.0, 100.0)


def get_tier(score: float) -> Tier:
    """Tier for a score. Thresholds are inclusive lower bounds."""
    for threshold, tier in TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return Tier.BRONZE


def tier_rank(tier: Tier) -> int:
    """0-based ordinal of a tier (Bronze is 0)."""
    return TIER_ORDER.index(Tier(tier))


def level_cost(level: int) -> int:
    """Points needed to finish ``level`` and reach ``level + 1``."""
    return LEVEL_BASE_COST + LEVEL_STEP_COST * level


def points_for_level(level: int) -> int:
    """Cumulative points threshold for a given level. Quadratic scaling.

    Level 1: 0 points (everyone starts here)
    Level 2: 100
    Level 3: 250
    Level 4: 450
    Level 5: 700
    """
    if level <= 1:
        return 0
    steps = level - 1
    return 75 * steps + 25 * steps * steps


def calculate_level(points: int) -> int:
    """Current level given cumulative points. Negative points count as 0."""
    points = max(0, int(points))
    # Solve 25*m^2 + 75*m <= points for the number of completed levels m
    steps = (isqrt(5625 + 100 * points) - 75) // 50
    level = steps + 1
    # isqrt floors; step to the exact boundary
    while points_for_level(level + 1) <= points:
        level += 1
    while level > 1 and points_for_level(level) > points:
        level -= 1
    return level


def get_points_for_next_level(points: int) -> LevelProgress:
    """Progress inside the current level."""
    points = max(0, int(points))
    level = calculate_level(points)
    current = points - points_for_level(level)
    required = level_cost(level)
    percent = int(_round_half_up(100 * current / required, Decimal("1")))
    return LevelProgress(
        current=current,
        required=required,
        progress_percent=min(100, percent),
    )
