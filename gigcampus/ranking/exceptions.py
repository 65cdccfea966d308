"""Custom exceptions for the Ranking & Achievement Engine."""


class RankingError(Exception):
    """Base exception for ranking engine errors."""

    def __init__(self, message: str, error_type: str = "ranking_error"):
        self.message = message
        self.error_type = error_type
        super().__init__(message)


class InvalidStatsError(RankingError):
    """Raised in strict mode when a stats snapshot breaks its constraints."""

    def __init__(self, violations: list[str]):
        super().__init__(
            f"Invalid user stats: {'; '.join(violations)}",
            "invalid_stats",
        )
        self.violations = violations


class UnknownBadgeError(RankingError):
    """Raised when a badge id is not in the catalog."""

    def __init__(self, badge_id: str):
        super().__init__(
            f"Badge '{badge_id}' not found",
            "badge_not_found",
        )
        self.badge_id = badge_id


class BadgeNotGrantableError(RankingError):
    """Raised when an external grant targets a badge decided from stats."""

    def __init__(self, badge_id: str):
        super().__init__(
            f"Badge '{badge_id}' is unlocked from user stats and cannot be granted directly",
            "badge_not_grantable",
        )
        self.badge_id = badge_id


class BadgeAlreadyAwardedError(RankingError):
    """Raised when a user already holds the badge being granted."""

    def __init__(self, user_id: str, badge_id: str):
        super().__init__(
            f"User '{user_id}' already holds badge '{badge_id}'",
            "badge_already_awarded",
        )
        self.user_id = user_id
        self.badge_id = badge_id
