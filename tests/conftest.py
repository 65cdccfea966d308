"""Global pytest fixtures for the GigCampus ranking engine.

This module provides shared fixtures for testing including:
- A pinned clock for deterministic badge timestamps
- Canonical stats snapshots (brand-new, first completion, perfect)
- Ranking settings and services in lenient and strict mode
"""

from datetime import datetime, timezone

import pytest
import structlog
from structlog.testing import LogCapture

from gigcampus.ranking.config import RankingSettings
from gigcampus.ranking.schemas import UserStats
from gigcampus.ranking.service import RankingService

FIXED_NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


# ===========================================
# CLOCK FIXTURES
# ===========================================


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock():
    """Zero-argument clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


# ===========================================
# STATS FIXTURES
# ===========================================


@pytest.fixture
def zero_stats() -> UserStats:
    return UserStats()


@pytest.fixture
def first_completion_stats() -> UserStats:
    return UserStats(
        total_projects=1,
        completed_projects=1,
        on_time_deliveries=1,
        average_rating=5.0,
        total_reviews=1,
        repeat_clients=0,
        total_earnings=150.0,
        response_time=2.0,
        profile_completeness=80,
    )


@pytest.fixture
def perfect_stats() -> UserStats:
    return UserStats(
        total_projects=10,
        completed_projects=10,
        on_time_deliveries=10,
        repeat_clients=10,
        total_reviews=10,
        average_rating=5.0,
        total_earnings=1000.0,
        response_time=0.0,
        profile_completeness=100,
    )


# ===========================================
# SERVICE FIXTURES
# ===========================================


@pytest.fixture
def lenient_settings() -> RankingSettings:
    return RankingSettings(strict_stats=False)


@pytest.fixture
def strict_settings() -> RankingSettings:
    return RankingSettings(strict_stats=True)


@pytest.fixture
def service(lenient_settings, clock) -> RankingService:
    return RankingService(settings=lenient_settings, clock=clock)


@pytest.fixture
def strict_service(strict_settings, clock) -> RankingService:
    return RankingService(settings=strict_settings, clock=clock)


# ===========================================
# LOGGING FIXTURES
# ===========================================


@pytest.fixture
def context_logs():
    """Captured log entries with bound context variables merged in."""
    capture = LogCapture()
    old_config = structlog.get_config()
    structlog.configure(processors=[structlog.contextvars.merge_contextvars, capture])
    try:
        yield capture.entries
    finally:
        structlog.configure(**old_config)
        structlog.contextvars.clear_contextvars()


@pytest.fixture
def reset_structlog():
    """Restore structlog defaults after a test that configures logging."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
