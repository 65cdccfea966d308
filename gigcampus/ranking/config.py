"""Configuration for the Ranking & Achievement Engine."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class RankingSettings(BaseSettings):
    """Settings for ranking computation and its logging."""

    model_config = {"env_prefix": "RANKING_", "case_sensitive": False}

    # Input policy
    strict_stats: bool = Field(
        default=False,
        description="Reject out-of-range or inconsistent stats instead of clamping them",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=True,
        description="Emit JSON log lines; console format when false",
    )
    service_name: str = Field(
        default="gigcampus-ranking",
        description="Service name bound into every log entry",
    )


@lru_cache
def get_settings() -> RankingSettings:
    """Get cached ranking settings."""
    return RankingSettings()

