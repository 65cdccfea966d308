"""Tests for shared logging and clock helpers."""

from datetime import datetime, timedelta, timezone

import pytest
import structlog
from structlog.testing import capture_logs

from gigcampus import __version__
from gigcampus.ranking.config import RankingSettings
from gigcampus.shared.utils.datetime_utils import ensure_utc, utcnow
from gigcampus.shared.utils.logging import (
    bind_user_context,
    clear_user_context,
    configure_logging,
    get_logger,
    user_context,
)


class TestDatetimeUtils:
    def test_utcnow_is_aware(self):
        assert utcnow().utcoffset() == timedelta(0)

    def test_ensure_utc_naive(self):
        naive = datetime(2026, 3, 1, 8, 0)
        assert ensure_utc(naive) == datetime(2026, 3, 1, 8, 0, tzinfo=timezone.utc)

    def test_ensure_utc_converts(self):
        est = datetime(2026, 3, 1, 8, 0, tzinfo=timezone(timedelta(hours=-5)))
        converted = ensure_utc(est)
        assert converted.tzinfo == timezone.utc
        assert converted.hour == 13


class TestLoggingContext:
    def test_bind_and_clear_user(self):
        bind_user_context("user-42")
        try:
            assert structlog.contextvars.get_contextvars()["user_id"] == "user-42"
        finally:
            clear_user_context()
        assert "user_id" not in structlog.contextvars.get_contextvars()

    def test_get_logger_logs_structured_events(self):
        with capture_logs() as logs:
            get_logger("test").info("badge_unlocked", badge_id="first-project")
        assert logs == [{"event": "badge_unlocked", "badge_id": "first-project", "log_level": "info"}]

    def test_user_context_scopes_binding(self):
        with user_context("user-7"):
            assert structlog.contextvars.get_contextvars()["user_id"] == "user-7"
        assert "user_id" not in structlog.contextvars.get_contextvars()

    def test_user_context_clears_on_error(self):
        with pytest.raises(RuntimeError):
            with user_context("user-7"):
                raise RuntimeError("boom")
        assert "user_id" not in structlog.contextvars.get_contextvars()


@pytest.mark.usefixtures("reset_structlog")
class TestConfigureLogging:
    def test_binds_service_and_version(self):
        configure_logging(RankingSettings(service_name="ranking-worker"))
        context = structlog.contextvars.get_contextvars()
        assert context == {"service": "ranking-worker", "engine_version": __version__}

    def test_json_renderer_by_default(self):
        configure_logging(RankingSettings())
        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)

    def test_console_renderer_when_json_disabled(self):
        configure_logging(RankingSettings(log_json=False))
        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)

    def test_falls_back_to_environment_settings(self, monkeypatch):
        monkeypatch.setenv("RANKING_SERVICE_NAME", "from-env")
        monkeypatch.setattr("gigcampus.ranking.config.get_settings", lambda: RankingSettings())
        configure_logging()
        assert structlog.contextvars.get_contextvars()["service"] == "from-env"
