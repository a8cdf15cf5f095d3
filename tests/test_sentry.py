"""Tests for Sentry error tracking setup and request tagging."""

from unittest.mock import MagicMock, patch

import pytest
from httpx import AsyncClient
from sentry_sdk.utils import BadDsn

from interviewtrainer.core import sentry
from interviewtrainer.core.sentry import filter_sensitive_data, init_sentry

VALID_DSN = "https://public@o0.ingest.sentry.io/1"


@pytest.fixture(autouse=True)
def fresh_sentry_state(monkeypatch):
    """Each test starts with Sentry not yet initialized."""
    monkeypatch.setattr(sentry, "_sentry_initialized", False)


class TestInitSentry:
    """Test init_sentry gating and idempotence."""

    def test_disabled_without_dsn(self, monkeypatch):
        monkeypatch.delenv("SENTRY_DSN", raising=False)

        with patch("interviewtrainer.core.sentry.sentry_sdk.init") as sdk_init:
            assert init_sentry() is False

        sdk_init.assert_not_called()

    @pytest.mark.parametrize("dsn", ["xxx", "changeme", "   "])
    def test_disabled_with_placeholder_dsn(self, monkeypatch, dsn: str):
        monkeypatch.setenv("SENTRY_DSN", dsn)

        with patch("interviewtrainer.core.sentry.sentry_sdk.init") as sdk_init:
            assert init_sentry() is False

        sdk_init.assert_not_called()

    def test_enabled_with_valid_dsn_only_once(self, monkeypatch):
        monkeypatch.setenv("SENTRY_DSN", VALID_DSN)
        monkeypatch.setenv("ENVIRONMENT", "staging")

        with patch("interviewtrainer.core.sentry.sentry_sdk.init") as sdk_init:
            assert init_sentry() is True
            assert init_sentry() is True

        sdk_init.assert_called_once()
        kwargs = sdk_init.call_args.kwargs
        assert kwargs["dsn"] == VALID_DSN
        assert kwargs["environment"] == "staging"
        assert kwargs["send_default_pii"] is False
        assert kwargs["traces_sample_rate"] == 0.0
        assert kwargs["before_send"] is filter_sensitive_data

    def test_bad_dsn_disables_tracking(self, monkeypatch):
        monkeypatch.setenv("SENTRY_DSN", "https://not-a-dsn")

        with patch("interviewtrainer.core.sentry.sentry_sdk.init", side_effect=BadDsn("bad")):
            assert init_sentry() is False

        assert sentry._sentry_initialized is False


class TestFilterSensitiveData:
    """Test SQL never leaves the process in a Sentry event."""

    def test_drops_extras_mentioning_sql(self):
        event = {
            "extra": {
                "sql_statement": "UPDATE interview_sessions ...",
                "db_error": "sqlalchemy.exc.OperationalError",
                "session_id": "abc",
            }
        }

        filtered = filter_sensitive_data(event, {})

        assert filtered["extra"] == {"session_id": "abc"}

    def test_drops_sql_breadcrumbs(self):
        event = {
            "breadcrumbs": [
                {"message": "SQL: SELECT 1"},
                {"message": "request.start"},
                "raw sql breadcrumb",
                "plain breadcrumb",
            ]
        }

        filtered = filter_sensitive_data(event, {})

        assert filtered["breadcrumbs"] == [{"message": "request.start"}, "plain breadcrumb"]

    def test_event_without_extras_is_unchanged(self):
        event = {"message": "boom"}

        assert filter_sensitive_data(event, {}) == {"message": "boom"}


class TestSentryContextMiddleware:
    """Test requests are tagged with their request ID."""

    @pytest.mark.asyncio
    async def test_request_id_tag(self, client: AsyncClient):
        set_tag = MagicMock()
        set_context = MagicMock()

        with patch("interviewtrainer.middleware.sentry.sentry_sdk.set_tag", set_tag), patch(
            "interviewtrainer.middleware.sentry.sentry_sdk.set_context", set_context
        ):
            await client.get("/health", headers={"X-Request-ID": "req-42"})

        set_tag.assert_called_once_with("request_id", "req-42")
        context_name, context = set_context.call_args.args
        assert context_name == "request"
        assert context == {"method": "GET", "path": "/health", "request_id": "req-42"}
