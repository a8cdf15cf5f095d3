"""Sentry error tracking configuration and initialization."""

import os

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration
from sentry_sdk.utils import BadDsn

from interviewtrainer.core.logging import get_logger

logger = get_logger(__name__)

_sentry_initialized = False


def init_sentry() -> bool:
    """
    Initialize Sentry SDK for error tracking.

    No-op unless SENTRY_DSN holds an http(s) DSN, so local runs and tests
    go without it. Safe to call more than once.

    Returns:
        True if Sentry is active after the call
    """
    global _sentry_initialized

    if _sentry_initialized:
        return True

    sentry_dsn = os.getenv("SENTRY_DSN", "").strip()
    if not sentry_dsn.startswith(("https://", "http://")):
        logger.info("sentry.disabled", message="No valid SENTRY_DSN, error tracking disabled")
        return False

    environment = os.getenv("ENVIRONMENT", "development")

    try:
        sentry_sdk.init(
            dsn=sentry_dsn,
            environment=environment,
            traces_sample_rate=0.0,
            send_default_pii=False,
            integrations=[
                FastApiIntegration(transaction_style="endpoint"),
                # structlog already emits the log lines
                LoggingIntegration(level=None, event_level=None),
            ],
            before_send=filter_sensitive_data,
        )
    except BadDsn as exc:
        logger.warning(
            "sentry.init_failed",
            message="Invalid SENTRY_DSN, error tracking disabled",
            error=str(exc),
        )
        return False

    _sentry_initialized = True
    logger.info("sentry.initialized", environment=environment)
    return True


def filter_sensitive_data(event: dict, hint: dict) -> dict:
    """Drop extras and breadcrumbs that mention SQL before an event leaves the process."""
    extra = event.get("extra")
    if isinstance(extra, dict):
        event["extra"] = {
            key: value
            for key, value in extra.items()
            if "sql" not in str(key).lower() and "sql" not in str(value).lower()
        }

    breadcrumbs = event.get("breadcrumbs")
    if isinstance(breadcrumbs, list):
        event["breadcrumbs"] = [
            crumb
            for crumb in breadcrumbs
            if "sql" not in str(crumb.get("message", "") if isinstance(crumb, dict) else crumb).lower()
        ]

    return event
