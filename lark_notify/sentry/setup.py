"""
Sentry Setup and Context Management

Initializes Sentry SDK and provides context enrichment helpers.
"""

import logging
from typing import Any, Dict, Optional

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from ..config import NotificationContext, PluginConfig

logger = logging.getLogger(__name__)

# Track initialization state
_sentry_initialized = False


def init_sentry(config: PluginConfig) -> bool:
    """
    Initialize Sentry SDK.

    Args:
        config: PluginConfig with DSN

    Returns:
        True if initialized successfully
    """
    global _sentry_initialized

    if _sentry_initialized:
        return True

    if not config.sentry_enabled:
        logger.debug("Sentry not configured, skipping initialization")
        return False

    try:
        logging_integration = LoggingIntegration(
            level=logging.INFO,  # Capture INFO and above as breadcrumbs
            event_level=logging.ERROR,  # Send ERROR and above as events
        )

        sentry_sdk.init(
            dsn=config.sentry_dsn,
            environment=config.sentry_environment,
            integrations=[logging_integration],
            send_default_pii=False,
            attach_stacktrace=True,
        )

        _sentry_initialized = True
        logger.debug("Sentry initialized successfully")
        return True

    except Exception as e:
        logger.error("Failed to initialize Sentry: %s", e)
        return False


def set_pipeline_context(ctx: NotificationContext, version: str = "") -> None:
    """
    Set the reported pipeline as Sentry context.

    Args:
        ctx: Pipeline context
        version: Project version label
    """
    if not _sentry_initialized:
        return

    try:
        sentry_sdk.set_context("pipeline", {
            "repo": ctx.repo,
            "branch": ctx.branch,
            "commit": ctx.commit_sha,
            "tag": ctx.commit_tag,
            "version": version,
            "pipeline_url": ctx.pipeline_url,
        })

        sentry_sdk.set_tag("repo", ctx.repo)
        sentry_sdk.set_tag("branch", ctx.branch)

    except Exception as e:
        logger.debug("Failed to set pipeline context: %s", e)


def add_breadcrumb(
    message: str,
    category: str = "notify",
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
) -> None:
    """Add a breadcrumb to the current Sentry scope."""
    if not _sentry_initialized:
        return

    try:
        sentry_sdk.add_breadcrumb(
            message=message,
            category=category,
            level=level,
            data=data,
        )

    except Exception as e:
        logger.debug("Failed to add breadcrumb: %s", e)


def capture_exception(
    exception: Exception,
    level: str = "error",
    tags: Optional[Dict[str, str]] = None,
) -> Optional[str]:
    """
    Capture an exception and send to Sentry.

    Args:
        exception: The exception to capture
        level: Severity level (error, warning, info)
        tags: Additional tags

    Returns:
        Sentry event ID if captured, None otherwise
    """
    if not _sentry_initialized:
        return None

    try:
        with sentry_sdk.new_scope() as scope:
            scope.set_level(level)

            if tags:
                for key, value in tags.items():
                    scope.set_tag(key, value)

            return sentry_sdk.capture_exception(exception)

    except Exception as e:
        logger.debug("Failed to capture exception: %s", e)
        return None
