"""
Notification Run

Builds the pipeline message from configuration and delivers it to Lark.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Mapping, Optional

import requests

from .config import NotificationContext, PluginConfig
from .exceptions import ConfigurationError
from .lark import LarkNotifier, build_message
from .sentry import add_breadcrumb, set_pipeline_context
from .signing import make_signature
from .types import project_version

logger = logging.getLogger(__name__)


def build_info(ctx: NotificationContext, version: str, now: Optional[datetime] = None) -> str:
    """Render the build summary printed before sending."""
    now = now or datetime.now(timezone.utc)
    return "\n".join([
        "",
        "Build Info:",
        f" PROJECT: {ctx.repo}",
        f" BRANCH:  {ctx.branch}",
        f" VERSION: {version}",
        f" STATUS:  {ctx.pipeline_status}",
        f" DATE:    {now.strftime('%Y-%m-%dT%H:%M:%SZ')}",
    ])


def debug_info(payload: bytes, environ: Mapping[str, str]) -> str:
    """Render the environment and payload dump shown in debug mode."""
    lines = ["", "** DEBUG ENABLED **", "", "Environment Variables:"]
    for name in sorted(environ):
        lines.append(f" {name:<30} = {environ[name]}")
    lines.extend(["", "Lark Message JSON:", payload.decode("utf-8")])
    return "\n".join(lines)


def notify(
    config: PluginConfig,
    ctx: NotificationContext,
    environ: Mapping[str, str],
    echo: Callable[[str], None] = print,
    session: Optional[requests.Session] = None,
    dry_run: bool = False,
) -> bytes:
    """
    Build, sign and deliver the notification for one pipeline run.

    Args:
        config: Plugin configuration
        ctx: Pipeline context
        environ: Environment snapshot used for variable lookups and debug output
        echo: Output function for progress messages
        session: Optional requests session for delivery
        dry_run: Build and print the payload without sending it

    Returns:
        The serialized payload

    Raises:
        ConfigurationError: If no webhook URL is configured
        SerializationError: If the message cannot be encoded
        DeliveryError: If the webhook rejects the message
    """
    if not config.webhook_url:
        raise ConfigurationError("Need to set Lark Webhook URL")

    version = project_version(ctx.commit_tag, ctx.commit_sha)
    set_pipeline_context(ctx, version)

    message = build_message(config, ctx, environ)
    signature = make_signature(config.secret) if config.signing_enabled else None

    with LarkNotifier(config.webhook_url, session=session) as notifier:
        payload = notifier.serialize(message, signature)

        if config.debug:
            echo(debug_info(payload, environ))

        echo(build_info(ctx, version))

        if dry_run:
            logger.info("Dry run, not sending notification")
            return payload

        echo("\nSending to Lark...")
        add_breadcrumb("Sending Lark notification", data={"card": config.use_card})
        notifier.send(payload)
        echo("Done!")

    return payload
