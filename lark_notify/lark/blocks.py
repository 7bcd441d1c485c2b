"""
Lark Message Builders

Creates interactive cards and plain text messages for pipeline notifications.
"""

import os
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..config import NotificationContext, PluginConfig
from ..types import (
    CardMessage,
    TextMessage,
    project_version,
    resolve_status,
)
from .buttons import build_buttons

FAILURE_ICON = "🚨"
SUCCESS_ICON = "✅"


def _divider() -> Dict[str, str]:
    """Create a divider element."""
    return {"tag": "hr"}


def _div(content: str) -> Dict[str, Any]:
    """Create a div element with lark_md text."""
    return {
        "tag": "div",
        "text": {"content": content, "tag": "lark_md"},
    }


def _variable_values(
    names: Sequence[str],
    env: Optional[Mapping[str, str]],
) -> List[tuple]:
    """Look up each variable name, defaulting to an empty string."""
    env = os.environ if env is None else env
    return [(name.strip(), env.get(name.strip(), "")) for name in names]


def format_card(
    ctx: NotificationContext,
    version: str,
    allow_list: Optional[Sequence[str]] = None,
    variable_names: Optional[Sequence[str]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> CardMessage:
    """
    Build an interactive card for the pipeline result.

    Args:
        ctx: Pipeline context
        version: Project version label
        allow_list: Optional button names to keep
        variable_names: Extra environment variables to list
        env: Mapping used for variable lookups (defaults to os.environ)

    Returns:
        CardMessage
    """
    status = resolve_status(ctx.status_override, ctx.pipeline_status)

    if status.failed:
        color, icon, status_text = "red", FAILURE_ICON, "Pipeline Failed"
    else:
        color, icon, status_text = "green", SUCCESS_ICON, "Pipeline Succeeded"

    sections = [
        _div(
            f"**Project:** {ctx.repo}\n"
            f"**Branch:** {ctx.branch}\n"
            f"**Author:** {ctx.author}\n"
            f"**Version:** {version}"
        ),
        _divider(),
        _div(f"**Commit Message:**\n{ctx.commit_title}"),
    ]

    if variable_names:
        sections.append(_divider())
        content = "**Variables:**\n"
        for name, value in _variable_values(variable_names, env):
            content += f"• `{name}`: {value}\n"
        sections.append(_div(content))

    return CardMessage(
        header_color=color,
        header_title=f"{ctx.repo_name} - {icon} {status_text}",
        sections=sections,
        actions=build_buttons(ctx, allow_list),
    )


def format_text(
    ctx: NotificationContext,
    version: str,
    variable_names: Optional[Sequence[str]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> TextMessage:
    """
    Build a plain text message for the pipeline result.

    Args:
        ctx: Pipeline context
        version: Project version label
        variable_names: Extra environment variables to list
        env: Mapping used for variable lookups (defaults to os.environ)

    Returns:
        TextMessage
    """
    status = resolve_status(ctx.status_override, ctx.pipeline_status)

    if status.failed:
        header = f"{FAILURE_ICON} PIPELINE FAILED"
    else:
        header = f"{SUCCESS_ICON} PIPELINE SUCCEEDED"

    lines = [
        f"{header}\n\n",
        f"📋 Project: {ctx.repo}\n",
        f"🌿 Branch: {ctx.branch}\n",
        f"👤 Author: {ctx.author}\n",
        f"🏷️ Version: {version}\n",
        f"💬 Message: {ctx.commit_title}\n",
    ]

    if variable_names:
        lines.append("\n📊 Variables:\n")
        for name, value in _variable_values(variable_names, env):
            lines.append(f"• {name}: {value}\n")

    if ctx.pipeline_url:
        lines.append(f"\n🔗 Pipeline: {ctx.pipeline_url}")

    return TextMessage(body="".join(lines))


def build_message(
    config: PluginConfig,
    ctx: NotificationContext,
    env: Optional[Mapping[str, str]] = None,
):
    """Build the card or text message selected by the plugin config."""
    version = project_version(ctx.commit_tag, ctx.commit_sha)
    if config.use_card:
        return format_card(ctx, version, config.buttons, ctx.variable_names, env)
    return format_text(ctx, version, ctx.variable_names, env)
