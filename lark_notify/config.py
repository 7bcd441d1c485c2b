"""
Plugin Configuration

Loads plugin settings and pipeline metadata from environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional


def get_env(key: str, default: str = "", environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Read an environment variable, treating empty values as unset.

    Args:
        key: Variable name
        default: Value returned when the variable is unset or empty
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        The variable value or the default
    """
    environ = os.environ if environ is None else environ
    value = environ.get(key, "")
    return value if value else default


def split_list(value: str) -> List[str]:
    """Split a comma-separated setting into trimmed names."""
    if not value:
        return []
    return [name.strip() for name in value.split(",")]


@dataclass
class PluginConfig:
    """Configuration for the notification plugin."""

    # Lark settings
    webhook_url: Optional[str] = field(default=None)
    secret: Optional[str] = field(default=None)
    use_card: bool = True
    buttons: List[str] = field(default_factory=list)

    # Output settings
    debug: bool = False
    log_level: str = "INFO"

    # Sentry settings
    sentry_dsn: Optional[str] = field(default=None)
    sentry_environment: str = "ci"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PluginConfig":
        """Create config from environment variables."""
        return cls(
            webhook_url=get_env("PLUGIN_WEBHOOK_URL", environ=environ) or None,
            secret=get_env("PLUGIN_SECRET", environ=environ) or None,
            use_card=get_env("PLUGIN_USE_CARD", "true", environ) == "true",
            buttons=split_list(get_env("PLUGIN_BUTTONS", environ=environ)),
            debug=get_env("PLUGIN_DEBUG", "false", environ) == "true",
            log_level=get_env("PLUGIN_LOG_LEVEL", "INFO", environ).upper(),
            sentry_dsn=get_env("SENTRY_DSN", environ=environ) or None,
            sentry_environment=get_env("SENTRY_ENVIRONMENT", "ci", environ),
        )

    @property
    def signing_enabled(self) -> bool:
        """Check if payloads should be signed."""
        return bool(self.secret)

    @property
    def sentry_enabled(self) -> bool:
        """Check if Sentry tracking is configured."""
        return bool(self.sentry_dsn)


@dataclass(frozen=True)
class NotificationContext:
    """Snapshot of the pipeline run being reported."""

    repo: str = ""
    repo_name: str = ""
    repo_url: str = ""
    branch: str = ""
    author: str = ""
    commit_sha: str = ""
    commit_tag: str = ""
    commit_message: str = ""
    pipeline_url: str = ""
    forge_url: str = ""
    status_override: str = ""
    pipeline_status: str = ""
    variables: str = ""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "NotificationContext":
        """Create context from CI environment variables."""
        return cls(
            repo=get_env("CI_REPO", environ=environ),
            repo_name=get_env("CI_REPO_NAME", environ=environ),
            repo_url=get_env("CI_REPO_URL", environ=environ),
            branch=get_env("CI_COMMIT_BRANCH", environ=environ),
            author=get_env("CI_COMMIT_AUTHOR", environ=environ),
            commit_sha=get_env("CI_COMMIT_SHA", environ=environ),
            commit_tag=get_env("CI_COMMIT_TAG", environ=environ),
            commit_message=get_env("CI_COMMIT_MESSAGE", environ=environ),
            pipeline_url=get_env("CI_PIPELINE_URL", environ=environ),
            forge_url=get_env("CI_PIPELINE_FORGE_URL", environ=environ),
            status_override=get_env("PLUGIN_STATUS", environ=environ),
            pipeline_status=get_env("DRONE_BUILD_STATUS", environ=environ),
            variables=get_env("PLUGIN_VARIABLES", environ=environ),
        )

    @property
    def variable_names(self) -> List[str]:
        """Extra variable names to include in the message."""
        return split_list(self.variables)

    @property
    def commit_title(self) -> str:
        """First line of the commit message."""
        return self.commit_message.split("\n")[0]
