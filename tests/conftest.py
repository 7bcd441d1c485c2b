"""Shared pytest fixtures for CI Lark Notification tests."""

import pytest

from lark_notify.config import NotificationContext, PluginConfig

ENV_PREFIXES = ("PLUGIN_", "CI_", "DRONE_", "SENTRY_")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove plugin and CI variables inherited from the host environment."""
    import os

    for name in list(os.environ):
        if name.startswith(ENV_PREFIXES):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def ci_env():
    """Environment of a typical successful pipeline run."""
    return {
        "PLUGIN_WEBHOOK_URL": "https://open.larksuite.com/open-apis/bot/v2/hook/test",
        "CI_REPO": "acme/widget",
        "CI_REPO_NAME": "widget",
        "CI_REPO_URL": "https://github.com/acme/widget",
        "CI_COMMIT_BRANCH": "main",
        "CI_COMMIT_AUTHOR": "octocat",
        "CI_COMMIT_SHA": "abcdef1234567890",
        "CI_COMMIT_MESSAGE": "Fix flaky test\n\nLonger description",
        "CI_PIPELINE_URL": "https://ci.example.com/acme/widget/42",
        "CI_PIPELINE_FORGE_URL": "https://github.com/acme/widget/commit/abcdef1",
        "DRONE_BUILD_STATUS": "success",
    }


@pytest.fixture
def context(ci_env):
    return NotificationContext.from_env(ci_env)


@pytest.fixture
def config(ci_env):
    return PluginConfig.from_env(ci_env)
