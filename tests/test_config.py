"""Tests for environment configuration loading (config.py)."""

from lark_notify.config import NotificationContext, PluginConfig, get_env, split_list


class TestGetEnv:
    def test_existing(self):
        assert get_env("TEST_VAR", "default", {"TEST_VAR": "test_value"}) == "test_value"

    def test_missing(self):
        assert get_env("TEST_VAR", "default", {}) == "default"

    def test_empty_is_missing(self):
        assert get_env("TEST_VAR", "default", {"TEST_VAR": ""}) == "default"

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("TEST_VAR", "from_os")
        assert get_env("TEST_VAR") == "from_os"


def test_split_list():
    assert split_list("") == []
    assert split_list(" pipeline , commit") == ["pipeline", "commit"]


class TestPluginConfig:
    def test_defaults(self):
        config = PluginConfig.from_env({})

        assert config.webhook_url is None
        assert config.use_card is True
        assert config.debug is False
        assert config.buttons == []
        assert not config.signing_enabled
        assert not config.sentry_enabled
        assert config.sentry_environment == "ci"

    def test_from_env(self):
        config = PluginConfig.from_env({
            "PLUGIN_WEBHOOK_URL": "https://hook",
            "PLUGIN_SECRET": "s3cret",
            "PLUGIN_USE_CARD": "false",
            "PLUGIN_DEBUG": "true",
            "PLUGIN_BUTTONS": "pipeline,release",
            "PLUGIN_LOG_LEVEL": "debug",
            "SENTRY_DSN": "https://key@sentry.example.com/1",
        })

        assert config.webhook_url == "https://hook"
        assert config.signing_enabled
        assert config.use_card is False
        assert config.debug is True
        assert config.buttons == ["pipeline", "release"]
        assert config.log_level == "DEBUG"
        assert config.sentry_enabled

    def test_use_card_requires_exact_true(self):
        assert PluginConfig.from_env({"PLUGIN_USE_CARD": "TRUE"}).use_card is False
        assert PluginConfig.from_env({"PLUGIN_USE_CARD": ""}).use_card is True


class TestNotificationContext:
    def test_from_env(self, ci_env):
        ctx = NotificationContext.from_env(ci_env)

        assert ctx.repo == "acme/widget"
        assert ctx.repo_name == "widget"
        assert ctx.pipeline_status == "success"
        assert ctx.status_override == ""
        assert ctx.commit_title == "Fix flaky test"

    def test_variable_names(self):
        ctx = NotificationContext(variables="FOO, BAR ,BAZ")
        assert ctx.variable_names == ["FOO", "BAR", "BAZ"]

    def test_is_immutable(self):
        import dataclasses
        import pytest

        ctx = NotificationContext()
        with pytest.raises(dataclasses.FrozenInstanceError):
            ctx.repo = "changed"
