"""Tests for card action buttons (lark/buttons.py)."""

from lark_notify.config import NotificationContext
from lark_notify.lark.buttons import build_buttons
from lark_notify.types import ButtonStyle


def _labels(buttons):
    return [b.label for b in buttons]


class TestBuildButtons:
    def test_pipeline_and_release(self):
        ctx = NotificationContext(
            pipeline_url="https://example.com/pipeline",
            commit_tag="v1.0.0",
            repo_url="https://github.com/user/repo",
        )
        buttons = build_buttons(ctx)

        assert _labels(buttons) == ["View Pipeline", "View Release"]
        assert buttons[0].style == ButtonStyle.PRIMARY
        assert buttons[1].style == ButtonStyle.DEFAULT
        assert buttons[1].url == "https://github.com/user/repo/releases/tag/v1.0.0"

    def test_pipeline_and_commit(self):
        ctx = NotificationContext(
            pipeline_url="https://example.com/pipeline",
            forge_url="https://github.com/user/repo/commit/abc123",
        )
        buttons = build_buttons(ctx)

        assert _labels(buttons) == ["View Pipeline", "View Commit"]
        assert buttons[1].url == "https://github.com/user/repo/commit/abc123"

    def test_tag_without_repo_url_skips_commit(self):
        ctx = NotificationContext(
            commit_tag="v1.0.0",
            forge_url="https://github.com/user/repo/commit/abc123",
        )
        assert build_buttons(ctx) == []

    def test_no_urls(self):
        assert build_buttons(NotificationContext()) == []

    def test_filter_pipeline_only(self):
        ctx = NotificationContext(
            pipeline_url="https://example.com/pipeline",
            commit_tag="v1.0.0",
            repo_url="https://github.com/user/repo",
        )
        assert _labels(build_buttons(ctx, ["pipeline"])) == ["View Pipeline"]

    def test_filter_preserves_order(self):
        ctx = NotificationContext(
            pipeline_url="https://example.com/pipeline",
            forge_url="https://github.com/user/repo/commit/abc123",
        )
        buttons = build_buttons(ctx, ["commit", " pipeline "])

        assert _labels(buttons) == ["View Pipeline", "View Commit"]

    def test_filter_missing_button_yields_empty(self):
        ctx = NotificationContext(forge_url="https://github.com/user/repo/commit/abc123")
        assert build_buttons(ctx, ["pipeline"]) == []

    def test_filter_unknown_and_case_sensitive_names_dropped(self):
        ctx = NotificationContext(
            pipeline_url="https://example.com/pipeline",
            forge_url="https://github.com/user/repo/commit/abc123",
        )
        assert _labels(build_buttons(ctx, ["Pipeline", "deploy", "commit"])) == ["View Commit"]

    def test_empty_filter_keeps_all(self):
        ctx = NotificationContext(pipeline_url="https://example.com/pipeline")
        assert _labels(build_buttons(ctx, [])) == ["View Pipeline"]
