"""Action buttons for pipeline notification cards."""

from typing import List, Optional, Sequence

from ..config import NotificationContext
from ..types import Button, ButtonStyle

# Requested button name -> keyword the button label must contain
BUTTON_KEYWORDS = {
    "pipeline": "Pipeline",
    "commit": "Commit",
    "release": "Release",
}


def _matches(button: Button, names: Sequence[str]) -> bool:
    for name in names:
        keyword = BUTTON_KEYWORDS.get(name.strip())
        if keyword and keyword in button.label:
            return True
    return False


def build_buttons(
    ctx: NotificationContext,
    allow_list: Optional[Sequence[str]] = None,
) -> List[Button]:
    """
    Build the card action buttons from the available URLs.

    Args:
        ctx: Pipeline context
        allow_list: Optional button names to keep (pipeline, commit, release)

    Returns:
        Buttons in display order, possibly empty
    """
    buttons = []

    if ctx.pipeline_url:
        buttons.append(Button("View Pipeline", ctx.pipeline_url, ButtonStyle.PRIMARY))

    if ctx.commit_tag:
        if ctx.repo_url:
            release_url = f"{ctx.repo_url}/releases/tag/{ctx.commit_tag}"
            buttons.append(Button("View Release", release_url, ButtonStyle.DEFAULT))
    elif ctx.forge_url:
        buttons.append(Button("View Commit", ctx.forge_url, ButtonStyle.DEFAULT))

    if allow_list:
        return [b for b in buttons if _matches(b, allow_list)]

    return buttons
