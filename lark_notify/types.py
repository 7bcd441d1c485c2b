"""
Notification Types

Data structures for Lark messages and the pipeline outcome they report.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class PipelineStatus(Enum):
    """Reported pipeline outcome."""
    SUCCESS = "success"
    FAILURE = "failure"

    @property
    def failed(self) -> bool:
        return self is PipelineStatus.FAILURE


class ButtonStyle(Enum):
    """Lark button styles."""
    PRIMARY = "primary"
    DEFAULT = "default"


@dataclass(frozen=True)
class Button:
    """A card action button linking to a URL."""

    label: str
    url: str
    style: ButtonStyle = ButtonStyle.DEFAULT

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a Lark button element."""
        return {
            "tag": "button",
            "text": {"content": self.label, "tag": "plain_text"},
            "type": self.style.value,
            "url": self.url,
        }


@dataclass(frozen=True)
class TextMessage:
    """Plain text Lark message."""

    body: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the Lark webhook payload."""
        return {
            "msg_type": "text",
            "content": {"text": self.body},
        }


@dataclass(frozen=True)
class CardMessage:
    """Interactive Lark card message."""

    header_color: str
    header_title: str
    sections: List[Dict[str, Any]] = field(default_factory=list)
    actions: List[Button] = field(default_factory=list)

    @property
    def elements(self) -> List[Dict[str, Any]]:
        """Card body elements, with the action row last when buttons exist."""
        elements = list(self.sections)
        if self.actions:
            elements.append({
                "tag": "action",
                "actions": [b.to_dict() for b in self.actions],
            })
        return elements

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the Lark webhook payload."""
        return {
            "msg_type": "interactive",
            "card": {
                "header": {
                    "title": {"content": self.header_title, "tag": "plain_text"},
                    "template": self.header_color,
                },
                "elements": self.elements,
            },
        }


@dataclass(frozen=True)
class SignaturePair:
    """Timestamp and signature attached to signed payloads."""

    timestamp: str
    sign: str

    def to_dict(self) -> Dict[str, str]:
        return {"timestamp": self.timestamp, "sign": self.sign}


def resolve_status(override: Optional[str], pipeline_status: Optional[str]) -> PipelineStatus:
    """
    Determine the pipeline outcome to report.

    A non-empty override wins over the pipeline status. Only the exact
    value "failure" counts as a failure; anything else is reported as success.

    Args:
        override: Explicit status from plugin settings
        pipeline_status: Status reported by the CI system

    Returns:
        PipelineStatus
    """
    status = override or pipeline_status
    if status == PipelineStatus.FAILURE.value:
        return PipelineStatus.FAILURE
    return PipelineStatus.SUCCESS


def project_version(tag: Optional[str], sha: Optional[str]) -> str:
    """Version label: the tag, else the short commit SHA, else empty."""
    if tag:
        return tag
    if sha:
        # shorter SHAs are returned whole
        return sha[:7]
    return ""
