"""
Lark Notification Module

Builds interactive cards and text messages and delivers them to Lark webhooks.
"""

from .blocks import build_message, format_card, format_text
from .buttons import build_buttons
from .client import LarkNotifier

__all__ = [
    'LarkNotifier',
    'build_buttons',
    'build_message',
    'format_card',
    'format_text',
]
