"""Webhook signature generation for Lark custom bots."""

import base64
import hashlib
import hmac
import time
from typing import Optional

from .types import SignaturePair


def sign(timestamp: str, secret: str) -> str:
    """
    Generate the signature for a signed webhook request.

    The "timestamp\\nsecret" string is the HMAC key and the message is empty.
    Receivers validate exactly this arrangement, so it must not be swapped.

    Args:
        timestamp: Unix time in seconds, as a string
        secret: Shared webhook secret

    Returns:
        Base64-encoded HMAC-SHA256 digest
    """
    string_to_sign = f"{timestamp}\n{secret}"
    digest = hmac.new(string_to_sign.encode("utf-8"), digestmod=hashlib.sha256).digest()
    return base64.b64encode(digest).decode("utf-8")


def make_signature(secret: str, now: Optional[float] = None) -> SignaturePair:
    """Sign the current (or given) Unix time with the secret."""
    timestamp = str(int(time.time() if now is None else now))
    return SignaturePair(timestamp=timestamp, sign=sign(timestamp, secret))
