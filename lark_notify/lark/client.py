"""
Lark Webhook Client

Serializes notification messages and posts them to a Lark custom bot webhook.
"""

import json
import logging
from typing import Optional, Union

import requests

from ..exceptions import (
    HTTPStatusError,
    RemoteRejectedError,
    SerializationError,
    TransportError,
)
from ..types import CardMessage, SignaturePair, TextMessage

logger = logging.getLogger(__name__)

Message = Union[TextMessage, CardMessage]


class LarkNotifier:
    """
    Delivers messages to a Lark webhook.

    Usage:
        notifier = LarkNotifier(config.webhook_url)
        payload = notifier.serialize(message, signature)
        notifier.send(payload)
    """

    def __init__(
        self,
        webhook_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize Lark notifier.

        Args:
            webhook_url: Lark custom bot webhook URL
            session: Optional requests session (one is created if omitted)
            timeout: Optional request timeout in seconds (None = no timeout)
        """
        self.webhook_url = webhook_url
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.timeout = timeout

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "LarkNotifier":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    @staticmethod
    def serialize(message: Message, signature: Optional[SignaturePair] = None) -> bytes:
        """
        Encode a message as a JSON payload.

        Args:
            message: Text or card message
            signature: Optional signature fields to add at the top level

        Returns:
            UTF-8 encoded JSON

        Raises:
            SerializationError: If the message cannot be encoded
        """
        payload = message.to_dict()
        if signature is not None:
            payload.update(signature.to_dict())

        try:
            data = json.dumps(payload, ensure_ascii=False)
            # undecodable environment bytes arrive as lone surrogates; send them as U+FFFD
            return data.encode("utf-8", "surrogateescape").decode("utf-8", "replace").encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Error creating message JSON: {e}") from e

    def send(self, payload: bytes) -> None:
        """
        POST a serialized payload to the webhook.

        Raises:
            TransportError: If the request fails
            HTTPStatusError: If the webhook returns a non-2xx status
            RemoteRejectedError: If Lark reports a non-zero error code
        """
        try:
            response = self.session.post(
                self.webhook_url,
                data=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"Error sending to Lark: {e}") from e

        body = response.text
        if not 200 <= response.status_code < 300:
            raise HTTPStatusError(response.status_code, body)

        code = _response_code(body)
        if code:
            raise RemoteRejectedError(code, body)

        logger.debug("Lark notification sent successfully (status %s)", response.status_code)

    def deliver(self, message: Message, signature: Optional[SignaturePair] = None) -> None:
        """Serialize and send a message in one step."""
        self.send(self.serialize(message, signature))


def _response_code(body: str):
    """Extract a numeric "code" from a JSON response body, if any."""
    try:
        data = json.loads(body)
    except ValueError:
        logger.debug("Lark response is not JSON, treating as success")
        return None

    if not isinstance(data, dict):
        return None

    code = data.get("code")
    if isinstance(code, bool) or not isinstance(code, (int, float)):
        return None
    return code
