"""Notifier error types."""


class NotifierError(Exception):
    """Base class for errors that abort a notification run."""
    pass


class ConfigurationError(NotifierError):
    """Raised when required plugin settings are missing."""
    pass


class SerializationError(NotifierError):
    """Raised when the message cannot be encoded as JSON."""
    pass


class DeliveryError(NotifierError):
    """Raised when the webhook does not accept the message."""
    pass


class TransportError(DeliveryError):
    """Raised when the HTTP request itself fails."""
    pass


class HTTPStatusError(DeliveryError):
    """Raised when the webhook answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Error response from Lark ({status_code}): {body}")
        self.status_code = status_code
        self.body = body


class RemoteRejectedError(DeliveryError):
    """Raised when Lark returns a non-zero error code in a 2xx response."""

    def __init__(self, code, body: str):
        super().__init__(f"Lark API error (code {code}): {body}")
        self.code = code
        self.body = body
