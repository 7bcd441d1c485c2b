"""CI Lark Notification - Main package.

Notifies a Lark chat webhook about the outcome of a CI pipeline run.

Modules:
    config - Plugin settings and pipeline context from environment
    types - Message data structures and status/version helpers
    signing - Webhook signature generation
    lark - Card/text formatting and webhook delivery
    sentry - Optional error tracking
    cli - Command-line entry point
"""

from .config import NotificationContext, PluginConfig
from .exceptions import (
    ConfigurationError,
    DeliveryError,
    HTTPStatusError,
    NotifierError,
    RemoteRejectedError,
    SerializationError,
    TransportError,
)
from .types import (
    Button,
    CardMessage,
    PipelineStatus,
    SignaturePair,
    TextMessage,
    project_version,
    resolve_status,
)

__all__ = [
    'PluginConfig',
    'NotificationContext',
    'NotifierError',
    'ConfigurationError',
    'SerializationError',
    'DeliveryError',
    'TransportError',
    'HTTPStatusError',
    'RemoteRejectedError',
    'Button',
    'CardMessage',
    'TextMessage',
    'SignaturePair',
    'PipelineStatus',
    'project_version',
    'resolve_status',
]

__version__ = '1.0.0'
