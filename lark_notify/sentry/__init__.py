"""
Sentry Error Tracking Module

Reports fatal notification failures with pipeline context.
"""

from .setup import (
    init_sentry,
    set_pipeline_context,
    add_breadcrumb,
    capture_exception,
)

__all__ = [
    'init_sentry',
    'set_pipeline_context',
    'add_breadcrumb',
    'capture_exception',
]
